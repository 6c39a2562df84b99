"""yap: a local secret store that keeps every secret in its own sealed file."""

__version__ = "0.1.0"
