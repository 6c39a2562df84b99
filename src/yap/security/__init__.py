"""Security helpers: passphrase key derivation and the secret sealing engine.

This package provides:
- PBKDF2-HMAC-SHA256 derivation of the 32-byte vault key
- AES-256-GCM sealing/opening of individual secret values

The engine does no I/O; reading and writing sealed files is up to the vault.
"""

from .kdf import derive_key, kdf_params_to_dict, KDF_ITERATIONS, KDF_SALT, KEY_LENGTH
from .engine import Aes256Engine, generate_nonce, NONCE_SIZE, TAG_SIZE, OVERHEAD

__all__ = [
    "derive_key",
    "kdf_params_to_dict",
    "KDF_ITERATIONS",
    "KDF_SALT",
    "KEY_LENGTH",
    "Aes256Engine",
    "generate_nonce",
    "NONCE_SIZE",
    "TAG_SIZE",
    "OVERHEAD",
]
