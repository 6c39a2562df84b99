"""Locations of yap's user-scoped files and first-run bootstrap.

Structure Map for reference:
==============================
 - ~/.yap/
      - config.yml
      - vault/
          - {secret name}   (sealed payload)
==============================
"""

import logging
from pathlib import Path

from .exceptions import ErrorKind, YapError

logger = logging.getLogger(__name__)

YAP_DIR = ".yap"
CONFIG_FILE = "config.yml"
VAULT_DIR = "vault"


def home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise YapError(ErrorKind.NO_HOME_DIR) from exc


def default_root() -> Path:
    return home_dir() / YAP_DIR


def init_dir(dir_name: str) -> Path:
    """Create ``~/<dir_name>`` if needed and write default settings into it."""
    # local import: config depends on this module for its default path
    from .config import Configuration

    root = home_dir() / dir_name
    if not root.exists():
        try:
            root.mkdir(parents=True)
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc
        logger.info("Created %s", root)

    Configuration.init(root)
    return root


def init() -> Path:
    """Ensure the default yap directory and its settings exist."""
    return init_dir(YAP_DIR)
