"""
Per-secret file vault.

Every secret is stored in its own file, named after the secret, inside the
vault directory. The file content is the sealed payload produced by
:class:`yap.security.engine.Aes256Engine`; this module only moves whole
buffers between the engine and the disk.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from .exceptions import ErrorKind, YapError
from .paths import VAULT_DIR, default_root
from ..security.engine import Aes256Engine

logger = logging.getLogger(__name__)

_TMP_PREFIX = ".tmp-"


def validate_name(name: str) -> str:
    """Return ``name`` if it can be used as a file name inside the vault."""
    if (
        not name
        or name in (".", "..")
        or name.startswith(_TMP_PREFIX)
        or "/" in name
        or "\\" in name
        or "\x00" in name
        or (os.altsep is not None and os.altsep in name)
    ):
        raise YapError(ErrorKind.INVALID_NAME, name)
    return name


class SimpleVault:
    """Stores each secret sealed in a separate file."""

    def __init__(self, vault_dir: Path, engine: Aes256Engine):
        self.vault_dir = vault_dir
        self.engine = engine

    @staticmethod
    def default_vault_path() -> Path:
        return default_root() / VAULT_DIR

    @classmethod
    def _path_or_default(cls, store: Optional[str | Path]) -> Path:
        return Path(store).expanduser() if store else cls.default_vault_path()

    @classmethod
    def init_store(cls, store: Optional[str | Path] = None) -> Path:
        """Create the vault directory if it does not exist yet. Existing secrets are kept."""
        vault_dir = cls._path_or_default(store)
        if not vault_dir.exists():
            try:
                vault_dir.mkdir(parents=True, mode=0o700)
            except OSError as exc:
                raise YapError.from_os_error(exc) from exc
            logger.info("Created vault at %s", vault_dir)
        return vault_dir

    @classmethod
    def create(cls, engine: Aes256Engine, store: Optional[str | Path] = None) -> "SimpleVault":
        return cls(cls.init_store(store), engine)

    @classmethod
    def load(cls, engine: Aes256Engine, store: Optional[str | Path] = None) -> "SimpleVault":
        return cls(cls._path_or_default(store), engine)

    def secret_path(self, name: str) -> Path:
        return self.vault_dir / validate_name(name)

    # ------------------------------------------------------------------
    # Secret operations
    # ------------------------------------------------------------------

    def has_key(self, name: str) -> bool:
        return self.secret_path(name).is_file()

    def get_key(self, name: str) -> str:
        p = self.secret_path(name)
        if not p.is_file():
            raise YapError(ErrorKind.PASSWORD_NOT_FOUND, name)

        try:
            sealed = p.read_bytes()
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc

        logger.debug("Opening %s (%d bytes)", name, len(sealed))
        return self.engine.open_text(sealed)

    def set_key(self, name: str, value: str) -> None:
        """Seal ``value`` and write it, replacing any previous value for ``name``."""
        p = self.secret_path(name)
        sealed = self.engine.seal_text(value)

        # write to a temp file in the same directory, then rename over the target
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=_TMP_PREFIX, dir=self.vault_dir)
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(sealed)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, p)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise YapError.from_os_error(exc) from exc

        logger.debug("Stored %s (%d bytes)", name, len(sealed))

    def delete_key(self, name: str) -> None:
        p = self.secret_path(name)
        if not p.is_file():
            raise YapError(ErrorKind.PASSWORD_NOT_FOUND, name)
        try:
            p.unlink()
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc
        logger.debug("Deleted %s", name)

    def list_keys(self) -> List[str]:
        if not self.vault_dir.exists():
            return []
        try:
            entries = list(self.vault_dir.iterdir())
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc
        return sorted(
            e.name for e in entries if e.is_file() and not e.name.startswith(_TMP_PREFIX)
        )
