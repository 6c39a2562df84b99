"""
Exceptions for yap
Every failure in the package is a YapError tagged with one ErrorKind, so the
CLI has a single thing to catch and tests can match on the kind.
"""

from __future__ import annotations

import enum
from typing import Optional

import yaml


class ErrorKind(enum.Enum):
    PASSWORD_NOT_FOUND = "password_not_found"
    NO_HOME_DIR = "no_home_dir"
    BAD_CONFIG_KEY = "bad_config_key"
    INVALID_NAME = "invalid_name"
    # crypto
    ENTROPY_FAILURE = "entropy_failure"
    AUTHENTICATION_FAILURE = "authentication_failure"
    MALFORMED_INPUT = "malformed_input"
    # wrapped
    IO = "io"
    SERIALIZATION = "serialization"
    UTF8 = "utf8"


_CRYPTO_KINDS = frozenset({ErrorKind.ENTROPY_FAILURE, ErrorKind.AUTHENTICATION_FAILURE})


class YapError(Exception):
    """Single error type for yap, tagged with an :class:`ErrorKind`.

    ``detail`` carries the variant payload: the secret name for
    ``PASSWORD_NOT_FOUND`` / ``INVALID_NAME``, the key for ``BAD_CONFIG_KEY``,
    or the underlying message for wrapped errors.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        kind, detail = self.kind, self.detail
        if kind is ErrorKind.PASSWORD_NOT_FOUND:
            return f"Key named {detail} not found in this vault"
        if kind is ErrorKind.NO_HOME_DIR:
            return "No home directory was found, could not process request"
        if kind is ErrorKind.BAD_CONFIG_KEY:
            return f"Config key {detail} does not exist"
        if kind is ErrorKind.INVALID_NAME:
            return f"Invalid secret name: {detail!r}"
        if kind is ErrorKind.ENTROPY_FAILURE:
            return "Cryptographic error: secure random source unavailable"
        if kind is ErrorKind.AUTHENTICATION_FAILURE:
            return "Cryptographic error: cannot decrypt"
        if kind is ErrorKind.MALFORMED_INPUT:
            return f"Malformed input: {detail}" if detail else "Malformed input"
        if kind is ErrorKind.IO:
            return f"IO Error: {detail}"
        if kind is ErrorKind.SERIALIZATION:
            return f"Unable to serialize or deserialize: {detail}"
        return f"Unable to parse bytes into UTF-8 string: {detail}"

    @property
    def is_crypto(self) -> bool:
        return self.kind in _CRYPTO_KINDS

    def __repr__(self) -> str:
        return f"YapError({self.kind.name}, {self.detail!r})"

    # ------------------------------------------------------------------
    # Conversions from underlying failures
    # ------------------------------------------------------------------

    @classmethod
    def from_os_error(cls, exc: OSError) -> "YapError":
        return cls(ErrorKind.IO, str(exc))

    @classmethod
    def from_yaml_error(cls, exc: yaml.YAMLError) -> "YapError":
        return cls(ErrorKind.SERIALIZATION, str(exc))

    @classmethod
    def from_unicode_error(cls, exc: UnicodeError) -> "YapError":
        return cls(ErrorKind.UTF8, str(exc))
