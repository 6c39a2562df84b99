"""AES-256-GCM sealing engine for individual secret values.

Sealed payload layout (this is the literal content of a secret file):
- 12 bytes: random nonce
- N bytes: ciphertext
- 16 bytes: GCM authentication tag

No header, no version byte. A payload is always exactly 28 bytes longer than
the plaintext it seals.
"""

from __future__ import annotations

import os
from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from yap.core.exceptions import ErrorKind, YapError
from .kdf import KEY_LENGTH, derive_key

NONCE_SIZE = 12
TAG_SIZE = 16
OVERHEAD = NONCE_SIZE + TAG_SIZE


def generate_nonce() -> bytes:
    """Return a fresh nonce from the OS CSPRNG."""
    try:
        return os.urandom(NONCE_SIZE)
    except (NotImplementedError, OSError) as exc:
        raise YapError(ErrorKind.ENTROPY_FAILURE) from exc


class Aes256Engine:
    """
    Seals and opens secret values with a key derived once from a passphrase.

    The key is fixed for the lifetime of the instance and each call draws its
    own nonce, so a single engine can be shared between threads.
    """

    __slots__ = ("_aead",)

    def __init__(self, passphrase: Union[str, bytes]):
        self._aead = AESGCM(derive_key(passphrase))

    @classmethod
    def from_key(cls, key: bytes) -> "Aes256Engine":
        """Build an engine around an already-derived 32-byte key."""
        if len(key) != KEY_LENGTH:
            raise YapError(
                ErrorKind.MALFORMED_INPUT,
                f"key must be {KEY_LENGTH} bytes, got {len(key)}",
            )
        engine = cls.__new__(cls)
        engine._aead = AESGCM(key)
        return engine

    def __repr__(self) -> str:
        return "Aes256Engine(<key hidden>)"

    # ------------------------------------------------------------------
    # Byte-level sealing
    # ------------------------------------------------------------------

    def seal(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` and return ``nonce || ciphertext || tag``."""
        nonce = generate_nonce()
        return nonce + self._aead.encrypt(nonce, bytes(plaintext), None)

    def open(self, sealed: bytes) -> bytes:
        """
        Verify and decrypt a payload produced by :meth:`seal`.

        Raises ``MALFORMED_INPUT`` for payloads too short to hold a nonce and a
        tag, and ``AUTHENTICATION_FAILURE`` when the tag does not verify (wrong
        key or tampered bytes). No plaintext is returned on failure.
        """
        if len(sealed) < OVERHEAD:
            raise YapError(
                ErrorKind.MALFORMED_INPUT,
                f"sealed payload is {len(sealed)} bytes, need at least {OVERHEAD}",
            )

        nonce, body = bytes(sealed[:NONCE_SIZE]), bytes(sealed[NONCE_SIZE:])
        try:
            return self._aead.decrypt(nonce, body, None)
        except InvalidTag as exc:
            raise YapError(ErrorKind.AUTHENTICATION_FAILURE) from exc

    # ------------------------------------------------------------------
    # Text helpers
    # ------------------------------------------------------------------

    def seal_text(self, text: str) -> bytes:
        return self.seal(text.encode("utf-8"))

    def open_text(self, sealed: bytes) -> str:
        raw = self.open(sealed)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise YapError.from_unicode_error(exc) from exc
