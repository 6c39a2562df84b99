from typing import Dict, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

KEY_LENGTH = 32
KDF_ITERATIONS = 100_000
# Fixed salt shared by every vault; existing vault files depend on it.
KDF_SALT = bytes(range(10))


def derive_key(passphrase: Union[str, bytes]) -> bytes:
    """
    Derive the 32-byte vault key from a passphrase using PBKDF2-HMAC-SHA256.
    The same passphrase always yields the same key.
    """
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=KDF_SALT,
        iterations=KDF_ITERATIONS,
    )
    return kdf.derive(passphrase)


def kdf_params_to_dict() -> Dict:
    return {
        "algo": "pbkdf2-hmac-sha256",
        "salt": KDF_SALT.hex(),
        "iterations": KDF_ITERATIONS,
        "length": KEY_LENGTH,
    }
