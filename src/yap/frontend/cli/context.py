"""Small helper to build a yap app context for the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import getpass
import logging
import os

from yap.core.vault import SimpleVault
from yap.security.engine import Aes256Engine
from yap.security.kdf import kdf_params_to_dict

logger = logging.getLogger(__name__)

DEFAULT_PASSPHRASE_ENV = "YAP_PASSPHRASE"


@dataclass
class RuntimeConfig:
    """Startup settings for one CLI invocation. Never persisted."""

    passphrase: str = field(repr=False)
    store: Optional[str | Path] = None
    verbose: bool = False


@dataclass
class AppContext:
    """Container for runtime objects the commands need."""

    config: RuntimeConfig
    engine: Aes256Engine
    vault: SimpleVault


def resolve_passphrase(env_var: str = DEFAULT_PASSPHRASE_ENV) -> str:
    """
    Return the passphrase from ``env_var`` or, when it is unset, prompt for it.

    Reading the passphrase from the environment is meant for scripting; the
    value may be visible to other processes of the same user.
    """
    value = os.environ.get(env_var)
    if value is not None:
        logger.debug("Using passphrase from $%s", env_var)
        return value
    return getpass.getpass("Vault passphrase: ")


def build_context(config: RuntimeConfig, create: bool = False) -> AppContext:
    """
    Derive the engine once from ``config.passphrase`` and open the vault.

    With ``create=True`` the vault directory is created when missing;
    otherwise an existing vault is assumed.
    """
    params = kdf_params_to_dict()
    logger.debug("Deriving vault key with %s, %d iterations", params["algo"], params["iterations"])
    engine = Aes256Engine(config.passphrase)

    if create:
        vault = SimpleVault.create(engine, config.store)
    else:
        vault = SimpleVault.load(engine, config.store)

    return AppContext(config=config, engine=engine, vault=vault)
