"""Command line interface for yap, Yet Another Password manager.

Start here with `python -m yap.frontend.cli.app` or the installed `yap` script.

Commands:
  init                   -> create ~/.yap, its settings file and the vault
  config get KEY         -> print a setting
  config set KEY VALUE   -> update a setting
  get NAME [--copy]      -> print (or copy) a secret
  set NAME VALUE         -> store a secret, overwriting any previous value
  list                   -> list stored secret names
  delete NAME            -> remove a secret
  sync, generate         -> not implemented yet
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pyperclip

from yap.core import config as settings
from yap.core import paths
from yap.core.exceptions import YapError
from yap.core.vault import SimpleVault
from yap.frontend.cli.context import (
    DEFAULT_PASSPHRASE_ENV,
    AppContext,
    RuntimeConfig,
    build_context,
    resolve_passphrase,
)
from yap.frontend.cli.logging_config import configure_logging

logger = logging.getLogger(__name__)


# === Command handlers ===
# Each handler returns the text to print on success and raises YapError on failure.


def cmd_init(args: argparse.Namespace, ctx: Optional[AppContext]) -> str:
    paths.init()
    SimpleVault.init_store(args.store)
    return "Successfully initialized Yap!"


def cmd_config_get(args: argparse.Namespace, ctx: Optional[AppContext]) -> str:
    key = settings.SettingKey.require(args.key)
    return settings.read().get_key(key)


def cmd_config_set(args: argparse.Namespace, ctx: Optional[AppContext]) -> str:
    key = settings.SettingKey.require(args.key)
    conf = settings.read()
    conf.set_key(key, args.value)
    conf.save()
    return "Successfully updated config."


def cmd_get(args: argparse.Namespace, ctx: AppContext) -> str:
    value = ctx.vault.get_key(args.name)
    if args.copy:
        pyperclip.copy(value)
        return f"Copied {args.name} to clipboard"
    return value


def cmd_set(args: argparse.Namespace, ctx: AppContext) -> str:
    ctx.vault.set_key(args.name, args.value)
    return "Successfully saved password"


def cmd_list(args: argparse.Namespace, ctx: AppContext) -> str:
    return "\n".join(ctx.vault.list_keys())


def cmd_delete(args: argparse.Namespace, ctx: AppContext) -> str:
    ctx.vault.delete_key(args.name)
    return f"Deleted {args.name}"


def cmd_sync(args: argparse.Namespace, ctx: Optional[AppContext]) -> str:
    logger.info("sync requested for store %s", args.sync_store or args.store or "<default>")
    return "sync is not implemented yet"


def cmd_generate(args: argparse.Namespace, ctx: Optional[AppContext]) -> str:
    return "generate is not implemented yet"


# === Argument parsing ===


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yap", description="Yet Another Password Manager")
    parser.add_argument(
        "-s",
        "--store",
        default=None,
        help="Vault directory to use instead of ~/.yap/vault. Useful if multiple vaults are in use.",
    )
    parser.add_argument(
        "--passphrase-env",
        default=DEFAULT_PASSPHRASE_ENV,
        help=f"Environment variable holding the vault passphrase (default: {DEFAULT_PASSPHRASE_ENV}); "
        "prompts when unset",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser(
        "init",
        help="Initialize Yap. Creates ~/.yap, default settings and the vault directory",
    )
    p.set_defaults(func=cmd_init, needs_vault=False)

    p = sub.add_parser("sync", help="Sync passwords with the remote repository")
    p.add_argument("-s", "--store", dest="sync_store", default=None, help="Password store to sync if not default")
    p.set_defaults(func=cmd_sync, needs_vault=False)

    p = sub.add_parser("config", help="Set or view global settings")
    config_sub = p.add_subparsers(dest="config_command", required=True)
    cp = config_sub.add_parser("get", help="Get the value for the given setting")
    cp.add_argument("key")
    cp.set_defaults(func=cmd_config_get, needs_vault=False)
    cp = config_sub.add_parser("set", help="Set the value for the given setting")
    cp.add_argument("key")
    cp.add_argument("value")
    cp.set_defaults(func=cmd_config_set, needs_vault=False)

    p = sub.add_parser("get", help="Get a password identified by NAME")
    p.add_argument("name", help="The name of the password")
    p.add_argument("-c", "--copy", action="store_true", help="Copy to the clipboard instead of printing")
    p.set_defaults(func=cmd_get, needs_vault=True, create_vault=False)

    p = sub.add_parser("set", help="Set a password to the given value, overwriting it if it exists")
    p.add_argument("name", help="The name of the password")
    p.add_argument("value")
    p.set_defaults(func=cmd_set, needs_vault=True, create_vault=True)

    p = sub.add_parser("list", help="List the names of stored passwords")
    p.set_defaults(func=cmd_list, needs_vault=True, create_vault=False)

    p = sub.add_parser("delete", help="Delete the password identified by NAME")
    p.add_argument("name", help="The name of the password")
    p.set_defaults(func=cmd_delete, needs_vault=True, create_vault=False)

    p = sub.add_parser("generate", help="Generate and store a password using the given name")
    p.add_argument("name", help="The name of the password")
    p.set_defaults(func=cmd_generate, needs_vault=False)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        ctx = None
        if args.needs_vault:
            config = RuntimeConfig(
                passphrase=resolve_passphrase(args.passphrase_env),
                store=args.store,
                verbose=args.verbose,
            )
            ctx = build_context(config, create=args.create_vault)
        message = args.func(args, ctx)
    except YapError as exc:
        logger.debug("%s failed: %r", args.command, exc)
        print(exc, file=sys.stderr)
        return 1
    except pyperclip.PyperclipException as exc:
        print(f"Clipboard unavailable: {exc}", file=sys.stderr)
        return 1

    if message:
        print(message)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
