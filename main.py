"""
CLI entrypoint for the character role bot.

This script performs the following steps:
- loads .env and configs/bot.yaml
- configures logging (console + optional rotating file)
- builds the directory adapter (Discord REST, or in-memory with --mock)
- runs one subcommand:
    sync               replace a member's tags for one category
    register-commands  register the slash commands in the configured guild
"""

import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from application import (
    Invocation,
    SyncContext,
    build_command_definitions,
    handle_invocation,
)
from domain.categories import Category
from infrastructure.config import BotConfig, load_bot_config
from infrastructure.constants import BOT_CONFIG_FILE, ENV_FILE
from infrastructure.directory import InMemoryDirectory, make_directory
from infrastructure.directory.base import DirectoryAdapter
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)

MOCK_GUILD_ID = "1"


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Self-assigned character roles for a Discord guild")
    p.add_argument(
        "--config",
        type=str,
        default=str(BOT_CONFIG_FILE),
        help="Path to bot.yaml (default: configs/bot.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=str(ENV_FILE),
        help="Path to .env file (default: .env)",
    )
    p.add_argument(
        "--mock",
        action="store_true",
        help="Use the in-memory directory instead of calling Discord.",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    p.add_argument("--log-file", type=str, default=None, help="Optional rotating log file")

    sub = p.add_subparsers(dest="command", required=True)

    sync = sub.add_parser("sync", help="Replace a member's characters for one category")
    sync.add_argument("--member-id", required=True, help="User id of the member to update")
    sync.add_argument(
        "--category",
        required=True,
        choices=[c.value for c in Category],
        help="Category (command name) to update",
    )
    sync.add_argument("--characters", default="", help="Characters separated by comma")

    sub.add_parser("register-commands", help="Register the slash commands in the configured guild")
    return p.parse_args()


def _require_guild(cfg: BotConfig, use_mock: bool) -> str:
    if cfg.guild_id is not None:
        return cfg.guild_id
    if use_mock:
        return MOCK_GUILD_ID
    raise SystemExit("No guild configured: set GUILD_ID or guild_id in bot.yaml")


async def _run_sync(args: argparse.Namespace, cfg: BotConfig, directory: DirectoryAdapter) -> int:
    guild = _require_guild(cfg, args.mock)

    if isinstance(directory, InMemoryDirectory):
        directory.seed_member(guild, args.member_id)

    member = await directory.get_member(guild, args.member_id)
    if member is None:
        logger.error("Member %s not found in guild %s", args.member_id, guild)
        return 1

    ctx = SyncContext(cfg=cfg, directory=directory)
    response = await handle_invocation(
        ctx,
        Invocation(command_name=args.category, raw_text=args.characters, member=member, guild_id=guild),
    )
    print(response)

    if isinstance(directory, InMemoryDirectory):
        logger.info("Mock guild roles now: %s", directory.role_names(guild))
    return 0


async def _run_register(cfg: BotConfig, directory: DirectoryAdapter) -> int:
    if not directory.supports_command_registration:
        logger.error("Backend %s cannot register commands", cfg.backend.value)
        return 1

    guild = _require_guild(cfg, use_mock=False)
    registered = await directory.register_guild_commands(guild, build_command_definitions())  # type: ignore[attr-defined]
    logger.info("Registered %d commands in guild %s", len(registered), guild)
    return 0


async def _main_async(args: argparse.Namespace, cfg: BotConfig) -> int:
    directory = make_directory(cfg, use_mock=bool(args.mock))
    try:
        if args.command == "sync":
            return await _run_sync(args, cfg, directory)
        return await _run_register(cfg, directory)
    finally:
        await directory.aclose()


def main() -> int:
    args = _parse_args()

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)
    else:
        logger.info("No env file at %s; using process environment", env_file)

    cfg = load_bot_config(Path(args.config))
    logger.info("Loaded config (backend=%s, guild=%s)", cfg.backend.value, cfg.guild_id or "-")

    return asyncio.run(_main_async(args, cfg))


if __name__ == "__main__":
    raise SystemExit(main())
