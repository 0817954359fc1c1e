"""Configuration loading from YAML files and the environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.tags.loader import parse_alias_config
from infrastructure.config.models import BotConfig, DirectoryBackend, DiscordConfig
from infrastructure.constants import ENV_APPLICATION_ID, ENV_GUILD_ID, ENV_TOKEN

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is a valid "all defaults" config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_bot_config(path: Path | None = None, env: Mapping[str, str] | None = None) -> BotConfig:
    """
    Load bot.yaml (if present) and apply environment overrides.

    Environment variables win over the file:
    - DISCORD_TOKEN -> discord.token
    - DISCORD_APPLICATION_ID -> discord.application_id
    - GUILD_ID -> guild_id

    Args:
        path: Path to the YAML config; a missing file means "defaults only"
        env: Environment mapping (default: os.environ)

    Raises:
        ValueError: If the YAML has the wrong shape or values fail validation
    """
    env = os.environ if env is None else env

    data: dict[str, Any] = {}
    if path is not None and path.exists():
        data = _load_yaml(path)
    elif path is not None:
        logger.info("No config file at %s; using defaults and environment", path)

    discord_raw = data.get("discord") or {}
    if not isinstance(discord_raw, dict):
        raise ValueError("discord must be a mapping")
    aliases_raw = data.get("aliases") or {}
    if not isinstance(aliases_raw, dict):
        raise ValueError("aliases must be a mapping")

    discord = DiscordConfig(**discord_raw)
    if env.get(ENV_TOKEN):
        discord.token = env[ENV_TOKEN]
    if env.get(ENV_APPLICATION_ID):
        discord.application_id = env[ENV_APPLICATION_ID]

    guild_id = data.get("guild_id")
    if env.get(ENV_GUILD_ID):
        guild_id = env[ENV_GUILD_ID]

    cfg = BotConfig(
        backend=DirectoryBackend(str(data.get("backend", DirectoryBackend.DISCORD.value)).strip().lower()),
        guild_id=str(guild_id) if guild_id is not None else None,
        discord=discord,
        aliases=parse_alias_config(aliases_raw),
        serialize_invocations=data.get("serialize_invocations", True),
    )

    return cfg
