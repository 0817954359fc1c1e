"""
Configuration management: models and loading.

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_bot_config
from infrastructure.config.models import BotConfig, DirectoryBackend, DiscordConfig

__all__ = [
    "BotConfig",
    "DiscordConfig",
    "DirectoryBackend",
    "load_bot_config",
]
