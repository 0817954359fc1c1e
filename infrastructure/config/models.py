"""Configuration models (Pydantic classes)."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from domain.tags.aliases import AliasTable
from infrastructure.constants import DISCORD_API_BASE


class DirectoryBackend(str, Enum):
    """Supported directory service backends."""

    DISCORD = "discord"
    MEMORY = "memory"


class DiscordConfig(BaseModel):
    """Discord REST settings."""

    token: str | None = Field(default=None, description="Bot token (normally from DISCORD_TOKEN).")
    application_id: str | None = Field(default=None, description="Needed only for command registration.")
    api_base_url: str = DISCORD_API_BASE
    timeout_s: float = 10.0
    members_page_size: int = Field(default=1000, ge=1, le=1000)


class BotConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/bot.yaml plus environment overrides
    - Injected once at startup and passed explicitly to the engine
    """

    backend: DirectoryBackend = Field(default=DirectoryBackend.DISCORD, description="Directory backend to use.")
    guild_id: str | None = Field(default=None, description="Guild whose roles are managed.")
    discord: DiscordConfig = Field(default_factory=DiscordConfig)
    aliases: AliasTable = Field(default_factory=AliasTable)
    serialize_invocations: bool = Field(
        default=True,
        description="Run at most one invocation at a time per (guild, category).",
    )

    @model_validator(mode="after")
    def _validate(self) -> "BotConfig":
        if self.guild_id is not None:
            self.guild_id = str(self.guild_id).strip() or None
        if self.guild_id is not None and not self.guild_id.isdigit():
            raise ValueError(f"guild_id must be an integer, got {self.guild_id!r}")
        return self
