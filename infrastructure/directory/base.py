"""Base adapter interface for the remote directory service."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from domain.schemas import GuildId, Member, RemoteRole, RoleId
from infrastructure.config.models import BotConfig, DirectoryBackend

logger = logging.getLogger(__name__)


class DirectoryAdapter(ABC):
    """
    Abstract base class for directory service adapters.

    The narrow surface the synchronization engine depends on. Every method is
    a suspension point and raises TransportError when the remote call fails;
    none of them retry.
    """

    backend: DirectoryBackend
    cfg: BotConfig
    client: Any

    supports_command_registration: bool = False

    def __init__(self, *, cfg: BotConfig, client: Any) -> None:
        self.cfg = cfg
        self.client = client

    @abstractmethod
    async def list_roles(self, guild: GuildId) -> list[RemoteRole]:
        """Full snapshot of the guild's roles."""
        raise NotImplementedError

    @abstractmethod
    async def list_members(self, guild: GuildId) -> list[Member]:
        """Full snapshot of the guild's members."""
        raise NotImplementedError

    async def get_member(self, guild: GuildId, user_id: str) -> Member | None:
        """Look up one member; backends with a direct endpoint override this."""
        for member in await self.list_members(guild):
            if member.user_id == user_id:
                return member
        return None

    @abstractmethod
    async def add_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        raise NotImplementedError

    @abstractmethod
    async def remove_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        raise NotImplementedError

    @abstractmethod
    async def create_role(self, guild: GuildId, name: str, color: int) -> RemoteRole:
        """Create a role. No uniqueness check; callers look up before creating."""
        raise NotImplementedError

    @abstractmethod
    async def delete_role(self, guild: GuildId, role_id: RoleId) -> None:
        """Delete a role from the guild (removes it from every holder)."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release client resources."""
        return None
