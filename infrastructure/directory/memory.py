"""In-memory directory for tests and dry runs."""

import asyncio
import itertools
import logging
from collections import Counter

from domain.errors import TransportError
from domain.schemas import GuildId, Member, RemoteRole, RoleId
from infrastructure.config.models import BotConfig, DirectoryBackend

from .base import DirectoryAdapter
from .registry import register_directory

logger = logging.getLogger(__name__)


class InMemoryDirectory(DirectoryAdapter):
    """Directory backed by process memory; no remote calls are made.

    Reads return copies, so callers see snapshots the way they would from a
    real service. Every call is recorded in ``calls`` as ``(operation, *args)``.
    ``fail_after`` maps an operation name to the number of calls that succeed
    before it starts raising TransportError. With ``yield_on_call`` every call
    suspends once, so concurrent tasks interleave as they would against a
    real service.
    """

    backend = DirectoryBackend.MEMORY

    def __init__(
        self,
        *,
        cfg: BotConfig | None = None,
        fail_after: dict[str, int] | None = None,
        yield_on_call: bool = False,
    ) -> None:
        super().__init__(cfg=cfg or BotConfig(backend=DirectoryBackend.MEMORY), client=None)
        self._roles: dict[GuildId, dict[RoleId, RemoteRole]] = {}
        self._members: dict[GuildId, dict[str, Member]] = {}
        self._ids = itertools.count(1)
        self._counts: Counter[str] = Counter()
        self.fail_after = dict(fail_after or {})
        self.calls: list[tuple[str, ...]] = []
        self.yield_on_call = yield_on_call
        logger.info("Initialized in-memory directory (no real API calls will be made)")

    @classmethod
    def from_cfg(cls, cfg: BotConfig) -> "InMemoryDirectory":
        return cls(cfg=cfg)

    # Seeding / inspection helpers

    def seed_role(self, guild: GuildId, name: str, color: int = 0) -> RemoteRole:
        role = RemoteRole(id=str(next(self._ids)), name=name, color=color)
        self._roles.setdefault(guild, {})[role.id] = role
        return role.model_copy()

    def seed_member(self, guild: GuildId, user_id: str, name: str = "", roles: list[RoleId] | None = None) -> Member:
        member = Member(user_id=user_id, name=name or user_id, roles=list(roles or []))
        self._members.setdefault(guild, {})[user_id] = member
        return member.model_copy(deep=True)

    def role_names(self, guild: GuildId) -> list[str]:
        return sorted(r.name for r in self._roles.get(guild, {}).values())

    def member_role_names(self, guild: GuildId, user_id: str) -> list[str]:
        roles = self._roles.get(guild, {})
        member = self._members[guild][user_id]
        return sorted(roles[r].name if r in roles else r for r in member.roles)

    def mutations(self) -> list[tuple[str, ...]]:
        return [c for c in self.calls if not c[0].startswith(("list_", "get_"))]

    async def _record(self, operation: str, *args: str) -> None:
        if self.yield_on_call:
            await asyncio.sleep(0)
        self.calls.append((operation, *args))
        limit = self.fail_after.get(operation)
        if limit is not None and self._counts[operation] >= limit:
            raise TransportError(operation, "injected failure")
        self._counts[operation] += 1

    def _stored_member(self, operation: str, guild: GuildId, user_id: str) -> Member:
        member = self._members.get(guild, {}).get(user_id)
        if member is None:
            raise TransportError(operation, f"Unknown Member {user_id}")
        return member

    # DirectoryAdapter

    async def list_roles(self, guild: GuildId) -> list[RemoteRole]:
        await self._record("list_roles", guild)
        return [r.model_copy() for r in self._roles.get(guild, {}).values()]

    async def list_members(self, guild: GuildId) -> list[Member]:
        await self._record("list_members", guild)
        return [m.model_copy(deep=True) for m in self._members.get(guild, {}).values()]

    async def get_member(self, guild: GuildId, user_id: str) -> Member | None:
        await self._record("get_member", guild, user_id)
        member = self._members.get(guild, {}).get(user_id)
        return member.model_copy(deep=True) if member is not None else None

    async def add_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        await self._record("add_member_role", guild, member.user_id, role_id)
        stored = self._stored_member("add_member_role", guild, member.user_id)
        if role_id not in self._roles.get(guild, {}):
            raise TransportError("add_member_role", f"Unknown Role {role_id}")
        if role_id not in stored.roles:
            stored.roles.append(role_id)

    async def remove_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        await self._record("remove_member_role", guild, member.user_id, role_id)
        stored = self._stored_member("remove_member_role", guild, member.user_id)
        if role_id in stored.roles:
            stored.roles.remove(role_id)

    async def create_role(self, guild: GuildId, name: str, color: int) -> RemoteRole:
        await self._record("create_role", guild, name)
        role = RemoteRole(id=str(next(self._ids)), name=name, color=color)
        self._roles.setdefault(guild, {})[role.id] = role
        return role.model_copy()

    async def delete_role(self, guild: GuildId, role_id: RoleId) -> None:
        await self._record("delete_role", guild, role_id)
        if self._roles.get(guild, {}).pop(role_id, None) is None:
            raise TransportError("delete_role", f"Unknown Role {role_id}")
        for member in self._members.get(guild, {}).values():
            if role_id in member.roles:
                member.roles.remove(role_id)


register_directory(DirectoryBackend.MEMORY, InMemoryDirectory)
