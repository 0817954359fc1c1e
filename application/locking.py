"""Per-(guild, category) serialization of invocations."""

import asyncio

from domain.categories import Category
from domain.schemas import GuildId


class InvocationLocks:
    """Hands out one asyncio.Lock per (guild, category).

    Two invocations for the same category in the same guild share tag-roles
    (one may garbage-collect a role the other is about to add), so they run
    one after the other. Different categories never touch each other's roles.
    """

    def __init__(self) -> None:
        self._locks: dict[tuple[GuildId, Category], asyncio.Lock] = {}

    def for_key(self, guild: GuildId, category: Category) -> asyncio.Lock:
        return self._locks.setdefault((guild, category), asyncio.Lock())

    def __len__(self) -> int:
        return len(self._locks)
