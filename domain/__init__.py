"""
Domain layer: tag rules with no I/O.

Contains:
- schemas: Pydantic models for roles, members, tag sets
- categories: Category enum and per-category policy
- tags: alias resolution and input parsing
- errors: error kinds reported to the invoker
"""

from domain.categories import Category, CategoryPolicy, is_tag_role, policy, role_name_for
from domain.errors import CorruptState, NotInGuild, TagSyncError, TransportError, UnknownCategory
from domain.schemas import Member, RemoteRole, SyncReport, TagSet

__all__ = [
    "Category",
    "CategoryPolicy",
    "policy",
    "is_tag_role",
    "role_name_for",
    "Member",
    "RemoteRole",
    "TagSet",
    "SyncReport",
    "TagSyncError",
    "TransportError",
    "CorruptState",
    "UnknownCategory",
    "NotInGuild",
]
