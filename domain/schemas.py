"""Pydantic models for directory objects and parsed tag input."""

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

GuildId: TypeAlias = str
RoleId: TypeAlias = str
TagName: TypeAlias = str


class RemoteRole(BaseModel):
    """A guild role as reported by the directory service."""

    id: RoleId = Field(..., description="Opaque role identifier, stable within one guild.")
    name: str = Field(..., description="Display name; tag-roles are '<TagName><suffix>'.")
    color: int = Field(default=0, description="24-bit RGB color.")


class Member(BaseModel):
    """A guild member and the role ids they currently hold."""

    user_id: str
    name: str = ""
    roles: list[RoleId] = Field(default_factory=list)


class TagSet(BaseModel):
    """Ordered, duplicate-free sequence of canonical tag names."""

    model_config = ConfigDict(frozen=True)

    names: tuple[TagName, ...] = ()

    @classmethod
    def from_names(cls, names: list[TagName]) -> "TagSet":
        # dict keeps first-seen order
        return cls(names=tuple(dict.fromkeys(names)))

    def __len__(self) -> int:
        return len(self.names)


class SyncReport(BaseModel):
    """What a completed synchronization changed, by role name."""

    removed: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    created: list[str] = Field(default_factory=list)
    assigned: list[str] = Field(default_factory=list)


def count_holders(members: list[Member], role_id: RoleId, *, excluding: str | None = None) -> int:
    """Number of members holding ``role_id``, optionally ignoring one user id."""
    return sum(1 for m in members if m.user_id != excluding and role_id in m.roles)
