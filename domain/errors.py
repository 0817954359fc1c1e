"""Error kinds raised by the tag synchronization engine and its collaborators."""


class TagSyncError(Exception):
    """Base class for every failure that is reported back to the invoker."""


class TransportError(TagSyncError):
    """A remote directory call failed (network, permission, rate limit)."""

    def __init__(self, operation: str, cause: object) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class CorruptState(TagSyncError):
    """A member holds a role id that the guild's role list does not contain."""

    def __init__(self, role_id: str, member: str, guild_id: str) -> None:
        self.role_id = role_id
        self.member = member
        self.guild_id = guild_id
        super().__init__(f"corrupt role instance: role {role_id} held by {member} is missing from guild {guild_id}")


class UnknownCategory(TagSyncError):
    """The invocation names a category that has no policy."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"command not found: {name}")


class NotInGuild(TagSyncError):
    """The invocation carries no guild (or no member) context."""

    def __init__(self) -> None:
        super().__init__("command must be used inside a guild")
