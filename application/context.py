"""Explicit per-process context handed to the command handler."""

from dataclasses import dataclass, field

from application.locking import InvocationLocks
from infrastructure.config.models import BotConfig
from infrastructure.directory.base import DirectoryAdapter


@dataclass
class SyncContext:
    """Configuration and collaborators injected at startup; no globals."""

    cfg: BotConfig
    directory: DirectoryAdapter
    locks: InvocationLocks = field(default_factory=InvocationLocks)
