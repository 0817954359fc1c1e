"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain rules and the directory adapter,
implementing the tag synchronization workflow and the command surface.
"""

from application.commands import (
    Invocation,
    build_command_definitions,
    build_interaction_response,
    handle_invocation,
    invocation_from_interaction,
)
from application.context import SyncContext
from application.locking import InvocationLocks
from application.sync import assign_tag_roles, clear_tag_roles, synchronize_tags

__all__ = [
    # Main workflows
    "handle_invocation",
    "synchronize_tags",
    "clear_tag_roles",
    "assign_tag_roles",
    # Command surface
    "Invocation",
    "invocation_from_interaction",
    "build_command_definitions",
    "build_interaction_response",
    # Context
    "SyncContext",
    "InvocationLocks",
]
