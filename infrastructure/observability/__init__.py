"""
Observability: structured logging and context management.

Provides:
- Contextual logging with invocation/guild/member/phase fields
- Log rotation and file management
- Third-party library log level control
"""

from infrastructure.observability.logging import (
    clear_invocation_context,
    configure_logging,
    make_invocation_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_invocation_context",
    "make_invocation_tag",
]
