"""
Logging setup with contextvars-based metadata injection.

- Adds invocation tag, guild, member, category and phase into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (httpx, httpcore).
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_invocation_tag = contextvars.ContextVar("invocation_tag", default="-")
cv_guild = contextvars.ContextVar("guild", default="-")
cv_member = contextvars.ContextVar("member", default="-")
cv_category = contextvars.ContextVar("category", default="-")
cv_phase = contextvars.ContextVar("phase", default="-")


def make_invocation_tag(invocation_id: str, length: int = 8) -> str:
    """
    Stable short tag derived from a full invocation id (e.g. an interaction id).
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(invocation_id.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.inv = cv_invocation_tag.get() or "-"
        record.guild = cv_guild.get() or "-"
        record.member = cv_member.get() or "-"
        record.category = cv_category.get() or "-"
        record.phase = cv_phase.get() or "-"
        return True


def set_log_context(
    *,
    invocation_id: str | None = None,
    guild_id: str | None = None,
    member: str | None = None,
    category: str | None = None,
    phase: str | None = None,
) -> None:
    """Update logging context (task-local via contextvars)."""
    if invocation_id is not None:
        cv_invocation_tag.set(make_invocation_tag(str(invocation_id)))
    if guild_id is not None:
        cv_guild.set(str(guild_id))
    if member is not None:
        cv_member.set(str(member))
    if category is not None:
        cv_category.set(str(category))
    if phase is not None:
        cv_phase.set(str(phase))


def clear_invocation_context() -> None:
    """Reset per-invocation context to defaults."""
    cv_invocation_tag.set("-")
    cv_guild.set("-")
    cv_member.set("-")
    cv_category.set("-")
    cv_phase.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] i=%(inv)s m=%(member)s c=%(category)s p=%(phase)s | %(message)s"
    file_fmt = (
        "%(asctime)s [%(levelname)s] %(name)s | i=%(inv)s g=%(guild)s m=%(member)s "
        "c=%(category)s p=%(phase)s | %(message)s"
    )

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Reduce noise from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
