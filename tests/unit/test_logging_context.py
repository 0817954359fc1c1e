import logging

import pytest

from application.commands import Invocation, handle_invocation
from application.context import SyncContext
from domain.schemas import Member
from infrastructure.directory.memory import InMemoryDirectory
from infrastructure.observability.logging import (
    ContextInjectFilter,
    clear_invocation_context,
    cv_guild,
    make_invocation_tag,
    set_log_context,
)

GUILD = "100"


def _record() -> logging.LogRecord:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    ContextInjectFilter().filter(record)
    return record


def test_context_is_injected_into_records() -> None:
    set_log_context(invocation_id="555", guild_id=GUILD, member="alice", category="main", phase="clearing")
    try:
        record = _record()
    finally:
        clear_invocation_context()

    assert record.inv == make_invocation_tag("555")
    assert (record.guild, record.member, record.category, record.phase) == (GUILD, "alice", "main", "clearing")


def test_clear_resets_every_field() -> None:
    set_log_context(invocation_id="555", guild_id=GUILD, member="alice", category="main", phase="done")

    clear_invocation_context()

    record = _record()
    assert (record.inv, record.guild, record.member, record.category, record.phase) == ("-", "-", "-", "-", "-")


@pytest.mark.asyncio
async def test_guild_is_not_carried_past_an_invocation(ctx: SyncContext, directory: InMemoryDirectory) -> None:
    directory.seed_member(GUILD, "a")

    await handle_invocation(
        ctx, Invocation(command_name="main", raw_text="mario", member=Member(user_id="a"), guild_id=GUILD)
    )

    assert cv_guild.get() == "-"
