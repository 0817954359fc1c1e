"""Command surface: invocation handling, registration payloads and interaction mapping."""

import logging
from typing import Any

from pydantic import BaseModel, Field

from application.constants import (
    CHANNEL_MESSAGE_WITH_SOURCE,
    CHARACTERS_OPTION,
    CHARACTERS_OPTION_DESCRIPTION,
    CHAT_INPUT_COMMAND_TYPE,
    STRING_OPTION_TYPE,
    SUCCESS_MESSAGE,
)
from application.context import SyncContext
from application.sync import synchronize_tags
from domain.categories import Category, policy
from domain.errors import NotInGuild, TagSyncError
from domain.schemas import GuildId, Member
from domain.tags.parser import parse_tags
from infrastructure.observability.logging import clear_invocation_context, set_log_context

logger = logging.getLogger(__name__)


class Invocation(BaseModel):
    """One command invocation as delivered by the transport."""

    command_name: str
    raw_text: str = ""
    member: Member | None = None
    guild_id: GuildId | None = None
    invocation_id: str | None = Field(default=None, description="Transport id, used only for log correlation.")


def build_command_definitions() -> list[dict[str, Any]]:
    """One chat-input command per category, each taking the required 'characters' string."""
    return [
        {
            "name": category.value,
            "description": policy(category).description,
            "type": CHAT_INPUT_COMMAND_TYPE,
            "options": [
                {
                    "name": CHARACTERS_OPTION,
                    "description": CHARACTERS_OPTION_DESCRIPTION,
                    "type": STRING_OPTION_TYPE,
                    "required": True,
                }
            ],
        }
        for category in Category
    ]


def invocation_from_interaction(payload: dict[str, Any]) -> Invocation:
    """
    Map a Discord application-command interaction payload to an Invocation.

    A missing option value yields empty text; a missing guild or member is
    left as None and rejected later by handle_invocation.
    """
    data = payload.get("data") or {}
    options = data.get("options") or []
    raw_text = ""
    if options:
        value = options[0].get("value")
        raw_text = value if isinstance(value, str) else ""

    member: Member | None = None
    member_raw = payload.get("member")
    if member_raw and member_raw.get("user"):
        user = member_raw["user"]
        member = Member(
            user_id=str(user["id"]),
            name=str(user.get("global_name") or user.get("username") or user["id"]),
            roles=[str(r) for r in member_raw.get("roles") or []],
        )

    guild_id = payload.get("guild_id")
    return Invocation(
        command_name=str(data.get("name", "")),
        raw_text=raw_text,
        member=member,
        guild_id=str(guild_id) if guild_id is not None else None,
        invocation_id=str(payload["id"]) if payload.get("id") is not None else None,
    )


def build_interaction_response(text: str) -> dict[str, Any]:
    """Interaction response body that posts ``text`` as a channel message."""
    return {"type": CHANNEL_MESSAGE_WITH_SOURCE, "data": {"content": text}}


async def handle_invocation(ctx: SyncContext, invocation: Invocation) -> str:
    """
    Run one invocation end to end and return the response text.

    Guild/member and category are validated before any remote call. Every
    TagSyncError is logged and returned as its message; nothing is retried.
    """
    set_log_context(
        invocation_id=invocation.invocation_id or f"{invocation.guild_id}:{invocation.command_name}",
        guild_id=invocation.guild_id or "-",
        member=(invocation.member.name or invocation.member.user_id) if invocation.member else "-",
        category=invocation.command_name,
    )
    try:
        if invocation.guild_id is None or invocation.member is None:
            raise NotInGuild()
        category = Category.from_command_name(invocation.command_name)
        tags = parse_tags(invocation.raw_text, ctx.cfg.aliases)
        logger.info("Parsed %r into %s", invocation.raw_text, list(tags.names))

        if ctx.cfg.serialize_invocations:
            async with ctx.locks.for_key(invocation.guild_id, category):
                await synchronize_tags(ctx.directory, invocation.guild_id, invocation.member, tags, category)
        else:
            await synchronize_tags(ctx.directory, invocation.guild_id, invocation.member, tags, category)
    except TagSyncError as err:
        logger.error("Failed to run application command: %s", err)
        return str(err)
    finally:
        clear_invocation_context()

    return SUCCESS_MESSAGE
