"""Tag synchronization: clear a member's tag-roles for a category, then assign the desired set."""

import logging

from application.constants import PHASE_ASSIGNING, PHASE_CLEARING, PHASE_DONE
from domain.categories import Category, is_tag_role, policy, role_name_for
from domain.errors import CorruptState, TransportError
from domain.schemas import GuildId, Member, RemoteRole, SyncReport, TagSet, count_holders
from infrastructure.directory.base import DirectoryAdapter
from infrastructure.observability.logging import set_log_context

logger = logging.getLogger(__name__)


def _member_label(member: Member) -> str:
    return member.name or member.user_id


async def clear_tag_roles(
    directory: DirectoryAdapter,
    guild: GuildId,
    member: Member,
    category: Category,
    report: SyncReport | None = None,
) -> SyncReport:
    """
    Remove every tag-role of ``category`` from ``member``.

    Roles and members are fetched once. A removed role that no other member
    holds (per that member snapshot) is deleted from the guild.

    Raises:
        CorruptState: If the member holds a role id missing from the guild
            role list. Checked for all held roles before any mutation.
        TransportError: On the first failed remote call (nothing is rolled back)
    """
    report = report if report is not None else SyncReport()
    set_log_context(phase=PHASE_CLEARING)

    members = await directory.list_members(guild)
    roles = {r.id: r for r in await directory.list_roles(guild)}

    held: list[RemoteRole] = []
    for role_id in member.roles:
        role = roles.get(role_id)
        if role is None:
            logger.error("Role %s held by %s is not in guild %s", role_id, _member_label(member), guild)
            raise CorruptState(role_id, _member_label(member), guild)
        held.append(role)

    suffix = policy(category).suffix
    for role in held:
        matches = is_tag_role(role.name, category)
        logger.debug("does %r end with %r? %s", role.name, suffix, matches)
        if not matches:
            continue

        try:
            logger.info("Removing role %s from %s", role.name, _member_label(member))
            await directory.remove_member_role(guild, member, role.id)
            member.roles.remove(role.id)
            report.removed.append(role.name)

            if count_holders(members, role.id, excluding=member.user_id) == 0:
                logger.info("Deleting role %s from guild (no other holders)", role.name)
                await directory.delete_role(guild, role.id)
                report.deleted.append(role.name)
        except TransportError:
            logger.error("Clearing failed at role %s for %s", role.name, _member_label(member))
            raise

    return report


async def assign_tag_roles(
    directory: DirectoryAdapter,
    guild: GuildId,
    member: Member,
    tags: TagSet,
    category: Category,
    report: SyncReport | None = None,
) -> SyncReport:
    """
    Give ``member`` one tag-role per tag, creating roles that do not exist yet.

    The role list is re-fetched because clearing may have deleted roles.
    Roles created here are remembered for the rest of the call, so a name is
    never created twice in one invocation.

    Raises:
        TransportError: On the first failed remote call; remaining tags are skipped
    """
    report = report if report is not None else SyncReport()
    set_log_context(phase=PHASE_ASSIGNING)
    color = policy(category).color

    by_name: dict[str, RemoteRole] = {}
    for role in await directory.list_roles(guild):
        by_name.setdefault(role.name, role)

    for tag in tags.names:
        role_name = role_name_for(tag, category)
        try:
            role = by_name.get(role_name)
            if role is None:
                logger.info("Creating new role %s", role_name)
                role = await directory.create_role(guild, role_name, color)
                by_name[role_name] = role
                report.created.append(role_name)
            else:
                logger.info("Adding existing role %s to %s", role_name, _member_label(member))
            await directory.add_member_role(guild, member, role.id)
        except TransportError:
            logger.error("Assigning failed at role %s for %s", role_name, _member_label(member))
            raise

        if role.id not in member.roles:
            member.roles.append(role.id)
        report.assigned.append(role_name)

    return report


async def synchronize_tags(
    directory: DirectoryAdapter,
    guild: GuildId,
    member: Member,
    tags: TagSet,
    category: Category,
) -> SyncReport:
    """Replace the member's tag-roles for ``category`` with exactly ``tags``."""
    report = SyncReport()
    await clear_tag_roles(directory, guild, member, category, report)
    await assign_tag_roles(directory, guild, member, tags, category, report)

    set_log_context(phase=PHASE_DONE)
    logger.info(
        "Successfully assigned %s to user %s (removed=%d, deleted=%d, created=%d)",
        list(tags.names),
        _member_label(member),
        len(report.removed),
        len(report.deleted),
        len(report.created),
    )
    return report
