"""Discord REST directory adapter."""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from domain.errors import TransportError
from domain.schemas import GuildId, Member, RemoteRole, RoleId
from infrastructure.config.models import BotConfig, DirectoryBackend

from .base import DirectoryAdapter
from .registry import register_directory

logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (https://github.com/character-roles, 0.1.0)"


def _role_from_payload(data: dict[str, Any]) -> RemoteRole:
    return RemoteRole(id=str(data["id"]), name=str(data.get("name", "")), color=int(data.get("color", 0) or 0))


def _member_from_payload(data: dict[str, Any]) -> Member:
    user = data.get("user") or {}
    return Member(
        user_id=str(user["id"]),
        name=str(user.get("global_name") or user.get("username") or user["id"]),
        roles=[str(r) for r in data.get("roles") or []],
    )


class DiscordDirectory(DirectoryAdapter):
    """
    Discord guild roles and members over the REST API (v10).

    - Authenticates with a bot token
    - Member listing pages through GET /guilds/{id}/members with limit/after
    - Any non-2xx response, network error or malformed body becomes TransportError
    """

    backend = DirectoryBackend.DISCORD
    supports_command_registration: bool = True

    @classmethod
    def from_cfg(cls, cfg: BotConfig) -> "DiscordDirectory":
        if not cfg.discord.token:
            raise ValueError("Backend=discord but no bot token is configured (set DISCORD_TOKEN)")
        client = httpx.AsyncClient(
            base_url=cfg.discord.api_base_url.rstrip("/"),
            timeout=cfg.discord.timeout_s,
            headers={
                "Authorization": f"Bot {cfg.discord.token}",
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
        )
        return cls(cfg=cfg, client=client)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: Any | None = None,
        params: dict[str, Any] | None = None,
        parse: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Send one request; decode the body and map it with ``parse`` if given.

        Raises:
            TransportError: On a non-2xx response, a network error, a body that
                is not JSON, or a payload ``parse`` cannot map
        """
        try:
            resp = await self.client.request(method, path, json=json, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as err:
            body = err.response.text[:300]
            logger.warning("%s %s -> HTTP %d: %s", method, path, err.response.status_code, body)
            raise TransportError(operation, f"HTTP {err.response.status_code}: {body}") from err
        except httpx.HTTPError as err:
            logger.warning("%s %s -> %s", method, path, err)
            raise TransportError(operation, str(err) or type(err).__name__) from err

        data = None
        if resp.status_code != 204 and resp.content:
            try:
                data = resp.json()
            except ValueError as err:
                body = resp.text[:300]
                logger.warning("%s %s -> undecodable body: %s", method, path, body)
                raise TransportError(operation, f"invalid JSON response: {body}") from err

        if parse is None:
            return data
        try:
            return parse(data)
        except (AttributeError, KeyError, TypeError, ValueError) as err:
            logger.warning("%s %s -> unexpected payload: %r", method, path, err)
            raise TransportError(operation, f"unexpected payload: {err!r}") from err

    async def list_roles(self, guild: GuildId) -> list[RemoteRole]:
        return await self._request(
            "GET",
            f"/guilds/{guild}/roles",
            operation="list_roles",
            parse=lambda data: [_role_from_payload(r) for r in data or []],
        )

    async def list_members(self, guild: GuildId) -> list[Member]:
        limit = self.cfg.discord.members_page_size
        members: list[Member] = []
        after = "0"
        while True:
            page: list[Member] = await self._request(
                "GET",
                f"/guilds/{guild}/members",
                operation="list_members",
                params={"limit": limit, "after": after},
                parse=lambda data: [_member_from_payload(m) for m in data or []],
            )
            members.extend(page)
            if len(page) < limit:
                break
            after = members[-1].user_id
        logger.debug("Fetched %d members of guild %s", len(members), guild)
        return members

    async def get_member(self, guild: GuildId, user_id: str) -> Member | None:
        try:
            return await self._request(
                "GET", f"/guilds/{guild}/members/{user_id}", operation="get_member", parse=_member_from_payload
            )
        except TransportError as err:
            cause = err.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                return None
            raise

    async def add_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        await self._request(
            "PUT", f"/guilds/{guild}/members/{member.user_id}/roles/{role_id}", operation="add_member_role"
        )

    async def remove_member_role(self, guild: GuildId, member: Member, role_id: RoleId) -> None:
        await self._request(
            "DELETE", f"/guilds/{guild}/members/{member.user_id}/roles/{role_id}", operation="remove_member_role"
        )

    async def create_role(self, guild: GuildId, name: str, color: int) -> RemoteRole:
        return await self._request(
            "POST",
            f"/guilds/{guild}/roles",
            operation="create_role",
            json={"name": name, "color": color},
            parse=_role_from_payload,
        )

    async def delete_role(self, guild: GuildId, role_id: RoleId) -> None:
        await self._request("DELETE", f"/guilds/{guild}/roles/{role_id}", operation="delete_role")

    async def register_guild_commands(self, guild: GuildId, commands: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Bulk-overwrite the application's commands in one guild."""
        app_id = self.cfg.discord.application_id
        if not app_id:
            raise ValueError("Command registration needs discord.application_id (set DISCORD_APPLICATION_ID)")
        return await self._request(
            "PUT",
            f"/applications/{app_id}/guilds/{guild}/commands",
            operation="register_commands",
            json=commands,
            parse=lambda data: list(data or []),
        )

    async def aclose(self) -> None:
        await self.client.aclose()


register_directory(DirectoryBackend.DISCORD, DiscordDirectory)
