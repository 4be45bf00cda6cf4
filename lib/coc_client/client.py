from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

from .builders import ClanSearch, Locations
from .config_types import ClientConfig, resolve_client_config
from .options import merge_options
from .transport import Transport


class ClashClient:
    """Async client for the Clash of Clans API.

    Every request method is a coroutine returning the decoded response body
    as-is; transport errors propagate unchanged.

        async with ClashClient(token="...") as client:
            clan = await client.clan_by_tag("#UPC2UQ")
            found = await client.clans().with_war_frequency("always").with_min_members(25).fetch()
    """

    def __init__(
            self,
            uri: str | None = None,
            token: str | None = None,
            request_defaults: Mapping[str, Any] | None = None,
            *,
            timeout_s: float = 15.0,
            environ: Mapping[str, str] | None = None,
            transport: Transport | None = None,
    ):
        self.config: ClientConfig = resolve_client_config(
            uri,
            token,
            request_defaults,
            timeout_s=timeout_s,
            environ=environ,
        )
        self._t = transport or Transport(self.config)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> ClashClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @staticmethod
    def encode(value: Any) -> str:
        return quote(str(value), safe="")

    def build_request_options(self, opts: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge the base template, ``opts`` and the client's request defaults.

        Later layers win, so defaults given at construction override per-call
        options (``uri`` and ``params`` included).
        """
        base = {
            "headers": {
                "Accept": "application/json",
                "Authorization": f"Bearer {self.config.token}",
            },
            "expect_json": True,
        }
        return merge_options(base, opts, self.config.request_defaults)

    async def _get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        opts: dict[str, Any] = {"uri": f"{self.config.base_url}{path}"}
        if params is not None:
            opts["params"] = dict(params)
        return await self._t.request(self.build_request_options(opts))

    # --- clans ---
    async def clan_by_tag(self, tag: str) -> Any:
        return await self._get(f"/clans/{self.encode(tag)}")

    async def clan_members_by_tag(self, tag: str) -> Any:
        return await self._get(f"/clans/{self.encode(tag)}/members")

    async def clan_warlog_by_tag(self, tag: str) -> Any:
        return await self._get(f"/clans/{self.encode(tag)}/warlog")

    async def clan_current_war_by_tag(self, tag: str) -> Any:
        return await self._get(f"/clans/{self.encode(tag)}/currentwar")

    async def clan_league(self, tag: str) -> Any:
        """Current clan war league group of the clan."""
        return await self._get(f"/clans/{self.encode(tag)}/currentwar/leaguegroup")

    async def clan_league_wars(self, war_tag: str) -> Any:
        return await self._get(f"/clanwarleagues/wars/{self.encode(war_tag)}")

    def clans(self) -> ClanSearch:
        return ClanSearch(self)

    # --- locations / leagues / players ---
    def locations(self) -> Locations:
        return Locations(self)

    async def leagues(self) -> Any:
        return await self._get("/leagues")

    async def player_by_tag(self, tag: str) -> Any:
        return await self._get(f"/players/{self.encode(tag)}")
