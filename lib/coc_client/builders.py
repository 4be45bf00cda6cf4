"""Chainable query builders for clan search and location rankings."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import ClashClient

CLAN_SEARCH_FIELDS = (
    "name",
    "warFrequency",
    "locationId",
    "minMembers",
    "maxMembers",
    "minClanPoints",
    "minClanLevel",
    "limit",
    "after",
    "before",
)


class RankingKind(str, Enum):
    CLANS = "clans"
    PLAYERS = "players"


class ClanSearch:
    """Accumulates clan search filters; ``fetch()`` issues one ``GET /clans``.

    The API requires at least one filter and, when ``name`` is used, at least
    three characters. Both rules are enforced server-side only.

    Setting the same filter twice keeps the last value. A builder belongs to
    one caller; ``client.clans()`` returns a fresh one each time.
    """

    def __init__(self, client: ClashClient):
        self._client = client
        self._params: dict[str, Any] = {}

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)

    def _set(self, field: str, value: Any) -> ClanSearch:
        self._params[field] = value
        return self

    def with_name(self, name: str) -> ClanSearch:
        return self._set("name", name)

    def with_war_frequency(self, war_frequency: str) -> ClanSearch:
        return self._set("warFrequency", war_frequency)

    def with_location_id(self, location_id: int | str) -> ClanSearch:
        return self._set("locationId", location_id)

    def with_min_members(self, min_members: int) -> ClanSearch:
        return self._set("minMembers", min_members)

    def with_max_members(self, max_members: int) -> ClanSearch:
        return self._set("maxMembers", max_members)

    def with_min_clan_points(self, min_clan_points: int) -> ClanSearch:
        return self._set("minClanPoints", min_clan_points)

    def with_min_clan_level(self, min_clan_level: int) -> ClanSearch:
        return self._set("minClanLevel", min_clan_level)

    def with_limit(self, limit: int) -> ClanSearch:
        return self._set("limit", limit)

    def with_after(self, after: str) -> ClanSearch:
        return self._set("after", after)

    def with_before(self, before: str) -> ClanSearch:
        return self._set("before", before)

    async def fetch(self) -> Any:
        return await self._client._get("/clans", params=self.params)


class Locations:
    """Entry point of ``client.locations()``: list all or pick one by id."""

    def __init__(self, client: ClashClient):
        self._client = client

    def with_id(self, location_id: int | str) -> Location:
        return Location(self._client, location_id)

    async def fetch(self) -> Any:
        return await self._client._get("/locations")


class Location:
    def __init__(self, client: ClashClient, location_id: int | str):
        self._client = client
        self.location_id = location_id

    def by_clan(self) -> LocationRankings:
        return LocationRankings(self._client, self.location_id, RankingKind.CLANS)

    def by_player(self) -> LocationRankings:
        return LocationRankings(self._client, self.location_id, RankingKind.PLAYERS)

    async def fetch(self) -> Any:
        return await self._client._get(f"/locations/{self._client.encode(self.location_id)}")


class LocationRankings:
    """Ranking sub-resource of one location; immutable once created."""

    def __init__(self, client: ClashClient, location_id: int | str, kind: RankingKind):
        self._client = client
        self.location_id = location_id
        self.kind = RankingKind(kind)

    async def fetch(self) -> Any:
        path = f"/locations/{self._client.encode(self.location_id)}/rankings/{self.kind.value}"
        return await self._client._get(path)
