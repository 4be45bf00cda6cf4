from .builders import CLAN_SEARCH_FIELDS, ClanSearch, Location, LocationRankings, Locations, RankingKind
from .client import ClashClient
from .config_types import DEFAULT_BASE_URL, ENV_API_TOKEN, ClientConfig
from .errors import (
    ApiError,
    AuthError,
    CocClientError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    TransportError,
)

__all__ = [
    "ClashClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "ENV_API_TOKEN",
    "CLAN_SEARCH_FIELDS",
    "ClanSearch",
    "Locations",
    "Location",
    "LocationRankings",
    "RankingKind",
    "CocClientError",
    "ConfigurationError",
    "TransportError",
    "NetworkError",
    "DecodeError",
    "ApiError",
    "AuthError",
]
