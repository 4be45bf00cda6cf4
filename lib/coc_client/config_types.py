from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.clashofclans.com/v1"
ENV_API_TOKEN = "COC_API_TOKEN"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    token: str
    request_defaults: Mapping[str, Any] = field(default_factory=dict)
    timeout_s: float = 15.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "request_defaults", _freeze(self.request_defaults))


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return copy.deepcopy(value)


def resolve_client_config(
        uri: str | None = None,
        token: str | None = None,
        request_defaults: Mapping[str, Any] | None = None,
        *,
        timeout_s: float = 15.0,
        environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Build a ClientConfig, falling back to the environment for the token.

    Resolution order: explicit token, then ``COC_API_TOKEN``. The base URL
    falls back to ``DEFAULT_BASE_URL``.
    """
    env = os.environ if environ is None else environ
    resolved_token = token or env.get(ENV_API_TOKEN) or ""
    if not resolved_token.strip():
        raise ConfigurationError(
            f"An API token is required. Pass token=... or set the {ENV_API_TOKEN} environment variable."
        )
    base_url = (uri or DEFAULT_BASE_URL).strip().rstrip("/")
    return ClientConfig(
        base_url=base_url,
        token=resolved_token,
        request_defaults=request_defaults or {},
        timeout_s=timeout_s,
    )
