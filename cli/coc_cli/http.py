from __future__ import annotations

from dataclasses import dataclass

from coc_client import ClashClient

ENV_API_URI = "COC_API_URI"


@dataclass(frozen=True)
class CliSettings:
    token: str | None = None
    base_url: str | None = None
    timeout_s: float = 15.0


def make_client(settings: CliSettings) -> ClashClient:
    # Environment was already read by the CLI options; keep the library from reading it again.
    return ClashClient(
        uri=settings.base_url or None,
        token=settings.token or None,
        timeout_s=settings.timeout_s,
        environ={},
    )
