from __future__ import annotations

import pytest

from coc_client import ClashClient


class RecordingTransport:
    """Stands in for the HTTP transport and records every request options mapping."""

    def __init__(self, response=None):
        self.calls: list[dict] = []
        self.response = {"ok": True} if response is None else response
        self.closed = False

    async def request(self, options):
        self.calls.append(options)
        return self.response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport) -> ClashClient:
    return ClashClient(uri="https://coc.example.test/v1", token="test-token", transport=transport)
