from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, DecodeError, NetworkError

log = logging.getLogger(__name__)


class Transport:
    """Async HTTP transport executing request option mappings built by the client.

    Recognised option keys: ``uri``, ``method`` (default ``GET``), ``params``,
    ``headers``, ``expect_json`` and ``timeout``.
    """

    def __init__(self, cfg: ClientConfig, *, client: httpx.AsyncClient | None = None):
        self._cfg = cfg
        self._client = client or httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers={"User-Agent": "coc-client/0.1.0"},
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, options: Mapping[str, Any]) -> Any:
        method = str(options.get("method") or "GET").upper()
        uri = str(options["uri"])
        params = dict(options.get("params") or {}) or None
        headers = dict(options.get("headers") or {})
        extra: dict[str, Any] = {}
        if options.get("timeout") is not None:
            extra["timeout"] = options["timeout"]

        log.debug("%s %s params=%s", method, uri, params)
        try:
            r = await self._client.request(method, uri, params=params, headers=headers, **extra)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        # Try parse body as json for better errors / output
        data: Any = None
        text = None
        try:
            data = r.json()
        except ValueError:
            text = r.text

        if r.status_code >= 400:
            log.debug("%s %s -> %s", method, uri, r.status_code)
            msg = f"{method} {uri} failed with {r.status_code}"
            details = None

            if isinstance(data, dict) and ("reason" in data or "message" in data):
                details = json.dumps(data, ensure_ascii=False)
                msg = str(data.get("message") or data.get("reason") or msg)
            elif text:
                details = text[:1000]

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        if not options.get("expect_json", True):
            return r.text
        if text:
            raise DecodeError(f"{method} {uri} returned a body that is not valid JSON")
        return data
