from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from token_catalog.core.config import ApiConfig
from token_catalog.exchange.adapters.retry_policy import default_retry
from token_catalog.exchange.base import InfoClient


class HyperliquidInfoClient(InfoClient):
    """
    POST-only client for the Hyperliquid ``/info`` endpoint.

    Every request body is ``{"type": ...}``; responses are returned decoded but otherwise
    untouched, shape checks belong to the catalog layer.
    """

    def __init__(self, cfg: ApiConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._cfg = cfg
        self._http = httpx.AsyncClient(base_url=cfg.base_url, timeout=cfg.timeout_sec, transport=transport)
        self._slots = asyncio.Semaphore(cfg.max_concurrency)
        self._log = logging.getLogger("hyperliquid")
        # tenacity retries only on transport/timeouts (see adapters/retry_policy.py);
        # HTTP status errors surface immediately
        self._post = default_retry(cfg.retry_attempts)(self._post_once)

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> HyperliquidInfoClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def _post_once(self, payload: dict[str, Any]) -> Any:
        async with self._slots:
            r = await self._http.post(self._cfg.info_path, json=payload)
        r.raise_for_status()
        return r.json()

    async def fetch_perp_dexs(self) -> Any:
        return await self._post({"type": "perpDexs"})

    async def fetch_spot_meta(self) -> Any:
        return await self._post({"type": "spotMeta"})

    async def fetch_all_mids(self, dex: str | None = None) -> Any:
        payload: dict[str, Any] = {"type": "allMids"}
        if dex is not None:
            payload["dex"] = dex
        self._log.debug("allMids dex=%s", dex or "main")
        return await self._post(payload)
