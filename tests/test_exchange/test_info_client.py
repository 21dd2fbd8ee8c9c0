from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from token_catalog.core.config import ApiConfig
from token_catalog.exchange.hyperliquid.info_client import HyperliquidInfoClient


def test_all_mids_payload_includes_dex_only_for_external_venues():
    seen: list[dict] = []

    def handle(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/info"
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={})

    async def go():
        async with HyperliquidInfoClient(ApiConfig(), transport=httpx.MockTransport(handle)) as client:
            await client.fetch_all_mids()
            await client.fetch_all_mids("xyz")
            await client.fetch_perp_dexs()
            await client.fetch_spot_meta()

    asyncio.run(go())
    assert seen == [
        {"type": "allMids"},
        {"type": "allMids", "dex": "xyz"},
        {"type": "perpDexs"},
        {"type": "spotMeta"},
    ]


def test_transport_errors_are_retried():
    calls = {"n": 0}

    def handle(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        if calls["n"] == 1:
            raise httpx.ConnectError("reset", request=request)
        return httpx.Response(200, json=[None])

    async def go():
        async with HyperliquidInfoClient(ApiConfig(retry_attempts=2), transport=httpx.MockTransport(handle)) as client:
            return await client.fetch_perp_dexs()

    assert asyncio.run(go()) == [None]
    assert calls["n"] == 2


def test_status_errors_are_not_retried():
    calls = {"n": 0}

    def handle(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        return httpx.Response(503)

    async def go():
        async with HyperliquidInfoClient(ApiConfig(retry_attempts=3), transport=httpx.MockTransport(handle)) as client:
            await client.fetch_spot_meta()

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(go())
    assert calls["n"] == 1
