from __future__ import annotations

import asyncio
from typing import Any, Awaitable

import httpx

from token_catalog.catalog.aggregator import aggregate_tokens, sort_tokens
from token_catalog.catalog.registry import build_token_registry
from token_catalog.catalog.universe import build_universe_resolver, parse_universe_entries
from token_catalog.core.config import CatalogConfig
from token_catalog.core.errors import MetadataFetchError
from token_catalog.core.types import CatalogResult, Venue
from token_catalog.exchange.base import InfoClient
from token_catalog.monitoring.logger import get_logger

log = get_logger(__name__)

FETCH_ERRORS = (httpx.HTTPError, ValueError)


def parse_venues(payload: Any) -> list[Venue]:
    """``perpDexs`` response -> venues in listed order; ``null`` entries are the main venue."""
    if not isinstance(payload, list):
        log.warning("perpDexs payload is %s, expected list; querying main venue only", type(payload).__name__)
        return [Venue()]
    out: list[Venue] = []
    seen: set[str | None] = set()
    for raw in payload:
        if raw is None:
            venue = Venue()
        elif isinstance(raw, dict) and isinstance(raw.get("name"), str) and raw["name"]:
            venue = Venue(name=raw["name"])
        else:
            log.debug("skipping venue entry %r", raw)
            continue
        if venue.name in seen:
            continue
        seen.add(venue.name)
        out.append(venue)
    return out


async def _gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    tasks = [asyncio.ensure_future(a) for a in aws]
    try:
        return list(await asyncio.gather(*tasks))
    finally:
        pending = [t for t in tasks if not t.done()]
        for t in pending:
            t.cancel()
        # siblings are fully unwound before the failure propagates
        await asyncio.gather(*pending, return_exceptions=True)


class TokenCatalogService:
    """
    Builds the symbol catalog from a fresh set of fetches on every call.

    Nothing is cached between calls; concurrent calls share only the client.
    """

    def __init__(self, client: InfoClient, cfg: CatalogConfig | None = None) -> None:
        self._client = client
        self._cfg = cfg or CatalogConfig()

    async def _fetch_metadata(self) -> tuple[Any, Any]:
        try:
            dexs, spot_meta = await _gather_or_cancel(
                self._client.fetch_perp_dexs(),
                self._client.fetch_spot_meta(),
            )
        except FETCH_ERRORS as e:
            raise MetadataFetchError(f"metadata fetch failed: {e}") from e
        return dexs, spot_meta

    async def _fetch_snapshot(self, venue: Venue) -> dict[str, Any] | None:
        try:
            mids = await self._client.fetch_all_mids(venue.name)
        except FETCH_ERRORS as e:
            log.warning("allMids failed for venue %s: %s", venue.label, e)
            return None
        if not isinstance(mids, dict):
            log.warning("allMids for venue %s returned %s, expected object", venue.label, type(mids).__name__)
            return {}
        return mids

    async def resolve(self) -> CatalogResult:
        dexs, spot_meta = await self._fetch_metadata()
        if not isinstance(spot_meta, dict):
            log.warning("spotMeta payload is %s, expected object", type(spot_meta).__name__)
            spot_meta = {}

        registry = build_token_registry(spot_meta.get("tokens"))
        resolver = build_universe_resolver(
            parse_universe_entries(spot_meta.get("universe")),
            registry,
            stablecoin=self._cfg.stablecoin,
        )
        venues = parse_venues(dexs)

        results = await asyncio.gather(*(self._fetch_snapshot(v) for v in venues))
        failed = [v for v, snap in zip(venues, results) if snap is None]
        snapshots = [snap or {} for snap in results]

        tokens = aggregate_tokens(
            registry,
            resolver,
            snapshots,
            stablecoin=self._cfg.stablecoin,
            unresolved_spot_policy=self._cfg.unresolved_spot_policy,
        )
        log.info(
            "catalog resolved: %d tokens, %d venues (%d failed), %d registry tokens, %d spot keys",
            len(tokens),
            len(venues),
            len(failed),
            len(registry),
            len(resolver),
        )
        return CatalogResult(tokens=tokens, venues=venues, failed_venues=failed)

    async def get_all_tokens(self) -> list[str]:
        try:
            result = await self.resolve()
        except MetadataFetchError:
            log.exception("token catalog unavailable, using fallback list")
            return sort_tokens(set(self._cfg.fallback_tokens))
        return result.tokens
