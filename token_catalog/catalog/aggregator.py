from __future__ import annotations

from typing import Iterable, Mapping

from token_catalog.catalog.market_keys import classify_market_key, stablecoin_pair_base
from token_catalog.catalog.registry import TokenRegistry
from token_catalog.catalog.universe import DEFAULT_STABLECOIN, UniverseResolver
from token_catalog.core.config import UnresolvedSpotPolicy
from token_catalog.core.types import MarketKey, MarketKeyKind
from token_catalog.monitoring.logger import get_logger

log = get_logger(__name__)

# ICU root collation order for ASCII punctuation and symbols; all of them sort before digits and letters
_PUNCT_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def _char_weight(c: str) -> tuple[int, str]:
    idx = _PUNCT_ORDER.find(c)
    if idx >= 0:
        return (idx, c)
    if c.isdigit():
        return (100, c)
    if c.isalpha():
        return (200, c.casefold())
    return (50, c)


def collation_key(symbol: str) -> tuple[tuple[tuple[int, str], ...], str]:
    """
    Locale-aware, case-sensitive sort key matching the ICU root collation
    (``localeCompare`` in the browser): letters compare case-insensitively first,
    punctuation precedes digits precedes letters, and on a tie lowercase sorts first.
    """
    return tuple(_char_weight(c) for c in symbol), symbol.swapcase()


def sort_tokens(tokens: Iterable[str]) -> list[str]:
    return sorted(tokens, key=collation_key)


def merge_snapshot_keys(snapshots: Iterable[Mapping[str, object]]) -> set[str]:
    keys: set[str] = set()
    for snap in snapshots:
        keys.update(k for k in snap.keys() if isinstance(k, str))
    return keys


def resolve_market_key(
    key: MarketKey,
    resolver: UniverseResolver,
    *,
    stablecoin: str = DEFAULT_STABLECOIN,
    unresolved_spot_policy: UnresolvedSpotPolicy = UnresolvedSpotPolicy.KEEP,
) -> str | None:
    """Display name for one classified key; None means the key is dropped."""
    direct = resolver.resolve(key.raw)
    if direct is not None:
        return direct

    if key.kind is MarketKeyKind.EXTERNAL_SPOT_INDEX:
        name = resolver.resolve(key.symbol)
        if name is None:
            return key.raw
        return f"{key.venue}:{name}"

    if key.kind is MarketKeyKind.SPOT_INDEX:
        if unresolved_spot_policy is UnresolvedSpotPolicy.DROP:
            log.debug("dropping unresolved spot key %s", key.raw)
            return None
        return key.raw

    if key.kind is MarketKeyKind.BARE:
        base = stablecoin_pair_base(key.symbol, stablecoin)
        if base is not None:
            return base

    return key.raw


def aggregate_tokens(
    registry: TokenRegistry,
    resolver: UniverseResolver,
    snapshots: Iterable[Mapping[str, object]],
    *,
    stablecoin: str = DEFAULT_STABLECOIN,
    unresolved_spot_policy: UnresolvedSpotPolicy = UnresolvedSpotPolicy.KEEP,
) -> list[str]:
    # registry names first so quote-only tokens (the stablecoin itself) survive
    tokens = registry.names()
    unresolved = 0
    for raw in merge_snapshot_keys(snapshots):
        key = classify_market_key(raw)
        name = resolve_market_key(
            key,
            resolver,
            stablecoin=stablecoin,
            unresolved_spot_policy=unresolved_spot_policy,
        )
        if name is None:
            unresolved += 1
            continue
        tokens.add(name)
    if unresolved:
        log.info("dropped %d unresolved spot keys", unresolved)
    return sort_tokens(tokens)
