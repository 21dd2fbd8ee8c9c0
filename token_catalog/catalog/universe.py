from __future__ import annotations

from typing import Any, Iterable

from token_catalog.catalog.registry import TokenRegistry
from token_catalog.core.types import UniverseEntry
from token_catalog.monitoring.logger import get_logger

log = get_logger(__name__)

DEFAULT_STABLECOIN = "USDC"


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def unknown_token(index: int) -> str:
    return f"Unknown({index})"


def parse_universe_entries(payload: Any) -> list[UniverseEntry]:
    """
    Parse the ``universe`` list of a ``spotMeta`` response.

    Older snapshots carry only ``{"tokens": [base, quote]}`` and the pair index is
    the list position; newer ones add ``name`` (the venue key) and ``index``.
    """
    if not isinstance(payload, list):
        if payload is not None:
            log.warning("spot universe payload is %s, expected list; using empty universe", type(payload).__name__)
        return []
    out: list[UniverseEntry] = []
    for pos, raw in enumerate(payload):
        if not isinstance(raw, dict):
            log.debug("skipping universe entry %r", raw)
            continue
        tokens = raw.get("tokens")
        if not isinstance(tokens, (list, tuple)) or len(tokens) < 2 or not (_is_int(tokens[0]) and _is_int(tokens[1])):
            log.debug("skipping universe entry without [base, quote] tokens: %r", raw)
            continue
        index = raw.get("index")
        name = raw.get("name")
        out.append(
            UniverseEntry(
                pair_index=index if _is_int(index) else pos,
                base_index=tokens[0],
                quote_index=tokens[1],
                display_key=name if isinstance(name, str) and name else None,
            )
        )
    return out


def display_name(entry: UniverseEntry, registry: TokenRegistry, stablecoin: str = DEFAULT_STABLECOIN) -> str:
    base = registry.lookup(entry.base_index) or unknown_token(entry.base_index)
    quote = registry.lookup(entry.quote_index)
    if quote == stablecoin:
        return base
    # an unknown quote is never the stablecoin
    return f"{base}/{quote or unknown_token(entry.quote_index)}"


class UniverseResolver:
    """Maps spot market keys ("@107" and the venue-native alias) to display names."""

    def __init__(self, names: dict[str, str] | None = None) -> None:
        self._names: dict[str, str] = dict(names or {})

    def resolve(self, key: str) -> str | None:
        return self._names.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._names

    def __len__(self) -> int:
        return len(self._names)

    def items(self) -> list[tuple[str, str]]:
        return list(self._names.items())


def build_universe_resolver(
    entries: Iterable[UniverseEntry],
    registry: TokenRegistry,
    *,
    stablecoin: str = DEFAULT_STABLECOIN,
) -> UniverseResolver:
    names: dict[str, str] = {}
    for e in entries:
        name = display_name(e, registry, stablecoin)
        names[e.spot_key] = name
        if e.display_key and e.display_key != e.spot_key:
            names[e.display_key] = name
    return UniverseResolver(names)
