from __future__ import annotations

from typing import Any, Iterable

from token_catalog.core.types import TokenRecord
from token_catalog.monitoring.logger import get_logger

log = get_logger(__name__)


class TokenRegistry:
    """Spot token index -> name lookup built from one ``spotMeta`` snapshot."""

    def __init__(self, records: Iterable[TokenRecord] = ()) -> None:
        self._names: dict[int, str] = {}
        for r in records:
            # last write wins on duplicate indices
            self._names[r.index] = r.name

    def lookup(self, index: int) -> str | None:
        return self._names.get(index)

    def names(self) -> set[str]:
        return set(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, index: object) -> bool:
        return index in self._names


def parse_token_records(payload: Any) -> list[TokenRecord]:
    if not isinstance(payload, list):
        if payload is not None:
            log.warning("spot tokens payload is %s, expected list; using empty registry", type(payload).__name__)
        return []
    out: list[TokenRecord] = []
    for raw in payload:
        if not isinstance(raw, dict):
            log.debug("skipping token record %r", raw)
            continue
        index = raw.get("index")
        name = raw.get("name")
        if isinstance(index, bool) or not isinstance(index, int) or not isinstance(name, str):
            log.debug("skipping token record %r", raw)
            continue
        out.append(TokenRecord(index=index, name=name))
    return out


def build_token_registry(payload: Any) -> TokenRegistry:
    return TokenRegistry(parse_token_records(payload))
