from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MarketKeyKind(str, Enum):
    BARE = "BARE"
    SPOT_INDEX = "SPOT_INDEX"
    EXTERNAL_BARE = "EXTERNAL_BARE"
    EXTERNAL_SPOT_INDEX = "EXTERNAL_SPOT_INDEX"


@dataclass(frozen=True)
class TokenRecord:
    index: int
    name: str


@dataclass(frozen=True)
class UniverseEntry:
    pair_index: int
    base_index: int
    quote_index: int
    # venue-native key, e.g. "@107" or "PURR/USDC"
    display_key: str | None = None

    @property
    def spot_key(self) -> str:
        return f"@{self.pair_index}"


@dataclass(frozen=True)
class MarketKey:
    kind: MarketKeyKind
    raw: str
    # venue-local part of the key ("@5" for "xyz:@5", "BTC" for "BTC")
    symbol: str
    venue: str | None = None


@dataclass(frozen=True)
class Venue:
    """A queryable market venue. ``name=None`` is the main venue."""

    name: str | None = None

    @property
    def label(self) -> str:
        return self.name or "main"


@dataclass(frozen=True)
class CatalogResult:
    tokens: list[str]
    venues: list[Venue]
    failed_venues: list[Venue] = field(default_factory=list)
