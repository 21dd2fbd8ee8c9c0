from __future__ import annotations

from token_catalog.core.types import MarketKey, MarketKeyKind

SPOT_SIGIL = "@"
VENUE_SEPARATOR = ":"
PAIR_SEPARATOR = "/"


def classify_market_key(raw: str) -> MarketKey:
    """
    Tag a raw price-snapshot key with its shape.

    "BTC" -> BARE, "@107" -> SPOT_INDEX, "xyz:AAPL" -> EXTERNAL_BARE,
    "xyz:@5" -> EXTERNAL_SPOT_INDEX. Pair notation such as "PURR/USDC" is BARE.
    """
    venue, sep, symbol = raw.partition(VENUE_SEPARATOR)
    if sep and venue and symbol:
        kind = MarketKeyKind.EXTERNAL_SPOT_INDEX if symbol.startswith(SPOT_SIGIL) else MarketKeyKind.EXTERNAL_BARE
        return MarketKey(kind=kind, raw=raw, symbol=symbol, venue=venue)
    if raw.startswith(SPOT_SIGIL):
        return MarketKey(kind=MarketKeyKind.SPOT_INDEX, raw=raw, symbol=raw)
    return MarketKey(kind=MarketKeyKind.BARE, raw=raw, symbol=raw)


def stablecoin_pair_base(symbol: str, stablecoin: str) -> str | None:
    """Return "PURR" for "PURR/USDC" when USDC is the stablecoin, else None."""
    base, sep, quote = symbol.partition(PAIR_SEPARATOR)
    if sep and base and quote == stablecoin:
        return base
    return None
