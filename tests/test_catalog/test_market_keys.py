from __future__ import annotations

import pytest

from token_catalog.catalog.market_keys import classify_market_key, stablecoin_pair_base
from token_catalog.core.types import MarketKeyKind


@pytest.mark.parametrize(
    "raw, kind, venue, symbol",
    [
        ("BTC", MarketKeyKind.BARE, None, "BTC"),
        ("PURR/USDC", MarketKeyKind.BARE, None, "PURR/USDC"),
        ("@107", MarketKeyKind.SPOT_INDEX, None, "@107"),
        ("xyz:AAPL", MarketKeyKind.EXTERNAL_BARE, "xyz", "AAPL"),
        ("xyz:@5", MarketKeyKind.EXTERNAL_SPOT_INDEX, "xyz", "@5"),
    ],
)
def test_classify_market_key(raw, kind, venue, symbol):
    key = classify_market_key(raw)
    assert key.kind is kind
    assert key.raw == raw
    assert key.venue == venue
    assert key.symbol == symbol


def test_dangling_separator_is_bare():
    assert classify_market_key(":BTC").kind is MarketKeyKind.BARE
    assert classify_market_key("xyz:").kind is MarketKeyKind.BARE


def test_stablecoin_pair_base():
    assert stablecoin_pair_base("PURR/USDC", "USDC") == "PURR"
    assert stablecoin_pair_base("UBTC/USDH", "USDC") is None
    assert stablecoin_pair_base("BTC", "USDC") is None
    assert stablecoin_pair_base("/USDC", "USDC") is None
