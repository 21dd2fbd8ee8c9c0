from __future__ import annotations

import argparse
import asyncio
import json
import sys

from token_catalog.catalog.service import TokenCatalogService
from token_catalog.core.config import load_config
from token_catalog.exchange.hyperliquid.info_client import HyperliquidInfoClient
from token_catalog.monitoring.logger import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="token-catalog")
    p.add_argument("--config", default=None, help="Path to YAML config (e.g., configs/default.yaml)")
    p.add_argument("--json", action="store_true", help="Print a JSON array instead of one symbol per line")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


async def _amain(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    cfg = load_config(args.config)
    setup_logging("DEBUG" if args.verbose else cfg.logging.level)

    async with HyperliquidInfoClient(cfg.api) as client:
        tokens = await TokenCatalogService(client, cfg.catalog).get_all_tokens()

    if args.json:
        print(json.dumps(tokens))
    else:
        for t in tokens:
            print(t)
    return 0


def main() -> None:
    try:
        rc = asyncio.run(_amain(sys.argv[1:]))
    except KeyboardInterrupt:
        rc = 130
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
