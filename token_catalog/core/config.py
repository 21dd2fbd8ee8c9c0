from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class UnresolvedSpotPolicy(str, Enum):
    KEEP = "keep"
    DROP = "drop"


class LoggingConfig(BaseModel):
    level: str = "INFO"


class ApiConfig(BaseModel):
    base_url: str = "https://api.hyperliquid.xyz"
    info_path: str = "/info"
    timeout_sec: float = 10.0
    retry_attempts: int = Field(default=3, ge=1)
    max_concurrency: int = Field(default=8, ge=1)


class CatalogConfig(BaseModel):
    stablecoin: str = "USDC"
    # what to do with "@N" keys that no universe entry names
    unresolved_spot_policy: UnresolvedSpotPolicy = UnresolvedSpotPolicy.KEEP
    fallback_tokens: list[str] = Field(default_factory=lambda: ["BTC", "ETH", "HYPE", "SOL", "USDC"])


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)


def load_config(path: str | None = None) -> AppConfig:
    if path is None:
        return AppConfig()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    data = yaml.safe_load(p.read_text()) or {}
    return AppConfig.model_validate(data)
