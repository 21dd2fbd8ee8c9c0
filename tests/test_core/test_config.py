from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from token_catalog.core.config import UnresolvedSpotPolicy, load_config


def test_defaults_without_path():
    cfg = load_config()
    assert cfg.catalog.stablecoin == "USDC"
    assert cfg.catalog.unresolved_spot_policy is UnresolvedSpotPolicy.KEEP
    assert cfg.api.base_url == "https://api.hyperliquid.xyz"


def test_shipped_default_config_loads():
    root = Path(__file__).resolve().parents[2]
    cfg = load_config(str(root / "configs" / "default.yaml"))
    assert "USDC" in cfg.catalog.fallback_tokens
    assert cfg.api.info_path == "/info"


def test_partial_yaml_overrides(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("catalog:\n  unresolved_spot_policy: drop\napi:\n  timeout_sec: 2.5\n")
    cfg = load_config(str(p))
    assert cfg.catalog.unresolved_spot_policy is UnresolvedSpotPolicy.DROP
    assert cfg.api.timeout_sec == 2.5
    assert cfg.api.retry_attempts == 3


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_invalid_policy_rejected(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("catalog:\n  unresolved_spot_policy: maybe\n")
    with pytest.raises(pydantic.ValidationError):
        load_config(str(p))
