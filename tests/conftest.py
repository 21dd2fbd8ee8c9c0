from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure `import token_catalog.*` works when running tests without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def spot_meta() -> dict[str, Any]:
    return json.loads((FIXTURES / "spot_meta.json").read_text())
