from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class InfoClient(ABC):
    """Read-only market metadata client. Implementations return decoded JSON as-is."""

    @abstractmethod
    async def fetch_perp_dexs(self) -> Any:
        """Venue list; ``None`` entries stand for the main venue."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_spot_meta(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def fetch_all_mids(self, dex: str | None = None) -> Any:
        """Mid-price snapshot keyed by market key; ``dex=None`` queries the main venue."""
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        raise NotImplementedError
