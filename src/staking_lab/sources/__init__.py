"""Market data adapters supplying pools to :mod:`staking_lab`."""

from __future__ import annotations

from typing import Protocol

from ..core import Pool
from .csv import CSVPoolSource
from .sample import SAMPLE_ASSETS, SampleMarketSource


class MarketDataSource(Protocol):
    """Adapter protocol returning pools for a :class:`PoolCatalog`."""

    def fetch_pools(self) -> list[Pool]: ...


__all__ = [
    "CSVPoolSource",
    "MarketDataSource",
    "SAMPLE_ASSETS",
    "SampleMarketSource",
]
