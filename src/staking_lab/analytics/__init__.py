"""Analytics subpackage bundling portfolio valuation helpers."""

from . import portfolio
from .portfolio import PortfolioAggregator

__all__ = ["PortfolioAggregator", "portfolio"]
