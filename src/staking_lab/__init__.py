"""
StakingLab: accounting core for staking positions and portfolio valuation.

Design goals:
- Immutable data model (Pool, Stake, Notification) + light in-memory registries
- Linear reward estimate fixed at stake time; status derived from the clock
- Wallet, market data and persistence behind small protocols
- Valuation snapshots recomputed on every read, never cached
- pandas frames for reporting, matplotlib charts on top of them
"""

from __future__ import annotations

import logging

from . import analytics, reporting
from .analytics.portfolio import PortfolioAggregator
from .core import (
    Asset,
    BelowMinimum,
    BreakdownItem,
    Holding,
    InsufficientBalance,
    InvalidAmount,
    InvalidArgument,
    InvalidLockPeriod,
    Notification,
    NotificationType,
    Pool,
    PoolCatalog,
    PoolInactive,
    PoolNotFound,
    PoolStats,
    Portfolio,
    Stake,
    StakeNotFound,
    StakeStatus,
    StakingError,
)
from .ledger import StakeLedger, days_remaining, derived_status, progress
from .notifications import (
    NotificationCenter,
    NotificationEmitter,
    NotificationSink,
    format_time_ago,
    sort_for_display,
)
from .persistence import InMemoryLedgerStore, LedgerPersistence, LedgerState
from .rewards import estimate_reward, reward_rate
from .service import AccountingService, StakeResult, build_catalog
from .sources import CSVPoolSource, MarketDataSource, SampleMarketSource
from .visualization import Visualizer
from .wallet import InMemoryWallet, WalletAccount

logger = logging.getLogger(__name__)

__all__ = [
    "AccountingService",
    "Asset",
    "BelowMinimum",
    "BreakdownItem",
    "CSVPoolSource",
    "Holding",
    "InMemoryLedgerStore",
    "InMemoryWallet",
    "InsufficientBalance",
    "InvalidAmount",
    "InvalidArgument",
    "InvalidLockPeriod",
    "LedgerPersistence",
    "LedgerState",
    "MarketDataSource",
    "Notification",
    "NotificationCenter",
    "NotificationEmitter",
    "NotificationSink",
    "NotificationType",
    "Pool",
    "PoolCatalog",
    "PoolInactive",
    "PoolNotFound",
    "PoolStats",
    "Portfolio",
    "PortfolioAggregator",
    "SampleMarketSource",
    "Stake",
    "StakeLedger",
    "StakeNotFound",
    "StakeResult",
    "StakeStatus",
    "StakingError",
    "Visualizer",
    "WalletAccount",
    "analytics",
    "build_catalog",
    "days_remaining",
    "derived_status",
    "estimate_reward",
    "format_time_ago",
    "progress",
    "reporting",
    "reward_rate",
    "sort_for_display",
]
