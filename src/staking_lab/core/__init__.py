"""Core data structures for :mod:`staking_lab`.

This subpackage groups the models, errors and the pool catalog so they can be
shared without importing the entire public interface exposed in
:mod:`staking_lab.__init__`.
"""

from __future__ import annotations

from .constants import DAYS_PER_YEAR, SECONDS_PER_DAY
from .errors import (
    BelowMinimum,
    InsufficientBalance,
    InvalidAmount,
    InvalidArgument,
    InvalidLockPeriod,
    PoolInactive,
    PoolNotFound,
    StakeNotFound,
    StakingError,
)
from .models import (
    Asset,
    BreakdownItem,
    Holding,
    Notification,
    NotificationType,
    Pool,
    Portfolio,
    Stake,
    StakeStatus,
)
from .repositories import PoolCatalog, PoolStats

__all__ = [
    "Asset",
    "BelowMinimum",
    "BreakdownItem",
    "DAYS_PER_YEAR",
    "Holding",
    "InsufficientBalance",
    "InvalidAmount",
    "InvalidArgument",
    "InvalidLockPeriod",
    "Notification",
    "NotificationType",
    "Pool",
    "PoolCatalog",
    "PoolInactive",
    "PoolNotFound",
    "PoolStats",
    "Portfolio",
    "SECONDS_PER_DAY",
    "Stake",
    "StakeNotFound",
    "StakeStatus",
    "StakingError",
]
