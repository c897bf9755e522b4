"""Core constants shared across StakingLab modules."""

from __future__ import annotations

# Rewards are quoted per 365-day year; leap years are not special-cased.
DAYS_PER_YEAR = 365

SECONDS_PER_DAY = 24 * 60 * 60

# Sort keys understood by :meth:`PoolCatalog.sorted_by`, mapped to
# ``(pool attribute, descending)``.
POOL_SORT_KEYS = {
    "apy": ("apy", True),
    "total_staked": ("total_staked", True),
    "lock_period": ("lock_period_days", False),
}

DEFAULT_CURRENCY_SYMBOL = "₦"  # Naira

__all__ = ["DAYS_PER_YEAR", "SECONDS_PER_DAY", "POOL_SORT_KEYS", "DEFAULT_CURRENCY_SYMBOL"]
