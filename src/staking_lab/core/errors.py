"""Validation errors raised by the staking core.

Every error is a rejected user input; none of them is retryable and none of
them leaves partial state behind. ``title`` is a short caption suitable for an
inline alert, the exception message carries the detail.
"""

from __future__ import annotations


class StakingError(ValueError):
    title = "Staking Failed"
    code = "staking_error"


class InvalidArgument(StakingError):
    title = "Invalid Argument"
    code = "invalid_argument"


class InvalidAmount(StakingError):
    title = "Invalid Amount"
    code = "invalid_amount"


class BelowMinimum(StakingError):
    title = "Minimum Stake Required"
    code = "below_minimum"


class InsufficientBalance(StakingError):
    title = "Insufficient Balance"
    code = "insufficient_balance"


class InvalidLockPeriod(StakingError):
    title = "Invalid Lock Period"
    code = "invalid_lock_period"


class PoolInactive(StakingError):
    title = "Pool Inactive"
    code = "pool_inactive"


class PoolNotFound(StakingError, LookupError):
    title = "Pool Not Found"
    code = "not_found"


class StakeNotFound(StakingError, LookupError):
    title = "Stake Not Found"
    code = "not_found"


__all__ = [
    "BelowMinimum",
    "InsufficientBalance",
    "InvalidAmount",
    "InvalidArgument",
    "InvalidLockPeriod",
    "PoolInactive",
    "PoolNotFound",
    "StakeNotFound",
    "StakingError",
]
