"""Linear reward projection for staking positions."""

from __future__ import annotations

import math
import numbers

from .core.constants import DAYS_PER_YEAR
from .core.errors import InvalidArgument


def _is_number(value: object) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


def estimate_reward(principal: float, apy_percent: float, lock_days: int) -> float:
    """Estimate the reward earned on ``principal`` over ``lock_days``.

    Simple interest, no compounding::

        reward = principal * (apy_percent / 100) * (lock_days / 365)

    Parameters
    ----------
    principal:
        Staked amount, strictly positive.
    apy_percent:
        Annual yield in percent (``12.5`` for 12.5%). Zero yields a zero reward.
    lock_days:
        Lock duration in whole days, strictly positive.

    The result is not rounded; currency rounding belongs to display code.
    """

    if not _is_number(principal) or principal <= 0:
        raise InvalidArgument(f"principal must be a positive number, got {principal!r}")
    if not _is_number(apy_percent) or apy_percent < 0:
        raise InvalidArgument(f"apy_percent must be non-negative, got {apy_percent!r}")
    if not isinstance(lock_days, numbers.Integral) or isinstance(lock_days, bool) or lock_days <= 0:
        raise InvalidArgument(f"lock_days must be a positive integer, got {lock_days!r}")

    return float(principal) * (float(apy_percent) / 100.0) * (int(lock_days) / DAYS_PER_YEAR)


def reward_rate(principal: float, reward: float) -> float:
    """Return ``reward`` as a percentage of ``principal`` (``0`` for empty principal)."""

    return reward / principal * 100.0 if principal > 0 else 0.0


__all__ = ["estimate_reward", "reward_rate"]
