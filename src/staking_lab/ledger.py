"""Stake positions and the rules governing their lifecycle."""

from __future__ import annotations

import logging
import math
import numbers
import threading
import uuid
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import numpy as np
import pandas as pd

from .core.constants import SECONDS_PER_DAY
from .core.errors import (
    BelowMinimum,
    InsufficientBalance,
    InvalidAmount,
    InvalidLockPeriod,
    PoolInactive,
    StakeNotFound,
)
from .core.models import NotificationType, Stake, StakeStatus
from .core.repositories import PoolCatalog
from .formatting import format_currency
from .notifications import NotificationEmitter
from .rewards import _is_number, estimate_reward
from .wallet import WalletAccount

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_SCHEDULE_COLUMNS = [
    "id",
    "pool_id",
    "amount",
    "reward",
    "reward_rate",
    "start_date",
    "end_date",
    "status",
    "progress",
    "days_remaining",
]


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored stake dates."""

    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def derived_status(stake: Stake, now: datetime) -> StakeStatus:
    """Status implied by the clock; unlocked from ``end_date`` onwards."""

    return StakeStatus.UNLOCKED if now >= stake.end_date else StakeStatus.ACTIVE


def progress(stake: Stake, now: datetime) -> float:
    """Elapsed share of the lock period in percent, clamped to ``[0, 100]``."""

    duration = (stake.end_date - stake.start_date).total_seconds()
    if duration <= 0:
        return 100.0
    elapsed = (now - stake.start_date).total_seconds()
    return min(100.0, max(0.0, elapsed / duration * 100.0))


def days_remaining(stake: Stake, now: datetime) -> int:
    """Whole days left until unlock, rounded up and never negative."""

    days = math.ceil((stake.end_date - now).total_seconds() / SECONDS_PER_DAY)
    return days if days > 0 else 0


class StakeLedger:
    """Authoritative in-memory record of a user's stake positions.

    The ledger validates a staking request against the pool catalog and the
    wallet, debits the wallet and appends the position as one step under a
    lock, so concurrent callers cannot both pass the balance check against the
    same balance.
    """

    def __init__(
        self,
        catalog: PoolCatalog,
        wallet: WalletAccount,
        emitter: NotificationEmitter | None = None,
        *,
        stakes: Iterable[Stake] | None = None,
        clock: Clock = _utcnow,
    ) -> None:
        self.catalog = catalog
        self.wallet = wallet
        self.emitter = emitter
        self._clock = clock
        self._stakes: list[Stake] = list(stakes) if stakes else []
        self._lock = threading.RLock()

    def _validate(self, pool_id: str, amount: float, lock_days: int | None):
        pool = self.catalog.get_pool(pool_id)
        if not pool.is_active:
            raise PoolInactive(f"Pool {pool.id!r} is not accepting new stakes")
        if not _is_number(amount) or amount <= 0:
            raise InvalidAmount("Please enter a valid stake amount.")
        if amount < pool.min_stake:
            raise BelowMinimum(
                f"The minimum stake amount is {format_currency(pool.min_stake)}."
            )
        balance = self.wallet.get_balance()
        if amount > balance:
            raise InsufficientBalance(
                "You don't have enough balance. Your current balance is "
                f"{format_currency(balance)}."
            )
        days = pool.lock_period_days if lock_days is None else lock_days
        if not isinstance(days, numbers.Integral) or isinstance(days, bool) or days <= 0:
            raise InvalidLockPeriod("Please enter a valid lock period in days.")
        return pool, days

    def create_stake(
        self,
        pool_id: str,
        amount: float,
        lock_days: int | None = None,
        *,
        now: datetime | None = None,
    ) -> Stake:
        """Open a new position in ``pool_id``.

        ``lock_days`` defaults to the pool's lock period. Raises a
        :class:`~staking_lab.core.errors.StakingError` subclass when the request
        is rejected, in which case neither the ledger nor the wallet changes.
        """

        with self._lock:
            pool, days = self._validate(pool_id, amount, lock_days)
            reward = estimate_reward(amount, pool.apy, days)
            start = _as_utc(now or self._clock())
            days = int(days)
            stake = Stake(
                id=f"stake_{uuid.uuid4().hex[:12]}",
                pool_id=pool.id,
                amount=float(amount),
                start_date=start,
                end_date=start + timedelta(days=days),
                reward=reward,
                status=StakeStatus.ACTIVE,
            )
            self.wallet.debit(stake.amount)
            self._stakes.append(stake)

        logger.info(
            "Created %s in %s: amount=%s lock_days=%s reward=%.4f",
            stake.id,
            pool.id,
            stake.amount,
            days,
            reward,
        )
        if self.emitter is not None:
            self.emitter.emit(
                "Staking Successful",
                f"You have successfully staked {format_currency(stake.amount)} for "
                f"{days} days. Estimated reward: {format_currency(reward)}",
                NotificationType.STAKING,
                related_asset_id=pool.asset_id,
            )
        return stake

    def list_stakes(self) -> list[Stake]:
        return list(self._stakes)

    def get_stake(self, stake_id: str) -> Stake:
        for stake in self._stakes:
            if stake.id == stake_id:
                return stake
        raise StakeNotFound(f"No stake with id {stake_id!r}")

    # Lifecycle views

    def derived_status(self, stake: Stake, now: datetime | None = None) -> StakeStatus:
        return derived_status(stake, _as_utc(now or self._clock()))

    def progress(self, stake: Stake, now: datetime | None = None) -> float:
        return progress(stake, _as_utc(now or self._clock()))

    def days_remaining(self, stake: Stake, now: datetime | None = None) -> int:
        return days_remaining(stake, _as_utc(now or self._clock()))

    def refreshed(self, now: datetime | None = None) -> list[Stake]:
        """Stakes with ``status`` replaced by the status derived at ``now``."""

        now = _as_utc(now or self._clock())
        return [replace(s, status=derived_status(s, now)) for s in self._stakes]

    def active_stakes(self, now: datetime | None = None) -> list[Stake]:
        return [s for s in self.refreshed(now) if s.status is StakeStatus.ACTIVE]

    def active_count(self, now: datetime | None = None) -> int:
        return len(self.active_stakes(now))

    def total_staked(self) -> float:
        return sum(s.amount for s in self._stakes)

    def total_rewards(self) -> float:
        return sum(s.reward for s in self._stakes)

    def to_dataframe(self, now: datetime | None = None) -> pd.DataFrame:
        """Per-stake schedule with progress and days remaining at ``now``."""

        if not self._stakes:
            return pd.DataFrame(columns=_SCHEDULE_COLUMNS)
        now = _as_utc(now or self._clock())
        df = pd.DataFrame([s.to_dict() for s in self.refreshed(now)])
        start = pd.to_datetime(df["start_date"], utc=True)
        end = pd.to_datetime(df["end_date"], utc=True)
        now_ts = pd.Timestamp(now)
        duration = (end - start).dt.total_seconds().to_numpy()
        elapsed = (now_ts - start).dt.total_seconds().to_numpy()
        remaining = (end - now_ts).dt.total_seconds().to_numpy()
        with np.errstate(divide="ignore", invalid="ignore"):
            pct = np.where(duration > 0, elapsed / duration * 100.0, 100.0)
        df["progress"] = np.clip(pct, 0.0, 100.0)
        df["days_remaining"] = np.maximum(np.ceil(remaining / SECONDS_PER_DAY), 0).astype(int)
        return df[_SCHEDULE_COLUMNS]

    def reset(self) -> None:
        with self._lock:
            self._stakes.clear()

    def restore(self, stakes: Iterable[Stake], wallet_balance: float) -> None:
        """Replace the stake list and bring the wallet to ``wallet_balance``.

        The wallet is adjusted in place through ``credit``/``debit`` so the
        caller's :class:`WalletAccount` stays attached.
        """

        with self._lock:
            delta = float(wallet_balance) - self.wallet.get_balance()
            if delta > 0:
                self.wallet.credit(delta)
            elif delta < 0:
                self.wallet.debit(-delta)
            self._stakes = list(stakes)

    def __len__(self) -> int:
        return len(self._stakes)

    def __iter__(self) -> Iterator[Stake]:
        return iter(list(self._stakes))


__all__ = ["StakeLedger", "days_remaining", "derived_status", "progress"]
