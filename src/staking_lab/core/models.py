"""Immutable data models used throughout StakingLab."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

import pandas as pd


class StakeStatus(str, Enum):
    """Lifecycle state of a stake position.

    ``COMPLETED`` is part of the vocabulary but no ledger operation produces it;
    the reachable states are ``ACTIVE`` and ``UNLOCKED``.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    UNLOCKED = "unlocked"


class NotificationType(str, Enum):
    STAKING = "staking"
    TRADING = "trading"
    MARKET = "market"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Asset:
    """Tradable instrument a pool is denominated in."""

    id: str
    symbol: str
    name: str
    price: float = 1.0
    change_24h: float = 0.0
    change_percent_24h: float = 0.0
    volume: float = 0.0
    market_cap: float = 0.0
    type: str = "token"  # token | stock | option

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Asset {self.symbol!r} price must be non-negative, got {self.price}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Pool:
    """Staking pool description.

    ``total_staked`` and ``total_rewards`` are display counters supplied by the
    market data source; the authoritative record of a user's commitment lives
    in :class:`Stake` rows.
    """

    id: str
    asset: Asset
    apy: float  # percent per year, e.g. 12.5 for 12.5%
    min_stake: float
    lock_period_days: int
    total_staked: float = 0.0
    total_rewards: float = 0.0
    is_active: bool = True

    @property
    def asset_id(self) -> str:
        return self.asset.id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "asset_id": self.asset.id,
            "symbol": self.asset.symbol,
            "apy": self.apy,
            "min_stake": self.min_stake,
            "lock_period_days": self.lock_period_days,
            "total_staked": self.total_staked,
            "total_rewards": self.total_rewards,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class Stake:
    """A single staking position; the reward is fixed when the stake is created."""

    id: str
    pool_id: str
    amount: float
    start_date: datetime
    end_date: datetime
    reward: float
    status: StakeStatus = StakeStatus.ACTIVE

    @property
    def reward_rate(self) -> float:
        """Estimated reward as a percentage of principal."""

        return self.reward / self.amount * 100.0 if self.amount > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["reward_rate"] = self.reward_rate
        return data


@dataclass(frozen=True)
class Holding:
    """Spot position in an asset (bought outside the staking flow)."""

    asset: Asset
    quantity: float
    average_price: float

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Holding quantity must be non-negative, got {self.quantity}")
        if self.average_price < 0:
            raise ValueError(f"Holding average price must be non-negative, got {self.average_price}")

    @property
    def current_value(self) -> float:
        return self.quantity * self.asset.price

    @property
    def cost_basis(self) -> float:
        return self.quantity * self.average_price

    @property
    def profit(self) -> float:
        return self.current_value - self.cost_basis

    @property
    def profit_percent(self) -> float:
        basis = self.cost_basis
        return self.profit / basis * 100.0 if basis else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "asset_id": self.asset.id,
            "symbol": self.asset.symbol,
            "quantity": self.quantity,
            "average_price": self.average_price,
            "current_value": self.current_value,
            "profit": self.profit,
            "profit_percent": self.profit_percent,
        }


@dataclass(frozen=True)
class BreakdownItem:
    """One slice of the portfolio valuation."""

    category: str
    label: str
    value: float
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Portfolio:
    """Valuation snapshot; always recomputed, never persisted."""

    total_value: float
    total_change: float
    total_change_percent: float
    available_balance: float
    total_staked: float
    total_rewards: float
    holdings: tuple[Holding, ...] = ()
    staked: tuple[Stake, ...] = ()
    breakdown: tuple[BreakdownItem, ...] = field(default_factory=tuple)

    def percentage(self, category: str) -> float:
        for item in self.breakdown:
            if item.category == category:
                return item.percentage
        return 0.0

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([item.to_dict() for item in self.breakdown])


@dataclass(frozen=True)
class Notification:
    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: datetime
    read: bool = False
    related_asset_id: str | None = None
    action_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        data["timestamp"] = self.timestamp.isoformat()
        return data


__all__ = [
    "Asset",
    "BreakdownItem",
    "Holding",
    "Notification",
    "NotificationType",
    "Pool",
    "Portfolio",
    "Stake",
    "StakeStatus",
]
