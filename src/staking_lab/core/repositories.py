"""In-memory pool registry for StakingLab."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import pandas as pd

from .constants import POOL_SORT_KEYS
from .errors import PoolNotFound
from .models import Pool


@dataclass(frozen=True)
class PoolStats:
    """Headline figures shown above the pool list."""

    total_staked: float = 0.0
    highest_apy: float = 0.0
    average_apy: float = 0.0
    total_pools: int = 0


class PoolCatalog:
    """Read-only collection of staking pools keyed by id, in insertion order."""

    def __init__(self, pools: Iterable[Pool] | None = None) -> None:
        self._pools: list[Pool] = list(pools) if pools else []

    def list_pools(self) -> list[Pool]:
        return list(self._pools)

    def get_pool(self, pool_id: str) -> Pool:
        for pool in self._pools:
            if pool.id == pool_id:
                return pool
        raise PoolNotFound(f"No staking pool with id {pool_id!r}")

    def __contains__(self, pool_id: object) -> bool:
        return any(pool.id == pool_id for pool in self._pools)

    def filter(
        self,
        *,
        active_only: bool = False,
        min_apy: float = 0.0,
        symbols: list[str] | None = None,
        max_lock_days: int | None = None,
    ) -> "PoolCatalog":
        res: list[Pool] = []
        for pool in self._pools:
            if active_only and not pool.is_active:
                continue
            if pool.apy < min_apy:
                continue
            if symbols and pool.asset.symbol not in symbols:
                continue
            if max_lock_days is not None and pool.lock_period_days > max_lock_days:
                continue
            res.append(pool)
        return PoolCatalog(res)

    def sorted_by(self, key: str = "apy") -> list[Pool]:
        """Return pools ordered for display.

        ``apy`` and ``total_staked`` sort highest first, ``lock_period`` sorts
        shortest first. Ties keep catalog order.
        """

        try:
            attr, descending = POOL_SORT_KEYS[key]
        except KeyError:
            raise ValueError(
                f"Unknown sort key {key!r}; expected one of {sorted(POOL_SORT_KEYS)}"
            ) from None
        return sorted(self._pools, key=lambda p: getattr(p, attr), reverse=descending)

    def stats(self) -> PoolStats:
        if not self._pools:
            return PoolStats()
        apys = [pool.apy for pool in self._pools]
        return PoolStats(
            total_staked=sum(pool.total_staked for pool in self._pools),
            highest_apy=max(apys),
            average_apy=sum(apys) / len(apys),
            total_pools=len(self._pools),
        )

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([pool.to_dict() for pool in self._pools])

    def __len__(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[Pool]:
        return iter(self._pools)


__all__ = ["PoolCatalog", "PoolStats"]
