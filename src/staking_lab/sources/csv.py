"""CSV-backed pool source."""

from __future__ import annotations

import pandas as pd

from ..core import Asset, Pool

_REQUIRED = {"id", "symbol", "apy", "min_stake", "lock_period_days"}


def _optional(row: pd.Series, column: str, default: object) -> object:
    value = row.get(column, default)
    return default if pd.isna(value) else value


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


class CSVPoolSource:
    """Load pools from a CSV with one row per pool.

    Required columns: ``id``, ``symbol``, ``apy``, ``min_stake`` and
    ``lock_period_days``. Optional columns fill the asset description and the
    display counters.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def fetch_pools(self) -> list[Pool]:
        df = pd.read_csv(self.path, dtype={"id": str, "asset_id": str, "symbol": str})
        missing = _REQUIRED.difference(df.columns)
        if missing:
            raise ValueError(f"CSV missing columns: {sorted(missing)}")
        pools: list[Pool] = []
        for _, r in df.iterrows():
            symbol = str(r["symbol"])
            asset = Asset(
                id=str(_optional(r, "asset_id", symbol)),
                symbol=symbol,
                name=str(_optional(r, "asset_name", symbol)),
                price=float(_optional(r, "price", 1.0)),
                type=str(_optional(r, "asset_type", "token")),
            )
            pools.append(
                Pool(
                    id=str(r["id"]),
                    asset=asset,
                    apy=float(r["apy"]),
                    min_stake=float(r["min_stake"]),
                    lock_period_days=int(r["lock_period_days"]),
                    total_staked=float(_optional(r, "total_staked", 0.0)),
                    total_rewards=float(_optional(r, "total_rewards", 0.0)),
                    is_active=_as_bool(_optional(r, "is_active", True)),
                )
            )
        return pools


__all__ = ["CSVPoolSource"]
