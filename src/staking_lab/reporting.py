from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pandas as pd

from .service import AccountingService


def _ensure_outdir(outdir: str | Path) -> Path:
    p = Path(outdir)
    p.mkdir(parents=True, exist_ok=True)
    return p


def pool_summary(service: AccountingService) -> pd.DataFrame:
    """Pool table enriched with the user's own stake per pool."""

    pools = service.catalog.to_dataframe()
    if pools.empty:
        return pools
    stakes = service.ledger.to_dataframe()
    if stakes.empty:
        pools["user_staked"] = 0.0
        pools["user_rewards"] = 0.0
        pools["user_stakes"] = 0
        return pools
    per_pool = stakes.groupby("pool_id").agg(
        user_staked=("amount", "sum"),
        user_rewards=("reward", "sum"),
        user_stakes=("id", "count"),
    )
    out = pools.merge(per_pool, left_on="id", right_index=True, how="left")
    out[["user_staked", "user_rewards"]] = out[["user_staked", "user_rewards"]].fillna(0.0)
    out["user_stakes"] = out["user_stakes"].fillna(0).astype(int)
    return out


def staking_report(
    service: AccountingService,
    outdir: str | Path,
    *,
    now: datetime | None = None,
) -> dict[str, Path]:
    """Write pools, stakes, portfolio breakdown and notifications as CSV files.

    Returns a mapping of report name to the file written.
    """

    out = _ensure_outdir(outdir)
    frames = {
        "pools": pool_summary(service),
        "stakes": service.ledger.to_dataframe(now),
        "breakdown": service.portfolio(now).to_dataframe(),
        "notifications": service.notifications.to_dataframe(),
    }
    paths: dict[str, Path] = {}
    for name, df in frames.items():
        path = out / f"{name}.csv"
        df.to_csv(path, index=False)
        paths[name] = path
    return paths


__all__ = ["pool_summary", "staking_report"]
