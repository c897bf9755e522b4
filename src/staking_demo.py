from __future__ import annotations

import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Any, cast

from staking_lab import (
    AccountingService,
    CSVPoolSource,
    SampleMarketSource,
    Visualizer,
)
from staking_lab.formatting import format_currency, format_percent
from staking_lab.reporting import staking_report

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> dict[str, Any]:
    """Load configuration from a TOML file and merge with defaults.

    Parameters
    ----------
    path:
        Optional path to a configuration file. When ``None`` or missing, the
        built-in defaults are used.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary with any file overrides applied.
    """

    default: dict[str, Any] = {
        "log_level": "INFO",
        "wallet_balance": 50_000.0,
        "pools_csv": None,
        "stakes": [{"pool": "pool1", "amount": 1_000.0, "lock_days": 30}],
        "catalog": {"active_only": True, "sort_by": "apy"},
        "output": {"outdir": None, "show": True, "charts": ["breakdown", "pools", "progress"]},
    }

    cfg_path = Path(path) if path else None
    if cfg_path and cfg_path.is_file():
        with open(cfg_path, "rb") as f:
            file_cfg = tomllib.load(f)
        for k, v in file_cfg.items():
            if isinstance(v, dict) and k in default and isinstance(default[k], dict):
                cast(dict, default[k]).update(v)
            else:
                default[k] = v
    elif cfg_path:
        logger.warning("Config file not found at %s. Using defaults.", cfg_path)

    return default


def apply_env_overrides(cfg: dict[str, Any]) -> dict[str, Any]:
    if csv_env := os.getenv("STAKING_POOLS_CSV"):
        cfg["pools_csv"] = csv_env
    if outdir_env := os.getenv("STAKING_OUTDIR"):
        cfg.setdefault("output", {})["outdir"] = outdir_env
    if balance_env := os.getenv("STAKING_WALLET_BALANCE"):
        try:
            cfg["wallet_balance"] = float(balance_env)
        except ValueError:
            logger.warning("Ignoring non-numeric STAKING_WALLET_BALANCE=%r", balance_env)
    return cfg


def main() -> None:
    """Run the demo using configuration from file or environment variables."""

    cfg_file = os.getenv("STAKING_CONFIG") or (sys.argv[1] if len(sys.argv) > 1 else None)
    cfg = apply_env_overrides(load_config(cfg_file))
    logging.basicConfig(level=str(cfg.get("log_level", "INFO")).upper())

    sources = [CSVPoolSource(str(cfg["pools_csv"]))] if cfg.get("pools_csv") else [SampleMarketSource()]
    service = AccountingService.from_sources(sources, float(cfg["wallet_balance"]))

    catalog_cfg = cfg.get("catalog", {})
    catalog = service.catalog.filter(active_only=bool(catalog_cfg.get("active_only", False)))
    stats = catalog.stats()
    print(
        f"Pools: {stats.total_pools}  highest APY: {stats.highest_apy:.2f}%  "
        f"average APY: {stats.average_apy:.2f}%"
    )
    for pool in catalog.sorted_by(str(catalog_cfg.get("sort_by", "apy"))):
        print(
            f"  {pool.id:<12} {pool.asset.symbol:<8} {pool.apy:>6.2f}%  "
            f"min {format_currency(pool.min_stake)}  {pool.lock_period_days} days"
        )

    for request in cfg.get("stakes", []):
        result = service.stake(
            str(request["pool"]), float(request["amount"]), request.get("lock_days")
        )
        if result.ok:
            print(f"{result.title}: reward {format_currency(result.stake.reward)}")
        else:
            print(f"{result.title}: {result.message}")

    portfolio = service.portfolio()
    print(
        f"Total value {format_currency(portfolio.total_value)} "
        f"({format_percent(portfolio.total_change_percent)})"
    )
    for item in portfolio.breakdown:
        print(f"  {item.label:<10} {format_currency(item.value):>16} {item.percentage:6.1f}%")

    out = cfg.get("output", {})
    outdir = Path(out["outdir"]) if out.get("outdir") else None
    show = bool(out.get("show", True)) if not outdir else False
    charts = out.get("charts", [])

    if outdir:
        staking_report(service, outdir)

    if "breakdown" in charts:
        Visualizer.bar_breakdown(
            portfolio,
            save_path=str(outdir / "breakdown.png") if outdir else None,
            show=show,
        )
    if "pools" in charts:
        Visualizer.bar_pool_apy(
            catalog.to_dataframe(),
            save_path=str(outdir / "pool_apy.png") if outdir else None,
            show=show,
        )
    if "progress" in charts:
        Visualizer.barh_stake_progress(
            service.ledger.to_dataframe(),
            save_path=str(outdir / "stake_progress.png") if outdir else None,
            show=show,
        )


if __name__ == "__main__":
    main()
