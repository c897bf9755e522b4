"""Matplotlib-based chart helpers for StakingLab."""

from __future__ import annotations

import pandas as pd

from ..core.models import Portfolio


class Visualizer:
    """Collection of static helpers that turn ledger outputs into charts."""

    @staticmethod
    def _plt():
        try:
            import matplotlib.pyplot as plt
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "matplotlib is required for visualization. Install it via pip."
            ) from exc
        return plt

    @staticmethod
    def bar_breakdown(
        portfolio: Portfolio,
        title: str = "Portfolio breakdown",
        *,
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        df = portfolio.to_dataframe()
        if df.empty:
            return
        plt = Visualizer._plt()
        plt.figure(figsize=(8, 5))
        plt.bar(df["label"], df["percentage"])
        plt.title(title)
        plt.ylabel("Share of total value (%)")
        plt.ylim(0, 100)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()

    @staticmethod
    def bar_pool_apy(
        df: pd.DataFrame,
        title: str = "APY per pool",
        x_col: str = "id",
        y_col: str = "apy",
        *,
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        if df.empty:
            return
        plt = Visualizer._plt()
        plt.figure(figsize=(10, 6))
        plt.bar(df[x_col], df[y_col])  # already in percent
        plt.title(title)
        plt.ylabel("APY (%)")
        plt.xticks(rotation=45, ha="right")
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()

    @staticmethod
    def barh_stake_progress(
        schedule: pd.DataFrame,
        title: str = "Lock progress",
        *,
        save_path: str | None = None,
        show: bool = True,
    ) -> None:
        """Horizontal bars of lock progress, one per stake."""

        if schedule.empty:
            return
        plt = Visualizer._plt()
        plt.figure(figsize=(10, max(2, 0.5 * len(schedule) + 1)))
        labels = [f"{r['id']} ({r['days_remaining']}d left)" for _, r in schedule.iterrows()]
        plt.barh(labels, schedule["progress"])
        plt.xlim(0, 100)
        plt.xlabel("Progress (%)")
        plt.title(title)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, bbox_inches="tight")
        if show:
            plt.show()
