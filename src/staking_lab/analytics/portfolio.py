"""Portfolio valuation over wallet balance, stakes and holdings."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import BreakdownItem, Holding, Portfolio, Stake

_CATEGORY_LABELS = {
    "available": "Available",
    "staked": "Staked",
    "rewards": "Rewards",
    "holdings": "Holdings",
}


def _share(value: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, value / total * 100.0)


def breakdown(
    available: float,
    staked: float,
    rewards: float,
    holdings_value: float = 0.0,
    *,
    include_holdings: bool = False,
) -> tuple[BreakdownItem, ...]:
    """Split a valuation into category shares of the total.

    A zero total maps every category to ``0%`` instead of dividing by zero.
    """

    values = {"available": available, "staked": staked, "rewards": rewards}
    if include_holdings:
        values["holdings"] = holdings_value
    total = available + staked + rewards + holdings_value
    return tuple(
        BreakdownItem(
            category=key,
            label=_CATEGORY_LABELS[key],
            value=value,
            percentage=_share(value, total),
        )
        for key, value in values.items()
    )


class PortfolioAggregator:
    """Compute :class:`~staking_lab.core.models.Portfolio` snapshots on demand.

    Nothing is cached between calls. The wallet balance is taken as already
    net of staked principal (the ledger debits it at stake creation), so the
    staked amount is added to it rather than subtracted from it.
    """

    @staticmethod
    def snapshot(
        wallet_balance: float,
        stakes: Iterable[Stake],
        holdings: Iterable[Holding] = (),
    ) -> Portfolio:
        stake_list = tuple(stakes)
        holding_list = tuple(holdings)

        total_staked = sum(stake.amount for stake in stake_list)
        total_rewards = sum(stake.reward for stake in stake_list)
        available = float(wallet_balance)
        if available < 0:
            raise ValueError(f"wallet_balance must be non-negative, got {wallet_balance}")
        holdings_value = sum(h.current_value for h in holding_list)
        total_value = available + total_staked + total_rewards + holdings_value

        # unrealised gains: spot profit plus the reward estimate
        total_change = sum(h.profit for h in holding_list) + total_rewards
        base = total_value - total_change
        total_change_percent = total_change / base * 100.0 if base > 0 else 0.0

        return Portfolio(
            total_value=total_value,
            total_change=total_change,
            total_change_percent=total_change_percent,
            available_balance=available,
            total_staked=total_staked,
            total_rewards=total_rewards,
            holdings=holding_list,
            staked=stake_list,
            breakdown=breakdown(
                available,
                total_staked,
                total_rewards,
                holdings_value,
                include_holdings=bool(holding_list),
            ),
        )


def snapshot(
    wallet_balance: float,
    stakes: Iterable[Stake],
    holdings: Iterable[Holding] = (),
) -> Portfolio:
    """Functional shortcut for :meth:`PortfolioAggregator.snapshot`."""

    return PortfolioAggregator.snapshot(wallet_balance, stakes, holdings)


__all__ = ["PortfolioAggregator", "breakdown", "snapshot"]
