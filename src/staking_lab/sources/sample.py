"""Built-in sample market: the platform's demo assets and staking pools."""

from __future__ import annotations

from ..core import Asset, Pool

SAMPLE_ASSETS: dict[str, Asset] = {
    "1": Asset(
        id="1",
        symbol="NGN",
        name="Nigerian Naira Token",
        price=1.0,
        change_24h=0.02,
        change_percent_24h=2.0,
        volume=1_000_000,
        market_cap=50_000_000,
        type="token",
    ),
    "2": Asset(
        id="2",
        symbol="DANGOTE",
        name="Dangote Cement",
        price=285.50,
        change_24h=-5.20,
        change_percent_24h=-1.79,
        volume=500_000,
        market_cap=1_200_000_000,
        type="stock",
    ),
    "3": Asset(
        id="3",
        symbol="GTB",
        name="Guaranty Trust Bank",
        price=42.30,
        change_24h=1.15,
        change_percent_24h=2.79,
        volume=800_000,
        market_cap=800_000_000,
        type="stock",
    ),
}


class SampleMarketSource:
    """Hardcoded pools used until a live market data service exists."""

    def fetch_pools(self) -> list[Pool]:
        return [
            Pool(
                id="pool1",
                asset=SAMPLE_ASSETS["1"],
                apy=12.5,
                total_staked=1_000_000,
                min_stake=100,
                lock_period_days=30,
                total_rewards=10_000,
                is_active=True,
            ),
            Pool(
                id="pool2",
                asset=SAMPLE_ASSETS["2"],
                apy=8.5,
                total_staked=500_000,
                min_stake=1_000,
                lock_period_days=90,
                total_rewards=5_000,
                is_active=True,
            ),
        ]

    def fetch_assets(self) -> list[Asset]:
        return list(SAMPLE_ASSETS.values())


__all__ = ["SAMPLE_ASSETS", "SampleMarketSource"]
