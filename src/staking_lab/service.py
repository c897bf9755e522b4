"""Per-session facade over wallet, ledger, notifications and valuation."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from .analytics.portfolio import PortfolioAggregator
from .core import Holding, Pool, PoolCatalog, Portfolio, Stake, StakingError
from .ledger import StakeLedger
from .notifications import NotificationCenter, NotificationEmitter
from .persistence import LedgerPersistence, LedgerState
from .rewards import _is_number, estimate_reward
from .sources import MarketDataSource
from .wallet import InMemoryWallet, WalletAccount

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class StakeResult:
    """Outcome of a staking request: either ``stake`` or ``error`` is set."""

    stake: Stake | None = None
    error: StakingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def title(self) -> str:
        return self.error.title if self.error else "Staking Successful"

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


def build_catalog(sources: Sequence[MarketDataSource]) -> PoolCatalog:
    """Collect pools from every source, skipping sources that fail."""

    pools: list[Pool] = []
    for source in sources:
        try:
            pools.extend(source.fetch_pools())
        except Exception as exc:
            logger.warning("Source %s failed: %s", source.__class__.__name__, exc)
            continue
    return PoolCatalog(pools)


class AccountingService:
    """Owns one user's wallet, stake ledger and notification list.

    Build one per session and pass it to whatever needs to stake or read the
    portfolio; there is no module-level instance.
    """

    def __init__(
        self,
        catalog: PoolCatalog,
        wallet: WalletAccount | None = None,
        *,
        notifications: NotificationCenter | None = None,
        holdings: Iterable[Holding] = (),
        persistence: LedgerPersistence | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.catalog = catalog
        self.wallet = wallet if wallet is not None else InMemoryWallet()
        self.notifications = notifications if notifications is not None else NotificationCenter()
        self.emitter = NotificationEmitter(self.notifications, clock=clock)
        self.ledger = StakeLedger(catalog, self.wallet, self.emitter, clock=clock)
        self.holdings: list[Holding] = list(holdings)
        self.persistence = persistence
        self._clock = clock

    @classmethod
    def from_sources(
        cls,
        sources: Sequence[MarketDataSource],
        wallet_balance: float = 0.0,
        **kwargs,
    ) -> "AccountingService":
        return cls(build_catalog(sources), InMemoryWallet(wallet_balance), **kwargs)

    @property
    def wallet_balance(self) -> float:
        return self.wallet.get_balance()

    def stake(self, pool_id: str, amount: float, lock_days: int | None = None) -> StakeResult:
        """Create a stake, reporting rejections as a value instead of raising."""

        try:
            stake = self.ledger.create_stake(pool_id, amount, lock_days)
        except StakingError as exc:
            logger.info("Stake in %s rejected (%s): %s", pool_id, exc.code, exc)
            return StakeResult(error=exc)
        return StakeResult(stake=stake)

    def preview_reward(self, pool_id: str, amount: float, lock_days: int | None = None) -> float:
        """Live reward estimate for a staking form; ``0`` until the input is usable."""

        pool = self.catalog.get_pool(pool_id)
        days = pool.lock_period_days if lock_days is None else lock_days
        if (
            not _is_number(amount)
            or amount <= 0
            or not isinstance(days, numbers.Integral)
            or isinstance(days, bool)
            or days <= 0
        ):
            return 0.0
        return estimate_reward(amount, pool.apy, days)

    def stakes(self, now: datetime | None = None) -> list[Stake]:
        return self.ledger.refreshed(now)

    def portfolio(self, now: datetime | None = None) -> Portfolio:
        return PortfolioAggregator.snapshot(self.wallet_balance, self.stakes(now), self.holdings)

    @property
    def unread_count(self) -> int:
        return self.notifications.unread_count

    def save(self) -> None:
        if self.persistence is None:
            raise RuntimeError("No persistence backend configured")
        self.persistence.save(
            LedgerState(
                wallet_balance=self.wallet_balance,
                stakes=tuple(self.ledger.list_stakes()),
                saved_at=self._clock(),
            )
        )

    def restore(self) -> bool:
        """Bring the wallet and ledger back to the last saved state, if any."""

        if self.persistence is None:
            raise RuntimeError("No persistence backend configured")
        state = self.persistence.load()
        if state is None:
            return False
        self.ledger.restore(state.stakes, state.wallet_balance)
        logger.info("Restored %d stakes saved at %s", len(state.stakes), state.saved_at)
        return True

    def reset(self) -> None:
        """Drop every stake and notification; the wallet is left untouched."""

        self.ledger.reset()
        self.emitter.reset()
        self.notifications.clear_all()


__all__ = ["AccountingService", "StakeResult", "build_catalog"]
