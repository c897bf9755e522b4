"""Persistence boundary for ledger state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from .core.models import Stake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerState:
    """Everything needed to rebuild a session's ledger and wallet."""

    wallet_balance: float
    stakes: tuple[Stake, ...]
    saved_at: datetime


class LedgerPersistence(Protocol):
    def save(self, state: LedgerState) -> None: ...

    def load(self) -> LedgerState | None: ...


class InMemoryLedgerStore:
    """Keeps the last saved state in memory; useful for tests and demos."""

    def __init__(self) -> None:
        self._state: LedgerState | None = None

    def save(self, state: LedgerState) -> None:
        self._state = state
        logger.debug("Saved ledger state with %d stakes", len(state.stakes))

    def load(self) -> LedgerState | None:
        return self._state


__all__ = ["InMemoryLedgerStore", "LedgerPersistence", "LedgerState"]
