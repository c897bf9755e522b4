"""Wallet balance collaborator used by the stake ledger."""

from __future__ import annotations

import logging
from typing import Protocol

from .core.errors import InsufficientBalance, InvalidAmount
from .rewards import _is_number

logger = logging.getLogger(__name__)


class WalletAccount(Protocol):
    """Spendable balance of a single user."""

    def get_balance(self) -> float: ...

    def debit(self, amount: float) -> None: ...

    def credit(self, amount: float) -> None: ...


class InMemoryWallet:
    """Single-currency balance held in memory."""

    def __init__(self, balance: float = 0.0) -> None:
        if not _is_number(balance) or balance < 0:
            raise InvalidAmount(f"Opening balance must be non-negative, got {balance!r}")
        self._balance = float(balance)

    def get_balance(self) -> float:
        return self._balance

    def debit(self, amount: float) -> None:
        if not _is_number(amount) or amount <= 0:
            raise InvalidAmount(f"Debit amount must be positive, got {amount!r}")
        if amount > self._balance:
            raise InsufficientBalance(
                f"Cannot debit {amount} from a balance of {self._balance}"
            )
        self._balance -= float(amount)
        logger.debug("Wallet debited %s; balance now %s", amount, self._balance)

    def credit(self, amount: float) -> None:
        if not _is_number(amount) or amount <= 0:
            raise InvalidAmount(f"Credit amount must be positive, got {amount!r}")
        self._balance += float(amount)
        logger.debug("Wallet credited %s; balance now %s", amount, self._balance)

    def __repr__(self) -> str:
        return f"InMemoryWallet(balance={self._balance!r})"


__all__ = ["InMemoryWallet", "WalletAccount"]
