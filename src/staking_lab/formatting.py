"""Display helpers for amounts and percentages."""

from __future__ import annotations

from .core.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percent(value: float, *, signed: bool = True) -> str:
    """Format a percentage value, e.g. ``3.456 -> '+3.46%'``."""

    return f"{value:+.2f}%" if signed else f"{value:.2f}%"


__all__ = ["format_currency", "format_percent"]
