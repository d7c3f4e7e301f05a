"""
Utility helpers for formatting numeric values, currency strings, and percentages.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

MISSING = "–"


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round the way people expect money to round (1999.995 -> 2000.00).

    Goes through the shortest decimal repr so binary float noise does not
    push a trailing 5 down.
    """
    try:
        quantum = Decimal(1).scaleb(-decimals)
        return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
    except (InvalidOperation, TypeError, ValueError):
        return value


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return MISSING
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return MISSING


def format_brl(value: Optional[float], decimals: int = 2) -> str:
    """Brazilian real with pt-BR separators: 1234.5 -> 'R$ 1.234,50'."""
    if value is None:
        return MISSING
    try:
        numeric = round_half_up(float(value), decimals)
    except (TypeError, ValueError):
        return MISSING
    formatted = f"{numeric:,.{decimals}f}"
    # swap the en-US separators for pt-BR ones
    formatted = formatted.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return f"R$ {formatted}"


def format_prediction(value: Optional[float]) -> str:
    """Headline prediction, two decimals without grouping: 'R$ 2345.67'."""
    if value is None:
        return MISSING
    try:
        return f"R$ {round_half_up(float(value), 2):.2f}"
    except (TypeError, ValueError):
        return MISSING


def format_importance(value: Optional[float], decimals: int = 3) -> str:
    return format_number(value, decimals)

