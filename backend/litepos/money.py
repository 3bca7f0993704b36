# Overview: Display formatting for integer cents and basis points.

from __future__ import annotations

from decimal import Decimal


def format_cents(cents: int) -> str:
    """1999 -> "19.99". Exact; no float rounding."""
    return f"{Decimal(cents).scaleb(-2):.2f}"


def format_currency(cents: int, symbol: str = "$") -> str:
    """Symbol goes first, as in the currency_symbol setting: "$19.99"."""
    return f"{symbol}{format_cents(cents)}"


def format_bps(bps: int) -> str:
    """Basis points as a percentage figure: 825 -> "8.25"."""
    return f"{Decimal(bps).scaleb(-2):.2f}"
