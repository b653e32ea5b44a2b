"""Display helpers for payoff results."""

from __future__ import annotations

import math


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_payoff_time(months: float) -> str:
    """Render a month count as e.g. ``"2 years 3 months"`` or ``"6 months"``."""

    try:
        value = float(months)
    except (TypeError, ValueError):
        return "Paid off"
    if not math.isfinite(value) or value <= 0:
        return "Paid off"

    total = int(math.ceil(value))
    years, remaining = divmod(total, 12)
    if years == 0:
        return _plural(remaining, "month")
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(remaining, 'month')}"


def format_currency(amount: float) -> str:
    """Format *amount* as US dollars, e.g. ``"$1,234.56"``."""

    value = round(float(amount or 0.0), 2)
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


__all__ = ["format_currency", "format_payoff_time"]
