"""Service module exports."""

from . import comparison, debts, export_csv, formatting, import_csv
from .comparison import compare_strategies, extra_payment_impact
from .debts import calculate_payoff_schedule
from .formatting import format_payoff_time

__all__ = [
    "calculate_payoff_schedule",
    "compare_strategies",
    "comparison",
    "debts",
    "export_csv",
    "extra_payment_impact",
    "format_payoff_time",
    "formatting",
    "import_csv",
]
