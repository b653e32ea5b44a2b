"""Data model exports for payoff planning."""

from .debt import Debt, PayoffStrategy
from .schedule import DebtMonthLine, PayoffMonthSnapshot, PayoffSchedule, PayoffSummary

__all__ = [
    "Debt",
    "DebtMonthLine",
    "PayoffMonthSnapshot",
    "PayoffSchedule",
    "PayoffStrategy",
    "PayoffSummary",
]
