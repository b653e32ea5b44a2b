"""PayoffPlan debt payoff planning package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .models import Debt, PayoffMonthSnapshot, PayoffSchedule, PayoffStrategy, PayoffSummary
from .services.comparison import compare_strategies, extra_payment_impact
from .services.debts import calculate_payoff_schedule, order_debts
from .services.formatting import format_payoff_time

__all__ = [
    "BaseConfig",
    "Debt",
    "DevConfig",
    "PayoffMonthSnapshot",
    "PayoffSchedule",
    "PayoffStrategy",
    "PayoffSummary",
    "calculate_payoff_schedule",
    "compare_strategies",
    "extra_payment_impact",
    "format_payoff_time",
    "order_debts",
]
