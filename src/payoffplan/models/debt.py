"""Debt inputs and payoff strategy choices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional


class PayoffStrategy(str, Enum):
    """Order in which debts receive the extra payment."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"

    @classmethod
    def parse(cls, value: "PayoffStrategy | str") -> "PayoffStrategy":
        """Return the strategy named by *value* (case-insensitive)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError("Invalid debt payoff strategy.")

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        if self is PayoffStrategy.AVALANCHE:
            return "Highest interest rate first"
        return "Smallest balance first"


@dataclass(slots=True, frozen=True)
class Debt:
    """A liability snapshot fed into payoff projections.

    ``interest_rate`` is the nominal annual percentage (18.0 means 18% APR).
    ``name``, ``institution``, ``debt_type`` and ``original_amount`` are
    descriptive only; the simulator never reads them for its arithmetic.
    """

    id: Hashable
    name: str
    balance: float
    interest_rate: float = 0.0
    minimum_payment: float = 0.0
    institution: Optional[str] = None
    debt_type: Optional[str] = None
    original_amount: Optional[float] = None

    @property
    def amount_paid_off(self) -> float:
        """Principal retired since the debt was opened, when known."""

        if self.original_amount is None:
            return 0.0
        return max(float(self.original_amount) - float(self.balance or 0.0), 0.0)
