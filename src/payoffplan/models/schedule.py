"""Value types produced by the payoff simulator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Hashable, Iterator, Mapping, Optional, overload

from .debt import PayoffStrategy


@dataclass(slots=True, frozen=True)
class DebtMonthLine:
    """What happened to one debt during one simulated month."""

    debt_id: Hashable
    name: str
    balance: float
    payment: float
    interest: float
    is_paid_off: bool


@dataclass(slots=True, frozen=True)
class PayoffMonthSnapshot:
    """Balances and interest after one month of payments."""

    month_index: int
    date: date
    balances: Mapping[Hashable, float]
    interest_this_month: float
    cumulative_interest: float
    total_remaining: float
    total_payment: float
    debts: tuple[DebtMonthLine, ...] = ()

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "balances", MappingProxyType(dict(self.balances)))

    def line_for(self, debt_id: Hashable) -> Optional[DebtMonthLine]:
        for line in self.debts:
            if line.debt_id == debt_id:
                return line
        return None


@dataclass(slots=True, frozen=True)
class PayoffSchedule(Sequence):
    """Month-indexed payoff projection for one strategy.

    Behaves like a read-only list of :class:`PayoffMonthSnapshot`. When
    ``will_pay_off`` is false the snapshots stop at the iteration ceiling (or
    at the first month where no payment could be applied) and the final
    ``total_remaining`` is still positive.
    """

    snapshots: tuple[PayoffMonthSnapshot, ...]
    strategy: PayoffStrategy
    extra_payment: float
    will_pay_off: bool = True

    @overload
    def __getitem__(self, index: int) -> PayoffMonthSnapshot: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PayoffMonthSnapshot, ...]: ...

    def __getitem__(self, index):
        return self.snapshots[index]

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[PayoffMonthSnapshot]:
        return iter(self.snapshots)

    @property
    def months(self) -> int:
        return len(self.snapshots)

    @property
    def total_interest(self) -> float:
        if not self.snapshots:
            return 0.0
        return self.snapshots[-1].cumulative_interest

    @property
    def payoff_date(self) -> Optional[date]:
        if not self.snapshots or not self.will_pay_off:
            return None
        return self.snapshots[-1].date


@dataclass(slots=True, frozen=True)
class PayoffSummary:
    """Headline numbers for one strategy, as shown side by side."""

    strategy: PayoffStrategy
    months: int
    total_interest: float
    will_pay_off: bool = True
    payoff_date: Optional[date] = field(default=None)
