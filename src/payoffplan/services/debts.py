"""Debt payoff calculators (snowball and avalanche)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, Iterable

from ..config import DEFAULT_MAX_MONTHS
from ..logging_config import get_logger
from ..models.debt import Debt, PayoffStrategy
from ..models.schedule import DebtMonthLine, PayoffMonthSnapshot, PayoffSchedule

logger = get_logger(__name__)

CENT = Decimal("0.01")
PAYOFF_TOLERANCE = Decimal("0.005")
_ZERO = Decimal(0)
_MONTHS_PER_YEAR_PCT = Decimal(1200)


def to_amount(value: Any) -> Decimal:
    """Coerce *value* to a non-negative Decimal.

    Missing, negative, non-numeric and non-finite values all become zero.
    """

    if isinstance(value, Decimal):
        if not value.is_finite() or value <= 0:
            return _ZERO
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return _ZERO
    if not math.isfinite(number) or number <= 0:
        return _ZERO
    try:
        return Decimal(str(number))
    except InvalidOperation:  # pragma: no cover - finite floats always convert
        return _ZERO


def to_cents(value: Decimal) -> float:
    """Round to cents using half-up rounding and return a float for display."""

    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


def _next_month(value: date) -> date:
    month = value.month + 1
    year = value.year + (month - 1) // 12
    month = ((month - 1) % 12) + 1
    return value.replace(year=year, month=month, day=1)


@dataclass(slots=True)
class _DebtState:
    """Working copy of a debt for the duration of a single simulation."""

    debt: Debt
    balance: Decimal
    annual_rate: Decimal
    monthly_rate: Decimal
    minimum_payment: Decimal

    @classmethod
    def from_debt(cls, debt: Debt) -> "_DebtState":
        annual_rate = to_amount(debt.interest_rate)
        return cls(
            debt=debt,
            balance=to_amount(debt.balance).quantize(CENT, rounding=ROUND_HALF_UP),
            annual_rate=annual_rate,
            monthly_rate=annual_rate / _MONTHS_PER_YEAR_PCT,
            minimum_payment=to_amount(debt.minimum_payment),
        )


def _id_sort_key(value: Any) -> tuple:
    # Numeric ids sort numerically, everything else by its text.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, str(value))


def _strategy_key(strategy: PayoffStrategy) -> Callable[[_DebtState], tuple]:
    if strategy is PayoffStrategy.AVALANCHE:
        return lambda s: (-s.annual_rate, -s.balance, _id_sort_key(s.debt.id))
    return lambda s: (s.balance, -s.annual_rate, _id_sort_key(s.debt.id))


def _ordered_states(
    debts: Iterable[Debt], strategy: PayoffStrategy
) -> tuple[_DebtState, ...]:
    states = [_DebtState.from_debt(d) for d in debts]
    return tuple(sorted(states, key=_strategy_key(strategy)))


def order_debts(
    debts: Iterable[Debt], strategy: PayoffStrategy | str
) -> tuple[Debt, ...]:
    """Return *debts* in the priority order used for extra payments.

    Avalanche: highest rate, then largest balance, then id.
    Snowball: smallest balance, then highest rate, then id.
    Sorting uses the sanitised starting values and is never recomputed
    during a simulation.
    """

    strategy = PayoffStrategy.parse(strategy)
    return tuple(state.debt for state in _ordered_states(debts, strategy))


def calculate_payoff_schedule(
    *,
    debts: Iterable[Debt],
    extra_payment: float = 0.0,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
    max_months: int | None = None,
    start: date | None = None,
) -> PayoffSchedule:
    """Simulate month-by-month payoff of *debts* under *strategy*.

    Each month every open debt accrues ``balance * rate / 1200`` interest,
    then receives ``min(minimum_payment, amount owed)``. The extra payment,
    plus the minimums of debts retired in earlier months, is then poured
    into open debts in strategy order; whatever retires one debt cascades to
    the next within the same month.

    The run stops in the month the total remaining drops below half a cent.
    It also stops, with ``will_pay_off=False``, after ``max_months`` months
    or as soon as a month passes in which no money could be applied at all.
    """

    strategy = PayoffStrategy.parse(strategy)
    extra = to_amount(extra_payment)
    ceiling = max_months if max_months and max_months > 0 else DEFAULT_MAX_MONTHS
    ordered = _ordered_states(debts, strategy)

    if not any(state.balance > 0 for state in ordered):
        return PayoffSchedule(
            snapshots=(), strategy=strategy, extra_payment=float(extra), will_pay_off=True
        )

    month_date = (start or date.today()).replace(day=1)
    snapshots: list[PayoffMonthSnapshot] = []
    cumulative_interest = _ZERO
    will_pay_off = False

    for month_index in range(1, ceiling + 1):
        month_date = _next_month(month_date)
        pool = extra
        month_interest = _ZERO
        interest_by_debt: list[Decimal] = []
        paid_by_debt: list[Decimal] = []

        # Minimums of debts cleared in earlier months join the extra pool.
        for state in ordered:
            if state.balance <= 0:
                pool += state.minimum_payment

        for state in ordered:
            if state.balance <= 0:
                interest_by_debt.append(_ZERO)
                paid_by_debt.append(_ZERO)
                continue

            interest = state.balance * state.monthly_rate
            owed = state.balance + interest
            payment = min(state.minimum_payment, owed)
            state.balance = owed - payment
            month_interest += interest
            interest_by_debt.append(interest)
            paid_by_debt.append(payment)

        for position, state in enumerate(ordered):
            if pool <= 0:
                break
            if state.balance <= 0:
                continue
            applied = min(pool, state.balance)
            state.balance -= applied
            pool -= applied
            paid_by_debt[position] += applied

        cumulative_interest += month_interest
        total_remaining = sum((state.balance for state in ordered), _ZERO)
        total_payment = sum(paid_by_debt, _ZERO)

        snapshots.append(
            PayoffMonthSnapshot(
                month_index=month_index,
                date=month_date,
                balances={state.debt.id: to_cents(state.balance) for state in ordered},
                interest_this_month=to_cents(month_interest),
                cumulative_interest=to_cents(cumulative_interest),
                total_remaining=0.0 if total_remaining < PAYOFF_TOLERANCE else to_cents(total_remaining),
                total_payment=to_cents(total_payment),
                debts=tuple(
                    DebtMonthLine(
                        debt_id=state.debt.id,
                        name=state.debt.name,
                        balance=to_cents(state.balance),
                        payment=to_cents(paid_by_debt[position]),
                        interest=to_cents(interest_by_debt[position]),
                        is_paid_off=state.balance < PAYOFF_TOLERANCE,
                    )
                    for position, state in enumerate(ordered)
                ),
            )
        )

        if total_remaining < PAYOFF_TOLERANCE:
            will_pay_off = True
            break
        if total_payment <= 0:
            # Nothing was paid and nothing can change next month either.
            logger.warning(
                "No payment reaches the remaining debts; stopping after month %d",
                month_index,
                extra={"strategy": strategy.value, "remaining": to_cents(total_remaining)},
            )
            break
    else:
        logger.warning(
            "Payoff schedule did not converge within %d months",
            ceiling,
            extra={"strategy": strategy.value, "remaining": snapshots[-1].total_remaining},
        )

    logger.debug(
        "Simulated %s payoff for %d debts: %d months (pays off: %s)",
        strategy.value,
        len(ordered),
        len(snapshots),
        will_pay_off,
    )
    return PayoffSchedule(
        snapshots=tuple(snapshots),
        strategy=strategy,
        extra_payment=float(extra),
        will_pay_off=will_pay_off,
    )


__all__ = [
    "CENT",
    "PAYOFF_TOLERANCE",
    "calculate_payoff_schedule",
    "order_debts",
    "to_amount",
    "to_cents",
]
