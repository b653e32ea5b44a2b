"""Strategy comparison and derived payoff metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..logging_config import get_logger
from ..models.debt import Debt, PayoffStrategy
from ..models.schedule import PayoffSchedule, PayoffSummary
from .debts import calculate_payoff_schedule, to_amount, to_cents

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class StrategyComparison:
    """Avalanche and snowball results for the same inputs."""

    avalanche: PayoffSummary
    snowball: PayoffSummary
    avalanche_schedule: PayoffSchedule
    snowball_schedule: PayoffSchedule

    @property
    def interest_saved(self) -> float:
        """Interest avalanche saves over snowball (negative if it costs more)."""
        return round(self.snowball.total_interest - self.avalanche.total_interest, 2)

    @property
    def months_difference(self) -> int:
        return self.snowball.months - self.avalanche.months

    @property
    def recommended(self) -> PayoffStrategy:
        """Strategy with the lower total interest; avalanche wins ties."""

        if self.avalanche.will_pay_off != self.snowball.will_pay_off:
            return (
                PayoffStrategy.AVALANCHE
                if self.avalanche.will_pay_off
                else PayoffStrategy.SNOWBALL
            )
        if self.snowball.total_interest < self.avalanche.total_interest:
            return PayoffStrategy.SNOWBALL
        return PayoffStrategy.AVALANCHE

    def summary_for(self, strategy: PayoffStrategy | str) -> PayoffSummary:
        if PayoffStrategy.parse(strategy) is PayoffStrategy.AVALANCHE:
            return self.avalanche
        return self.snowball


@dataclass(slots=True, frozen=True)
class ExtraPaymentImpact:
    """How much an extra monthly payment shortens payoff and saves interest.

    When the minimums-only baseline never pays off there is nothing to measure
    against, so ``months_saved`` and ``interest_saved`` are ``None``.
    """

    months_saved: int | None
    interest_saved: float | None
    baseline: PayoffSummary
    with_extra: PayoffSummary

    @property
    def baseline_pays_off(self) -> bool:
        return self.baseline.will_pay_off


def summarize_schedule(schedule: PayoffSchedule) -> PayoffSummary:
    """Return the headline numbers for *schedule*."""

    return PayoffSummary(
        strategy=schedule.strategy,
        months=schedule.months,
        total_interest=schedule.total_interest,
        will_pay_off=schedule.will_pay_off,
        payoff_date=schedule.payoff_date,
    )


def compare_strategies(
    *, debts: Iterable[Debt], extra_payment: float = 0.0, max_months: int | None = None
) -> StrategyComparison:
    """Run both strategies with identical inputs."""

    debt_list: Sequence[Debt] = tuple(debts)
    avalanche = calculate_payoff_schedule(
        debts=debt_list,
        extra_payment=extra_payment,
        strategy=PayoffStrategy.AVALANCHE,
        max_months=max_months,
    )
    snowball = calculate_payoff_schedule(
        debts=debt_list,
        extra_payment=extra_payment,
        strategy=PayoffStrategy.SNOWBALL,
        max_months=max_months,
    )
    return StrategyComparison(
        avalanche=summarize_schedule(avalanche),
        snowball=summarize_schedule(snowball),
        avalanche_schedule=avalanche,
        snowball_schedule=snowball,
    )


def extra_payment_impact(
    *,
    debts: Iterable[Debt],
    extra_payment: float,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
    max_months: int | None = None,
) -> ExtraPaymentImpact:
    """Compare paying only minimums against paying *extra_payment* on top.

    Savings are never reported as negative, and are ``None`` when paying only
    the minimums never clears the debts.
    """

    debt_list: Sequence[Debt] = tuple(debts)
    baseline = summarize_schedule(
        calculate_payoff_schedule(
            debts=debt_list, extra_payment=0.0, strategy=strategy, max_months=max_months
        )
    )
    with_extra = summarize_schedule(
        calculate_payoff_schedule(
            debts=debt_list, extra_payment=extra_payment, strategy=strategy, max_months=max_months
        )
    )
    if not baseline.will_pay_off:
        logger.info("Minimum payments alone never clear these debts; no savings baseline")
        return ExtraPaymentImpact(
            months_saved=None, interest_saved=None, baseline=baseline, with_extra=with_extra
        )
    return ExtraPaymentImpact(
        months_saved=max(baseline.months - with_extra.months, 0),
        interest_saved=max(round(baseline.total_interest - with_extra.total_interest, 2), 0.0),
        baseline=baseline,
        with_extra=with_extra,
    )


def calculate_total_interest(
    *,
    debts: Iterable[Debt],
    extra_payment: float = 0.0,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
) -> float:
    schedule = calculate_payoff_schedule(
        debts=debts, extra_payment=extra_payment, strategy=strategy
    )
    return schedule.total_interest


def calculate_months_to_payoff(
    *,
    debts: Iterable[Debt],
    extra_payment: float = 0.0,
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
) -> int | None:
    """Months until every debt is cleared, or ``None`` if that never happens."""

    schedule = calculate_payoff_schedule(
        debts=debts, extra_payment=extra_payment, strategy=strategy
    )
    return schedule.months if schedule.will_pay_off else None


def calculate_available_funds(
    *, monthly_income: float, monthly_bills: float, minimum_debt_payments: float
) -> float:
    """Money left for extra debt payments after bills and minimums."""

    available = to_amount(monthly_income) - to_amount(monthly_bills) - to_amount(
        minimum_debt_payments
    )
    return max(to_cents(available), 0.0)


def total_minimum_payments(debts: Iterable[Debt]) -> float:
    """Sum of the monthly minimums of debts that still carry a balance."""

    return to_cents(
        sum(
            (to_amount(d.minimum_payment) for d in debts if to_amount(d.balance) > 0),
            to_amount(0),
        )
    )


__all__ = [
    "ExtraPaymentImpact",
    "StrategyComparison",
    "calculate_available_funds",
    "calculate_months_to_payoff",
    "calculate_total_interest",
    "compare_strategies",
    "extra_payment_impact",
    "summarize_schedule",
    "total_minimum_payments",
]
