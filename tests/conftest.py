"""Pytest configuration and shared fixtures for PayoffPlan tests.

Provides debt factories and helper utilities for exercising the payoff
engine without touching the real data directory.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from payoffplan.models import Debt

START = date(2024, 1, 1)


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point configuration at a temporary directory for every test."""

    data_dir = tmp_path / "instance"
    monkeypatch.setenv("PAYOFFPLAN_DATA_DIR", str(data_dir))
    monkeypatch.delenv("PAYOFFPLAN_MAX_MONTHS", raising=False)
    monkeypatch.delenv("PAYOFFPLAN_DEV_MODE", raising=False)
    return data_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""

    yield
    logger = logging.getLogger("payoffplan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def debt_factory():
    """Factory for creating test debts.

    Returns:
        Callable: Function that builds Debt instances with sensible defaults
    """

    counter = {"next_id": 1}

    def _create_debt(
        balance: float = 1000.00,
        interest_rate: float = 18.0,
        minimum_payment: float = 25.00,
        name: str | None = None,
        id=None,
        **kwargs,
    ) -> Debt:
        """Create a test debt.

        Args:
            balance: Current outstanding balance
            interest_rate: Annual percentage rate (e.g., 18.0 for 18%)
            minimum_payment: Minimum monthly payment
            name: Debt name, defaults to "Debt <id>"
            id: Debt identifier, defaults to an increasing integer

        Returns:
            Debt: New debt instance
        """
        if id is None:
            id = counter["next_id"]
            counter["next_id"] += 1
        return Debt(
            id=id,
            name=name or f"Debt {id}",
            balance=balance,
            interest_rate=interest_rate,
            minimum_payment=minimum_payment,
            **kwargs,
        )

    return _create_debt


@pytest.fixture
def two_debts(debt_factory):
    """A: $500 at 20% ($25 min); B: $2,000 at 5% ($50 min)."""

    return [
        debt_factory(id="A", balance=500.00, interest_rate=20.0, minimum_payment=25.00),
        debt_factory(id="B", balance=2000.00, interest_rate=5.0, minimum_payment=50.00),
    ]


@pytest.fixture
def card_portfolio(debt_factory):
    """Three debts with distinct rates and balances."""

    return [
        debt_factory(id=1, balance=5000.00, interest_rate=15.0, minimum_payment=100.00),
        debt_factory(id=2, balance=500.00, interest_rate=10.0, minimum_payment=25.00),
        debt_factory(id=3, balance=2500.00, interest_rate=24.0, minimum_payment=75.00),
    ]


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
