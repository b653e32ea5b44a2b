"""CSV import/export tests for debt lists and schedules."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from payoffplan.exceptions import DebtImportError
from payoffplan.models import Debt
from payoffplan.services.debts import calculate_payoff_schedule
from payoffplan.services.export_csv import BASE_HEADERS, export_schedule_csv
from payoffplan.services.import_csv import debts_from_rows, load_debts_csv
from tests.conftest import START


def _write(tmp_path: Path, text: str, name: str = "debts.csv") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadDebtsCsv:
    """Parsing debt lists."""

    def test_aliases_and_currency_text(self, tmp_path):
        path = _write(
            tmp_path,
            "Name,Balance,APR,Min Payment,Type\n"
            'Visa,"$1,200.50",19.9%,35,credit_card\n'
            "Car Loan,8000,4.5,250,auto\n",
        )

        debts = load_debts_csv(path)

        assert debts == [
            Debt(id=1, name="Visa", balance=1200.50, interest_rate=19.9,
                 minimum_payment=35.0, debt_type="credit_card"),
            Debt(id=2, name="Car Loan", balance=8000.0, interest_rate=4.5,
                 minimum_payment=250.0, debt_type="auto"),
        ]

    def test_explicit_ids_and_optional_columns(self, tmp_path):
        path = _write(
            tmp_path,
            "id,name,balance,interest_rate,minimum_payment,institution,original_amount\n"
            "card-1,Card,500,20,25,Big Bank,1500\n"
            "7,Loan,2000,5,50,,\n",
        )

        card, loan = load_debts_csv(path)

        assert card.id == "card-1"
        assert card.institution == "Big Bank"
        assert card.original_amount == 1500.0
        assert loan.id == 7
        assert loan.institution is None
        assert loan.original_amount is None

    def test_rows_without_balance_are_skipped(self, tmp_path):
        path = _write(tmp_path, "name,balance,apr\nKeep,100,5\nSkip,,5\n")

        debts = load_debts_csv(path)

        assert [d.name for d in debts] == ["Keep"]

    def test_unreadable_numbers_become_zero(self, tmp_path):
        path = _write(tmp_path, "name,balance,apr,minimum\nOdd,lots,n/a,-\n")

        (debt,) = load_debts_csv(path)

        assert debt.balance == 0.0
        assert debt.interest_rate == 0.0
        assert debt.minimum_payment == 0.0
        assert debt.name == "Odd"

    def test_missing_balance_column_raises(self, tmp_path):
        path = _write(tmp_path, "name,apr\nX,5\n")

        with pytest.raises(DebtImportError, match="no balance column"):
            load_debts_csv(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DebtImportError, match="not found"):
            load_debts_csv(tmp_path / "nope.csv")

    def test_empty_file_raises(self, tmp_path):
        path = _write(tmp_path, "")

        with pytest.raises(DebtImportError):
            load_debts_csv(path)

    def test_rows_from_mappings(self):
        columns = {"balance": "balance", "name": "name"}
        debts = debts_from_rows(rows=[{"balance": "250", "name": None}], columns=columns)

        assert debts == [Debt(id=1, name="Debt 1", balance=250.0)]


class TestExportScheduleCsv:
    """Writing schedules."""

    def test_writes_one_row_per_month(self, tmp_path, two_debts):
        schedule = calculate_payoff_schedule(
            debts=two_debts, extra_payment=100.0, strategy="avalanche", start=START
        )

        output = export_schedule_csv(schedule=schedule, output_path=tmp_path / "out" / "plan.csv")

        with output.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
            fh.seek(0)
            header = next(csv.reader(fh))

        assert header == BASE_HEADERS + ["balance_A", "balance_B"]
        assert len(rows) == schedule.months
        assert rows[0]["month"] == "1"
        assert rows[0]["date"] == "2024-02-01"
        assert rows[0]["total_payment"] == "175.00"
        assert rows[-1]["total_remaining"] == "0.00"

    def test_empty_schedule_writes_header_only(self, tmp_path):
        schedule = calculate_payoff_schedule(debts=[])

        output = export_schedule_csv(schedule=schedule, output_path=tmp_path / "empty.csv")

        assert output.read_text(encoding="utf-8").strip() == ",".join(BASE_HEADERS)
