"""CSV export helpers for payoff schedules."""

from __future__ import annotations

import csv
from datetime import date
from pathlib import Path

from ..models.schedule import PayoffSchedule

BASE_HEADERS = [
    "month",
    "date",
    "total_payment",
    "interest",
    "cumulative_interest",
    "total_remaining",
]


def _serialize_value(value):
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def export_schedule_csv(*, schedule: PayoffSchedule, output_path: Path) -> Path:
    """Write *schedule* to CSV at ``output_path``.

    Columns are deterministic: the base headers followed by one
    ``balance_<id>`` column per debt in strategy order. Returns the path written.
    """

    debt_ids = [line.debt_id for line in schedule[0].debts] if schedule else []
    headers = BASE_HEADERS + [f"balance_{debt_id}" for debt_id in debt_ids]
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=headers, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for snapshot in schedule:
            row = {
                "month": _serialize_value(snapshot.month_index),
                "date": _serialize_value(snapshot.date),
                "total_payment": _serialize_value(snapshot.total_payment),
                "interest": _serialize_value(snapshot.interest_this_month),
                "cumulative_interest": _serialize_value(snapshot.cumulative_interest),
                "total_remaining": _serialize_value(snapshot.total_remaining),
            }
            for debt_id in debt_ids:
                row[f"balance_{debt_id}"] = _serialize_value(snapshot.balances.get(debt_id))
            writer.writerow(row)

    return output_path


__all__ = ["export_schedule_csv"]
