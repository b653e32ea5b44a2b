"""CSV ingestion of debt lists."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import pandas as pd

from ..exceptions import DebtImportError
from ..logging_config import get_logger
from ..models.debt import Debt

logger = get_logger(__name__)

COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id", "debt_id"),
    "name": ("name", "debt", "account"),
    "balance": ("balance", "amount_owed"),
    "interest_rate": ("interest_rate", "apr", "rate"),
    "minimum_payment": ("minimum_payment", "min_payment", "minimum"),
    "institution": ("institution", "lender"),
    "debt_type": ("type", "debt_type"),
    "original_amount": ("original_amount", "original_balance"),
}


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing."""

    try:
        frame = pd.read_csv(file_path, encoding=encoding, skipinitialspace=True)
    except FileNotFoundError as exc:
        raise DebtImportError("Debts file not found", path=file_path) from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DebtImportError(f"Could not parse debts file: {exc}", path=file_path) from exc
    frame.columns = [str(c).strip().lower().replace(" ", "_") for c in frame.columns]
    return frame


def _resolve_columns(columns: list[str]) -> dict[str, str]:
    """Map each debt field to the first matching header present."""

    resolved: dict[str, str] = {}
    for field_name, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in columns:
                resolved[field_name] = alias
                break
    return resolved


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_number(value: Any) -> float:
    """Parse currency/percent text such as ``"$1,200.50"`` or ``"19.9%"``."""

    if _is_blank(value):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace("$", "").replace(",", "").rstrip("%")
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _coerce_id(value: Any, fallback: int) -> Any:
    if _is_blank(value):
        return fallback
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, str):
        text = value.strip()
        return int(text) if text.isdigit() else text
    return value


def _text(value: Any) -> str | None:
    if _is_blank(value):
        return None
    return str(value).strip()


def debts_from_rows(*, rows: list[Mapping[str, Any]], columns: Mapping[str, str]) -> list[Debt]:
    """Convert dict-like rows into :class:`Debt` objects.

    Rows without a balance are skipped; unreadable numbers become zero.
    """

    debts: list[Debt] = []
    for row_num, row in enumerate(rows, start=1):
        raw_balance = row.get(columns["balance"])
        if _is_blank(raw_balance):
            logger.debug("Row %d: skipping debt without balance", row_num)
            continue

        debt_id = _coerce_id(row.get(columns["id"]) if "id" in columns else None, row_num)
        name = _text(row.get(columns["name"])) if "name" in columns else None
        original = None
        if "original_amount" in columns and not _is_blank(row.get(columns["original_amount"])):
            original = _parse_number(row.get(columns["original_amount"]))

        debts.append(
            Debt(
                id=debt_id,
                name=name or f"Debt {debt_id}",
                balance=_parse_number(raw_balance),
                interest_rate=_parse_number(row.get(columns["interest_rate"]))
                if "interest_rate" in columns
                else 0.0,
                minimum_payment=_parse_number(row.get(columns["minimum_payment"]))
                if "minimum_payment" in columns
                else 0.0,
                institution=_text(row.get(columns["institution"]))
                if "institution" in columns
                else None,
                debt_type=_text(row.get(columns["debt_type"])) if "debt_type" in columns else None,
                original_amount=original,
            )
        )
    return debts


def load_debts_csv(path: Path | str) -> list[Debt]:
    """Read a debts CSV and return the parsed debts."""

    csv_path = Path(path)
    logger.info("Loading debts from %s", csv_path)
    frame = normalize_frame(file_path=csv_path)
    columns = _resolve_columns(list(frame.columns))
    if "balance" not in columns:
        raise DebtImportError("Debts file has no balance column", path=csv_path)

    rows = [{c: r[c] for c in frame.columns} for _, r in frame.iterrows()]
    debts = debts_from_rows(rows=rows, columns=columns)
    logger.info("Loaded %d debts from %s", len(debts), csv_path)
    return debts


__all__ = ["COLUMN_ALIASES", "debts_from_rows", "load_debts_csv", "normalize_frame"]
