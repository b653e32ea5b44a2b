"""Custom exceptions for PayoffPlan."""

from __future__ import annotations

from pathlib import Path


class PayoffPlanError(Exception):
    """Base exception for all PayoffPlan errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DebtImportError(PayoffPlanError):
    """Raised when a debts file cannot be read."""

    def __init__(self, message: str, path: Path | str | None = None):
        details = {"path": str(path)} if path is not None else {}
        super().__init__(message, details)
