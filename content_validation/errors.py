from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemas.report import ValidationReport


class SerializationError(ValueError):
    """Raised when a value cannot be measured as JSON (e.g. it contains a reference cycle)."""


class ContentRejectedError(ValueError):
    def __init__(self, report: "ValidationReport") -> None:
        self.report = report
        summary = "; ".join(report.errors[:3])
        more = len(report.errors) - 3
        if more > 0:
            summary += f" (+{more} more)"
        super().__init__(f"Content rejected: {summary}")
