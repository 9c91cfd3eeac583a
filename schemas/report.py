from __future__ import annotations

import json
from typing import List

from pydantic import Field

from schemas.base import SchemaBase


class PerformanceSummary(SchemaBase):
    content_size: int = Field(0, alias="contentSize", description="Serialized size in KB (rounded)")
    estimated_load_time: int = Field(0, alias="estimatedLoadTime", description="Estimated load time in ms (rounded)")
    lighthouse_impact: int = Field(
        0,
        alias="lighthouseImpact",
        description="0 = fine, -5 = content is large, -10 = validation itself failed",
    )


class ValidationReport(SchemaBase):
    """
    The sole output of a validation run.

    errors block publishing; warnings are advisory.
    """

    is_valid: bool = Field(..., alias="isValid")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    performance: PerformanceSummary = Field(default_factory=PerformanceSummary)

    @classmethod
    def from_findings(
        cls,
        *,
        errors: List[str],
        warnings: List[str],
        performance: PerformanceSummary,
    ) -> "ValidationReport":
        return cls(
            is_valid=len(errors) == 0,
            errors=list(errors),
            warnings=list(warnings),
            performance=performance,
        )

    @classmethod
    def internal_fault(cls, message: str) -> "ValidationReport":
        return cls(
            is_valid=False,
            errors=[f"Validation error: {message}"],
            warnings=[],
            performance=PerformanceSummary(content_size=0, estimated_load_time=0, lighthouse_impact=-10),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


class BatchReport(SchemaBase):
    results: List[ValidationReport] = Field(default_factory=list)
    total_processing_time: int = Field(0, alias="totalProcessingTime", description="Wall-clock ms for the batch")

    @property
    def all_valid(self) -> bool:
        return all(r.is_valid for r in self.results)
