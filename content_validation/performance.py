from __future__ import annotations

from dataclasses import dataclass

from content_validation.limits import DEFAULT_LIMITS, ValidationLimits
from content_validation.sizing import round_half_up, to_kb
from schemas.report import PerformanceSummary


@dataclass(frozen=True)
class PerformanceEstimate:
    content_size_bytes: int
    estimated_load_time_ms: float
    lighthouse_impact: int

    def to_summary(self) -> PerformanceSummary:
        return PerformanceSummary(
            content_size=to_kb(self.content_size_bytes),
            estimated_load_time=round_half_up(self.estimated_load_time_ms),
            lighthouse_impact=self.lighthouse_impact,
        )


def estimate_performance(total_size_bytes: int, limits: ValidationLimits = DEFAULT_LIMITS) -> PerformanceEstimate:
    """
    Load time = max(floor, size * ms_per_byte). Not a physical model: it is
    calibrated against the 2-second load budget and must stay this formula.
    Lighthouse impact is a cliff at large_content_ratio of the total ceiling.
    """
    load_ms = max(limits.load_time_floor_ms, total_size_bytes * limits.load_time_ms_per_byte)
    is_large = total_size_bytes > limits.total_json_max * limits.large_content_ratio
    return PerformanceEstimate(
        content_size_bytes=total_size_bytes,
        estimated_load_time_ms=load_ms,
        lighthouse_impact=-5 if is_large else 0,
    )
