"""Statistics result models — what the engine returns and the API serves.

``StatSummary`` and ``NormalCurvePoint`` are produced by
``tools.stats_tools``; they are frozen so a result can be shared between
callers without copying.  The ``*Response`` models are the JSON bodies of
the statistics endpoints.
"""

from __future__ import annotations

from pydantic import Field

from models.base import CamelModel, FrozenCamelModel


# ── Engine results ───────────────────────────────────────────


class HistogramBucket(FrozenCamelModel):
    """One equal-width histogram bucket, ``[start, end)`` (last one closed)."""

    label: str
    start: float
    end: float
    count: int = 0


class StatSummary(FrozenCamelModel):
    """Descriptive statistics for one set of grades."""

    count: int = 0
    min: float = 0
    max: float = 0
    mean: float = 0
    median: float = 0
    standard_deviation: float = 0
    histogram: dict[str, int] = Field(default_factory=dict)  # label -> count, bucket order
    buckets: tuple[HistogramBucket, ...] = ()


class NormalCurvePoint(FrozenCamelModel):
    """A single ``(x, y)`` sample of a Gaussian PDF."""

    x: float
    y: float


# ── API responses ────────────────────────────────────────────


class DistributionStats(CamelModel):
    """Summary as consumed by the distribution charts."""

    min: float = 0
    max: float = 0
    mean: float = 0
    median: float = 0
    standard_deviation: float = 0
    distribution: dict[str, int] = Field(default_factory=dict)
    total_grades: int = 0

    @classmethod
    def from_summary(cls, summary: StatSummary) -> DistributionStats:
        return cls(
            min=summary.min,
            max=summary.max,
            mean=summary.mean,
            median=summary.median,
            standard_deviation=summary.standard_deviation,
            distribution=dict(summary.histogram),
            total_grades=summary.count,
        )


class CourseDistributionResponse(CamelModel):
    """GET /api/statistics/courses/{course_id}"""

    course_name: str
    overall: DistributionStats
    groups: dict[str, DistributionStats] = Field(default_factory=dict)
    total_grades: int = 0


class GroupDistributionResponse(CamelModel):
    """GET /api/statistics/courses/{course_id}/groups/{group_id}"""

    course_name: str
    group: str
    stats: DistributionStats
    total_grades: int = 0


class NormalCurveResponse(CamelModel):
    """GET /api/statistics/courses/{course_id}/normal-curve"""

    course_name: str
    mean: float
    standard_deviation: float
    normal_curve: list[NormalCurvePoint] = Field(default_factory=list)
