"""Grade distribution statistics — public read-only endpoints.

Only public courses expose their distribution; the service enforces it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from models.stats import (
    CourseDistributionResponse,
    GroupDistributionResponse,
    NormalCurveResponse,
)
from services.grade_service import GradeService, get_grade_service

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("/courses/{course_id}", response_model=CourseDistributionResponse)
async def get_course_distribution(
    course_id: str,
    service: GradeService = Depends(get_grade_service),
):
    """Overall and per-group grade distribution for a course."""
    return service.course_distribution(course_id)


@router.get(
    "/courses/{course_id}/groups/{group_id}",
    response_model=GroupDistributionResponse,
)
async def get_group_distribution(
    course_id: str,
    group_id: str,
    service: GradeService = Depends(get_grade_service),
):
    """Grade distribution for one group within a course."""
    return service.group_distribution(course_id, group_id)


@router.get("/courses/{course_id}/normal-curve", response_model=NormalCurveResponse)
async def get_normal_curve(
    course_id: str,
    points: int | None = Query(default=None, description="Number of curve steps (points + 1 samples)"),
    service: GradeService = Depends(get_grade_service),
):
    """Normal curve fitted to the course's grades, for overlay on the histogram."""
    return service.course_normal_curve(course_id, points)
