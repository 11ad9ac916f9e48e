"""Grade endpoints — recording, listing, and per-course distributions.

Creating, listing all and updating grades is admin-only.  Any signed-in
user may read a course's grades or delete their own grade; distribution
aliases are public (same rules as ``/api/statistics``).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from models.data import CurrentUser, Grade
from models.request import CreateGradeRequest, UpdateGradeRequest
from models.stats import CourseDistributionResponse, GroupDistributionResponse
from services.auth import get_current_user, require_admin
from services.grade_service import GradeService, get_grade_service

router = APIRouter(prefix="/api/grades", tags=["grades"])


@router.post("", response_model=Grade, status_code=201)
async def create_grade(
    req: CreateGradeRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: GradeService = Depends(get_grade_service),
):
    return service.create_grade(req)


@router.get("", response_model=list[Grade])
async def list_grades(
    _admin: CurrentUser = Depends(require_admin),
    service: GradeService = Depends(get_grade_service),
):
    return service.list_grades()


@router.get("/my", response_model=list[Grade])
async def list_my_grades(
    user: CurrentUser = Depends(get_current_user),
    service: GradeService = Depends(get_grade_service),
):
    """All grades recorded for the calling user."""
    return service.grades_for_student(user.user_id)


@router.get("/course/{course_id}", response_model=list[Grade])
async def list_course_grades(
    course_id: str,
    _user: CurrentUser = Depends(get_current_user),
    service: GradeService = Depends(get_grade_service),
):
    return service.grades_for_course(course_id)


@router.get("/course/{course_id}/distribution", response_model=CourseDistributionResponse)
async def get_course_distribution(
    course_id: str,
    service: GradeService = Depends(get_grade_service),
):
    return service.course_distribution(course_id)


@router.get(
    "/course/{course_id}/group/{group_id}/distribution",
    response_model=GroupDistributionResponse,
)
async def get_group_distribution(
    course_id: str,
    group_id: str,
    service: GradeService = Depends(get_grade_service),
):
    return service.group_distribution(course_id, group_id)


@router.get("/{grade_id}", response_model=Grade)
async def get_grade(
    grade_id: str,
    _user: CurrentUser = Depends(get_current_user),
    service: GradeService = Depends(get_grade_service),
):
    return service.get_grade(grade_id)


@router.patch("/{grade_id}", response_model=Grade)
async def update_grade(
    grade_id: str,
    req: UpdateGradeRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: GradeService = Depends(get_grade_service),
):
    return service.update_grade(grade_id, req)


@router.delete("/{grade_id}", status_code=204)
async def delete_grade(
    grade_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: GradeService = Depends(get_grade_service),
):
    """Admins may delete any grade; students only their own."""
    service.delete_grade(grade_id, user)
    return Response(status_code=204)
