"""Course management (admin) and public course listings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from models.data import Course, CurrentUser, Group, PublicCourse
from models.request import CreateCourseRequest, UpdateCourseRequest
from services.auth import require_admin
from services.course_service import CourseService, get_course_service

router = APIRouter(prefix="/api/courses", tags=["courses"])
public_router = APIRouter(prefix="/api/public-courses", tags=["public-courses"])


# ── Admin ────────────────────────────────────────────────────


@router.post("", response_model=Course, status_code=201)
async def create_course(
    req: CreateCourseRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.create_course(req)


@router.get("", response_model=list[Course])
async def list_courses(
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.list_courses()


@router.get("/{course_id}", response_model=Course)
async def get_course(
    course_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.get_course(course_id)


@router.patch("/{course_id}", response_model=Course)
async def update_course(
    course_id: str,
    req: UpdateCourseRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    """Toggle visibility / grade acceptance, or rename."""
    return service.update_course(course_id, req)


@router.delete("/{course_id}", status_code=204)
async def delete_course(
    course_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    """Delete a course together with its grades."""
    service.delete_course(course_id)
    return Response(status_code=204)


@router.post("/{course_id}/groups/{group_id}", response_model=Course)
async def add_course_group(
    course_id: str,
    group_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.add_group(course_id, group_id)


@router.delete("/{course_id}/groups/{group_id}", response_model=Course)
async def remove_course_group(
    course_id: str,
    group_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.remove_group(course_id, group_id)


# ── Public ───────────────────────────────────────────────────


@public_router.get("", response_model=list[PublicCourse])
async def list_public_courses(service: CourseService = Depends(get_course_service)):
    return service.list_public_courses()


@public_router.get("/{course_id}", response_model=PublicCourse)
async def get_public_course(
    course_id: str,
    service: CourseService = Depends(get_course_service),
):
    return service.get_public_course(course_id)


@public_router.get("/{course_id}/groups", response_model=list[Group])
async def list_public_course_groups(
    course_id: str,
    service: CourseService = Depends(get_course_service),
):
    return service.list_public_course_groups(course_id)
