"""Group management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from models.data import CurrentUser, Group
from models.request import CreateGroupRequest, UpdateGroupRequest
from services.auth import get_current_user, require_admin
from services.course_service import CourseService, get_course_service

router = APIRouter(prefix="/api/groups", tags=["groups"])


@router.post("", response_model=Group, status_code=201)
async def create_group(
    req: CreateGroupRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.create_group(req)


@router.get("", response_model=list[Group])
async def list_groups(
    _user: CurrentUser = Depends(get_current_user),
    service: CourseService = Depends(get_course_service),
):
    return service.list_groups()


@router.get("/{group_id}", response_model=Group)
async def get_group(
    group_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.get_group(group_id)


@router.patch("/{group_id}", response_model=Group)
async def update_group(
    group_id: str,
    req: UpdateGroupRequest,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    return service.update_group(group_id, req)


@router.delete("/{group_id}", status_code=204)
async def delete_group(
    group_id: str,
    _admin: CurrentUser = Depends(require_admin),
    service: CourseService = Depends(get_course_service),
):
    """Delete a group; its grades become ungrouped."""
    service.delete_group(group_id)
    return Response(status_code=204)
