"""Course and group management.

Thin layer over :mod:`services.grade_store` that turns missing records into
``EntityNotFoundError`` and applies partial updates.
"""

from __future__ import annotations

import logging

from errors.exceptions import EntityNotFoundError
from models.data import Course, Group, PublicCourse
from models.request import (
    CreateCourseRequest,
    CreateGroupRequest,
    UpdateCourseRequest,
    UpdateGroupRequest,
)
from services.grade_store import GradeStore, get_grade_store, new_id
from services.validation import check_name

logger = logging.getLogger(__name__)


class CourseService:
    """Create, read, update and delete courses and groups."""

    def __init__(self, store: GradeStore) -> None:
        self._store = store

    # ── Courses ──────────────────────────────────────────────

    def create_course(self, req: CreateCourseRequest) -> Course:
        check_name("name", req.name).raise_for_errors()
        course = Course(
            id=new_id("crs"),
            name=req.name.strip(),
            description=req.description,
            is_public=req.is_public,
            accepting_grades=req.accepting_grades,
        )
        self._store.save_course(course)
        logger.info("Created course %s (%s)", course.id, course.name)
        return course

    def list_courses(self) -> list[Course]:
        return self._store.list_courses()

    def get_course(self, course_id: str) -> Course:
        course = self._store.get_course(course_id)
        if course is None:
            raise EntityNotFoundError("Course", course_id)
        return course

    def update_course(self, course_id: str, req: UpdateCourseRequest) -> Course:
        course = self.get_course(course_id)
        changes = req.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes:
            check_name("name", changes["name"]).raise_for_errors()
        updated = course.model_copy(update=changes)
        self._store.save_course(updated)
        logger.info("Updated course %s: %s", course_id, sorted(changes))
        return updated

    def delete_course(self, course_id: str) -> None:
        if not self._store.delete_course(course_id):
            raise EntityNotFoundError("Course", course_id)
        logger.info("Deleted course %s", course_id)

    def list_public_courses(self) -> list[PublicCourse]:
        return [PublicCourse.from_course(c) for c in self._store.list_courses() if c.is_public]

    def get_public_course(self, course_id: str) -> PublicCourse:
        course = self._store.get_course(course_id)
        if course is None or not course.is_public:
            raise EntityNotFoundError("Public course", course_id)
        return PublicCourse.from_course(course)

    def list_public_course_groups(self, course_id: str) -> list[Group]:
        course = self._store.get_course(course_id)
        if course is None or not course.is_public:
            raise EntityNotFoundError("Public course", course_id)
        return self._groups_of(course)

    def add_group(self, course_id: str, group_id: str) -> Course:
        course = self.get_course(course_id)
        self.get_group(group_id)
        if group_id not in course.group_ids:
            course.group_ids.append(group_id)
            self._store.save_course(course)
            logger.info("Attached group %s to course %s", group_id, course_id)
        return course

    def remove_group(self, course_id: str, group_id: str) -> Course:
        course = self.get_course(course_id)
        if group_id in course.group_ids:
            course.group_ids.remove(group_id)
            self._store.save_course(course)
            logger.info("Detached group %s from course %s", group_id, course_id)
        return course

    def _groups_of(self, course: Course) -> list[Group]:
        groups = (self._store.get_group(gid) for gid in course.group_ids)
        return [g for g in groups if g is not None]

    # ── Groups ───────────────────────────────────────────────

    def create_group(self, req: CreateGroupRequest) -> Group:
        check_name("name", req.name).raise_for_errors()
        group = Group(id=new_id("grp"), name=req.name.strip(), description=req.description)
        self._store.save_group(group)
        logger.info("Created group %s (%s)", group.id, group.name)
        return group

    def list_groups(self) -> list[Group]:
        return self._store.list_groups()

    def get_group(self, group_id: str) -> Group:
        group = self._store.get_group(group_id)
        if group is None:
            raise EntityNotFoundError("Group", group_id)
        return group

    def update_group(self, group_id: str, req: UpdateGroupRequest) -> Group:
        group = self.get_group(group_id)
        changes = req.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes:
            check_name("name", changes["name"]).raise_for_errors()
        updated = group.model_copy(update=changes)
        self._store.save_group(updated)
        return updated

    def delete_group(self, group_id: str) -> None:
        if not self._store.delete_group(group_id):
            raise EntityNotFoundError("Group", group_id)
        logger.info("Deleted group %s", group_id)


def get_course_service() -> CourseService:
    """FastAPI dependency: a service bound to the process-wide store."""
    return CourseService(get_grade_store())
