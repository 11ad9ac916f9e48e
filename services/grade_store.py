"""Grade store — courses, groups and grades held for the service.

Provides an abstract interface with an in-memory implementation.  Records
are pydantic models; the store hands out copies so callers can't mutate
stored state behind its lock.
"""

from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod

from models.data import Course, Grade, Group

logger = logging.getLogger(__name__)


def new_id(prefix: str) -> str:
    """Short prefixed id, e.g. ``crs-3f9a1c2b7d``."""
    return f"{prefix}-{uuid.uuid4().hex[:10]}"


# ── Abstract Interface ──────────────────────────────────────


class GradeStore(ABC):
    """Abstract grade store interface."""

    # Courses
    @abstractmethod
    def save_course(self, course: Course) -> Course: ...

    @abstractmethod
    def get_course(self, course_id: str) -> Course | None: ...

    @abstractmethod
    def list_courses(self) -> list[Course]: ...

    @abstractmethod
    def delete_course(self, course_id: str) -> bool: ...

    # Groups
    @abstractmethod
    def save_group(self, group: Group) -> Group: ...

    @abstractmethod
    def get_group(self, group_id: str) -> Group | None: ...

    @abstractmethod
    def list_groups(self) -> list[Group]: ...

    @abstractmethod
    def delete_group(self, group_id: str) -> bool: ...

    # Grades
    @abstractmethod
    def save_grade(self, grade: Grade) -> Grade: ...

    @abstractmethod
    def get_grade(self, grade_id: str) -> Grade | None: ...

    @abstractmethod
    def list_grades(
        self,
        *,
        course_id: str | None = None,
        group_id: str | None = None,
        student_id: str | None = None,
    ) -> list[Grade]: ...

    @abstractmethod
    def delete_grade(self, grade_id: str) -> bool: ...


# ── In-Memory Implementation ────────────────────────────────


class InMemoryGradeStore(GradeStore):
    """Thread-safe in-memory store; dicts keep insertion order."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._courses: dict[str, Course] = {}
        self._groups: dict[str, Group] = {}
        self._grades: dict[str, Grade] = {}

    # ── Courses ──

    def save_course(self, course: Course) -> Course:
        with self._lock:
            self._courses[course.id] = course.model_copy(deep=True)
            return course

    def get_course(self, course_id: str) -> Course | None:
        with self._lock:
            course = self._courses.get(course_id)
            return course.model_copy(deep=True) if course else None

    def list_courses(self) -> list[Course]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._courses.values()]

    def delete_course(self, course_id: str) -> bool:
        with self._lock:
            if self._courses.pop(course_id, None) is None:
                return False
            orphaned = [gid for gid, g in self._grades.items() if g.course_id == course_id]
            for grade_id in orphaned:
                del self._grades[grade_id]
            if orphaned:
                logger.info("Removed %d grades with course %s", len(orphaned), course_id)
            return True

    # ── Groups ──

    def save_group(self, group: Group) -> Group:
        with self._lock:
            self._groups[group.id] = group.model_copy(deep=True)
            return group

    def get_group(self, group_id: str) -> Group | None:
        with self._lock:
            group = self._groups.get(group_id)
            return group.model_copy(deep=True) if group else None

    def list_groups(self) -> list[Group]:
        with self._lock:
            return [g.model_copy(deep=True) for g in self._groups.values()]

    def delete_group(self, group_id: str) -> bool:
        with self._lock:
            if self._groups.pop(group_id, None) is None:
                return False
            for course in self._courses.values():
                if group_id in course.group_ids:
                    course.group_ids.remove(group_id)
            for grade in self._grades.values():
                if grade.group_id == group_id:
                    grade.group_id = None
            return True

    # ── Grades ──

    def save_grade(self, grade: Grade) -> Grade:
        with self._lock:
            self._grades[grade.id] = grade.model_copy(deep=True)
            return grade

    def get_grade(self, grade_id: str) -> Grade | None:
        with self._lock:
            grade = self._grades.get(grade_id)
            return grade.model_copy(deep=True) if grade else None

    def list_grades(
        self,
        *,
        course_id: str | None = None,
        group_id: str | None = None,
        student_id: str | None = None,
    ) -> list[Grade]:
        with self._lock:
            return [
                g.model_copy(deep=True)
                for g in self._grades.values()
                if (course_id is None or g.course_id == course_id)
                and (group_id is None or g.group_id == group_id)
                and (student_id is None or g.student_id == student_id)
            ]

    def delete_grade(self, grade_id: str) -> bool:
        with self._lock:
            return self._grades.pop(grade_id, None) is not None


# ── Singleton Factory ────────────────────────────────────────

_store: GradeStore | None = None


def get_grade_store() -> GradeStore:
    """Return the process-wide store instance."""
    global _store
    if _store is None:
        _store = InMemoryGradeStore()
        logger.info("Using in-memory grade store")
    return _store


def reset_grade_store(store: GradeStore | None = None) -> GradeStore:
    """Replace the process-wide store (fresh in-memory one by default)."""
    global _store
    _store = store or InMemoryGradeStore()
    return _store
