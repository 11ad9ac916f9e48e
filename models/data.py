"""Internal data models — courses, groups, grades and the calling user.

These are the records held by ``services.grade_store`` and returned
(camelCase) by the API.  Relationships are plain id references; the store
resolves them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import Field

from models.base import CamelModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class Role(str, Enum):
    """Roles asserted by the upstream gateway."""

    ADMIN = "admin"
    STUDENT = "student"


class CurrentUser(CamelModel):
    """The caller of a request, as resolved from gateway headers."""

    user_id: str
    role: Role = Role.STUDENT

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


# ---------------------------------------------------------------------------
# Courses / groups
# ---------------------------------------------------------------------------

class Group(CamelModel):
    """A cohort label used to partition grades (e.g. "Group A")."""
    id: str
    name: str
    description: str = ""


class Course(CamelModel):
    """A course that grades are recorded against."""
    id: str
    name: str
    description: str = ""
    is_public: bool = False  # distribution visible without login
    accepting_grades: bool = True  # grades may be created / changed / removed
    group_ids: list[str] = Field(default_factory=list)


class PublicCourse(CamelModel):
    """The subset of a course exposed on public listings."""
    id: str
    name: str
    description: str = ""

    @classmethod
    def from_course(cls, course: Course) -> PublicCourse:
        return cls(id=course.id, name=course.name, description=course.description)


# ---------------------------------------------------------------------------
# Grades
# ---------------------------------------------------------------------------

class Grade(CamelModel):
    """A single recorded grade."""
    id: str
    value: float
    student_id: str
    course_id: str
    group_id: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
