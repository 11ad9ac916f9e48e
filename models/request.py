"""API request models.

Range and presence rules are enforced by the guard functions in
``services.validation``; these models only describe the payload shape.
"""

from __future__ import annotations

from models.base import CamelModel


class CreateCourseRequest(CamelModel):
    """POST /api/courses — request body."""

    name: str
    description: str = ""
    is_public: bool = False
    accepting_grades: bool = True


class UpdateCourseRequest(CamelModel):
    """PATCH /api/courses/{course_id} — only the fields sent are applied."""

    name: str | None = None
    description: str | None = None
    is_public: bool | None = None
    accepting_grades: bool | None = None


class CreateGroupRequest(CamelModel):
    """POST /api/groups — request body."""

    name: str
    description: str = ""


class UpdateGroupRequest(CamelModel):
    """PATCH /api/groups/{group_id} — request body."""

    name: str | None = None
    description: str | None = None


class CreateGradeRequest(CamelModel):
    """POST /api/grades — request body."""

    value: float
    student_id: str
    course_id: str
    group_id: str | None = None


class UpdateGradeRequest(CamelModel):
    """PATCH /api/grades/{grade_id} — request body.

    ``groupId: null`` clears the group; omitting ``groupId`` leaves it as is.
    Use ``model_fields_set`` to tell the two apart.
    """

    value: float | None = None
    group_id: str | None = None
