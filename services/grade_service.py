"""Grade recording and grade-distribution reporting.

Mutations enforce the course state rules (a course must be accepting
grades) and ownership on delete.  Reporting fetches a course's grades,
hands the numbers to :mod:`tools.stats_tools`, and wraps the result in the
response models the charts consume.  Distribution endpoints are only served
for public courses.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from config.settings import get_settings
from errors.exceptions import (
    EntityNotFoundError,
    ForbiddenActionError,
    InvalidArgumentError,
    InvalidDomainError,
)
from models.data import Course, CurrentUser, Grade
from models.request import CreateGradeRequest, UpdateGradeRequest
from models.stats import (
    CourseDistributionResponse,
    DistributionStats,
    GroupDistributionResponse,
    NormalCurveResponse,
)
from services.grade_store import GradeStore, get_grade_store, new_id
from services.validation import validate_grade_update, validate_new_grade
from tools.stats_tools import compute_summary, grouped_summary, normal_curve

logger = logging.getLogger(__name__)


class GradeService:
    """Grade CRUD plus distribution statistics for a course."""

    def __init__(self, store: GradeStore) -> None:
        self._store = store

    # ── Lookups ──────────────────────────────────────────────

    def _course(self, course_id: str) -> Course:
        course = self._store.get_course(course_id)
        if course is None:
            raise EntityNotFoundError("Course", course_id)
        return course

    def _public_course(self, course_id: str) -> Course:
        course = self._course(course_id)
        if not course.is_public:
            logger.warning("Distribution requested for private course %s", course_id)
            raise ForbiddenActionError(f"Course {course.name} is not public", entity=course_id)
        return course

    def _ensure_accepting(self, course: Course) -> None:
        if not course.accepting_grades:
            logger.warning("Course %s rejected a grade change: not accepting grades", course.id)
            raise ForbiddenActionError(
                f"Course {course.name} is not accepting grades", entity=course.id
            )

    def _ensure_group(self, group_id: str) -> None:
        if self._store.get_group(group_id) is None:
            raise EntityNotFoundError("Group", group_id)

    # ── CRUD ─────────────────────────────────────────────────

    def create_grade(self, req: CreateGradeRequest) -> Grade:
        validate_new_grade(req).raise_for_errors()
        course = self._course(req.course_id)
        self._ensure_accepting(course)
        if req.group_id is not None:
            self._ensure_group(req.group_id)

        grade = Grade(
            id=new_id("grd"),
            value=req.value,
            student_id=req.student_id,
            course_id=course.id,
            group_id=req.group_id,
        )
        self._store.save_grade(grade)
        logger.info(
            "Recorded grade %s: student=%s course=%s group=%s",
            grade.id, grade.student_id, grade.course_id, grade.group_id,
        )
        return grade

    def list_grades(self) -> list[Grade]:
        return self._store.list_grades()

    def get_grade(self, grade_id: str) -> Grade:
        grade = self._store.get_grade(grade_id)
        if grade is None:
            raise EntityNotFoundError("Grade", grade_id)
        return grade

    def grades_for_student(self, student_id: str) -> list[Grade]:
        return self._store.list_grades(student_id=student_id)

    def grades_for_course(self, course_id: str) -> list[Grade]:
        self._course(course_id)
        return self._store.list_grades(course_id=course_id)

    def update_grade(self, grade_id: str, req: UpdateGradeRequest) -> Grade:
        validate_grade_update(req).raise_for_errors()
        grade = self.get_grade(grade_id)
        self._ensure_accepting(self._course(grade.course_id))

        changes: dict = {}
        if "value" in req.model_fields_set:
            changes["value"] = req.value
        if "group_id" in req.model_fields_set:
            if req.group_id is not None:
                self._ensure_group(req.group_id)
            changes["group_id"] = req.group_id

        updated = grade.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        self._store.save_grade(updated)
        logger.info("Updated grade %s: %s", grade_id, sorted(changes))
        return updated

    def delete_grade(self, grade_id: str, user: CurrentUser) -> None:
        grade = self.get_grade(grade_id)
        if not user.is_admin and grade.student_id != user.user_id:
            logger.warning("User %s tried to delete grade %s of another student", user.user_id, grade_id)
            raise ForbiddenActionError("You can only delete your own grades", entity=grade_id)
        self._ensure_accepting(self._course(grade.course_id))
        self._store.delete_grade(grade_id)
        logger.info("Deleted grade %s by %s", grade_id, user.user_id)

    # ── Distributions ────────────────────────────────────────

    def course_distribution(self, course_id: str) -> CourseDistributionResponse:
        """Overall and per-group statistics for a public course.

        Groups are keyed by group name; grades without a group fall under
        ``"No Group"``.
        """
        course = self._public_course(course_id)
        grades = self._store.list_grades(course_id=course_id)
        bins = get_settings().histogram_bin_count

        names: dict[str, str | None] = {}
        for grade in grades:
            if grade.group_id is not None and grade.group_id not in names:
                group = self._store.get_group(grade.group_id)
                names[grade.group_id] = group.name if group else None

        overall = compute_summary((g.value for g in grades), bins)
        per_group = grouped_summary(
            ((g.value, names.get(g.group_id) if g.group_id else None) for g in grades),
            bins,
        )
        return CourseDistributionResponse(
            course_name=course.name,
            overall=DistributionStats.from_summary(overall),
            groups={name: DistributionStats.from_summary(s) for name, s in per_group.items()},
            total_grades=overall.count,
        )

    def group_distribution(self, course_id: str, group_id: str) -> GroupDistributionResponse:
        course = self._public_course(course_id)
        group = self._store.get_group(group_id)
        if group is None:
            raise EntityNotFoundError("Group", group_id)

        grades = self._store.list_grades(course_id=course_id, group_id=group_id)
        summary = compute_summary((g.value for g in grades), get_settings().histogram_bin_count)
        return GroupDistributionResponse(
            course_name=course.name,
            group=group.name,
            stats=DistributionStats.from_summary(summary),
            total_grades=summary.count,
        )

    def course_normal_curve(self, course_id: str, points: int | None = None) -> NormalCurveResponse:
        """Normal curve fitted to a public course's grades.

        Raises:
            InvalidArgumentError: ``points`` outside ``1..normal_curve_max_points``.
            InvalidDomainError: the course has no grades, or every grade is equal.
        """
        settings = get_settings()
        if points is None:
            points = settings.normal_curve_points
        if points > settings.normal_curve_max_points:
            raise InvalidArgumentError(
                "points", f"must be at most {settings.normal_curve_max_points}, got {points}"
            )

        course = self._public_course(course_id)
        grades = self._store.list_grades(course_id=course_id)
        if not grades:
            raise InvalidDomainError(f"No grades found for course {course.name}")

        summary = compute_summary(g.value for g in grades)
        curve = normal_curve(
            summary.mean,
            summary.standard_deviation,
            points,
            domain_min=settings.grade_min,
            domain_max=settings.grade_max,
        )
        return NormalCurveResponse(
            course_name=course.name,
            mean=summary.mean,
            standard_deviation=summary.standard_deviation,
            normal_curve=curve,
        )


def get_grade_service() -> GradeService:
    """FastAPI dependency: a service bound to the process-wide store."""
    return GradeService(get_grade_store())
