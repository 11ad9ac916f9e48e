"""Validation guards for grade, course and group input.

Guards are plain functions returning a :class:`ValidationResult`; the
service layer runs them before touching the store and raises on failure.
The statistics engine never validates; it trusts what was stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from config.settings import get_settings
from errors.exceptions import GradeValidationError
from models.request import CreateGradeRequest, UpdateGradeRequest


@dataclass
class ValidationResult:
    """Accumulated guard failures; empty ``errors`` means valid."""

    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.errors.extend(other.errors)
        return self

    def raise_for_errors(self) -> None:
        if self.errors:
            raise GradeValidationError(self.errors)


def check_grade_value(value: Any) -> ValidationResult:
    """A grade must be a finite number inside the configured range."""
    settings = get_settings()
    result = ValidationResult()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        result.errors.append(f"value must be a number, got {type(value).__name__}")
        return result
    if not math.isfinite(value):
        result.errors.append("value must be finite")
        return result
    if not settings.grade_min <= value <= settings.grade_max:
        result.errors.append(
            f"value must be between {settings.grade_min:g} and {settings.grade_max:g}, got {value:g}"
        )
    return result


def check_identifier(name: str, value: Any, required: bool = True) -> ValidationResult:
    """Ids must be non-blank strings; ``None`` is accepted when not required."""
    result = ValidationResult()
    if value is None:
        if required:
            result.errors.append(f"{name} is required")
        return result
    if not isinstance(value, str) or not value.strip():
        result.errors.append(f"{name} must be a non-empty string")
    return result


def check_name(name: str, value: Any) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(value, str) or not value.strip():
        result.errors.append(f"{name} must not be blank")
    return result


def validate_new_grade(req: CreateGradeRequest) -> ValidationResult:
    return (
        check_grade_value(req.value)
        .merge(check_identifier("studentId", req.student_id))
        .merge(check_identifier("courseId", req.course_id))
        .merge(check_identifier("groupId", req.group_id, required=False))
    )


def validate_grade_update(req: UpdateGradeRequest) -> ValidationResult:
    result = ValidationResult()
    if "value" in req.model_fields_set:
        result.merge(check_grade_value(req.value))
    if "group_id" in req.model_fields_set:
        result.merge(check_identifier("groupId", req.group_id, required=False))
    return result
