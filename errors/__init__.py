"""Custom exception hierarchy for the gradebook service."""

from errors.exceptions import (
    EntityNotFoundError,
    ForbiddenActionError,
    GradebookError,
    GradeValidationError,
    InvalidArgumentError,
    InvalidDomainError,
    StatisticsError,
)

__all__ = [
    "EntityNotFoundError",
    "ForbiddenActionError",
    "GradebookError",
    "GradeValidationError",
    "InvalidArgumentError",
    "InvalidDomainError",
    "StatisticsError",
]
