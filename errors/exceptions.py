"""Domain-specific exceptions for the gradebook service.

Two families live here:

- ``StatisticsError`` and its subclasses are raised by the pure statistics
  engine in ``tools.stats_tools``.  They signal programmer error (a bad
  argument) or a distribution that cannot be described by a curve.
- ``GradebookError`` and its subclasses are raised by the service layer so
  the API can answer with the right HTTP status.
"""

from __future__ import annotations


class StatisticsError(Exception):
    """Base class for statistics engine errors."""


class InvalidArgumentError(StatisticsError):
    """An argument is outside the accepted range (e.g. ``sample_count <= 0``)."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {message}")


class InvalidDomainError(StatisticsError):
    """The distribution is degenerate and no finite-width curve exists.

    Raised for a zero standard deviation, or when the three-sigma window
    does not intersect the grade domain.
    """


class GradebookError(Exception):
    """Base class for service-layer errors."""

    def __init__(self, message: str, entity: str = "") -> None:
        self.entity = entity
        super().__init__(message)


class EntityNotFoundError(GradebookError):
    """A referenced course, group or grade does not exist."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found", entity=entity_id)


class ForbiddenActionError(GradebookError):
    """The action is not allowed in the entity's current state.

    Examples: a closed course, a private course's distribution, or a
    student deleting someone else's grade.
    """


class GradeValidationError(GradebookError):
    """Input failed one or more validation guards."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid input")
