"""Shared pytest fixtures.

Provides:
- ``store``: fresh InMemoryGradeStore installed as the process-wide store
- ``course_service`` / ``grade_service``: services bound to ``store``
- ``admin`` / ``student``: CurrentUser instances
- ``admin_headers`` / ``student_headers``: gateway identity headers
"""

from __future__ import annotations

import pytest

from models.data import CurrentUser, Role
from services.course_service import CourseService
from services.grade_service import GradeService
from services.grade_store import InMemoryGradeStore, reset_grade_store


@pytest.fixture(autouse=True)
def store():
    """Fresh store per test — also swapped in for the API dependencies."""
    fresh = InMemoryGradeStore()
    reset_grade_store(fresh)
    yield fresh
    reset_grade_store()


@pytest.fixture
def course_service(store) -> CourseService:
    return CourseService(store)


@pytest.fixture
def grade_service(store) -> GradeService:
    return GradeService(store)


@pytest.fixture
def admin() -> CurrentUser:
    return CurrentUser(user_id="admin-001", role=Role.ADMIN)


@pytest.fixture
def student() -> CurrentUser:
    return CurrentUser(user_id="student-001", role=Role.STUDENT)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-User-Id": "admin-001", "X-User-Role": "admin"}


@pytest.fixture
def student_headers() -> dict[str, str]:
    return {"X-User-Id": "student-001", "X-User-Role": "student"}
