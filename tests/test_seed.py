"""Tests for demo data seeding."""

from __future__ import annotations

import random

from services.grade_service import GradeService
from services.grade_store import InMemoryGradeStore
from services.seed import COURSES, GROUP_NAMES, STUDENT_COUNT, seed_demo_data


def test_seed_counts():
    store = InMemoryGradeStore()
    counts = seed_demo_data(store, random.Random(7))

    assert counts["groups"] == len(GROUP_NAMES)
    assert counts["courses"] == len(COURSES)
    assert 2 * STUDENT_COUNT <= counts["grades"] <= 3 * STUDENT_COUNT
    assert len(store.list_grades()) == counts["grades"]


def test_seed_grades_in_range():
    store = InMemoryGradeStore()
    seed_demo_data(store, random.Random(7))
    values = [g.value for g in store.list_grades()]
    assert all(0 <= v <= 100 for v in values)
    assert all(round(v, 1) == v for v in values)


def test_seed_is_deterministic_for_a_seed():
    a, b = InMemoryGradeStore(), InMemoryGradeStore()
    seed_demo_data(a, random.Random(42))
    seed_demo_data(b, random.Random(42))
    assert [g.value for g in a.list_grades()] == [g.value for g in b.list_grades()]


def test_seeded_public_course_has_distribution():
    store = InMemoryGradeStore()
    seed_demo_data(store, random.Random(3))
    service = GradeService(store)

    public = [c for c in store.list_courses() if c.is_public]
    assert len(public) == 3
    for course in public:
        result = service.course_distribution(course.id)
        assert sum(result.overall.distribution.values()) == result.total_grades
        assert set(result.groups) <= set(GROUP_NAMES)
