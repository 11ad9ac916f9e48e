"""Demo data for local development.

Creates four groups, four courses (three public) and a cohort of synthetic
students with roughly normal grades.  Enabled with ``SEED_DEMO_DATA=true``.
"""

from __future__ import annotations

import logging
import random

from models.data import Course, Grade, Group
from services.grade_store import GradeStore, new_id

logger = logging.getLogger(__name__)

GROUP_NAMES = ["Group A", "Group B", "Group C", "Group D"]

COURSES = [
    {"name": "Mathematics", "description": "Advanced mathematics course", "is_public": True},
    {"name": "Physics", "description": "Introduction to physics", "is_public": True},
    {"name": "Computer Science", "description": "Programming fundamentals", "is_public": True},
    {"name": "History", "description": "World history course", "is_public": False},
]

STUDENT_COUNT = 50


def _synthetic_grade(rng: random.Random) -> float:
    """Mean ~75, spread ~15: sum of four uniforms, clamped, one decimal."""
    value = 75 + (rng.random() + rng.random() + rng.random() + rng.random() - 2) * 15
    value = min(100.0, max(0.0, value))
    return round(value, 1)


def seed_demo_data(store: GradeStore, rng: random.Random | None = None) -> dict[str, int]:
    """Populate ``store`` with demo groups, courses and grades.

    Each student takes 2-3 random courses and lands in a random group per
    course.  Returns counts of what was created.
    """
    rng = rng or random.Random()

    groups = []
    for name in GROUP_NAMES:
        group = Group(id=new_id("grp"), name=name, description=f"Students in {name}")
        groups.append(store.save_group(group))

    courses = []
    for data in COURSES:
        course = Course(
            id=new_id("crs"),
            accepting_grades=True,
            group_ids=[g.id for g in groups],
            **data,
        )
        courses.append(store.save_course(course))

    grade_count = 0
    for i in range(1, STUDENT_COUNT + 1):
        student_id = f"student-{i:03d}"
        for course in rng.sample(courses, rng.randint(2, 3)):
            group = rng.choice(groups)
            store.save_grade(Grade(
                id=new_id("grd"),
                value=_synthetic_grade(rng),
                student_id=student_id,
                course_id=course.id,
                group_id=group.id,
            ))
            grade_count += 1

    logger.info(
        "Seeded demo data: %d groups, %d courses, %d grades",
        len(groups), len(courses), grade_count,
    )
    return {"groups": len(groups), "courses": len(courses), "grades": grade_count}
