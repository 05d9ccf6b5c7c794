"""
Deterministic sample roster generation.

Fills a ``RecordStore`` with pseudo-random students and grades from a seeded
``random.Random`` so demos and tests get the same roster for the same seed.
"""

from __future__ import annotations

import random

from gradebook.store import MAX_GRADE, MIN_GRADE, RecordStore
from gradebook.utils.logging import get_logger

log = get_logger(__name__)

FIRST_NAMES = ["Alice", "Bob", "Carol", "Dana", "Eli", "Farah", "Gil", "Hana", "Ido", "Yael"]
COURSE_NAMES = [
    "Algebra",
    "Biology",
    "Chemistry",
    "Data-Structures",
    "English",
    "French",
    "Geometry",
    "History",
    "Physics",
    "Statistics",
]
FIRST_ID = 100


def populate(store: RecordStore, students: int, courses: int, seed: int) -> int:
    """
    Add ``students`` students with up to ``courses`` graded courses each.

    Ids are consecutive from ``FIRST_ID`` and skipped when already taken;
    course names are drawn without replacement per student.
    Returns the number of grades recorded.
    """
    rng = random.Random(seed)
    per_student = min(courses, len(COURSE_NAMES))
    grades_added = 0
    student_id = FIRST_ID

    for _ in range(students):
        while student_id in store:
            student_id += 1
        store.add_student(rng.choice(FIRST_NAMES), student_id)
        for course in rng.sample(COURSE_NAMES, per_student):
            store.add_grade(course, student_id, rng.randint(MIN_GRADE, MAX_GRADE))
            grades_added += 1
        student_id += 1

    log.info(
        "Roster generated",
        extra={"students": students, "grades": grades_added, "seed": seed},
    )
    return grades_added


__all__ = ["populate", "COURSE_NAMES", "FIRST_ID", "FIRST_NAMES"]
