"""
Record store: the public surface of the gradebook.

A ``RecordStore`` owns an ``OrderedCollection`` of students; each student owns
its courses. Every lookup is a linear scan in insertion order, and every
insertion stores a clone, so callers never share state with the store.

Usage:
    from gradebook.store import RecordStore

    with RecordStore() as store:
        store.add_student("Alice", 1)
        store.add_grade("Math", 1, 85)
        print(store.render_student(1))      # Alice 1: Math 85
        print(store.calc_average(1))        # AverageResult(average=85.0, name='Alice')
"""

from __future__ import annotations

from types import TracebackType
from typing import List, NamedTuple, Optional, Type

from gradebook.collections.ordered import OrderedCollection, Position
from gradebook.domain.models import (
    Course,
    Student,
    clone_student,
    destroy_course,
    destroy_student,
    student_id_matches,
)
from gradebook.errors import (
    DuplicateCourseError,
    DuplicateIdError,
    GradebookError,
    InvalidGradeError,
    InvalidHandleError,
    StudentNotFoundError,
)
from gradebook.utils.logging import get_logger

log = get_logger(__name__)

MIN_GRADE = 0
MAX_GRADE = 100


class AverageResult(NamedTuple):
    """Average grade of a student together with an owned copy of their name."""

    average: float
    name: str


def _reject(error: GradebookError) -> GradebookError:
    log.debug(error.message, extra={"error_code": error.error_code, **error.details})
    return error


class RecordStore:
    """
    In-memory store of students and their course grades.

    Not thread-safe: guard a shared instance with one external lock.
    """

    def __init__(self) -> None:
        self._students: Optional[OrderedCollection[Student]] = OrderedCollection(
            clone_fn=clone_student, destroy_fn=destroy_student
        )

    # --- lifecycle ---

    def destroy(self) -> None:
        """Destroy every student and their courses; the store is unusable afterwards."""
        students = self._require_open()
        count = students.size()
        students.destroy()
        self._students = None
        log.debug("Store destroyed", extra={"students": count})

    @property
    def closed(self) -> bool:
        return self._students is None

    def __enter__(self) -> "RecordStore":
        self._require_open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self.closed:
            self.destroy()

    # --- mutation ---

    def add_student(self, name: str, student_id: int) -> None:
        """
        Add a student with no courses.

        Raises
        ------
        AllocationFailedError
            ``name`` is not a string or ``student_id`` is not an integer.
        DuplicateIdError
            A student with ``student_id`` already exists; the store is unchanged.
        """
        students = self._require_open()
        student = Student.create(name, student_id)
        try:
            if students.find(student_id, student_id_matches) is not None:
                raise _reject(
                    DuplicateIdError(
                        f"Student id {student_id} already exists",
                        details={"student_id": student_id},
                    )
                )
            students.push_back(student)
        finally:
            student.destroy()
        log.debug("Student added", extra={"student_id": student_id})

    def add_grade(self, course_name: str, student_id: int, grade: int) -> None:
        """
        Record ``grade`` for ``course_name`` on the student with ``student_id``.

        Checks run in order: grade type and range, student existence, course
        uniqueness.
        """
        students = self._require_open()
        if isinstance(grade, bool) or not isinstance(grade, int):
            raise _reject(
                InvalidGradeError(
                    f"Grade must be an integer, got {type(grade).__name__}",
                    details={
                        "student_id": student_id,
                        "course": course_name,
                        "grade": repr(grade),
                    },
                )
            )
        if not MIN_GRADE <= grade <= MAX_GRADE:
            raise _reject(
                InvalidGradeError(
                    f"Grade {grade} is outside {MIN_GRADE}..{MAX_GRADE}",
                    details={"student_id": student_id, "course": course_name, "grade": grade},
                )
            )

        student = students.get(self._locate(student_id))
        if student.find_course(course_name) is not None:
            raise _reject(
                DuplicateCourseError(
                    f"Student {student_id} already has a grade for {course_name!r}",
                    details={"student_id": student_id, "course": course_name},
                )
            )

        course = Course.create(course_name, grade)
        try:
            student.add_course(course)
        finally:
            destroy_course(course)
        log.debug(
            "Grade added",
            extra={"student_id": student_id, "course": course_name, "grade": grade},
        )

    # --- queries ---

    def find_student(self, student_id: int) -> Optional[Position[Student]]:
        """
        Position of the student with ``student_id``, or None.

        The position is opaque and only meaningful to this store; use
        ``get_student`` for a caller-owned copy or ``in`` for membership.
        """
        return self._require_open().find(student_id, student_id_matches)

    def get_student(self, student_id: int) -> Student:
        """Deep copy of the stored student; the caller owns the copy."""
        students = self._require_open()
        return clone_student(students.get(self._locate(student_id)))

    def calc_average(self, student_id: int) -> AverageResult:
        """
        Average grade of the student with ``student_id``.

        A student without courses averages exactly 0.0.
        """
        students = self._require_open()
        student = students.get(self._locate(student_id))
        if student.course_count() == 0:
            average = 0.0
        else:
            average = student.average()
        return AverageResult(average=average, name=student.clone_name())

    def render_student(self, student_id: int) -> str:
        """
        Render one student as ``NAME ID: COURSE GRADE, COURSE GRADE``.

        Courses appear in insertion order. A student without courses renders
        as ``NAME ID:``.
        """
        students = self._require_open()
        return self._render(students.get(self._locate(student_id)))

    def render_all(self) -> str:
        """Render every student, one newline-terminated line each, in insertion order."""
        students = self._require_open()
        return "".join(f"{self._render(student)}\n" for student in students)

    def student_ids(self) -> List[int]:
        return [student.id for student in self._require_open()]

    def __len__(self) -> int:
        return self._require_open().size()

    def __contains__(self, student_id: object) -> bool:
        return self._require_open().find(student_id, student_id_matches) is not None

    def __repr__(self) -> str:
        if self.closed:
            return "RecordStore(closed)"
        return f"RecordStore(students={len(self)})"

    # --- internals ---

    def _require_open(self) -> OrderedCollection[Student]:
        if self._students is None:
            raise InvalidHandleError("Record store has been destroyed")
        return self._students

    def _locate(self, student_id: int) -> Position[Student]:
        position = self.find_student(student_id)
        if position is None:
            raise _reject(
                StudentNotFoundError(
                    f"No student with id {student_id}",
                    details={"student_id": student_id},
                )
            )
        return position

    @staticmethod
    def _render(student: Student) -> str:
        header = f"{student.name} {student.id}:"
        courses = ", ".join(f"{name} {grade}" for name, grade in student.courses())
        return f"{header} {courses}" if courses else header


__all__ = ["AverageResult", "MAX_GRADE", "MIN_GRADE", "RecordStore"]
