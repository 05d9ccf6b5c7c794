"""
Domain models for the gradebook.

``Course`` is an immutable value object validated by pydantic. ``Student``
owns its name and an ``OrderedCollection`` of courses; cloning a student deep
clones that collection so the copy shares nothing with the original.

The module-level helpers (``clone_course``, ``destroy_course``,
``clone_student``, ...) are the clone/destroy/compare callables handed to
``OrderedCollection`` and ``OrderedCollection.find``.
"""
from __future__ import annotations

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from gradebook.collections.ordered import OrderedCollection, Position
from gradebook.errors import AllocationFailedError, CloneFailedError


class Course(BaseModel):
    """
    A named course with the grade a student received in it.

    The grade range is enforced by the record store, not here.
    """

    name: str = Field(..., description="Course name, compared case-sensitively.")
    grade: int = Field(..., description="Numeric grade.")

    model_config = {
        "frozen": True,
        "strict": True,
    }

    @classmethod
    def create(cls, name: str, grade: int) -> "Course":
        try:
            return cls(name=name, grade=grade)
        except ValidationError as exc:
            raise AllocationFailedError(
                f"Could not create course {name!r}",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def matches_name(self, name: str) -> bool:
        return self.name == name


def clone_course(course: Course) -> Course:
    return course.model_copy()


def destroy_course(course: Course) -> None:
    """Courses hold no owned resources."""
    del course


def course_name_matches(course: Course, name: str) -> bool:
    return course.matches_name(name)


def _new_course_collection() -> OrderedCollection[Course]:
    return OrderedCollection(clone_fn=clone_course, destroy_fn=destroy_course)


class Student:
    """
    A student identified by ``id``, owning an ordered collection of courses.

    Course names are unique per student; callers check with ``find_course``
    before ``add_course``.
    """

    __slots__ = ("_name", "_id", "_courses")

    def __init__(self, name: str, student_id: int, courses: OrderedCollection[Course]) -> None:
        self._name = name
        self._id = student_id
        self._courses = courses

    @classmethod
    def create(cls, name: str, student_id: int) -> "Student":
        if not isinstance(name, str):
            raise AllocationFailedError(
                "Student name must be a string", details={"name": repr(name)}
            )
        if isinstance(student_id, bool) or not isinstance(student_id, int):
            raise AllocationFailedError(
                "Student id must be an integer", details={"id": repr(student_id)}
            )
        return cls(name, student_id, _new_course_collection())

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> int:
        return self._id

    def clone(self) -> "Student":
        """Deep copy: the course collection is cloned element by element."""
        return Student(self.clone_name(), self._id, self._courses.clone())

    def clone_name(self) -> str:
        return str(self._name)

    def destroy(self) -> None:
        self._courses.destroy()

    def find_course(self, name: str) -> Optional[Position[Course]]:
        return self._courses.find(name, course_name_matches)

    def add_course(self, course: Course) -> None:
        self._courses.push_back(course)

    def course_count(self) -> int:
        return self._courses.size()

    def courses(self) -> Iterator[Tuple[str, int]]:
        """Yield ``(name, grade)`` pairs in insertion order."""
        for course in self._courses:
            yield course.name, course.grade

    def average(self) -> float:
        """
        Arithmetic mean of the course grades.

        Undefined for a student without courses: raises ZeroDivisionError.
        The record store reports 0.0 for that case itself.
        """
        total = sum(course.grade for course in self._courses)
        return total / self._courses.size()

    def __repr__(self) -> str:
        return f"Student(name={self._name!r}, id={self._id}, courses={self._courses.size()})"


def clone_student(student: Student) -> Student:
    try:
        return student.clone()
    except CloneFailedError:
        raise
    except AllocationFailedError as exc:
        raise CloneFailedError(exc.message, details=exc.details) from exc


def destroy_student(student: Student) -> None:
    student.destroy()


def student_id_matches(student: Student, student_id: int) -> bool:
    return student.id == student_id


__all__ = [
    "Course",
    "Student",
    "clone_course",
    "clone_student",
    "course_name_matches",
    "destroy_course",
    "destroy_student",
    "student_id_matches",
]
