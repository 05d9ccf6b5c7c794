"""
Domain package for the gradebook.

Exports the record model: immutable courses and the students that own them.
Keep this package focused on data definitions and their ownership rules.
"""

from gradebook.domain.models import Course, Student

__all__ = [
    "Course",
    "Student",
]
