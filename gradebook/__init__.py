"""
Gradebook - an in-memory academic records store.

This package tracks students and the grades they received in named courses:

- A generic insertion-ordered container with injected clone/destroy behaviour
- Immutable courses owned by students, students owned by a record store
- Average computation and line-oriented reports in insertion order
- A status-code API mirroring the classic handle-based grades library

Every insertion stores a deep copy, and every accessor hands out copies or
plain values, so callers never alias state owned by the store.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from gradebook.collections.ordered import OrderedCollection, Position
from gradebook.config import Settings, get_settings
from gradebook.domain.models import Course, Student
from gradebook.errors import (
    AllocationFailedError,
    CloneFailedError,
    DuplicateCourseError,
    DuplicateIdError,
    GradebookError,
    InvalidGradeError,
    InvalidHandleError,
    StudentNotFoundError,
)
from gradebook.store import AverageResult, RecordStore
from gradebook.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Container
    "OrderedCollection",
    "Position",
    # Records
    "Course",
    "Student",
    "RecordStore",
    "AverageResult",
    # Errors
    "GradebookError",
    "InvalidHandleError",
    "DuplicateIdError",
    "DuplicateCourseError",
    "InvalidGradeError",
    "StudentNotFoundError",
    "AllocationFailedError",
    "CloneFailedError",
    # Logging
    "configure_logging",
    "get_logger",
]
