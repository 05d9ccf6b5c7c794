"""
Exceptions raised by the gradebook core.

Each error carries a stable ``error_code`` so callers that need a status-code
view (see ``gradebook.api``) or structured logs can branch on it without
matching on exception types.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GradebookError(Exception):
    """Base exception for all gradebook errors."""

    default_code = "gradebook_error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}


class InvalidHandleError(GradebookError):
    """Raised when operating on a missing or already destroyed store."""

    default_code = "invalid_handle"


class DuplicateIdError(GradebookError):
    """Raised when a student id is already present in the store."""

    default_code = "duplicate_id"


class DuplicateCourseError(GradebookError):
    """Raised when a student already has a course with the same name."""

    default_code = "duplicate_course"


class InvalidGradeError(GradebookError):
    """Raised when a grade falls outside the accepted range."""

    default_code = "invalid_grade"


class StudentNotFoundError(GradebookError):
    """Raised when no student matches the requested id."""

    default_code = "student_not_found"


class AllocationFailedError(GradebookError):
    """Raised when an owned copy of a value cannot be produced."""

    default_code = "allocation_failed"


class CloneFailedError(AllocationFailedError):
    """Raised when a collection element could not be cloned."""

    default_code = "clone_failed"


__all__ = [
    "GradebookError",
    "InvalidHandleError",
    "DuplicateIdError",
    "DuplicateCourseError",
    "InvalidGradeError",
    "StudentNotFoundError",
    "AllocationFailedError",
    "CloneFailedError",
]
