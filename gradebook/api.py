"""
Status-code API over ``RecordStore``.

Mirrors the handle-and-return-code surface of the original grades library:
mutators return an ``Outcome``, ``grades_calc_avg`` returns ``AVG_FAIL`` with
no name on failure, and a ``None`` store is treated as an invalid handle.
Nothing here raises for a ``GradebookError``; failures are logged with their
error code instead.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TextIO, Tuple

from gradebook import reporter
from gradebook.errors import GradebookError, InvalidHandleError
from gradebook.store import RecordStore
from gradebook.utils.logging import get_logger

log = get_logger(__name__)

AVG_FAIL = -1.0


class Outcome(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def _failed(operation: str, error: GradebookError) -> Outcome:
    log.warning(
        f"{operation} failed: {error.message}",
        extra={"operation": operation, "error_code": error.error_code},
    )
    return Outcome.FAILURE


def _require(store: Optional[RecordStore]) -> RecordStore:
    if store is None or store.closed:
        raise InvalidHandleError("Invalid record store handle")
    return store


def grades_init() -> Optional[RecordStore]:
    return RecordStore()


def grades_destroy(store: Optional[RecordStore]) -> None:
    if store is not None and not store.closed:
        store.destroy()


def grades_add_student(store: Optional[RecordStore], name: str, student_id: int) -> Outcome:
    try:
        _require(store).add_student(name, student_id)
    except GradebookError as exc:
        return _failed("add_student", exc)
    return Outcome.SUCCESS


def grades_add_grade(
    store: Optional[RecordStore], name: str, student_id: int, grade: int
) -> Outcome:
    try:
        _require(store).add_grade(name, student_id, grade)
    except GradebookError as exc:
        return _failed("add_grade", exc)
    return Outcome.SUCCESS


def grades_calc_avg(
    store: Optional[RecordStore], student_id: int
) -> Tuple[float, Optional[str]]:
    """
    Average of the student with ``student_id`` and a copy of their name.

    Returns ``(AVG_FAIL, None)`` for an invalid store or an unknown id.
    """
    try:
        result = _require(store).calc_average(student_id)
    except GradebookError as exc:
        _failed("calc_avg", exc)
        return AVG_FAIL, None
    return result.average, result.name


def grades_print_student(
    store: Optional[RecordStore], student_id: int, sink: Optional[TextIO] = None
) -> Outcome:
    try:
        reporter.print_student(_require(store), student_id, sink)
    except GradebookError as exc:
        return _failed("print_student", exc)
    return Outcome.SUCCESS


def grades_print_all(store: Optional[RecordStore], sink: Optional[TextIO] = None) -> Outcome:
    try:
        reporter.print_all(_require(store), sink)
    except GradebookError as exc:
        return _failed("print_all", exc)
    return Outcome.SUCCESS


__all__ = [
    "AVG_FAIL",
    "Outcome",
    "grades_add_grade",
    "grades_add_student",
    "grades_calc_avg",
    "grades_destroy",
    "grades_init",
    "grades_print_all",
    "grades_print_student",
]
