from __future__ import annotations

import io
import logging

import pytest

from gradebook import api
from gradebook.api import AVG_FAIL, Outcome

UNKNOWN_ID = 99


def test_reference_scenario_status_codes() -> None:
    store = api.grades_init()
    try:
        assert api.grades_add_student(store, "Alice", 1) is Outcome.SUCCESS
        assert api.grades_add_student(store, "Bob", 2) is Outcome.SUCCESS
        assert api.grades_add_grade(store, "Math", 1, 85) is Outcome.SUCCESS
        assert api.grades_add_grade(store, "Math", 1, 90) is Outcome.FAILURE
        assert api.grades_calc_avg(store, 1) == (85.0, "Alice")
        assert api.grades_calc_avg(store, 2) == (0.0, "Bob")
        assert api.grades_calc_avg(store, UNKNOWN_ID) == (AVG_FAIL, None)
    finally:
        api.grades_destroy(store)


def test_outcome_values_match_classic_codes() -> None:
    assert int(Outcome.SUCCESS) == 0
    assert int(Outcome.FAILURE) == 1
    assert AVG_FAIL == -1.0


def test_invalid_handle_fails_everywhere() -> None:
    sink = io.StringIO()

    assert api.grades_add_student(None, "Alice", 1) is Outcome.FAILURE
    assert api.grades_add_grade(None, "Math", 1, 50) is Outcome.FAILURE
    assert api.grades_calc_avg(None, 1) == (AVG_FAIL, None)
    assert api.grades_print_student(None, 1, sink) is Outcome.FAILURE
    assert api.grades_print_all(None, sink) is Outcome.FAILURE
    assert sink.getvalue() == ""
    api.grades_destroy(None)


def test_destroyed_store_is_an_invalid_handle() -> None:
    store = api.grades_init()
    api.grades_destroy(store)

    assert api.grades_add_student(store, "Alice", 1) is Outcome.FAILURE
    api.grades_destroy(store)


def test_add_grade_failures() -> None:
    store = api.grades_init()
    try:
        api.grades_add_student(store, "Alice", 1)
        assert api.grades_add_grade(store, "Math", 1, -1) is Outcome.FAILURE
        assert api.grades_add_grade(store, "Math", 1, 101) is Outcome.FAILURE
        assert api.grades_add_grade(store, "Math", UNKNOWN_ID, 50) is Outcome.FAILURE
        assert api.grades_add_grade(store, "Math", 1, 0) is Outcome.SUCCESS
        assert api.grades_add_grade(store, "Art", 1, 100) is Outcome.SUCCESS
    finally:
        api.grades_destroy(store)


def test_print_student_and_print_all_write_lines() -> None:
    store = api.grades_init()
    sink = io.StringIO()
    try:
        api.grades_add_student(store, "Alice", 1)
        api.grades_add_student(store, "Bob", 2)
        api.grades_add_grade(store, "Math", 1, 85)
        api.grades_add_grade(store, "Physics", 1, 70)

        assert api.grades_print_student(store, 1, sink) is Outcome.SUCCESS
        assert api.grades_print_student(store, UNKNOWN_ID, sink) is Outcome.FAILURE
        assert api.grades_print_all(store, sink) is Outcome.SUCCESS
    finally:
        api.grades_destroy(store)

    assert sink.getvalue() == (
        "Alice 1: Math 85, Physics 70\n"
        "Alice 1: Math 85, Physics 70\n"
        "Bob 2:\n"
    )


@pytest.mark.parametrize("grade", ["85", 85.5, True])
def test_add_grade_with_non_integer_grade_fails_without_raising(grade: object) -> None:
    store = api.grades_init()
    try:
        api.grades_add_student(store, "Alice", 1)

        assert api.grades_add_grade(store, "Math", 1, grade) is Outcome.FAILURE  # type: ignore[arg-type]
        assert api.grades_add_grade(store, "Math", UNKNOWN_ID, grade) is Outcome.FAILURE  # type: ignore[arg-type]
        assert api.grades_calc_avg(store, 1) == (0.0, "Alice")
    finally:
        api.grades_destroy(store)


def test_add_student_with_bool_id_fails_as_invalid_id(caplog: pytest.LogCaptureFixture) -> None:
    store = api.grades_init()
    try:
        api.grades_add_student(store, "Alice", 1)
        with caplog.at_level(logging.WARNING):
            assert api.grades_add_student(store, "Bob", True) is Outcome.FAILURE  # type: ignore[arg-type]
    finally:
        api.grades_destroy(store)

    codes = [getattr(r, "error_code", None) for r in caplog.records]
    assert codes == ["allocation_failed"]


def test_each_failure_is_logged_once_at_warning(caplog: pytest.LogCaptureFixture) -> None:
    store = api.grades_init()
    try:
        with caplog.at_level(logging.WARNING):
            assert api.grades_calc_avg(store, UNKNOWN_ID) == (AVG_FAIL, None)
    finally:
        api.grades_destroy(store)

    warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].name == "gradebook.api"
    assert getattr(warnings[0], "error_code") == "student_not_found"
