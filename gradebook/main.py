from __future__ import annotations

import sys
from typing import List, Optional, Tuple

import typer

from gradebook import api, reporter
from gradebook.config import get_settings
from gradebook.errors import GradebookError
from gradebook.roster import populate
from gradebook.store import RecordStore
from gradebook.utils.logging import configure_logging

app = typer.Typer(help="In-memory gradebook CLI.")

REPORT_STYLES = ("plain", "table")


def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _resolve_style(style: Optional[str]) -> str:
    chosen = style or get_settings().report_style
    if chosen not in REPORT_STYLES:
        raise typer.BadParameter(
            f"Unknown style '{chosen}'. Available: {', '.join(REPORT_STYLES)}",
            param_hint="--style",
        )
    return chosen


def _parse_int(raw: str, what: str, entry: str, hint: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise typer.BadParameter(
            f"{what} must be an integer in '{entry}'", param_hint=hint
        ) from None


def _parse_student(entry: str) -> Tuple[str, int]:
    """Parse ``NAME:ID``; the name may itself contain colons."""
    name, sep, raw_id = entry.rpartition(":")
    if not sep or not name:
        raise typer.BadParameter(f"Expected NAME:ID, got '{entry}'", param_hint="--student")
    return name, _parse_int(raw_id, "ID", entry, "--student")


def _parse_grade(entry: str) -> Tuple[str, int, int]:
    """Parse ``COURSE:ID:GRADE``."""
    parts = entry.rsplit(":", 2)
    if len(parts) != 3 or not parts[0]:
        raise typer.BadParameter(
            f"Expected COURSE:ID:GRADE, got '{entry}'", param_hint="--grade"
        )
    course, raw_id, raw_grade = parts
    return (
        course,
        _parse_int(raw_id, "ID", entry, "--grade"),
        _parse_int(raw_grade, "GRADE", entry, "--grade"),
    )


def _print_report(store: RecordStore, style: str) -> None:
    if style == "table":
        reporter.print_table(store)
    else:
        reporter.print_all(store)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log={settings.log_level} json={settings.log_json} | "
        f"style={settings.report_style} | roster students={settings.roster_students} "
        f"courses={settings.roster_courses} seed={settings.roster_seed}"
    )


@app.command()
def report(
    students: Optional[List[str]] = typer.Option(
        None,
        "--student",
        "-s",
        help="Student to add as NAME:ID (repeatable).",
    ),
    grades: Optional[List[str]] = typer.Option(
        None,
        "--grade",
        "-g",
        help="Grade to record as COURSE:ID:GRADE (repeatable, applied in order).",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Report style: plain or table (default from settings).",
    ),
    keep_going: bool = typer.Option(
        False,
        "--keep-going",
        help="Report rejected entries but still print the report and exit 0.",
    ),
) -> None:
    """
    Build a gradebook from the given students and grades and print it.
    """
    _setup()
    chosen_style = _resolve_style(style)
    student_entries = [_parse_student(entry) for entry in students or []]
    grade_entries = [_parse_grade(entry) for entry in grades or []]

    rejected = 0
    with RecordStore() as store:
        for name, student_id in student_entries:
            try:
                store.add_student(name, student_id)
            except GradebookError as exc:
                rejected += 1
                typer.echo(f"Rejected student {name}:{student_id}: {exc.message}", err=True)
        for course, student_id, grade in grade_entries:
            try:
                store.add_grade(course, student_id, grade)
            except GradebookError as exc:
                rejected += 1
                typer.echo(
                    f"Rejected grade {course}:{student_id}:{grade}: {exc.message}", err=True
                )

        if rejected and not keep_going:
            raise typer.Exit(code=1)
        _print_report(store, chosen_style)


@app.command()
def roster(
    students: Optional[int] = typer.Option(
        None,
        "--students",
        "-n",
        min=0,
        help="Number of students (default from settings).",
    ),
    courses: Optional[int] = typer.Option(
        None,
        "--courses",
        "-c",
        min=0,
        help="Courses per student (default from settings).",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Deterministic RNG seed (default from settings).",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Report style: plain or table (default from settings).",
    ),
) -> None:
    """
    Generate a deterministic sample roster and print it.
    """
    _setup()
    settings = get_settings()
    chosen_style = _resolve_style(style)
    with RecordStore() as store:
        populate(
            store,
            students=settings.roster_students if students is None else students,
            courses=settings.roster_courses if courses is None else courses,
            seed=settings.roster_seed if seed is None else seed,
        )
        _print_report(store, chosen_style)


@app.command()
def demo() -> None:
    """
    Run the reference scenario through the status-code API.
    """
    _setup()
    store = api.grades_init()
    try:
        steps = [
            ("add_student Alice 1", api.grades_add_student(store, "Alice", 1)),
            ("add_student Bob 2", api.grades_add_student(store, "Bob", 2)),
            ("add_grade Math 1 85", api.grades_add_grade(store, "Math", 1, 85)),
            ("add_grade Math 1 90", api.grades_add_grade(store, "Math", 1, 90)),
        ]
        for label, outcome in steps:
            typer.echo(f"{label} -> {outcome.name}")
        for student_id in (1, 2, 99):
            average, name = api.grades_calc_avg(store, student_id)
            typer.echo(f"calc_avg {student_id} -> ({average:.2f}, {name})")
        api.grades_print_all(store)
    finally:
        api.grades_destroy(store)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
