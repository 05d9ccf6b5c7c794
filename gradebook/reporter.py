from __future__ import annotations

import sys
from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table

from gradebook.store import RecordStore


def print_student(store: RecordStore, student_id: int, sink: Optional[TextIO] = None) -> None:
    """
    Write the rendered line for one student, newline-terminated.

    Raises StudentNotFoundError before anything is written.
    """
    line = store.render_student(student_id)
    out = sink if sink is not None else sys.stdout
    out.write(f"{line}\n")


def print_all(store: RecordStore, sink: Optional[TextIO] = None) -> None:
    """Write every student line in insertion order."""
    out = sink if sink is not None else sys.stdout
    out.write(store.render_all())


def print_table(store: RecordStore, console: Optional[Console] = None) -> None:
    """
    Render the store as a rich table.

    Students keep insertion order; the average column shows 0.00 for a
    student without courses.
    """
    console = console or Console()

    if len(store) == 0:
        console.print("[yellow]No students to display.[/yellow]")
        return

    table = Table(
        title="Gradebook",
        box=box.ROUNDED,
        caption="Students and courses in insertion order",
    )

    table.add_column("Student", style="cyan", no_wrap=True)
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Courses", justify="right", style="blue")
    table.add_column("Average", justify="right", style="bold green")
    table.add_column("Grades", style="white")

    for student_id in store.student_ids():
        student = store.get_student(student_id)
        try:
            result = store.calc_average(student_id)
            grades = ", ".join(f"{name} {grade}" for name, grade in student.courses())
            table.add_row(
                result.name,
                str(student_id),
                str(student.course_count()),
                f"{result.average:.2f}",
                grades or "-",
            )
        finally:
            student.destroy()

    console.print(table)


__all__ = ["print_all", "print_student", "print_table"]
