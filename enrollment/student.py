"""Student records and the ordering used when listing them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(eq=False)
class Student:
    """A student, identified by their ID."""

    student_id: str = ""
    student_name: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.student_id == other.student_id

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        if self.student_name != other.student_name:
            return self.student_name < other.student_name
        return self.student_id < other.student_id

    def __hash__(self) -> int:
        return hash(self.student_id)

    def __str__(self) -> str:
        return f"ID: {self.student_id}, Name: {self.student_name}"


def selection_sort_students(
    students: Iterable[Student], sort_by_name: bool = True
) -> list[Student]:
    """Return the students sorted by name then ID, or by ID alone."""
    if sort_by_name:
        return sorted(students, key=lambda s: (s.student_name, s.student_id))
    return sorted(students, key=lambda s: s.student_id)