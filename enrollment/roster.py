"""An ordered roster of students enrolled in a course."""

from __future__ import annotations

from typing import Iterator

from .student import Student


class StudentRoster:
    """Students kept in the order they were added."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def add(self, student: Student) -> None:
        """Append a student to the end of the roster."""
        self._students.append(student)

    def remove(self, student_id: str) -> Student:
        """Remove and return the first student with this ID; raise KeyError if absent."""
        for position, student in enumerate(self._students):
            if student.student_id == student_id:
                return self._students.pop(position)
        raise KeyError(student_id)

    def find(self, student_id: str) -> Student | None:
        """Return the first student with this ID, or None."""
        return next(
            (s for s in self._students if s.student_id == student_id), None
        )

    def is_empty(self) -> bool:
        return not self._students

    def to_list(self) -> list[Student]:
        """Return a copy of the students in roster order."""
        return list(self._students)

    def format_lines(self) -> list[str]:
        """Return the numbered listing of the roster."""
        if not self._students:
            return ["    No students enrolled."]
        return [
            f"    {number}. {student}"
            for number, student in enumerate(self._students, start=1)
        ]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __contains__(self, student_id: object) -> bool:
        return any(s.student_id == student_id for s in self._students)