"""Courses and the students enrolled in them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .roster import StudentRoster
from .student import Student


class EnrollmentError(Exception):
    """A student could not be enrolled in a course."""


class CourseFullError(EnrollmentError):
    """The course has no free places."""


class AlreadyEnrolledError(EnrollmentError):
    """The student is already enrolled in the course."""


@dataclass(eq=False)
class Course:
    """A course with a fixed capacity and its own roster."""

    code: str = ""
    name: str = ""
    capacity: int = 0
    roster: StudentRoster = field(default_factory=StudentRoster, repr=False)

    def enroll(self, student: Student) -> None:
        """Enroll a student; raise if the course is full or they are already in it."""
        if self.is_full():
            raise CourseFullError(f"Course {self.code} is already full.")
        if student.student_id in self.roster:
            raise AlreadyEnrolledError(
                f"Student {student.student_id} already enrolled in {self.code}"
            )
        self.roster.add(student)

    def drop(self, student_id: str) -> Student:
        """Remove a student from the course; raise KeyError if not enrolled."""
        return self.roster.remove(student_id)

    def is_full(self) -> bool:
        return len(self.roster) >= self.capacity

    def enrolled_students(self) -> list[Student]:
        return self.roster.to_list()

    def info_lines(self, show_enrolled: bool = True) -> list[str]:
        """Return the course description, optionally with the enrolled count."""
        lines = [
            f"Course Code: {self.code}",
            f"Course Name: {self.name}",
            f"Capacity: {self.capacity}",
        ]
        if show_enrolled:
            lines.append(f"Enrolled: {len(self.roster)}")
        return lines

    def roster_lines(self) -> list[str]:
        """Return a heading followed by the numbered list of students."""
        return [
            f"Students enrolled in {self.code} - {self.name}:",
            *self.roster.format_lines(),
        ]

    def __str__(self) -> str:
        return (
            f"Code: {self.code}, Name: {self.name}, "
            f"Capacity: {self.capacity}, Enrolled: {len(self.roster)}"
        )