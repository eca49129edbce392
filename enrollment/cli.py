"""Interactive menu for managing courses and enrollments."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO

from .avl import CourseTree
from .course import Course, EnrollmentError
from .student import Student, selection_sort_students

_LEADING_INT = re.compile(r"[+-]?\d+")

_MENU = (
    "\n--- Student Enrollment System ---",
    "1. Add New Course",
    "2. Enroll Student in Course",
    "3. Drop Student from Course",
    "4. Display All Courses",
    "5. Display Enrolled Students for a Course",
    "6. Search for a Course",
    "7. Delete Course (Full AVL Remove)",
    "0. Exit",
)


def _parse_int(token: str) -> Optional[int]:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else None


class EnrollmentShell:
    """A line-oriented menu over a course database."""

    def __init__(
        self,
        database: Optional[CourseTree] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.database = database if database is not None else CourseTree()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_course,
            2: self.enroll_student,
            3: self.drop_student,
            4: self.display_all_courses,
            5: self.display_enrolled_students,
            6: self.search_course,
            7: self.delete_course,
        }

    # --- input and output helpers -------------------------------------

    def _say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _prompt(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_token(self) -> str:
        """Return the first word of the next non-blank line; discard the rest."""
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            words = line.split()
            if words:
                return words[0]

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _read_int(self, retry_message: str, positive: bool = False) -> int:
        while True:
            value = _parse_int(self._read_token())
            if value is not None and (not positive or value > 0):
                return value
            self._prompt(retry_message)

    def _find_course(self, code: str) -> Optional[Course]:
        course = self.database.search(code)
        if course is None:
            self._say(f"Error: Course {code} not found.")
        return course

    # --- menu -----------------------------------------------------------

    def run(self) -> None:
        """Show the menu and carry out choices until 0 or end of input."""
        try:
            while True:
                for line in _MENU:
                    self._say(line)
                self._prompt("Enter your choice: ")
                choice = self._read_int("Invalid input. Please enter a number: ")
                if choice == 0:
                    self._say("Exiting system.")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self._say("Invalid choice. Please try again.")
                else:
                    action()
        except EOFError:
            return

    # --- actions --------------------------------------------------------

    def add_course(self) -> None:
        self._prompt("Enter Course Code (e.g., CS101): ")
        code = self._read_token()
        self._prompt("Enter Course Name: ")
        name = self._read_line()
        self._prompt("Enter Course Capacity: ")
        capacity = self._read_int(
            "Invalid capacity. Please enter a positive number: ", positive=True
        )
        if code in self.database:
            self._say(f"Error: Course with code {code} already exists.")
            return
        self.database.insert(Course(code, name, capacity))
        self._say(f"Course {code} added successfully.")

    def enroll_student(self) -> None:
        self._prompt("Enter Course Code to enroll student in: ")
        code = self._read_token()
        course = self._find_course(code)
        if course is None:
            return
        if course.is_full():
            self._say(f"Error: Course {code} is already full.")
            return
        self._prompt("Enter Student ID: ")
        student_id = self._read_token()
        self._prompt("Enter Student Name: ")
        student_name = self._read_line()
        if student_id in course.roster:
            self._say(
                f"Error: Student {student_id} is already enrolled in this course."
            )
            return
        try:
            course.enroll(Student(student_id, student_name))
        except EnrollmentError:
            self._say(
                "Failed to enroll student (course might be full or student "
                "already exists)."
            )
            return
        self._say(f"Student {student_name} enrolled successfully in {code}.")

    def drop_student(self) -> None:
        self._prompt("Enter Course Code to drop student from: ")
        code = self._read_token()
        course = self._find_course(code)
        if course is None:
            return
        self._prompt("Enter Student ID to drop: ")
        student_id = self._read_token()
        try:
            course.drop(student_id)
        except KeyError:
            self._say(f"Error: Student {student_id} not found in course {code}.")
            return
        self._say(f"Student {student_id} dropped successfully from {code}.")

    def display_all_courses(self) -> None:
        self._say("\n--- All Courses ---")
        for line in self.database.format_lines():
            self._say(line)
        self._say("-------------------\n")

    def display_enrolled_students(self) -> None:
        self._prompt("Enter Course Code to display enrolled students: ")
        code = self._read_token()
        course = self._find_course(code)
        if course is None:
            return
        for line in course.info_lines(show_enrolled=False):
            self._say(line)
        if course.roster.is_empty():
            self._say("No students enrolled in this course.")
            return
        self._prompt("Sort students? (y/n): ")
        if self._read_token()[0] in "yY":
            self._prompt("Sort by (N)ame or (I)D? ")
            by_name = self._read_token()[0] in "Nn"
            ordered = selection_sort_students(course.enrolled_students(), by_name)
            self._say("Enrolled Students (Sorted):")
            for number, student in enumerate(ordered, start=1):
                self._say(f"    {number}. {student}")
        else:
            for line in course.roster_lines():
                self._say(line)

    def search_course(self) -> None:
        self._prompt("Enter Course Code to search: ")
        code = self._read_token()
        course = self.database.search(code)
        if course is None:
            self._say(f"Course {code} not found.")
            return
        self._say("--- Course Found ---")
        for line in (*course.info_lines(), *course.roster_lines()):
            self._say(line)
        self._say("--------------------")

    def delete_course(self) -> None:
        self._prompt("Enter Course Code to delete: ")
        code = self._read_token()
        self.database.remove(code)
        self._say(
            f"Attempted to delete course {code}. "
            "(If it existed and deletion is fully implemented)"
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive enrollment menu on standard input and output."""
    EnrollmentShell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())