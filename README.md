# enrollment

A small interactive course enrollment system. Courses are kept in a
self-balancing AVL tree keyed by course code. Each course has a capacity and
its own roster of enrolled students.

## Install

```
pip install .
```

## Running the menu

```
enrollment
```

This opens a menu on standard input and output:

```
--- Student Enrollment System ---
1. Add New Course
2. Enroll Student in Course
3. Drop Student from Course
4. Display All Courses
5. Display Enrolled Students for a Course
6. Search for a Course
7. Delete Course (Full AVL Remove)
0. Exit
```

- **Add New Course** asks for a code, a name and a capacity. It asks for the
  capacity again until it gets a positive whole number. A code that already
  exists is refused.
- **Enroll Student** asks for a course code, then for a student ID and name.
  It refuses if the course is full or the ID is already on the roster.
- **Drop Student** removes a student from a course by ID.
- **Display All Courses** lists every course in code order, with its capacity
  and enrolled count.
- **Display Enrolled Students** shows a course and its roster. You can sort
  the roster by name (ties broken by ID) or by ID. Otherwise the roster is
  shown in enrollment order.
- **Search for a Course** shows one course with its roster.
- **Delete Course** removes a course by code. A code that does not exist is
  ignored.

The menu ends on choice `0` or at end of input.

## Using it as a library

```python
from enrollment.avl import CourseTree
from enrollment.course import Course
from enrollment.student import Student, selection_sort_students

tree = CourseTree()
tree.insert(Course("CS101", "Intro to Programming", 2))

cs101 = tree.search("CS101")
cs101.enroll(Student("S2", "Bob"))
cs101.enroll(Student("S1", "Alice"))
print(cs101.is_full())          # True

ordered = selection_sort_students(cs101.enrolled_students(), True)
print([str(s) for s in ordered])
# ['ID: S1, Name: Alice', 'ID: S2, Name: Bob']

cs101.drop("S2")
tree.remove("CS101")
print("CS101" in tree)          # False
```

- `enrollment.student`: `Student` has the fields `student_id` and
  `student_name`. Students compare equal when their IDs match.
  `selection_sort_students(students, sort_by_name)` returns a new sorted list
  and leaves its input unchanged.
- `enrollment.roster`: `StudentRoster` keeps students in the order they were
  added. It has `add`, `remove`, `find`, `is_empty`, `to_list` and
  `format_lines`. It supports `len`, iteration and `student_id in roster`.
  `remove` raises `KeyError` when the ID is absent.
- `enrollment.course`: `Course(code, name, capacity)` has `enroll`, `drop`,
  `is_full`, `enrolled_students`, `info_lines` and `roster_lines`.
  `enroll` raises `CourseFullError` when the course is full. It raises
  `AlreadyEnrolledError` when the ID is already on the roster. Both errors
  are subclasses of `EnrollmentError`. `drop` raises `KeyError` for an ID
  that is not enrolled.
- `enrollment.avl`: `CourseTree` has `insert`, `search`, `remove`, `height`,
  `is_balanced` and `format_lines`. It supports `len`, in-order iteration
  over courses and `code in tree`. `insert` raises `DuplicateCourseError`
  (a `KeyError`) for a code that already exists. `search` returns `None`
  for an unknown code, and `remove` ignores one.
- `enrollment.cli`: `EnrollmentShell(database, stdin, stdout)` runs the menu
  over any text streams with `run()`. `main()` starts it on the terminal.

## What it does not do

Everything is held in memory. Courses and enrollments are not saved
anywhere, so they are lost when the menu exits.

## Tests

```
pip install .[test]
pytest
```