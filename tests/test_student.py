import pytest

from enrollment.student import Student, selection_sort_students


def test_equality_uses_id_only():
    assert Student("S1", "Alice") == Student("S1", "Bob")
    assert not (Student("S1", "Alice") == Student("S2", "Alice"))


def test_hash_consistent_with_equality():
    assert len({Student("S1", "Alice"), Student("S1", "Other")}) == 1


def test_less_than_orders_by_name_then_id():
    assert Student("S9", "Alice") < Student("S1", "Bob")
    assert Student("S1", "Alice") < Student("S2", "Alice")
    assert not (Student("S2", "Alice") < Student("S1", "Alice"))


def test_str_format():
    assert str(Student("S1", "Alice")) == "ID: S1, Name: Alice"


def test_defaults_are_empty():
    student = Student()
    assert (student.student_id, student.student_name) == ("", "")


def test_sort_by_name_breaks_ties_by_id():
    a = Student("S3", "Carol")
    b = Student("S2", "Alice")
    c = Student("S1", "Alice")
    assert selection_sort_students([a, b, c], True) == [c, b, a]
    assert [s.student_name for s in selection_sort_students([a, b, c], True)] == [
        "Alice",
        "Alice",
        "Carol",
    ]


def test_sort_by_id():
    a = Student("S3", "Alice")
    b = Student("S1", "Carol")
    c = Student("S2", "Bob")
    result = selection_sort_students([a, b, c], False)
    assert [s.student_id for s in result] == ["S1", "S2", "S3"]


def test_sort_leaves_input_untouched():
    students = [Student("S2", "Bob"), Student("S1", "Alice")]
    selection_sort_students(students)
    assert [s.student_id for s in students] == ["S2", "S1"]


@pytest.mark.parametrize("by_name", [True, False])
def test_sort_of_empty_list(by_name):
    assert selection_sort_students([], by_name) == []