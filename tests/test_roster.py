import pytest

from enrollment.roster import StudentRoster
from enrollment.student import Student


@pytest.fixture
def roster():
    r = StudentRoster()
    for sid, name in [("S1", "Alice"), ("S2", "Bob"), ("S3", "Carol")]:
        r.add(Student(sid, name))
    return r


def test_new_roster_is_empty():
    r = StudentRoster()
    assert r.is_empty()
    assert len(r) == 0
    assert r.to_list() == []


def test_add_keeps_order(roster):
    assert [s.student_id for s in roster] == ["S1", "S2", "S3"]
    assert len(roster) == 3
    assert not roster.is_empty()


def test_find(roster):
    found = roster.find("S2")
    assert found.student_name == "Bob"
    assert roster.find("S9") is None


def test_contains(roster):
    assert "S1" in roster
    assert "S9" not in roster


@pytest.mark.parametrize("sid", ["S1", "S2", "S3"])
def test_remove_any_position(roster, sid):
    removed = roster.remove(sid)
    assert removed.student_id == sid
    assert sid not in roster
    assert len(roster) == 2
    assert [s.student_id for s in roster] == [
        x for x in ["S1", "S2", "S3"] if x != sid
    ]


def test_remove_missing_raises(roster):
    with pytest.raises(KeyError):
        roster.remove("S9")
    assert len(roster) == 3


def test_remove_all_leaves_empty(roster):
    for sid in ["S2", "S1", "S3"]:
        roster.remove(sid)
    assert roster.is_empty()
    roster.add(Student("S4", "Dan"))
    assert [s.student_id for s in roster] == ["S4"]


def test_duplicates_are_kept():
    r = StudentRoster()
    r.add(Student("S1", "Alice"))
    r.add(Student("S1", "Alice again"))
    assert len(r) == 2
    r.remove("S1")
    assert r.find("S1").student_name == "Alice again"


def test_to_list_is_a_copy(roster):
    copy = roster.to_list()
    copy.clear()
    assert len(roster) == 3


def test_format_lines_empty():
    assert StudentRoster().format_lines() == ["    No students enrolled."]


def test_format_lines_numbered(roster):
    lines = roster.format_lines()
    assert lines[0] == "    1. ID: S1, Name: Alice"
    assert len(lines) == 3
    assert lines[2].startswith("    3. ")