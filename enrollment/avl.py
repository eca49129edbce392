"""A height-balanced search tree of courses keyed by course code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .course import Course


class DuplicateCourseError(KeyError):
    """A course with the same code is already in the tree."""


@dataclass(eq=False)
class _Node:
    course: Course
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class CourseTree:
    """Courses ordered by code, kept balanced on insertion and removal."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, course: Course) -> None:
        """Add a course; raise DuplicateCourseError if its code is taken."""
        self._root = self._insert(self._root, course)
        self._size += 1

    def _insert(self, node: Optional[_Node], course: Course) -> _Node:
        if node is None:
            return _Node(course)
        if course.code < node.course.code:
            node.left = self._insert(node.left, course)
        elif course.code > node.course.code:
            node.right = self._insert(node.right, course)
        else:
            raise DuplicateCourseError(
                f"Course with code {course.code} already exists."
            )
        return _rebalance(node)

    def search(self, course_code: str) -> Course | None:
        """Return the course with this code, or None."""
        node = self._root
        while node is not None:
            if course_code == node.course.code:
                return node.course
            node = node.left if course_code < node.course.code else node.right
        return None

    def remove(self, course_code: str) -> None:
        """Remove the course with this code if it exists."""
        if course_code not in self:
            return
        self._root = self._remove(self._root, course_code)
        self._size -= 1

    def _remove(self, node: Optional[_Node], code: str) -> Optional[_Node]:
        if node is None:
            return None
        if code < node.course.code:
            node.left = self._remove(node.left, code)
        elif code > node.course.code:
            node.right = self._remove(node.right, code)
        else:
            if node.left is None or node.right is None:
                return node.left if node.left is not None else node.right
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.course = successor.course
            node.right = self._remove(node.right, successor.course.code)
        return _rebalance(node)

    def height(self) -> int:
        return _height(self._root)

    def is_balanced(self) -> bool:
        """Check the ordering, stored heights and balance of every node."""

        def check(node: Optional[_Node], low: str | None, high: str | None) -> bool:
            if node is None:
                return True
            code = node.course.code
            if (low is not None and code <= low) or (high is not None and code >= high):
                return False
            if node.height != 1 + max(_height(node.left), _height(node.right)):
                return False
            if abs(_balance(node)) > 1:
                return False
            return check(node.left, low, code) and check(node.right, code, high)

        return check(self._root, None, None)

    def format_lines(self) -> list[str]:
        """Return the listing of all courses in code order."""
        if self._root is None:
            return ["No courses in the system."]
        separator = "---------------------"
        lines: list[str] = []
        for course in self:
            lines.append(separator)
            lines.extend(course.info_lines())
            lines.append(separator)
        return lines

    def __iter__(self) -> Iterator[Course]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, course_code: object) -> bool:
        return isinstance(course_code, str) and self.search(course_code) is not None