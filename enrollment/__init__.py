"""Course enrollment: an AVL tree of courses, per-course rosters and an interactive menu."""

__version__ = "0.1.0"