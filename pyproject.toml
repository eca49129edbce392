[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enrollment"
version = "0.1.0"
description = "Interactive course enrollment system backed by an AVL tree of courses with per-course student rosters"
requires-python = ">=3.10"
dependencies = []
keywords = ["enrollment", "courses", "students", "avl-tree", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enrollment = "enrollment.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enrollment"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
