[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onaroll"
version = "0.1.0"
description = "Track tasks and projects from the command line or a curses terminal interface, stored in SQLite."
requires-python = ">=3.10"
keywords = ["tasks", "projects", "todo", "sqlite", "cli", "tui", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roll = "onaroll.cli:main"
roll-tui = "onaroll.tui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["onaroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
