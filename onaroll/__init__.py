"""Task and project tracking on SQLite, with a command line and a curses terminal interface."""

__version__ = "0.1.0"