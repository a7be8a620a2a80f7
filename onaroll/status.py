"""Workflow states for projects and tasks."""

from __future__ import annotations

from enum import Enum


class _Status(Enum):
    """Shared behaviour: labels for people, snake_case names for storage."""

    def __str__(self) -> str:
        return self.value

    @property
    def sql_value(self) -> str:
        """The form stored in the database."""
        return self.name.lower()

    @classmethod
    def _parse_label(cls, text, kind: str):
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid {kind} status: {text}") from None

    @classmethod
    def from_sql(cls, text):
        """Return the member stored in the database as ``text``."""
        try:
            return cls[text.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown stored {cls.__name__} value: {text!r}") from None


class ProjectStatus(_Status):
    """State of a project."""

    PLANNING = "Planning"
    ACTIVE = "Active"
    ON_HOLD = "On Hold"
    BLOCKED = "Blocked"
    IN_REVIEW = "In Review"
    COMPLETED = "Completed"
    CANCELED = "Canceled"

    @classmethod
    def parse(cls, text):
        """Return the member whose label is ``text``; raise ValueError otherwise."""
        return cls._parse_label(text, "project")


class TaskStatus(_Status):
    """State of a task."""

    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    BLOCKED = "Blocked"
    IN_REVIEW = "In Review"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    CANCELED = "Canceled"

    @classmethod
    def parse(cls, text):
        """Return the member whose label is ``text``; raise ValueError otherwise."""
        return cls._parse_label(text, "task")