"""Selectable lists of tasks and projects that open popup forms."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from onaroll.models import Project, Task
from onaroll.tui.events import Component, InputSubmit, Key, KeyEvent
from onaroll.tui.forms import (
    ProjectDelete,
    ProjectInput,
    ProjectUpdate,
    TaskDelete,
    TaskInput,
    TaskUpdate,
)
from onaroll.tui.layout import Rect
from onaroll.tui.list_selection import ListSelection


class _RecordList(Component):
    """Stored records shown as a list; a, u and d open forms for them."""

    def __init__(self, conn, model: Any, title: str) -> None:
        self.conn = conn
        self.entries = ListSelection(model.list(conn), title)
        self.popup: InputSubmit | None = None

    def _dispatch(
        self,
        event: KeyEvent,
        input_form: Callable[[], InputSubmit],
        update_form: Callable[[Any], InputSubmit],
        delete_form: Callable[[Any], InputSubmit],
    ) -> None:
        if event.key is Key.CHAR and event.char in ("a", "u", "d"):
            current = self.entries.selected()
            if event.char == "a":
                self.popup = input_form()
            elif current is not None:
                if event.char == "u":
                    self.popup = update_form(current)
                else:
                    self.popup = delete_form(current)
            return
        self.entries.handle_key(event)


class TaskList(_RecordList):
    """The list of all tasks."""

    def __init__(self, conn) -> None:
        super().__init__(conn, Task, "Tasks")

    def selected(self):
        """Return the selected task, or None when the list is empty."""
        return self.entries.selected()

    def refresh(self) -> None:
        """Reload the tasks from the database and select the first."""
        self.entries.set_items(Task.list(self.conn))

    def switch_active(self) -> None:
        """Toggle whether the list has focus."""
        self.entries.switch_active()

    def render(self, screen, area: Rect) -> None:
        """Draw the list."""
        self.entries.render(screen, area)

    def handle_key(self, event: KeyEvent) -> None:
        """Open a form for a, u or d; otherwise move the selection."""
        self._dispatch(
            event,
            lambda: TaskInput(self.conn),
            lambda task: TaskUpdate.from_task(self.conn, task),
            lambda task: TaskDelete(self.conn, task.id),
        )


class ProjectList(_RecordList):
    """The list of all projects."""

    def __init__(self, conn) -> None:
        super().__init__(conn, Project, "Projects")

    def selected(self):
        """Return the selected project, or None when the list is empty."""
        return self.entries.selected()

    def refresh(self) -> None:
        """Reload the projects from the database and select the first."""
        self.entries.set_items(Project.list(self.conn))

    def switch_active(self) -> None:
        """Toggle whether the list has focus."""
        self.entries.switch_active()

    def render(self, screen, area: Rect) -> None:
        """Draw the list."""
        self.entries.render(screen, area)

    def handle_key(self, event: KeyEvent) -> None:
        """Open a form for a, u or d; otherwise move the selection."""
        self._dispatch(
            event,
            lambda: ProjectInput(self.conn),
            lambda project: ProjectUpdate.from_project(self.conn, project),
            lambda project: ProjectDelete(self.conn, project.id),
        )