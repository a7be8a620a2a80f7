"""Popup forms that create, change and delete projects and tasks."""

from __future__ import annotations

import curses

from onaroll.models import Project, Task
from onaroll.status import ProjectStatus, TaskStatus
from onaroll.tui.drawing import draw_box, draw_paragraph
from onaroll.tui.events import Component, InputSubmit, KeyEvent
from onaroll.tui.layout import Rect
from onaroll.tui.multi_input import MultiInput


def _render_form(screen, area: Rect, title: str, inputs: MultiInput) -> None:
    inner = draw_box(screen, area, title, curses.A_BOLD)
    inputs.render(screen, inner)


def _render_delete(screen, area: Rect, noun: str, row_id: int) -> None:
    draw_paragraph(
        screen,
        area,
        [
            f"Are you sure you want to delete this {noun.lower()}?",
            "This action cannot be undone.",
        ],
        f"Delete {noun} {row_id}",
    )


class _InputForm(Component, InputSubmit):
    """A MultiInput bound to a database connection."""

    _status_type: type

    def __init__(self, conn) -> None:
        self.conn = conn
        self.inputs = MultiInput(self._status_type)


class _DeleteConfirmation(Component, InputSubmit):
    """A confirmation that deletes one row when submitted."""

    def __init__(self, conn, row_id: int) -> None:
        self.conn = conn
        self.row_id = row_id
        self.deleted: int | None = None


class TaskInput(_InputForm):
    """Form that creates a task."""

    _status_type = TaskStatus

    def submit(self) -> None:
        """Store a new task from the entered values."""
        entered = self.inputs.get_inputs()
        Task.create(self.conn, entered.title, entered.description, entered.status, None)

    def reset(self) -> None:
        """Clear the form."""
        self.inputs.reset()

    def render(self, screen, area: Rect) -> None:
        """Draw the frame and the fields inside it."""
        _render_form(screen, area, "Task Creation", self.inputs)

    def handle_key(self, event: KeyEvent) -> None:
        """Pass the key to the fields."""
        self.inputs.handle_key(event)


class TaskUpdate(_InputForm):
    """Form that changes an existing task."""

    _status_type = TaskStatus

    def __init__(self, conn, task_id: int, title: str, description: str | None, status) -> None:
        super().__init__(conn)
        self.task_id = task_id
        self.inputs.set_inputs(title, description, status)

    @classmethod
    def from_task(cls, conn, task: Task) -> TaskUpdate:
        """Return a form filled with ``task``'s values."""
        return cls(conn, task.id, task.title, task.description, task.status)

    def submit(self) -> None:
        """Save the entered values to the task."""
        entered = self.inputs.get_inputs()
        Task.update(
            self.conn, self.task_id, entered.title, entered.description, entered.status, None
        )

    def reset(self) -> None:
        """Clear the form."""
        self.inputs.reset()

    def render(self, screen, area: Rect) -> None:
        """Draw the frame and the fields inside it."""
        _render_form(screen, area, f"Task Update for task {self.task_id}", self.inputs)

    def handle_key(self, event: KeyEvent) -> None:
        """Pass the key to the fields."""
        self.inputs.handle_key(event)


class TaskDelete(_DeleteConfirmation):
    """Confirmation that deletes a task."""

    @property
    def task_id(self) -> int:
        return self.row_id

    def submit(self) -> None:
        """Delete the task and remember how many rows went."""
        self.deleted = Task.delete(self.conn, self.row_id)

    def reset(self) -> None:
        """Forget the outcome of the last submission."""
        self.deleted = None

    def render(self, screen, area: Rect) -> None:
        """Draw the warning."""
        _render_delete(screen, area, "Task", self.row_id)

    def handle_key(self, event: KeyEvent) -> bool:
        """Report the key as unused: only confirm and cancel matter here."""
        return False


class ProjectInput(_InputForm):
    """Form that creates a project."""

    _status_type = ProjectStatus

    def submit(self) -> None:
        """Store a new project from the entered values."""
        entered = self.inputs.get_inputs()
        Project.create(self.conn, entered.title, entered.description, entered.status)

    def reset(self) -> None:
        """Clear the form."""
        self.inputs.reset()

    def render(self, screen, area: Rect) -> None:
        """Draw the frame and the fields inside it."""
        _render_form(screen, area, "Project Creation", self.inputs)

    def handle_key(self, event: KeyEvent) -> None:
        """Pass the key to the fields."""
        self.inputs.handle_key(event)


class ProjectUpdate(_InputForm):
    """Form that changes an existing project."""

    _status_type = ProjectStatus

    def __init__(
        self, conn, project_id: int, title: str, description: str | None, status
    ) -> None:
        super().__init__(conn)
        self.project_id = project_id
        self.inputs.set_inputs(title, description, status)

    @classmethod
    def from_project(cls, conn, project: Project) -> ProjectUpdate:
        """Return a form filled with ``project``'s values."""
        return cls(conn, project.id, project.title, project.description, project.status)

    def submit(self) -> None:
        """Save the entered values to the project."""
        entered = self.inputs.get_inputs()
        Project.update(
            self.conn, self.project_id, entered.title, entered.description, entered.status
        )

    def reset(self) -> None:
        """Clear the form."""
        self.inputs.reset()

    def render(self, screen, area: Rect) -> None:
        """Draw the frame and the fields inside it."""
        _render_form(
            screen, area, f"Project Update for project {self.project_id}", self.inputs
        )

    def handle_key(self, event: KeyEvent) -> None:
        """Pass the key to the fields."""
        self.inputs.handle_key(event)


class ProjectDelete(_DeleteConfirmation):
    """Confirmation that deletes a project."""

    @property
    def project_id(self) -> int:
        return self.row_id

    def submit(self) -> None:
        """Delete the project and remember how many rows went."""
        self.deleted = Project.delete(self.conn, self.row_id)

    def reset(self) -> None:
        """Forget the outcome of the last submission."""
        self.deleted = None

    def render(self, screen, area: Rect) -> None:
        """Draw the warning."""
        _render_delete(screen, area, "Project", self.row_id)

    def handle_key(self, event: KeyEvent) -> bool:
        """Report the key as unused: only confirm and cancel matter here."""
        return False