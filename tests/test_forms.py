import pytest

from onaroll.db import connect
from onaroll.models import NotFoundError, Project, Task
from onaroll.status import ProjectStatus, TaskStatus
from onaroll.tui.events import Key, KeyEvent
from onaroll.tui.forms import (
    ProjectDelete,
    ProjectInput,
    ProjectUpdate,
    TaskDelete,
    TaskInput,
    TaskUpdate,
)
from onaroll.tui.layout import Rect


class FakeScreen:
    def __init__(self, rows=24, cols=80):
        self.cells = [[" "] * cols for _ in range(rows)]
        self.cursor = None

    def getmaxyx(self):
        return len(self.cells), len(self.cells[0])

    def addstr(self, y, x, text, attr=0):
        self.cells[y][x : x + len(text)] = list(text)

    def move(self, y, x):
        self.cursor = (y, x)

    def text(self):
        return "\n".join("".join(row) for row in self.cells)


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def type_text(form, text):
    for char in text:
        form.handle_key(KeyEvent(Key.CHAR, char))


def render_text(form):
    screen = FakeScreen()
    form.render(screen, Rect(0, 0, 80, 24))
    return screen.text()


def test_task_input_creates_task_and_resets(conn):
    form = TaskInput(conn)
    type_text(form, "Write docs")
    form.handle_key(KeyEvent(Key.TAB))
    type_text(form, "All of them")
    form.submit_and_reset()

    [task] = Task.list(conn)
    assert task.title == "Write docs"
    assert task.description == "All of them"
    assert task.status is TaskStatus.TODO
    assert task.project_id is None
    assert form.inputs.get_inputs().title == ""


def test_task_input_uses_selected_status(conn):
    form = TaskInput(conn)
    type_text(form, "Chosen")
    form.handle_key(KeyEvent(Key.BACK_TAB))
    form.handle_key(KeyEvent(Key.CHAR, "j"))
    form.submit()
    assert Task.list(conn)[0].status is list(TaskStatus)[1]


def test_task_update_prefills_from_task(conn):
    task = Task.create(conn, "Old", "Text", TaskStatus.BLOCKED, None)
    form = TaskUpdate.from_task(conn, task)
    entered = form.inputs.get_inputs()
    assert (entered.title, entered.description, entered.status) == (
        "Old",
        "Text",
        TaskStatus.BLOCKED,
    )
    assert form.task_id == task.id


def test_task_update_saves_changes_and_keeps_project(conn):
    project = Project.create(conn, "Home", None, None)
    task = Task.create(conn, "Old", None, None, project.id)
    form = TaskUpdate.from_task(conn, task)
    type_text(form, " but new")
    form.submit()
    stored = Task.find(conn, task.id)
    assert stored.title == "Old but new"
    assert stored.project_id == project.id


def test_task_update_of_missing_task_raises(conn):
    form = TaskUpdate(conn, 9999, "Non-existent", None, TaskStatus.TODO)
    with pytest.raises(NotFoundError):
        form.submit()


def test_task_delete_removes_task(conn):
    keep = Task.create(conn, "Keep", None, None, None)
    gone = Task.create(conn, "Gone", None, None, None)
    form = TaskDelete(conn, gone.id)
    form.handle_key(KeyEvent(Key.CHAR, "x"))
    form.submit_and_reset()
    assert Task.list(conn) == [keep]


def test_project_input_creates_project(conn):
    form = ProjectInput(conn)
    type_text(form, "Garden")
    form.submit_and_reset()
    [project] = Project.list(conn)
    assert project.title == "Garden"
    assert project.status is ProjectStatus.PLANNING
    assert project.description == ""


def test_project_update_saves_status(conn):
    project = Project.create(conn, "Garden", "Beds", ProjectStatus.ACTIVE)
    form = ProjectUpdate.from_project(conn, project)
    form.handle_key(KeyEvent(Key.BACK_TAB))
    form.handle_key(KeyEvent(Key.CHAR, "k"))
    form.submit()
    stored = Project.find(conn, project.id)
    assert stored.status is ProjectStatus.PLANNING
    assert stored.title == "Garden"
    assert stored.description == "Beds"


def test_project_update_reset_clears_inputs(conn):
    project = Project.create(conn, "Garden", None, ProjectStatus.ACTIVE)
    form = ProjectUpdate.from_project(conn, project)
    form.reset()
    assert form.inputs.get_inputs().title == ""
    assert form.inputs.get_inputs().status is ProjectStatus.PLANNING


def test_project_delete_removes_project(conn):
    project = Project.create(conn, "Doomed", None, None)
    form = ProjectDelete(conn, project.id)
    form.submit()
    assert Project.list(conn) == []
    assert form.project_id == project.id


def test_input_forms_render_titles(conn):
    assert "Task Creation" in render_text(TaskInput(conn))
    assert "Project Creation" in render_text(ProjectInput(conn))


def test_update_forms_render_titles(conn):
    task = Task.create(conn, "T", None, None, None)
    project = Project.create(conn, "P", None, None)
    assert f"Task Update for task {task.id}" in render_text(TaskUpdate.from_task(conn, task))
    assert f"Project Update for project {project.id}" in render_text(
        ProjectUpdate.from_project(conn, project)
    )


def test_delete_forms_render_warning(conn):
    text = render_text(TaskDelete(conn, 7))
    assert "Delete Task 7" in text
    assert "Are you sure you want to delete this task?" in text
    assert "This action cannot be undone." in text
    assert "Delete Project 7" in render_text(ProjectDelete(conn, 7))