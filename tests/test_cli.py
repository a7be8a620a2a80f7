import pytest

from onaroll.cli import build_parser, main, run_cli
from onaroll.db import connect
from onaroll.models import NotFoundError, Project, Task
from onaroll.status import ProjectStatus, TaskStatus


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def run(conn, *argv):
    run_cli(build_parser().parse_args(list(argv)), conn)


def test_create_project_via_cli(conn):
    run(conn, "project", "add", "Integration Test Project")
    projects = Project.list(conn)
    assert len(projects) == 1
    assert projects[0].title == "Integration Test Project"


def test_update_project_via_cli(conn):
    run(conn, "project", "add", "Initial Project")
    project = Project.list(conn)[0]
    run(conn, "project", "update", str(project.id), "--title", "Updated Project")
    assert Project.find(conn, project.id).title == "Updated Project"


def test_delete_project_via_cli(conn):
    run(conn, "project", "add", "Project to Delete")
    project = Project.list(conn)[0]
    run(conn, "project", "delete", str(project.id))
    assert Project.list(conn) == []


def test_read_project_via_cli(conn, capsys):
    run(conn, "project", "add", "Project to Read")
    project = Project.list(conn)[0]
    run(conn, "project", "read", str(project.id))
    assert Project.find(conn, project.id).title == "Project to Read"
    assert "Project to Read" in capsys.readouterr().out


def test_list_projects_via_cli(conn, capsys):
    run(conn, "project", "add", "Project 1")
    run(conn, "project", "add", "Project 2")
    run(conn, "project", "list")
    projects = Project.list(conn)
    assert len(projects) == 2
    assert projects[0].title == "Project 1"
    assert projects[1].title == "Project 2"
    out = capsys.readouterr().out
    assert out.index("Project 1") < out.index("Project 2")


def test_project_add_with_status_label(conn):
    run(conn, "project", "add", "Held", "Waiting", "On Hold")
    project = Project.list(conn)[0]
    assert project.description == "Waiting"
    assert project.status is ProjectStatus.ON_HOLD


def test_project_add_defaults(conn, capsys):
    run(conn, "project", "add")
    project = Project.list(conn)[0]
    assert project.title == "New Project"
    assert project.status is ProjectStatus.PLANNING
    assert f"Project created with id: {project.id}" in capsys.readouterr().out


def test_empty_project_list_message(conn, capsys):
    run_cli(build_parser().parse_args(["project", "list"]), conn)
    out = capsys.readouterr().out
    assert out.splitlines() == ["Listing projects", "No projects found"]
    assert Project.list(conn) == []


def test_read_missing_project_reports_not_found(conn, capsys):
    run_cli(build_parser().parse_args(["project", "read", "9999"]), conn)
    assert capsys.readouterr().err.strip() == "project not found"
    with pytest.raises(NotFoundError):
        Project.find(conn, 9999)


def test_delete_reports_count(conn, capsys):
    run_cli(build_parser().parse_args(["project", "add", "Kept"]), conn)
    run_cli(build_parser().parse_args(["project", "delete", "9999"]), conn)
    assert "Deleted 0 project(s)" in capsys.readouterr().out
    assert [p.title for p in Project.list(conn)] == ["Kept"]


def test_update_missing_project_reports_error(conn, capsys):
    run_cli(build_parser().parse_args(["project", "update", "9999", "-t", "Nothing"]), conn)
    assert "Error updating project" in capsys.readouterr().err
    with pytest.raises(NotFoundError):
        Project.find(conn, 9999)


def test_update_without_changes_reports_error(conn, capsys):
    run(conn, "project", "add", "Unchanged")
    project = Project.list(conn)[0]
    run(conn, "project", "update", str(project.id))
    assert "Error updating project" in capsys.readouterr().err
    assert Project.find(conn, project.id).title == "Unchanged"


def test_invalid_project_status_is_rejected():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["project", "add", "Title", "Desc", "Unknown"])
    assert info.value.code == 2


def test_missing_subcommand_is_rejected():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["task"])
    assert info.value.code == 2


def test_task_add_with_all_fields(conn):
    run(conn, "project", "add", "Home")
    project = Project.list(conn)[0]
    run(conn, "task", "add", "Paint", "Walls", "In Progress", str(project.id))
    task = Task.list(conn)[0]
    assert task.title == "Paint"
    assert task.description == "Walls"
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.project_id == project.id


def test_task_update_with_project_flag(conn):
    run(conn, "project", "add", "Garden")
    project = Project.list(conn)[0]
    run(conn, "task", "add", "Weed")
    task = Task.list(conn)[0]
    run(conn, "task", "update", str(task.id), "-s", "Completed", "-p", str(project.id))
    updated = Task.find(conn, task.id)
    assert updated.status is TaskStatus.COMPLETED
    assert updated.project_id == project.id
    assert updated.title == "Weed"


def test_task_read_missing(conn, capsys):
    run_cli(build_parser().parse_args(["task", "read", "42"]), conn)
    assert capsys.readouterr().err.strip() == "Task not found"
    with pytest.raises(NotFoundError):
        Task.find(conn, 42)


def test_task_delete_and_list(conn, capsys):
    run(conn, "task", "add", "Temporary")
    task = Task.list(conn)[0]
    run(conn, "task", "delete", str(task.id))
    run(conn, "task", "list")
    out = capsys.readouterr().out
    assert "Deleted 1 task(s)" in out
    assert "No tasks found" in out
    assert Task.list(conn) == []


def test_main_uses_database_url(tmp_path, monkeypatch):
    db_path = tmp_path / "roll.db"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", str(db_path))
    assert main(["project", "add", "From Main"]) == 0
    connection = connect(str(db_path))
    try:
        assert [p.title for p in Project.list(connection)] == ["From Main"]
    finally:
        connection.close()


def test_main_without_database_url(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert main(["task", "list"]) == 1
    assert "DATABASE_URL must be set" in capsys.readouterr().err