"""Command-line interface for managing projects and tasks."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Callable, Sequence

from onaroll.db import establish_connection
from onaroll.models import NotFoundError, Project, Task
from onaroll.status import ProjectStatus, TaskStatus

_FAILURES = (NotFoundError, ValueError, sqlite3.Error)


def _status_type(enum_cls) -> Callable[[str], object]:
    def convert(text: str):
        try:
            return enum_cls.parse(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    convert.__name__ = enum_cls.__name__
    return convert


def _show(value) -> str:
    """Render an optional value for progress messages."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def _project_add(conn, args) -> None:
    print(
        f"Adding project: {_show(args.title)} with description: "
        f"{_show(args.description)} and status: {_show(args.status)}"
    )
    try:
        project = Project.create(conn, args.title, args.description, args.status)
    except _FAILURES as exc:
        print(f"Error creating project: {exc}", file=sys.stderr)
    else:
        print(f"Project created with id: {project.id}")


def _project_update(conn, args) -> None:
    print(
        f"Updating project: {args.project_id} with title: {_show(args.title)}, "
        f"description: {_show(args.description)} and status: {_show(args.status)}"
    )
    try:
        project = Project.update(
            conn, args.project_id, args.title, args.description, args.status
        )
    except _FAILURES as exc:
        print(f"Error updating project: {exc}", file=sys.stderr)
    else:
        print(f"Project updated: {project}")


def _project_delete(conn, args) -> None:
    print(f"Deleting project: {args.project_id}")
    try:
        amount = Project.delete(conn, args.project_id)
    except _FAILURES as exc:
        print(f"Error deleting project: {exc}", file=sys.stderr)
    else:
        print(f"Deleted {amount} project(s)")


def _project_read(conn, args) -> None:
    try:
        project = Project.find(conn, args.project_id)
    except NotFoundError:
        print("project not found", file=sys.stderr)
    except _FAILURES as exc:
        print(f"Error finding project: {exc}", file=sys.stderr)
    else:
        print(f"Project found: {project}")


def _project_list(conn, args) -> None:
    print("Listing projects")
    try:
        projects = Project.list(conn)
    except _FAILURES as exc:
        print(f"Error listing projects: {exc}", file=sys.stderr)
        return
    if not projects:
        print("No projects found")
    for project in projects:
        print(project)


def _task_add(conn, args) -> None:
    print(
        f"Adding task: {_show(args.title)} with description: "
        f"{_show(args.description)} and status: {_show(args.status)}"
    )
    try:
        task = Task.create(
            conn, args.title, args.description, args.status, args.project_id
        )
    except _FAILURES as exc:
        print(f"Error creating task: {exc}", file=sys.stderr)
    else:
        print(f"Task created with id: {task.id}")


def _task_update(conn, args) -> None:
    print(
        f"Updating task: {args.task_id} with title: {_show(args.title)}, "
        f"description: {_show(args.description)} and status: {_show(args.status)}"
    )
    try:
        task = Task.update(
            conn,
            args.task_id,
            args.title,
            args.description,
            args.status,
            args.project_id,
        )
    except _FAILURES as exc:
        print(f"Error updating task: {exc}", file=sys.stderr)
    else:
        print(f"Task updated: {task}")


def _task_delete(conn, args) -> None:
    print(f"Deleting task: {args.task_id}")
    try:
        amount = Task.delete(conn, args.task_id)
    except _FAILURES as exc:
        print(f"Error deleting task: {exc}", file=sys.stderr)
    else:
        print(f"Deleted {amount} task(s)")


def _task_read(conn, args) -> None:
    try:
        task = Task.find(conn, args.task_id)
    except NotFoundError:
        print("Task not found", file=sys.stderr)
    except _FAILURES as exc:
        print(f"Error finding task: {exc}", file=sys.stderr)
    else:
        print(f"Task found: {task}")


def _task_list(conn, args) -> None:
    print("Listing tasks")
    try:
        tasks = Task.list(conn)
    except _FAILURES as exc:
        print(f"Error listing tasks: {exc}", file=sys.stderr)
        return
    if not tasks:
        print("No tasks found")
    for task in tasks:
        print(task)


def _add_task_commands(subparsers) -> None:
    parser = subparsers.add_parser("task", help="Manage tasks")
    commands = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)
    status = _status_type(TaskStatus)

    add = commands.add_parser("add", help="Add a new task")
    add.add_argument("title", nargs="?", help="Task title")
    add.add_argument("description", nargs="?", help="Optional task description")
    add.add_argument(
        "status", nargs="?", type=status, help="Optional task status, defaults to 'Todo'"
    )
    add.add_argument("project_id", nargs="?", type=int, help="Optional project id")
    add.set_defaults(handler=_task_add)

    update = commands.add_parser("update", help="Update an existing task")
    update.add_argument("task_id", type=int, help="Task id of task to update")
    update.add_argument("-t", "--title", help="New task title")
    update.add_argument("-d", "--description", help="New task description")
    update.add_argument("-s", "--status", type=status, help="New task status")
    update.add_argument(
        "-p", "--project", dest="project_id", type=int, help="New project id"
    )
    update.set_defaults(handler=_task_update)

    delete = commands.add_parser("delete", help="Delete an existing task")
    delete.add_argument("task_id", type=int, help="Task id of task to delete")
    delete.set_defaults(handler=_task_delete)

    read = commands.add_parser("read", help="Read an existing task")
    read.add_argument("task_id", type=int, help="Task id of task to view")
    read.set_defaults(handler=_task_read)

    listing = commands.add_parser("list", help="List all tasks")
    listing.set_defaults(handler=_task_list)


def _add_project_commands(subparsers) -> None:
    parser = subparsers.add_parser("project", help="Manage projects")
    commands = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)
    status = _status_type(ProjectStatus)

    add = commands.add_parser("add", help="Add a new project")
    add.add_argument("title", nargs="?", help="Project title")
    add.add_argument("description", nargs="?", help="Optional project description")
    add.add_argument(
        "status",
        nargs="?",
        type=status,
        help="Optional project status, defaults to 'Planning'",
    )
    add.set_defaults(handler=_project_add)

    update = commands.add_parser("update", help="Update an existing project")
    update.add_argument("project_id", type=int, help="Project id of project to update")
    update.add_argument("-t", "--title", help="New project title")
    update.add_argument("-d", "--description", help="New project description")
    update.add_argument("-s", "--status", type=status, help="New project status")
    update.set_defaults(handler=_project_update)

    delete = commands.add_parser("delete", help="Delete an existing project")
    delete.add_argument("project_id", type=int, help="Project id of project to delete")
    delete.set_defaults(handler=_project_delete)

    read = commands.add_parser("read", help="Read an existing project")
    read.add_argument("project_id", type=int, help="Project id of project to view")
    read.set_defaults(handler=_project_read)

    listing = commands.add_parser("list", help="List all projects")
    listing.set_defaults(handler=_project_list)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``roll`` command."""
    parser = argparse.ArgumentParser(prog="roll", description="Manage projects and tasks.")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    _add_task_commands(subparsers)
    _add_project_commands(subparsers)
    return parser


def run_cli(args: argparse.Namespace, conn: sqlite3.Connection) -> None:
    """Carry out the command described by parsed ``args`` against ``conn``."""
    args.handler(conn, args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``roll`` command."""
    args = build_parser().parse_args(argv)
    try:
        conn = establish_connection()
    except (RuntimeError, ConnectionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        run_cli(args, conn)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())