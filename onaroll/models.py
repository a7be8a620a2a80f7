"""Projects and tasks, and the queries that store and fetch them."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

from onaroll.status import ProjectStatus, TaskStatus

DEFAULT_PROJECT_TITLE = "New Project"
DEFAULT_PROJECT_STATUS = ProjectStatus.PLANNING
DEFAULT_TASK_TITLE = "New Task"
DEFAULT_TASK_STATUS = TaskStatus.TODO


class NotFoundError(LookupError):
    """No row has the requested id."""


def _fetch(conn: sqlite3.Connection, table: str, columns: tuple[str, ...], row_id: int):
    row = conn.execute(
        f"SELECT {', '.join(columns)} FROM {table} WHERE id = ?", (row_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No row in {table} with id {row_id}")
    return tuple(row)


def _fetch_all(conn: sqlite3.Connection, table: str, columns: tuple[str, ...]):
    rows = conn.execute(f"SELECT {', '.join(columns)} FROM {table} ORDER BY id")
    return [tuple(row) for row in rows]


def _present(values: dict[str, Any]) -> dict[str, Any]:
    return {name: value for name, value in values.items() if value is not None}


def _insert(conn: sqlite3.Connection, table: str, values: dict[str, Any]) -> int:
    values = _present(values)
    with conn:
        if values:
            marks = ", ".join("?" for _ in values)
            cursor = conn.execute(
                f"INSERT INTO {table} ({', '.join(values)}) VALUES ({marks})",
                tuple(values.values()),
            )
        else:
            cursor = conn.execute(f"INSERT INTO {table} DEFAULT VALUES")
    return cursor.lastrowid


def _update(conn: sqlite3.Connection, table: str, row_id: int, values: dict[str, Any]) -> None:
    values = _present(values)
    if not values:
        raise ValueError("There are no changes to save")
    assignments = ", ".join(f"{name} = ?" for name in values)
    with conn:
        conn.execute(
            f"UPDATE {table} SET {assignments} WHERE id = ?",
            (*values.values(), row_id),
        )


def _delete(conn: sqlite3.Connection, table: str, row_id: int) -> int:
    with conn:
        cursor = conn.execute(f"DELETE FROM {table} WHERE id = ?", (row_id,))
    return cursor.rowcount


@dataclass(frozen=True)
class Project:
    """A stored project."""

    id: int
    title: str
    description: str | None
    status: ProjectStatus

    _TABLE = "projects"
    _COLUMNS = ("id", "title", "description", "status")

    @classmethod
    def _from_row(cls, row) -> Project:
        row_id, title, description, status = row
        return cls(row_id, title, description, ProjectStatus.from_sql(status))

    @classmethod
    def find(cls, conn, project_id) -> Project:
        """Return the project with ``project_id``; raise NotFoundError if absent."""
        return cls._from_row(_fetch(conn, cls._TABLE, cls._COLUMNS, project_id))

    @classmethod
    def list(cls, conn) -> list[Project]:
        """Return every project in id order."""
        return [cls._from_row(row) for row in _fetch_all(conn, cls._TABLE, cls._COLUMNS)]

    @classmethod
    def create(cls, conn, title=None, description=None, status=None) -> Project:
        """Insert a project; fields left as None take the column defaults."""
        row_id = _insert(
            conn,
            cls._TABLE,
            {
                "title": title,
                "description": description,
                "status": status.sql_value if status is not None else None,
            },
        )
        return cls.find(conn, row_id)

    @classmethod
    def update(cls, conn, project_id, title=None, description=None, status=None) -> Project:
        """Change the given fields of a project and return it as stored."""
        _update(
            conn,
            cls._TABLE,
            project_id,
            {
                "title": title,
                "description": description,
                "status": status.sql_value if status is not None else None,
            },
        )
        return cls.find(conn, project_id)

    @classmethod
    def delete(cls, conn, project_id) -> int:
        """Delete a project; return the number of rows removed."""
        return _delete(conn, cls._TABLE, project_id)

    def label(self) -> str:
        """Short form for list views."""
        return f"{self.id}: {self.title}"


@dataclass(frozen=True)
class Task:
    """A stored task, optionally belonging to a project."""

    id: int
    title: str
    description: str | None
    status: TaskStatus
    project_id: int | None = None

    _TABLE = "tasks"
    _COLUMNS = ("id", "title", "description", "status", "project_id")

    @classmethod
    def _from_row(cls, row) -> Task:
        row_id, title, description, status, project_id = row
        return cls(row_id, title, description, TaskStatus.from_sql(status), project_id)

    @classmethod
    def find(cls, conn, task_id) -> Task:
        """Return the task with ``task_id``; raise NotFoundError if absent."""
        return cls._from_row(_fetch(conn, cls._TABLE, cls._COLUMNS, task_id))

    @classmethod
    def list(cls, conn) -> list[Task]:
        """Return every task in id order."""
        return [cls._from_row(row) for row in _fetch_all(conn, cls._TABLE, cls._COLUMNS)]

    @classmethod
    def create(cls, conn, title=None, description=None, status=None, project_id=None) -> Task:
        """Insert a task; fields left as None take the column defaults."""
        row_id = _insert(
            conn,
            cls._TABLE,
            {
                "title": title,
                "description": description,
                "status": status.sql_value if status is not None else None,
                "project_id": project_id,
            },
        )
        return cls.find(conn, row_id)

    @classmethod
    def update(
        cls, conn, task_id, title=None, description=None, status=None, project_id=None
    ) -> Task:
        """Change the given fields of a task and return it as stored."""
        _update(
            conn,
            cls._TABLE,
            task_id,
            {
                "title": title,
                "description": description,
                "status": status.sql_value if status is not None else None,
                "project_id": project_id,
            },
        )
        return cls.find(conn, task_id)

    @classmethod
    def delete(cls, conn, task_id) -> int:
        """Delete a task; return the number of rows removed."""
        return _delete(conn, cls._TABLE, task_id)

    def label(self) -> str:
        """Short form for list views."""
        return f"{self.id}: {self.title}"