"""SQLite connection handling and schema migrations."""

from __future__ import annotations

import os
import sqlite3

from dotenv import find_dotenv, load_dotenv

from onaroll.models import (
    DEFAULT_PROJECT_STATUS,
    DEFAULT_PROJECT_TITLE,
    DEFAULT_TASK_STATUS,
    DEFAULT_TASK_TITLE,
)

_MIGRATIONS = (
    f"""
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
        title TEXT NOT NULL DEFAULT '{DEFAULT_PROJECT_TITLE}',
        description TEXT,
        status TEXT NOT NULL DEFAULT '{DEFAULT_PROJECT_STATUS.sql_value}'
    );
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
        title TEXT NOT NULL DEFAULT '{DEFAULT_TASK_TITLE}',
        description TEXT,
        status TEXT NOT NULL DEFAULT '{DEFAULT_TASK_STATUS.sql_value}',
        project_id INTEGER REFERENCES projects(id)
    );
    """,
)


def run_migrations(conn: sqlite3.Connection) -> int:
    """Apply every migration the database has not seen yet; return how many ran."""
    version = conn.execute("PRAGMA user_version").fetchone()[0]
    pending = _MIGRATIONS[version:]
    for number, script in enumerate(pending, start=version + 1):
        conn.executescript(f"{script}\nPRAGMA user_version = {number};")
    return len(pending)


def connect(url: str) -> sqlite3.Connection:
    """Open the database at ``url`` and bring its schema up to date."""
    try:
        conn = sqlite3.connect(url, uri=url.startswith("file:"))
        conn.row_factory = sqlite3.Row
        run_migrations(conn)
    except sqlite3.Error as exc:
        raise ConnectionError(f"Error connecting to {url}") from exc
    return conn


def establish_connection() -> sqlite3.Connection:
    """Connect to the database named by DATABASE_URL, read from the environment or .env."""
    load_dotenv(find_dotenv(usecwd=True))
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL must be set")
    return connect(url)