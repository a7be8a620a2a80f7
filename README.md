# onaroll

A small task and project tracker. Everything is stored in one SQLite
database. You can work with it from a command line (`roll`) or from an
interactive curses terminal interface (`roll-tui`).

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

The terminal interface uses Python's `curses` module, which is available
on Linux, macOS and other POSIX systems.

## Configuration

Set `DATABASE_URL` to the path of the SQLite database file. It is read from
the environment, or from a `.env` file found in the working directory or
one of its parents:

```
DATABASE_URL=roll.db
```

A value starting with `file:` is opened as an SQLite URI. The tables are
created the first time you connect. If `DATABASE_URL` is not set, both
commands print `DATABASE_URL must be set` and exit with status 1.

## Command line

Tasks:

```
roll task add "Write report" "Quarterly numbers" "In Progress" 1
roll task update 3 --title "Write final report" --status Completed --project 2
roll task read 3
roll task list
roll task delete 3
```

Projects:

```
roll project add "Website" "Relaunch of the site" Active
roll project update 1 --status "On Hold"
roll project read 1
roll project list
roll project delete 1
```

For `add`, every argument is optional and they are taken in order: title,
description, status and, for tasks, project id. A task with no title is
called `New Task` and starts as `Todo`. A project with no title is called
`New Project` and starts as `Planning`.

`update` takes the id and any of `-t/--title`, `-d/--description`,
`-s/--status` and, for tasks, `-p/--project`. Only the options given are
changed; an update with none of them reports an error.

Errors from the database, and ids that do not exist for `read`, are
reported on standard error. `delete` of an unknown id reports
`Deleted 0 task(s)` (or `project(s)`).

Task statuses: `Todo`, `In Progress`, `Blocked`, `In Review`, `Completed`,
`On Hold`, `Canceled`.

Project statuses: `Planning`, `Active`, `On Hold`, `Blocked`, `In Review`,
`Completed`, `Canceled`.

## Terminal interface

```
roll-tui
```

The screen shows the task list, the project list and the title,
description and status of the item selected in the active list.

| Key         | Action                                     |
|-------------|--------------------------------------------|
| `j` / `k`   | move down / up in the active list          |
| `Tab`       | switch between tasks and projects          |
| `a`         | add an item                                |
| `u`         | update the selected item                   |
| `d`         | delete the selected item                   |
| `q`         | quit                                       |

In a form, `Tab` and `Shift+Tab` move between the title, the description
and the status list; `Left`, `Right` and `Backspace` edit text, `j` and `k`
move in the status list. `Enter` saves and `Esc` cancels. On the delete
confirmation, `Enter` deletes and `Esc` cancels.

## What it does not do

- The terminal interface does not assign tasks to projects, and its detail
  pane does not show a task's project; use `roll task add` or
  `roll task update --project` for that.
- Tasks are not listed or filtered by project.
- Deleting a project leaves its tasks in place, still holding the old
  project id.

## Using it as a library

```python
from onaroll.db import connect
from onaroll.models import NotFoundError, Project, Task
from onaroll.status import TaskStatus

conn = connect(":memory:")  # creates the tables

project = Project.create(conn, "Website", None, None)
task = Task.create(conn, "Draft copy", None, TaskStatus.parse("In Progress"), project.id)
print(task.label())            # "1: Draft copy"

Task.update(conn, task.id, status=TaskStatus.COMPLETED)
print(Task.find(conn, task.id).status)   # "Completed"

try:
    Task.find(conn, 9999)
except NotFoundError:
    print("no such task")
```

`onaroll.db` also offers `run_migrations(conn)` for a connection opened
elsewhere and `establish_connection()`, which connects to `DATABASE_URL`.
`ProjectStatus.parse` and `TaskStatus.parse` raise `ValueError` for an
unknown status label.