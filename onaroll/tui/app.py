"""The full-screen interface: task and project lists with a detail pane."""

from __future__ import annotations

import argparse
import curses
import os
import sys
from collections.abc import Sequence
from enum import Enum, auto

from onaroll.db import establish_connection
from onaroll.tui.drawing import draw_paragraph
from onaroll.tui.events import InputSubmit, Key, KeyEvent, key_from_curses
from onaroll.tui.layout import Rect, centered_rect, split_horizontal, split_vertical
from onaroll.tui.lists import ProjectList, TaskList


class Screen(Enum):
    """Which list has focus."""

    PROJECTS = auto()
    TASKS = auto()


class App:
    """Holds the lists, the open popup and the focus, and runs the event loop."""

    def __init__(self, conn=None) -> None:
        self.conn = conn if conn is not None else establish_connection()
        self.tasks = TaskList(self.conn)
        self.projects = ProjectList(self.conn)
        self.active_screen = Screen.TASKS
        self.popup: InputSubmit | None = None
        self.exited = False
        self.tasks.switch_active()

    @property
    def _active_list(self):
        return self.tasks if self.active_screen is Screen.TASKS else self.projects

    def _take_popup(self) -> InputSubmit | None:
        if self.popup is None:
            for source in (self.projects, self.tasks):
                if source.popup is not None:
                    self.popup, source.popup = source.popup, None
                    break
        return self.popup

    def run(self, screen) -> None:
        """Draw and handle keys until the user quits."""
        while not self.exited:
            self.draw(screen)
            try:
                code = screen.get_wch()
            except curses.error:
                continue
            self.handle_key(key_from_curses(code))

    def draw(self, screen) -> None:
        """Draw the whole interface onto ``screen``."""
        rows, cols = screen.getmaxyx()
        screen.erase()
        full = Rect(0, 0, cols, rows)
        body = full.inner(1)
        main_area, side = split_horizontal(
            Rect(body.x, body.y, max(0, body.width - 1), body.height), (3, 2)
        )
        detail_area = Rect(side.x + 1, side.y, side.width, side.height)
        task_area, project_area = split_vertical(main_area, (50, 50))

        lines = self.detail_lines()
        if lines:
            draw_paragraph(screen, detail_area, lines, self._detail_title())
        self.tasks.render(screen, task_area)
        self.projects.render(screen, project_area)

        popup = self._take_popup()
        if popup is not None:
            popup.render(screen, centered_rect(60, 20, full))
        try:
            curses.curs_set(1 if popup is not None else 0)
        except curses.error:
            pass
        screen.refresh()

    def _detail_title(self) -> str:
        return "Task details" if self.active_screen is Screen.TASKS else "Project details"

    def detail_lines(self) -> list[str]:
        """Describe the selected item of the focused list; empty if none is selected."""
        item = self._active_list.selected()
        if item is None:
            return []
        return [
            f"Title: {item.title}",
            f"Description: {item.description or ''}",
            f"Status: {item.status}",
        ]

    def handle_key(self, event: KeyEvent) -> None:
        """Route a key press to the popup, or to the focused list."""
        popup = self._take_popup()
        if popup is not None:
            self._handle_popup_key(popup, event)
        elif event.key is Key.CHAR and event.char == "q":
            self.exited = True
        elif event.key is Key.TAB:
            self.active_screen = (
                Screen.PROJECTS if self.active_screen is Screen.TASKS else Screen.TASKS
            )
            self.tasks.switch_active()
            self.projects.switch_active()
        else:
            self._active_list.handle_key(event)

    def _handle_popup_key(self, popup: InputSubmit, event: KeyEvent) -> None:
        if event.key is Key.ENTER:
            popup.submit_and_reset()
            self.tasks.refresh()
            self.projects.refresh()
            self.popup = None
        elif event.key is Key.ESC:
            self.popup = None
        else:
            popup.handle_key(event)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the full-screen interface."""
    argparse.ArgumentParser(
        prog="roll-tui", description="Browse and edit projects and tasks."
    ).parse_args(argv)
    try:
        conn = establish_connection()
    except (RuntimeError, ConnectionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(App(conn).run)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())