"""A single-line text entry box."""

from __future__ import annotations

import curses

from onaroll.tui.drawing import _put, clear, draw_box
from onaroll.tui.events import Component, Key, KeyEvent
from onaroll.tui.layout import Rect


class UserInput(Component):
    """Editable text with a cursor, shown in a titled box."""

    def __init__(self, title: str, active: bool = False) -> None:
        self.title = title
        self.text = ""
        self.cursor = 0
        self.active = active

    def switch_active(self) -> None:
        """Toggle whether the box has focus."""
        self.active = not self.active

    def set_input(self, text: str) -> None:
        """Replace the text and put the cursor at its end."""
        self.text = text
        self.cursor = len(text)

    def reset(self) -> None:
        """Empty the box and move the cursor to the start."""
        self.text = ""
        self.cursor = 0

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self.text)))

    def _move_left(self) -> None:
        self.cursor = self._clamp(self.cursor - 1)

    def _move_right(self) -> None:
        self.cursor = self._clamp(self.cursor + 1)

    def _enter_char(self, char: str) -> None:
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self._move_right()

    def _delete_char(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self._move_left()

    def render(self, screen, area: Rect) -> None:
        """Draw the box and, when focused, place the terminal cursor in it."""
        clear(screen, area)
        inner = draw_box(screen, area, self.title)
        if inner.height > 0:
            _put(screen, inner.y, inner.x, self.text[: inner.width])
        if self.active:
            try:
                screen.move(area.y + 1, area.x + self.cursor + 1)
            except curses.error:
                pass

    def handle_key(self, event: KeyEvent) -> None:
        """Edit the text or move the cursor."""
        if event.key is Key.CHAR and event.char:
            self._enter_char(event.char)
        elif event.key is Key.BACKSPACE:
            self._delete_char()
        elif event.key is Key.LEFT:
            self._move_left()
        elif event.key is Key.RIGHT:
            self._move_right()