"""A bordered list with a movable selection."""

from __future__ import annotations

import curses
from collections.abc import Callable, Iterable
from typing import Any

from onaroll.tui.drawing import _put, clear, draw_box
from onaroll.tui.events import Component, Key, KeyEvent
from onaroll.tui.layout import Rect

HIGHLIGHT_SYMBOL = ">>"
_ITALIC = getattr(curses, "A_ITALIC", curses.A_NORMAL)


def _default_label(item: Any) -> str:
    label = getattr(item, "label", None)
    return label() if callable(label) else str(item)


class ListSelection(Component):
    """Items shown one per line, with one of them selected."""

    def __init__(
        self,
        items: Iterable[Any],
        title: str,
        label: Callable[[Any], str] = _default_label,
    ) -> None:
        self.items = list(items)
        self.title = title
        self.label = label
        self.cursor: int | None = 0
        self.active = False
        self._offset = 0

    def set_items(self, items: Iterable[Any]) -> None:
        """Replace the items and select the first."""
        self.items = list(items)
        self.cursor = 0
        self._offset = 0

    def switch_active(self) -> None:
        """Toggle whether the list has focus."""
        self.active = not self.active

    def selected(self) -> Any | None:
        """Return the selected item, or None when nothing is selected."""
        if self.cursor is None or not 0 <= self.cursor < len(self.items):
            return None
        return self.items[self.cursor]

    def reset(self) -> None:
        """Select the first item."""
        self.cursor = 0

    def select_next(self) -> None:
        """Move the selection down, wrapping to the top."""
        if not self.items:
            self.cursor = None
            return
        self.cursor = 0 if self.cursor is None else (self.cursor + 1) % len(self.items)

    def select_previous(self) -> None:
        """Move the selection up, wrapping to the bottom."""
        if not self.items:
            self.cursor = None
            return
        if self.cursor is None or self.cursor == 0:
            self.cursor = len(self.items) - 1
        else:
            self.cursor -= 1

    def set_selected(self, item: Any) -> None:
        """Select ``item``; raise ValueError if it is not in the list."""
        try:
            self.cursor = self.items.index(item)
        except ValueError:
            raise ValueError("Item not found in the list.") from None

    def render(self, screen, area: Rect) -> None:
        """Draw the list, highlighting the selected item."""
        if not self.items:
            self.cursor = None
        elif self.cursor is not None and self.cursor >= len(self.items):
            self.cursor = len(self.items) - 1

        clear(screen, area)
        inner = draw_box(screen, area, self.title)
        if inner.height <= 0:
            return

        if self.cursor is not None:
            if self.cursor < self._offset:
                self._offset = self.cursor
            elif self.cursor >= self._offset + inner.height:
                self._offset = self.cursor - inner.height + 1
        self._offset = max(0, min(self._offset, max(0, len(self.items) - inner.height)))

        if self.active:
            highlight = curses.A_REVERSE | curses.A_BOLD | _ITALIC
        else:
            highlight = _ITALIC
        padding = " " * len(HIGHLIGHT_SYMBOL)
        visible = self.items[self._offset : self._offset + inner.height]
        for index, (y, item) in enumerate(zip(range(inner.y, inner.bottom), visible), self._offset):
            if index == self.cursor:
                text = (HIGHLIGHT_SYMBOL + self.label(item)).ljust(inner.width)
                _put(screen, y, inner.x, text[: inner.width], highlight)
            else:
                _put(screen, y, inner.x, (padding + self.label(item))[: inner.width])

    def handle_key(self, event: KeyEvent) -> None:
        """Move the selection with j and k."""
        if event.key is Key.CHAR:
            if event.char == "j":
                self.select_next()
            elif event.char == "k":
                self.select_previous()