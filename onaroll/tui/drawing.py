"""Low-level drawing helpers for curses windows."""

from __future__ import annotations

import curses
import textwrap
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from onaroll.tui.layout import Rect

_TOP_LEFT, _TOP_RIGHT, _BOTTOM_LEFT, _BOTTOM_RIGHT = "┌┐└┘"
_HORIZONTAL, _VERTICAL = "─│"


def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write ``text`` at (y, x), clipped to the window."""
    rows, cols = screen.getmaxyx()
    if not 0 <= y < rows or x >= cols or not text:
        return
    if x < 0:
        text = text[-x:]
        x = 0
    text = text[: cols - x]
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell succeeds but reports an error.
        pass


def _fill(screen, area: Rect, attr: int) -> None:
    blank = " " * area.width
    for y in range(area.y, area.bottom):
        _put(screen, y, area.x, blank, attr)


def clear(screen, area: Rect) -> None:
    """Blank every cell of ``area``."""
    _fill(screen, area, 0)


def draw_box(screen, area: Rect, title: str = "", attr: int = 0) -> Rect:
    """Draw a border around ``area`` with ``title`` on top; return the inside."""
    if area.width >= 2 and area.height >= 2:
        span = _HORIZONTAL * (area.width - 2)
        _put(screen, area.y, area.x, _TOP_LEFT + span + _TOP_RIGHT, attr)
        for y in range(area.y + 1, area.bottom - 1):
            _put(screen, y, area.x, _VERTICAL, attr)
            _put(screen, y, area.right - 1, _VERTICAL, attr)
        _put(screen, area.bottom - 1, area.x, _BOTTOM_LEFT + span + _BOTTOM_RIGHT, attr)
        if title:
            _put(screen, area.y, area.x + 1, title[: area.width - 2], attr)
    return area.inner(1)


def draw_paragraph(screen, area: Rect, lines: Iterable[str], title: str = "") -> None:
    """Clear ``area``, frame it with ``title`` and write ``lines`` inside."""
    clear(screen, area)
    inner = draw_box(screen, area, title)
    for y, line in zip(range(inner.y, inner.bottom), lines):
        _put(screen, y, inner.x, line[: inner.width])


def _wrap(content: str | Sequence[str], width: int) -> list[str]:
    if width <= 0:
        return []
    text = content if isinstance(content, str) else "\n".join(content)
    rows: list[str] = []
    for paragraph in text.splitlines():
        rows.extend(textwrap.wrap(paragraph, width) or [""])
    return rows


@dataclass
class Popup:
    """A framed box of wrapped text drawn over whatever lies beneath it."""

    title: str = ""
    content: str | Sequence[str] = ""
    border_attr: int = 0
    title_attr: int = 0
    attr: int = 0

    def render(self, screen, area: Rect) -> None:
        """Draw the popup into ``area``."""
        _fill(screen, area, self.attr)
        inner = draw_box(screen, area, "", self.border_attr)
        if self.title and area.width > 2:
            _put(screen, area.y, area.x + 1, self.title[: area.width - 2], self.title_attr)
        for y, row in zip(range(inner.y, inner.bottom), _wrap(self.content, inner.width)):
            _put(screen, y, inner.x, row, self.attr)