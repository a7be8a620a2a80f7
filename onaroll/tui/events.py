"""Keyboard events and the interfaces shared by screen components."""

from __future__ import annotations

import curses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """The kinds of key press the interface reacts to."""

    CHAR = auto()
    ENTER = auto()
    ESC = auto()
    TAB = auto()
    BACK_TAB = auto()
    BACKSPACE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``char`` is set for printable characters."""

    key: Key
    char: str | None = None


_SPECIAL: dict[int | str, Key] = {
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BTAB: Key.BACK_TAB,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x1b": Key.ESC,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
}


def key_from_curses(code: int | str) -> KeyEvent:
    """Translate a value from ``getch``/``get_wch`` into a KeyEvent."""
    if isinstance(code, int):
        if code in _SPECIAL:
            return KeyEvent(_SPECIAL[code])
        if not 0 <= code < curses.KEY_MIN:
            return KeyEvent(Key.OTHER)
        code = chr(code)
    if code in _SPECIAL:
        return KeyEvent(_SPECIAL[code])
    if len(code) == 1 and code.isprintable():
        return KeyEvent(Key.CHAR, code)
    return KeyEvent(Key.OTHER)


class Component(ABC):
    """Something that draws itself into an area and reacts to keys."""

    @abstractmethod
    def render(self, screen, area) -> None:
        """Draw into ``area`` of ``screen``."""

    @abstractmethod
    def handle_key(self, event: KeyEvent) -> None:
        """React to a key press."""


class InputSubmit(ABC):
    """A form whose contents can be committed and then cleared."""

    def submit_and_reset(self) -> None:
        """Commit the form, then clear it."""
        self.submit()
        self.reset()

    @abstractmethod
    def submit(self) -> None:
        """Commit the form's contents."""

    @abstractmethod
    def reset(self) -> None:
        """Clear the form."""