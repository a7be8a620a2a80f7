"""A form of title, description and status fields with keyboard focus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from onaroll.tui.events import Component, Key, KeyEvent
from onaroll.tui.layout import Rect, split_horizontal, split_vertical
from onaroll.tui.list_selection import ListSelection
from onaroll.tui.user_input import UserInput


class InputField(Enum):
    """The fields of the form, in focus order."""

    TITLE = auto()
    DESCRIPTION = auto()
    STATUS = auto()


@dataclass(frozen=True)
class Inputs:
    """The values currently entered in a MultiInput."""

    title: str
    description: str
    status: Any


class MultiInput(Component):
    """Title and description boxes beside a list of statuses."""

    def __init__(self, status_type) -> None:
        self.title = UserInput("Task Title", True)
        self.description = UserInput("Task Description", False)
        self.status = ListSelection(list(status_type), "Status")
        self.active_field = InputField.TITLE

    def _widget(self, field: InputField):
        return {
            InputField.TITLE: self.title,
            InputField.DESCRIPTION: self.description,
            InputField.STATUS: self.status,
        }[field]

    def _switch_field(self, reverse: bool) -> None:
        fields = list(InputField)
        step = -1 if reverse else 1
        following = fields[(fields.index(self.active_field) + step) % len(fields)]
        self._widget(self.active_field).switch_active()
        self.active_field = following
        self._widget(self.active_field).switch_active()

    def get_inputs(self) -> Inputs:
        """Return the entered title, description and selected status."""
        status = self.status.selected()
        if status is None:
            raise ValueError("No status is selected")
        return Inputs(self.title.text, self.description.text, status)

    def reset(self) -> None:
        """Clear the text fields, select the first status and focus the title."""
        self.title.reset()
        self.description.reset()
        self.status.reset()
        self.active_field = InputField.TITLE

    def set_inputs(self, title: str, description: str | None, status) -> None:
        """Fill the form; a None description leaves that field as it is."""
        self.title.set_input(title)
        if description is not None:
            self.description.set_input(description)
        self.status.set_selected(status)

    def render(self, screen, area: Rect) -> None:
        """Draw the text boxes on the left and the status list on the right."""
        text_area, list_area = split_horizontal(area, (65, 35))
        title_area, description_area = split_vertical(text_area, (50, 50))
        self.title.render(screen, title_area)
        self.description.render(screen, description_area)
        self.status.render(screen, list_area)

    def handle_key(self, event: KeyEvent) -> None:
        """Move focus with Tab and Shift-Tab; pass other keys to the focused field."""
        if event.key is Key.TAB:
            self._switch_field(False)
        elif event.key is Key.BACK_TAB:
            self._switch_field(True)
        else:
            self._widget(self.active_field).handle_key(event)