"""Screen rectangles and the arithmetic for dividing them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the screen, in character cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int) -> Rect:
        """Shrink by ``margin`` cells on every side; an empty Rect if it does not fit."""
        if margin < 0:
            raise ValueError("margin must not be negative")
        if self.width < 2 * margin or self.height < 2 * margin:
            return Rect(0, 0, 0, 0)
        return Rect(
            self.x + margin,
            self.y + margin,
            self.width - 2 * margin,
            self.height - 2 * margin,
        )


def _sizes(total: int, weights: Sequence[int]) -> list[int]:
    if not weights:
        raise ValueError("at least one weight is needed")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    whole = sum(weights)
    if whole == 0:
        raise ValueError("weights must not all be zero")
    sizes = []
    start = 0
    running = 0
    for weight in weights:
        running += weight
        end = (2 * total * running + whole) // (2 * whole)
        sizes.append(end - start)
        start = end
    return sizes


def split_horizontal(area: Rect, weights: Sequence[int]) -> list[Rect]:
    """Divide ``area`` into side-by-side columns sized in proportion to ``weights``."""
    columns = []
    x = area.x
    for width in _sizes(area.width, weights):
        columns.append(Rect(x, area.y, width, area.height))
        x += width
    return columns


def split_vertical(area: Rect, weights: Sequence[int]) -> list[Rect]:
    """Divide ``area`` into stacked rows sized in proportion to ``weights``."""
    rows = []
    y = area.y
    for height in _sizes(area.height, weights):
        rows.append(Rect(area.x, y, area.width, height))
        y += height
    return rows


def _centered_weights(percent: int) -> tuple[int, int, int]:
    if not 0 <= percent <= 100:
        raise ValueError(f"percentage must be between 0 and 100, got {percent}")
    side = (100 - percent) // 2
    return side, percent, 100 - side - percent


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle covering the given percentages of ``area``, centred in it."""
    row = split_vertical(area, _centered_weights(percent_y))[1]
    return split_horizontal(row, _centered_weights(percent_x))[1]