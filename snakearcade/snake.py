"""The snake: its head position, body cells, movement and growth."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """Directions the snake's head can travel in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Point(NamedTuple):
    """A cell on the grid."""

    x: int
    y: int


@dataclass
class Snake:
    """A snake on a wrapping grid, starting at its centre and heading up."""

    grid_width: int
    grid_height: int
    direction: Direction = field(default=Direction.UP, init=False)
    speed: float = field(default=0.4, init=False)
    size: int = field(default=1, init=False)
    alive: bool = field(default=True, init=False)
    head_x: float = field(init=False)
    head_y: float = field(init=False)
    body: list[Point] = field(default_factory=list, init=False)
    _growing: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.head_x = float(self.grid_width // 2)
        self.head_y = float(self.grid_height // 2)

    @property
    def head_cell(self) -> Point:
        """The grid cell the head currently occupies."""
        return Point(int(self.head_x), int(self.head_y))

    def update(self) -> None:
        """Advance the head and, if it entered a new cell, move the body."""
        prev_cell = self.head_cell
        self._update_head()
        current_cell = self.head_cell
        if current_cell != prev_cell:
            self._update_body(current_cell, prev_cell)

    def _update_head(self) -> None:
        if self.direction is Direction.UP:
            self.head_y -= self.speed
        elif self.direction is Direction.DOWN:
            self.head_y += self.speed
        elif self.direction is Direction.LEFT:
            self.head_x -= self.speed
        elif self.direction is Direction.RIGHT:
            self.head_x += self.speed

        # Wrap around when leaving the grid.
        self.head_x = math.fmod(self.head_x + self.grid_width, self.grid_width)
        self.head_y = math.fmod(self.head_y + self.grid_height, self.grid_height)

    def _update_body(self, current_head: Point, prev_head: Point) -> None:
        self.body.append(prev_head)
        if self._growing:
            self._growing = False
            self.size += 1
        else:
            self.body.pop(0)

        if current_head in self.body:
            self.alive = False

    def grow_body(self) -> None:
        """Grow by one cell the next time the head enters a new cell."""
        self._growing = True

    def snake_cell(self, x: int, y: int) -> bool:
        """Return True if the cell (x, y) is occupied by the head or body."""
        cell = Point(x, y)
        return cell == self.head_cell or cell in self.body