"""Game state: food, poison, walls, scoring and the main loop."""

from __future__ import annotations

import random
import time
from typing import Any

import pygame

from snakearcade.snake import Point, Snake

_NO_POISON = Point(-1, -1)


def _ticks() -> int:
    return int(time.monotonic() * 1000)


class Game:
    """A snake game on a grid, at a difficulty level from 1 (easy) to 3 (hard).

    Level 2 and above add a poison cell; level 3 adds a three-cell wall.
    """

    food_count = 2

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        difficulty: int,
        rng: random.Random | None = None,
    ) -> None:
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.difficulty = difficulty
        self.snake = Snake(grid_width, grid_height)
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.poison = _NO_POISON
        self.wall: list[Point] = []
        self.foods = [self.place_food() for _ in range(self.food_count)]

        if difficulty == 1:
            self.snake.speed = 0.3
        elif difficulty >= 2:
            self.snake.speed = 0.35
            self.place_poison()
            if difficulty == 3:
                self.place_wall()

    @property
    def size(self) -> int:
        """Current length of the snake."""
        return self.snake.size

    def _random_cell(self) -> Point:
        return Point(
            self.rng.randint(0, self.grid_width - 1),
            self.rng.randint(0, self.grid_height - 1),
        )

    def place_food(self) -> Point:
        """Return a random cell not occupied by the snake."""
        while True:
            cell = self._random_cell()
            if not self.snake.snake_cell(*cell):
                return cell

    def place_poison(self) -> Point:
        """Move the poison to a random cell not occupied by the snake."""
        while True:
            cell = self._random_cell()
            if not self.snake.snake_cell(*cell):
                self.poison = cell
                return cell

    def place_wall(self) -> list[Point]:
        """Place a three-cell horizontal wall clear of the snake and poison."""
        while True:
            x, y = self._random_cell()
            if not self.snake.snake_cell(x, y) and not self.poison_cell(x, y):
                self.wall = [Point(x - 1, y), Point(x, y), Point(x + 1, y)]
                return self.wall

    def poison_cell(self, x: int, y: int) -> bool:
        """Return True if (x, y) holds the poison."""
        return self.poison == Point(x, y)

    def wall_cell(self, x: int, y: int) -> bool:
        """Return True if (x, y) is part of the wall."""
        return Point(x, y) in self.wall

    def update(self, paused: bool) -> bool:
        """Advance one frame; return False once the game should stop."""
        if paused:
            return True
        if not self.snake.alive:
            return False

        self.snake.update()
        head = self.snake.head_cell

        for index, food in enumerate(self.foods):
            if food == head:
                self.score += 1
                self.foods[index] = self.place_food()
                self.snake.grow_body()
                if self.snake.speed > 0.12:
                    self.snake.speed -= 0.01

        if head == self.poison or head in self.wall:
            self.snake.alive = False
        return True

    def run(self, controller: Any, renderer: Any, target_frame_duration: int) -> None:
        """Run the input/update/render loop until the player quits or dies.

        ``target_frame_duration`` is in milliseconds.
        """
        title_timestamp = _ticks()
        frame_count = 0
        running = True
        paused = False

        while running:
            frame_start = _ticks()

            running, paused = controller.handle_input(
                pygame.event.get(), self.snake, paused
            )
            running = self.update(paused) and running
            renderer.render(self.snake, self.foods, self.poison, self.wall, paused)

            frame_end = _ticks()
            frame_count += 1
            frame_duration = frame_end - frame_start

            if frame_end - title_timestamp >= 1000:
                renderer.update_window_title(self.score, frame_count)
                frame_count = 0
                title_timestamp = frame_end

            if frame_duration < target_frame_duration:
                time.sleep((target_frame_duration - frame_duration) / 1000)