"""Keyboard handling: turning, pausing and quitting."""

from __future__ import annotations

from typing import Any, Iterable

import pygame

from snakearcade.snake import Direction, Snake

_ARROWS = {
    pygame.K_UP: (Direction.UP, Direction.DOWN),
    pygame.K_DOWN: (Direction.DOWN, Direction.UP),
    pygame.K_LEFT: (Direction.LEFT, Direction.RIGHT),
    pygame.K_RIGHT: (Direction.RIGHT, Direction.LEFT),
}


class Controller:
    """Translates input events into changes to the snake and game state."""

    def change_direction(
        self, snake: Snake, new_direction: Direction, opposite: Direction
    ) -> None:
        """Turn the snake unless that would reverse it onto its own body."""
        if snake.direction != opposite or snake.size == 1:
            snake.direction = new_direction

    def handle_input(
        self, events: Iterable[Any], snake: Snake, paused: bool
    ) -> tuple[bool, bool]:
        """Process events and return the new (running, paused) state.

        Escape pauses and Return resumes; either stops processing of the
        remaining events for this frame.
        """
        running = True
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return running, True
                if event.key == pygame.K_RETURN:
                    return running, False
                turn = _ARROWS.get(event.key)
                if turn is not None:
                    self.change_direction(snake, *turn)
        return running, paused