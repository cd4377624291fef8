"""Drawing the game state into a pygame window."""

from __future__ import annotations

from typing import Iterable

import pygame

from snakearcade.snake import Point, Snake

BACKGROUND = (0x1E, 0x1E, 0x1E)
FOOD_COLOR = (0xFF, 0xCC, 0x00)
POISON_COLOR = (0xFF, 0x00, 0x00)
WALL_COLOR = (0x00, 0xFF, 0xFF)
BODY_COLOR = (0xFF, 0xFF, 0xFF)
HEAD_ALIVE_COLOR = (0x00, 0x7A, 0xCC)
HEAD_DEAD_COLOR = (0xFF, 0x00, 0x00)
TEXT_COLOR = (255, 255, 255)

WINDOW_TITLE = "Snake Game"
PAUSE_TEXT = "PAUSE"
FONT_SIZE = 24


def format_title(score: int, fps: int) -> str:
    """Return the window title showing the score and frames per second."""
    return f"Snake Score: {score} FPS: {fps}"


class Renderer:
    """Draws the snake, food, poison and wall onto a window of cells."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        grid_width: int,
        grid_height: int,
        font_path: str | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.grid_width = grid_width
        self.grid_height = grid_height

        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((screen_width, screen_height))
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = self._load_font(font_path)

    @staticmethod
    def _load_font(font_path: str | None) -> pygame.font.Font:
        if font_path is not None:
            try:
                return pygame.font.Font(font_path, FONT_SIZE)
            except (OSError, pygame.error):
                print("Error in font")
        return pygame.font.Font(None, FONT_SIZE)

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def block_size(self) -> tuple[int, int]:
        """Width and height in pixels of one grid cell."""
        return (
            self.screen_width // self.grid_width,
            self.screen_height // self.grid_height,
        )

    def _fill_cell(self, x: int, y: int, color: tuple[int, int, int]) -> None:
        width, height = self.block_size
        self.surface.fill(color, pygame.Rect(x * width, y * height, width, height))

    def render(
        self,
        snake: Snake,
        foods: Iterable[Point],
        poison: Point,
        wall: Iterable[Point],
        paused: bool,
    ) -> None:
        """Draw one frame and show it."""
        self.surface.fill(BACKGROUND)

        if paused:
            self.render_pause_screen()

        for food in foods:
            self._fill_cell(food.x, food.y, FOOD_COLOR)

        if poison.x != -1:
            self._fill_cell(poison.x, poison.y, POISON_COLOR)

        for brick in wall:
            self._fill_cell(brick.x, brick.y, WALL_COLOR)

        for cell in snake.body:
            self._fill_cell(cell.x, cell.y, BODY_COLOR)

        head = snake.head_cell
        self._fill_cell(
            head.x, head.y, HEAD_ALIVE_COLOR if snake.alive else HEAD_DEAD_COLOR
        )

        pygame.display.flip()

    def update_window_title(self, score: int, fps: int) -> None:
        """Show the score and frame rate in the window title."""
        pygame.display.set_caption(format_title(score, fps))

    def render_pause_screen(self) -> None:
        """Draw the pause label near the bottom-left corner."""
        text = self.font.render(PAUSE_TEXT, False, TEXT_COLOR)
        self.surface.blit(text, (20, self.screen_height - 30))

    def close(self) -> None:
        """Close the window and release the display."""
        pygame.font.quit()
        pygame.display.quit()