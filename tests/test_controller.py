from types import SimpleNamespace

import pygame
import pytest

from snakearcade.controller import Controller
from snakearcade.snake import Direction, Snake


def key(k):
    return SimpleNamespace(type=pygame.KEYDOWN, key=k)


@pytest.fixture
def controller():
    return Controller()


@pytest.fixture
def snake():
    return Snake(32, 32)


def test_change_direction_allows_reverse_when_size_one(controller, snake):
    controller.change_direction(snake, Direction.DOWN, Direction.UP)
    assert snake.direction is Direction.DOWN


def test_change_direction_blocks_reverse_when_longer(controller, snake):
    snake.size = 2
    controller.change_direction(snake, Direction.DOWN, Direction.UP)
    assert snake.direction is Direction.UP


def test_change_direction_allows_turn_when_longer(controller, snake):
    snake.size = 3
    controller.change_direction(snake, Direction.LEFT, Direction.RIGHT)
    assert snake.direction is Direction.LEFT


def test_quit_event_stops_running(controller, snake):
    running, paused = controller.handle_input(
        [SimpleNamespace(type=pygame.QUIT)], snake, False
    )
    assert (running, paused) == (False, False)


def test_no_events_keeps_state(controller, snake):
    assert controller.handle_input([], snake, True) == (True, True)


def test_escape_pauses_and_stops_processing(controller, snake):
    running, paused = controller.handle_input(
        [key(pygame.K_ESCAPE), key(pygame.K_LEFT)], snake, False
    )
    assert paused is True
    assert running is True
    assert snake.direction is Direction.UP


def test_return_resumes(controller, snake):
    running, paused = controller.handle_input([key(pygame.K_RETURN)], snake, True)
    assert (running, paused) == (True, False)


@pytest.mark.parametrize(
    "k, expected",
    [
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_UP, Direction.UP),
    ],
)
def test_arrow_keys_turn_snake(controller, snake, k, expected):
    controller.handle_input([key(k)], snake, False)
    assert snake.direction is expected


def test_unrelated_key_is_ignored(controller, snake):
    result = controller.handle_input([key(pygame.K_a)], snake, False)
    assert result == (True, False)
    assert snake.direction is Direction.UP