"""Command-line entry point: ask for a player and level, play, keep a high score."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from snakearcade.controller import Controller
from snakearcade.game import Game
from snakearcade.renderer import Renderer

FRAMES_PER_SECOND = 60
MS_PER_FRAME = 1000 // FRAMES_PER_SECOND
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 640
GRID_WIDTH = 32
GRID_HEIGHT = 32
DEFAULT_HIGH_SCORE_FILE = "highest.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class HighScore:
    """The best score recorded and who achieved it."""

    username: str
    score: int


def load_high_score(path: str | Path) -> HighScore:
    """Read a high score file: the player's name, then the score.

    Raises OSError if the file cannot be read and ValueError if the
    second line does not begin with an integer.
    """
    with open(path, encoding="utf-8") as stream:
        username = stream.readline().rstrip("\n")
        score_text = stream.readline().rstrip("\n")
    match = _LEADING_INT.match(score_text)
    if match is None:
        raise ValueError(f"invalid high score: {score_text!r}")
    return HighScore(username, int(match.group(1)))


def save_high_score(path: str | Path, username: str, score: int) -> None:
    """Write the player's name and score as the new high score."""
    Path(path).write_text(f"{username}\n{score}", encoding="utf-8")


def _read_word() -> str:
    while True:
        try:
            line = input()
        except EOFError:
            return ""
        words = line.split()
        if words:
            return words[0]


def _read_difficulty() -> int:
    try:
        return int(_read_word())
    except ValueError:
        return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakearcade", description="Play snake.")
    parser.add_argument(
        "--high-score-file",
        default=DEFAULT_HIGH_SCORE_FILE,
        help="file holding the best player and score",
    )
    parser.add_argument("--font", default=None, help="TrueType font for the pause label")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game from the command line."""
    args = _parse_args(argv)

    print("Hi!! Welcome to Snake Game!\nPlease, enter your name to Proceed")
    print("User: ", end="", flush=True)
    username = _read_word()
    print("Please select the difficulty level: \n1. Easy\n2. Normal\n3. Hard")
    difficulty = _read_difficulty()

    game = Game(GRID_WIDTH, GRID_HEIGHT, difficulty)
    with Renderer(
        SCREEN_WIDTH, SCREEN_HEIGHT, GRID_WIDTH, GRID_HEIGHT, font_path=args.font
    ) as renderer:
        game.run(Controller(), renderer, MS_PER_FRAME)

    print(f"Thank you for playing: {username}")
    print("Game has terminated successfully!")
    print(f"Score: {game.score}")
    print(f"Size: {game.size}")

    try:
        best = load_high_score(args.high_score_file)
        if game.score > best.score:
            print(f"You have got highest score {username}!!")
            try:
                save_high_score(args.high_score_file, username, game.score)
            except OSError:
                pass
        else:
            print(
                f"The Highest score for the game is: {best.score} by {best.username}"
            )
    except (OSError, ValueError) as exc:
        print(f"Highest Score File I/O Exception: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())