import io
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest.mock import patch

import pygame
import pytest

from snakearcade.main import HighScore, load_high_score, main, save_high_score


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "hs.txt"
    save_high_score(path, "carol", 12)
    assert load_high_score(path) == HighScore("carol", 12)


def test_save_format(tmp_path):
    path = tmp_path / "hs.txt"
    save_high_score(path, "carol", 12)
    assert path.read_text() == "carol\n12"


def test_load_accepts_trailing_text(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("dave\n9 points\n")
    assert load_high_score(path) == HighScore("dave", 9)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_high_score(tmp_path / "absent.txt")


@pytest.mark.parametrize("content", ["erin\nabc", "erin\n", ""])
def test_load_invalid_score(tmp_path, content):
    path = tmp_path / "hs.txt"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_high_score(path)


def _run_main(monkeypatch, path, stdin_text="bob\n1\n"):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    quit_event = pygame.event.Event(pygame.QUIT)
    with patch("pygame.event.get", return_value=[quit_event]):
        return main(["--high-score-file", str(path)])


def test_main_keeps_better_high_score(monkeypatch, tmp_path, capsys):
    path = tmp_path / "hs.txt"
    save_high_score(path, "alice", 5)
    assert _run_main(monkeypatch, path) == 0
    out = capsys.readouterr().out
    assert "Thank you for playing: bob" in out
    assert "The Highest score for the game is: 5 by alice" in out
    assert load_high_score(path) == HighScore("alice", 5)


def test_main_records_new_high_score(monkeypatch, tmp_path, capsys):
    path = tmp_path / "hs.txt"
    save_high_score(path, "alice", -1)
    _run_main(monkeypatch, path)
    out = capsys.readouterr().out
    assert "You have got highest score bob!!" in out
    best = load_high_score(path)
    assert best.username == "bob"
    assert best.score > -1


def test_main_reports_missing_file(monkeypatch, tmp_path, capsys):
    path = tmp_path / "absent.txt"
    _run_main(monkeypatch, path)
    captured = capsys.readouterr()
    assert "Highest Score File I/O Exception" in captured.err
    assert not path.exists()


def test_main_reports_score_and_size(monkeypatch, tmp_path, capsys):
    path = tmp_path / "hs.txt"
    save_high_score(path, "alice", 5)
    _run_main(monkeypatch, path, stdin_text="frank\n2\n")
    out = capsys.readouterr().out
    assert "Score: 0" in out
    assert "Size: 1" in out