# tests/conftest.py
from __future__ import annotations

import itertools

import pytest

from tetris_game import Game
from tetris_piece import NAMES, SHAPES, Piece


class RecordingScheduler:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.running = False

    def start(self) -> None:
        self.calls.append("start")
        self.running = True

    def stop(self) -> None:
        self.calls.append("stop")
        self.running = False


class CyclingFactory:
    """Hands out catalog shapes by index, repeating the last sequence forever."""

    seed = None

    def __init__(self, *indices: int) -> None:
        self._indices = itertools.cycle(indices)

    def create_piece(self) -> Piece:
        return Piece.spawn(SHAPES[next(self._indices)])


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def make_game(scheduler):
    def _make(*indices: int, **listeners) -> Game:
        game = Game(scheduler, CyclingFactory(*(indices or (NAMES.index("O"),))), **listeners)
        game.start()
        return game

    return _make
