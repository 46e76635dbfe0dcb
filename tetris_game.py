
"""Game state machine: ticks, commands, piece lifecycle, pause and game over.

The game owns the board, the active and next pieces, and the score. Timing is
delegated to a scheduler exposing ``start()`` / ``stop()``; the host feeds
ticks back through :meth:`Game.tick`. Listeners are plain callables:

  • on_change()        : something visible changed, repaint
  • on_score(score)    : the score changed
  • on_game_over(score): the session ended
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional

from tetris_board import Board, new_board, can_place, merge, top_row_occupied, clear_full_lines
from tetris_piece import NAMES, Piece, rotate
from tetris_rng import PieceFactory

log = logging.getLogger("tetris.game")

POINTS_PER_LINE = 100


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DOWN = "soft_down"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"


class Game:
    def __init__(self, scheduler, factory: Optional[PieceFactory] = None,
                 on_change: Optional[Callable[[], None]] = None,
                 on_score: Optional[Callable[[int], None]] = None,
                 on_game_over: Optional[Callable[[int], None]] = None):
        self.scheduler = scheduler
        self.factory = factory or PieceFactory()
        self.on_change = on_change or (lambda: None)
        self.on_score = on_score or (lambda score: None)
        self.on_game_over = on_game_over or (lambda score: None)

        self.board: Board = new_board()
        self.current: Piece = self.factory.create_piece()
        self.next: Piece = self.factory.create_piece()
        self.score = 0
        self.lines = 0
        self.phase = Phase.RUNNING

    def start(self):
        log.info("game started (seed=%s)", self.factory.seed)
        self.scheduler.start()
        self.on_change()

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    # ---------- Commands ----------
    def handle(self, command: Command):
        {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DOWN: self.move_down,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
            Command.TOGGLE_PAUSE: self.toggle_pause,
        }[command]()

    def tick(self):
        if self.running:
            self.move_down()

    def move_left(self):
        self._shift(-1)

    def move_right(self):
        self._shift(1)

    def _shift(self, dx: int):
        if not self.running: return
        p = self.current
        if can_place(self.board, p.shape, p.x + dx, p.y):
            p.x += dx
        self.on_change()

    def move_down(self):
        if not self.running: return
        p = self.current
        if can_place(self.board, p.shape, p.x, p.y + 1):
            p.y += 1
        else:
            self._lock()
        self.on_change()

    def hard_drop(self):
        if not self.running: return
        p = self.current
        while can_place(self.board, p.shape, p.x, p.y + 1):
            p.y += 1
        self._lock()
        self.on_change()

    def rotate(self):
        if not self.running: return
        p = self.current
        rotated = rotate(p.shape)
        if can_place(self.board, rotated, p.x, p.y):
            p.shape = rotated
        self.on_change()

    def toggle_pause(self):
        if self.phase is Phase.OVER: return
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
            self.scheduler.stop()
            log.info("paused")
        else:
            self.phase = Phase.RUNNING
            self.scheduler.start()
            log.info("resumed")
        self.on_change()

    # ---------- Lock / clear / respawn ----------
    def _lock(self):
        p = self.current
        merge(self.board, p)
        log.debug("locked %s at x=%d y=%d", NAMES[p.color - 1], p.x, p.y)
        topped_out = top_row_occupied(self.board)
        cleared = clear_full_lines(self.board)
        if cleared:
            self.lines += cleared
            self.score += cleared * POINTS_PER_LINE
            log.info("cleared %d line(s), score %d", cleared, self.score)
            self.on_score(self.score)
        if topped_out:
            self._game_over()
            return
        self.current = self.next
        self.next = self.factory.create_piece()
        if not can_place(self.board, self.current.shape, self.current.x, self.current.y):
            self._game_over()

    def _game_over(self):
        self.phase = Phase.OVER
        self.scheduler.stop()
        log.info("game over, final score %d", self.score)
        self.on_game_over(self.score)
