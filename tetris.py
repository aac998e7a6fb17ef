
"""
Tetris engine
=============

The game state machine behind the desktop driver in main.py. It owns the
board, the current/next/held pieces, scoring and level progression, and
nothing else: no drawing, no sound, no clock.

  • Spawning -> Falling -> Locking -> (LineClearing) -> Spawning
  • Paused and GameOver freeze every mutating command
  • Line clears run through a fixed delay window so the UI can flash the rows

-------------------------------------------------------------
DRIVING THE ENGINE
-------------------------------------------------------------

A driver owns the clock. Each frame it:

  • calls tick() whenever current_speed() milliseconds have elapsed
  • calls update(dt_ms) every frame so a pending line clear can finish
  • maps input events to move_left/move_right/rotate/drop/hold/toggle_pause

Every command returns True when it did something, False when it was
rejected (frozen, mid line clear, no current piece, blocked). A rejected
command never changes state and never fires a notification.

-------------------------------------------------------------
NOTIFICATIONS
-------------------------------------------------------------

game.events.<name>.connect(fn) subscribes to a channel; see
tetris_events.GameEvents for the list. Listeners run synchronously before
the command returns, except the line-clear results (level_up,
clear_resolved, perfect_clear) which fire when the delay window closes.

-------------------------------------------------------------
LINE CLEARS
-------------------------------------------------------------

When a lock completes rows, the rows are published in lines_being_cleared,
"tetris" or "lines_cleared" fires, and the current piece is released. Ticks
and moves are no-ops until LINE_CLEAR_DELAY_MS of update() time has passed
(or finish_line_clear() is called). Only then are the rows compacted, lines,
level and score updated, and the next piece spawned. The countdown keeps
running while paused: once started it always completes.

Scoring: SCORE_TABLE[n] * level, where level is the value after the clear's
own lines were counted. level = lines // LINES_PER_LEVEL + 1.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from tetris_board import Board
from tetris_config import CONFIG
from tetris_events import GameEvents
from tetris_piece import Piece
from tetris_rng import make_randomizer

logger = logging.getLogger("tetris")


def speed_for_level(level: int) -> int:
    """Milliseconds between gravity steps at the given level."""
    return max(CONFIG["SPEED_MIN_MS"],
               CONFIG["SPEED_BASE_MS"] - (level - 1) * CONFIG["SPEED_STEP_MS"])


class Game:
    def __init__(self, randomizer=None, cols: Optional[int] = None, rows: Optional[int] = None):
        # randomizer: anything with next_id() -> kind id
        self.randomizer = randomizer if randomizer is not None else make_randomizer()
        self.cols = cols if cols is not None else CONFIG["COLS"]
        self.rows = rows if rows is not None else CONFIG["ROWS"]
        self.events = GameEvents()
        self.reset()

    # -------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------
    def reset(self):
        self.board = Board(self.cols, self.rows)
        self.score = 0
        self.lines_cleared = 0
        self.level = 1
        self.paused = False
        self.game_over = False
        self.can_hold = True
        self._current: Optional[Piece] = None
        self._held: Optional[Piece] = None
        self._clearing: List[int] = []
        self._clear_remaining = 0.0
        self._next = self._draw()
        logger.debug("reset %dx%d", self.cols, self.rows)
        self._spawn()

    def _draw(self) -> Piece:
        return Piece.of(self.randomizer.next_id())

    def spawn_x(self, piece: Piece) -> int:
        return (self.cols - piece.width) // 2

    def _place_at_spawn(self, piece: Piece):
        piece.x = self.spawn_x(piece)
        piece.y = 0

    def _spawn(self):
        self._current = self._next
        self._place_at_spawn(self._current)
        self._next = self._draw()
        self.can_hold = True
        logger.debug("spawn %s at %d,%d", self._current.kind.name, self._current.x, self._current.y)
        if self.board.collides(self._current):
            self._end_game()

    def _end_game(self):
        self.game_over = True
        # a clear window may close while paused; game over replaces the pause
        if self.paused:
            self.paused = False
            self.events.paused_changed.emit(False)
        logger.info("game over: score=%d lines=%d level=%d", self.score, self.lines_cleared, self.level)
        self.events.game_over.emit()

    # -------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self.game_over or self.paused

    @property
    def animating(self) -> bool:
        return bool(self._clearing)

    @property
    def lines_being_cleared(self) -> Tuple[int, ...]:
        return tuple(self._clearing)

    @property
    def clear_time_remaining(self) -> float:
        return self._clear_remaining if self._clearing else 0.0

    @property
    def current(self) -> Optional[Piece]:
        return self._current.clone() if self._current else None

    @property
    def next_piece(self) -> Piece:
        return self._next.clone()

    @property
    def held_piece(self) -> Optional[Piece]:
        return self._held.clone() if self._held else None

    def current_speed(self) -> int:
        return speed_for_level(self.level)

    def is_board_clear(self) -> bool:
        return self.board.is_clear()

    def ghost_piece(self) -> Optional[Piece]:
        """Where the current piece would land on a hard drop."""
        if self.frozen or self._current is None:
            return None
        ghost = self._current.clone()
        while True:
            ghost.translate(0, 1)
            if self.board.collides(ghost):
                ghost.translate(0, -1)
                return ghost

    def _can_act(self) -> bool:
        return not self.frozen and not self._clearing and self._current is not None

    # -------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------
    def tick(self) -> bool:
        """Gravity step; locks the piece if it cannot move down."""
        if not self._can_act():
            return False
        self._current.translate(0, 1)
        if self.board.collides(self._current):
            self._current.translate(0, -1)
            self._lock()
        return True

    def _shift(self, dx: int) -> bool:
        if not self._can_act():
            return False
        self._current.translate(dx, 0)
        if self.board.collides(self._current):
            self._current.translate(-dx, 0)
            return False
        self.events.moved.emit()
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        if not self._can_act():
            return False
        p = self._current
        p.rotate()
        if self.board.collides(p):
            # kicks: one column left, then one column right of the original
            p.translate(-1, 0)
            if self.board.collides(p):
                p.translate(2, 0)
                if self.board.collides(p):
                    p.translate(-1, 0)
                    for _ in range(3):
                        p.rotate()
                    return False
        self.events.rotated.emit()
        return True

    def drop(self) -> bool:
        if not self._can_act():
            return False
        p = self._current
        distance = 0
        while True:
            p.translate(0, 1)
            if self.board.collides(p):
                p.translate(0, -1)
                break
            distance += 1
        self.events.dropped.emit(distance)
        self._lock()
        return True

    def hold(self) -> bool:
        if not self.can_hold or not self._can_act():
            return False
        piece = self._current
        piece.x, piece.y = 0, 0
        if self._held is None:
            self._held = piece
            self._spawn()
        else:
            self._current, self._held = self._held, piece
            self._place_at_spawn(self._current)
            if self.board.collides(self._current):
                logger.debug("held %s does not fit", self._current.kind.name)
                self._end_game()
                return False
        if self.game_over:
            return False
        self.can_hold = False
        logger.debug("hold %s", piece.kind.name)
        self.events.held.emit()
        return True

    def toggle_pause(self) -> bool:
        if self.game_over:
            return False
        self.paused = not self.paused
        self.events.paused_changed.emit(self.paused)
        return True

    # -------------------------------------------------------------
    # LOCK & LINE CLEAR
    # -------------------------------------------------------------
    def _lock(self):
        piece, self._current = self._current, None
        self.board.commit(piece)
        rows = self.board.full_rows()
        logger.debug("lock %s at %d,%d full=%s", piece.kind.name, piece.x, piece.y, rows)
        if not rows:
            self._spawn()
            return
        self._clearing = rows
        self._clear_remaining = float(CONFIG["LINE_CLEAR_DELAY_MS"])
        if len(rows) == 4:
            self.events.tetris.emit()
        else:
            self.events.lines_cleared.emit(len(rows))

    def update(self, dt_ms: float) -> bool:
        """Advance the line-clear window; True when it closed this call."""
        if not self._clearing:
            return False
        self._clear_remaining -= dt_ms
        if self._clear_remaining > 0:
            return False
        return self.finish_line_clear()

    def finish_line_clear(self) -> bool:
        if not self._clearing:
            return False
        rows, n = self._clearing, len(self._clearing)
        self.board.clear_and_compact(rows)
        self.lines_cleared += n
        level = self.lines_cleared // CONFIG["LINES_PER_LEVEL"] + 1
        leveled = level > self.level
        self.level = max(self.level, level)
        self.score += CONFIG["SCORE_TABLE"][n] * self.level
        self._clearing = []
        self._clear_remaining = 0.0
        logger.debug("cleared %d rows: lines=%d score=%d", n, self.lines_cleared, self.score)
        self.events.clear_resolved.emit(n)
        if leveled:
            logger.info("level up: %d", self.level)
            self.events.level_up.emit(self.level)
        if self.board.is_clear():
            self.score += CONFIG["PERFECT_CLEAR_BONUS"] * self.level
            self.events.perfect_clear.emit()
        self._spawn()
        return True
