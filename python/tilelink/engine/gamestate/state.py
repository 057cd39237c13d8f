"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum, auto

from tilelink.models.board import Board

logger = logging.getLogger(__name__)

MATCH_POINTS = 100
TIME_BONUS_RATE = 0.1
HINT_PENALTY = 50


class GamePhase(Enum):
    MENU = auto()
    PLAYING = auto()
    WON = auto()
    GAME_OVER = auto()


class GameState:
    """Holds the current board, phase, score, and countdown clock."""

    def __init__(
        self,
        board: Board,
        time_limit: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.board = board
        self.time_limit = time_limit
        self.score: float = 0.0
        self.matches: int = 0
        self.hints_used: int = 0
        self.phase = GamePhase.PLAYING
        self._clock = clock
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def time_left(self) -> float:
        return max(0.0, self.time_limit - self.elapsed_time)

    @property
    def is_timed_out(self) -> bool:
        return self.time_left <= 0

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- phase ----------------------------------------------------------------

    def set_phase(self, phase: GamePhase) -> None:
        if phase is self.phase:
            return
        logger.info("Game phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase
        if phase is not GamePhase.PLAYING:
            self.pause()

    # -- scoring --------------------------------------------------------------

    def award_match(self) -> float:
        """Add the points for one match; faster matches earn a bonus."""
        points = MATCH_POINTS + self.time_left * TIME_BONUS_RATE
        self.score += points
        self.matches += 1
        return points

    def charge_hint(self) -> None:
        self.score = max(0.0, self.score - HINT_PENALTY)
        self.hints_used += 1
