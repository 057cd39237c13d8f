"""Core gameplay logic — processes tile selections and checks win condition."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from tilelink.engine.gamegenerator import GameGenerator
from tilelink.engine.gamesolver import BoardAnalyzer, Solver
from tilelink.engine.gamestate import GamePhase, GameState
from tilelink.models.board import Board, Coordinate
from tilelink.models.difficulty import DEFAULT_DIFFICULTY, DIFFICULTIES, Difficulty
from tilelink.models.theme import DEFAULT_THEME, PRESET_THEMES

logger = logging.getLogger(__name__)


class SelectionKind(StrEnum):
    IGNORED = "ignored"
    SELECTED = "selected"
    DESELECTED = "deselected"
    MATCHED = "matched"
    MISMATCH = "mismatch"


@dataclass
class Selection:
    kind: SelectionKind
    coord: Coordinate | None = None
    path: list[Coordinate] | None = None
    points: float = 0.0


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        symbols: Sequence[str] | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if symbols is None:
            symbols = PRESET_THEMES[DEFAULT_THEME].symbols
        config = DIFFICULTIES[difficulty]
        board = GameGenerator.for_difficulty(difficulty, symbols, rng)
        self.difficulty: Difficulty | None = difficulty
        self._setup(board, config.time_limit, rng, clock)

    @classmethod
    def from_board(
        cls,
        board: Board,
        time_limit: float = DIFFICULTIES[DEFAULT_DIFFICULTY].time_limit,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> "GamePlay":
        """Create a game session from an existing board (e.g. a test layout)."""
        obj = object.__new__(cls)
        obj.difficulty = None
        obj._setup(board, time_limit, rng, clock)
        return obj

    def _setup(
        self,
        board: Board,
        time_limit: float,
        rng: random.Random | None,
        clock: Callable[[], float],
    ) -> None:
        self.rng = rng
        self.state = GameState(board, time_limit, clock=clock)
        self.selected: Coordinate | None = None
        self.hint_pair: tuple[Coordinate, Coordinate] | None = None
        self.pending: list[Coordinate] = []
        self.last_path: list[Coordinate] | None = None
        self.reshuffles: int = 0
        self._settle()

    @property
    def board(self) -> Board:
        return self.state.board

    # -- selection ------------------------------------------------------------

    def select(self, coord: Coordinate) -> Selection:
        """Handle a click on *coord*.

        A second click on a matching, connectable tile marks both tiles as
        matched; they stay on the board until :meth:`clear_matched`.
        """
        coord = Coordinate(*coord)
        if self.state.phase is not GamePhase.PLAYING or self.pending:
            return Selection(SelectionKind.IGNORED, coord)

        tile = self.board.get_tile(coord)
        if tile is None or tile.matched:
            return Selection(SelectionKind.IGNORED, coord)

        if self.selected == coord:
            self.selected = None
            return Selection(SelectionKind.DESELECTED, coord)

        if self.selected is None:
            self.selected = coord
            self.hint_pair = None
            return Selection(SelectionKind.SELECTED, coord)

        first = self.selected
        path = Solver.find_path(self.board, first, coord)
        if path is None:
            # The clicked tile becomes the new selection.
            self.selected = coord
            return Selection(SelectionKind.MISMATCH, coord)

        for c in (first, coord):
            self.board.get_tile(c).matched = True  # type: ignore[union-attr]
        self.pending = [first, coord]
        self.last_path = path
        self.hint_pair = None
        points = self.state.award_match()
        logger.debug("Matched %s and %s (+%.1f)", first, coord, points)
        return Selection(SelectionKind.MATCHED, coord, path=path, points=points)

    def clear_matched(self) -> bool:
        """Remove tiles marked as matched.  Returns True if any were removed."""
        removed = False
        for coord, tile in self.board.occupied():
            if tile.matched:
                self.board.remove_tile(coord)
                removed = True
        self.pending = []
        self.selected = None
        self.last_path = None
        self._settle()
        return removed

    # -- helpers for the player -----------------------------------------------

    def hint(self) -> tuple[Coordinate, Coordinate] | None:
        """Return a connectable pair, charging the hint penalty if found."""
        if self.state.phase is not GamePhase.PLAYING or self.pending:
            return None
        pair = BoardAnalyzer.hint(self.board, self.rng)
        if pair is not None:
            self.state.charge_hint()
        self.hint_pair = pair
        return pair

    def shuffle(self) -> None:
        """Re-deal the remaining tiles (player request)."""
        if self.state.phase is not GamePhase.PLAYING or self.pending:
            return
        GameGenerator.shuffle(self.board, self.rng)
        self.selected = None
        self.hint_pair = None
        self._settle()

    def tick(self) -> None:
        """Advance the countdown; ends the game when time runs out."""
        if self.state.phase is GamePhase.PLAYING and self.state.is_timed_out:
            self.state.set_phase(GamePhase.GAME_OVER)

    def quit_to_menu(self) -> None:
        self.state.set_phase(GamePhase.MENU)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.phase is GamePhase.WON

    @property
    def is_over(self) -> bool:
        return self.state.phase in (GamePhase.WON, GamePhase.GAME_OVER)

    @property
    def moves_available(self) -> int:
        return len(BoardAnalyzer.valid_moves(self.board))

    # -- helpers --------------------------------------------------------------

    def _settle(self) -> None:
        """Win check, then reshuffle if the remaining tiles are stuck."""
        if self.state.phase is not GamePhase.PLAYING:
            return
        if self.board.resolved().is_cleared():
            self.state.set_phase(GamePhase.WON)
            return
        self.reshuffles += GameGenerator.ensure_playable(self.board, self.rng)
