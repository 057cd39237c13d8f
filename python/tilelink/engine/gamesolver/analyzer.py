"""Whole-board queries: is any move left, and which pair to hint."""

from __future__ import annotations

import logging
import random

from tilelink.engine.gamesolver.solver import Solver
from tilelink.models.board import Board, Coordinate

logger = logging.getLogger(__name__)

Pair = tuple[Coordinate, Coordinate]


class BoardAnalyzer:
    """Stateless analyzer built on :class:`Solver`.

    Tiles that are matched but not yet cleared are treated as already
    gone: every scan runs on ``board.resolved()``, so the answer is about
    the board as it will be once pending matches are removed.
    """

    @staticmethod
    def has_valid_moves(board: Board) -> bool:
        """Return True if at least one pair of tiles can be connected."""
        view = board.resolved()
        return BoardAnalyzer._first_pair(view, BoardAnalyzer._cells(view)) is not None

    @staticmethod
    def hint(board: Board, rng: random.Random | None = None) -> Pair | None:
        """Return a connectable pair, chosen in random order, or ``None``."""
        view = board.resolved()
        cells = BoardAnalyzer._cells(view)
        (rng or random).shuffle(cells)
        pair = BoardAnalyzer._first_pair(view, cells)
        logger.debug("Hint: %s", pair)
        return pair

    @staticmethod
    def valid_moves(board: Board) -> list[Pair]:
        """Every connectable pair, in row-major enumeration order."""
        view = board.resolved()
        cells = BoardAnalyzer._cells(view)
        pairs: list[Pair] = []
        for i, (a, sym_a) in enumerate(cells):
            for b, sym_b in cells[i + 1 :]:
                if sym_a == sym_b and Solver.find_path(view, a, b):
                    pairs.append((a, b))
        return pairs

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _cells(board: Board) -> list[tuple[Coordinate, str]]:
        return [(coord, tile.symbol) for coord, tile in board.occupied()]

    @staticmethod
    def _first_pair(
        board: Board, cells: list[tuple[Coordinate, str]]
    ) -> Pair | None:
        for i, (a, sym_a) in enumerate(cells):
            for b, sym_b in cells[i + 1 :]:
                if sym_a == sym_b and Solver.find_path(board, a, b):
                    return a, b
        return None
