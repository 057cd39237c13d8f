"""Connection-path solver — the "at most two turns" rule."""

from __future__ import annotations

import logging

from tilelink.models.board import Board, Coordinate

logger = logging.getLogger(__name__)

Path = list[Coordinate]


class Solver:
    """Stateless solver — all methods are static.

    A legal connection is an axis-aligned polyline with at most two bends
    whose interior cells are all empty.  Candidates are tried in order of
    complexity (straight, one bend, two bends) and the first one found is
    returned, which is not necessarily the shortest.
    """

    @staticmethod
    def find_path(board: Board, p1: Coordinate, p2: Coordinate) -> Path | None:
        """Return the path vertices linking *p1* to *p2*, or ``None``.

        The result holds the two endpoints plus 0–2 bend points.
        """
        p1, p2 = Coordinate(*p1), Coordinate(*p2)
        if p1 == p2:
            return None
        if not board.is_match(p1, p2):
            return None

        path = (
            Solver._check_line(board, p1, p2)
            or Solver._check_one_turn(board, p1, p2)
            or Solver._check_two_turns(board, p1, p2)
        )
        if path is not None:
            logger.debug("Connected %s -> %s via %s", p1, p2, path)
        return path

    @staticmethod
    def can_connect(board: Board, p1: Coordinate, p2: Coordinate) -> bool:
        return Solver.find_path(board, p1, p2) is not None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _check_line(board: Board, p1: Coordinate, p2: Coordinate) -> Path | None:
        """Straight segment; only the cells strictly between must be empty."""
        if p1.x == p2.x:
            lo, hi = sorted((p1.y, p2.y))
            for y in range(lo + 1, hi):
                if not board.is_empty(Coordinate(p1.x, y)):
                    return None
            return [p1, p2]
        if p1.y == p2.y:
            lo, hi = sorted((p1.x, p2.x))
            for x in range(lo + 1, hi):
                if not board.is_empty(Coordinate(x, p1.y)):
                    return None
            return [p1, p2]
        return None

    @staticmethod
    def _check_one_turn(
        board: Board, p1: Coordinate, p2: Coordinate
    ) -> Path | None:
        # Corner (p1.x, p2.y) is always tried before (p2.x, p1.y).
        for corner in (Coordinate(p1.x, p2.y), Coordinate(p2.x, p1.y)):
            if not board.is_empty(corner):
                continue
            if Solver._check_line(board, p1, corner) and Solver._check_line(
                board, corner, p2
            ):
                return _compact([p1, corner, p2])
        return None

    @staticmethod
    def _check_two_turns(
        board: Board, p1: Coordinate, p2: Coordinate
    ) -> Path | None:
        # Row scan is exhausted before the column scan starts.
        breaks = [
            Coordinate(x, p1.y) for x in range(board.grid_width) if x != p1.x
        ] + [
            Coordinate(p1.x, y) for y in range(board.grid_height) if y != p1.y
        ]
        for p_break in breaks:
            if not Solver._check_line(board, p1, p_break):
                continue
            if not board.is_empty(p_break):
                continue
            tail = Solver._check_one_turn(board, p_break, p2)
            if tail is not None:
                return _compact([p1, *tail])
        return None


def _compact(path: Path) -> Path:
    """Drop consecutive duplicate vertices."""
    out: Path = []
    for point in path:
        if not out or out[-1] != point:
            out.append(point)
    return out
