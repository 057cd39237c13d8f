"""Connection-path solver tests.

Boards are built with ``Board.from_flat``; coordinates in the assertions
are *padded* grid coordinates, so the top-left playable cell is (1, 1).
"""

from __future__ import annotations

import random

import pytest

from tilelink.engine.gamegenerator import GameGenerator
from tilelink.engine.gamesolver import Solver
from tilelink.models.board import Board, Coordinate


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(board: Board, path: list[Coordinate]) -> None:
    """Axis-aligned, at most two bends, and clear between the endpoints."""
    assert 2 <= len(path) <= 4, f"bad vertex count: {path}"
    for a, b in zip(path, path[1:]):
        assert a != b, f"repeated vertex in {path}"
        assert a.x == b.x or a.y == b.y, f"diagonal segment {a}->{b}"

    cells: list[Coordinate] = []
    for a, b in zip(path, path[1:]):
        if a.x == b.x:
            step = 1 if b.y > a.y else -1
            cells += [Coordinate(a.x, y) for y in range(a.y + step, b.y + step, step)]
        else:
            step = 1 if b.x > a.x else -1
            cells += [Coordinate(x, a.y) for x in range(a.x + step, b.x + step, step)]
    for cell in cells[:-1]:
        assert board.is_empty(cell), f"{cell} on {path} is not empty"
    assert cells[-1] == path[-1]


# -- straight lines -----------------------------------------------------------


def test_adjacent_tiles_connect_straight() -> None:
    board = Board.from_flat(2, 1, ["A", "A"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(2, 1)) == [(1, 1), (2, 1)]


def test_straight_line_over_empty_cells() -> None:
    board = Board.from_flat(4, 3, [
        None, "A", None, None,
        None, None, None, None,
        "B", "A", "B", None,
    ])
    path = Solver.find_path(board, Coordinate(2, 1), Coordinate(2, 3))
    assert path == [(2, 1), (2, 3)]


# -- rejections ---------------------------------------------------------------


def test_same_cell_never_connects() -> None:
    board = Board.from_flat(2, 1, ["A", "A"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(1, 1)) is None


def test_different_symbols_never_connect() -> None:
    board = Board.from_flat(2, 1, ["A", "B"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(2, 1)) is None


def test_empty_cell_never_connects() -> None:
    board = Board.from_flat(3, 1, ["A", None, "A"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(2, 1)) is None


def test_boxed_in_diagonal_pair_has_no_path() -> None:
    # 4×4 fully occupied; the A pair sits diagonally at (2,2) and (3,3)
    # with both shared corners taken.
    flat: list[str | None] = [f"S{i}" for i in range(16)]
    flat[5] = "A"
    flat[10] = "A"
    board = Board.from_flat(4, 4, flat)
    assert Solver.find_path(board, Coordinate(2, 2), Coordinate(3, 3)) is None
    assert not Solver.can_connect(board, Coordinate(3, 3), Coordinate(2, 2))


def test_three_turns_are_not_enough() -> None:
    board = Board.from_flat(3, 2, [
        "A", "B", "C",
        "D", "E", "A",
    ])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(3, 2)) is None


# -- one bend -----------------------------------------------------------------


def test_one_bend_prefers_first_corner() -> None:
    board = Board.from_flat(2, 2, ["A", None, None, "A"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(2, 2)) == [
        (1, 1), (1, 2), (2, 2),
    ]
    assert Solver.find_path(board, Coordinate(2, 2), Coordinate(1, 1)) == [
        (2, 2), (2, 1), (1, 1),
    ]


def test_one_bend_falls_back_to_second_corner() -> None:
    board = Board.from_flat(2, 2, ["A", None, "B", "A"])
    assert Solver.find_path(board, Coordinate(1, 1), Coordinate(2, 2)) == [
        (1, 1), (2, 1), (2, 2),
    ]


# -- two bends ----------------------------------------------------------------


def test_route_around_the_padding_ring() -> None:
    board = Board.from_flat(3, 1, ["A", "B", "A"])
    path = Solver.find_path(board, Coordinate(1, 1), Coordinate(3, 1))
    # Row scan from (1,1) finds nothing; the first column break is (1,0).
    assert path == [(1, 1), (1, 0), (3, 0), (3, 1)]


def test_two_bends_through_the_interior() -> None:
    board = Board.from_flat(3, 2, [
        "A", "B", None,
        "D", "E", "A",
    ])
    path = Solver.find_path(board, Coordinate(1, 1), Coordinate(3, 2))
    assert path == [(1, 1), (1, 0), (3, 0), (3, 2)]


def test_row_scan_wins_over_column_scan() -> None:
    # Both (0,3) on the row and (1,4) on the column lead to a path.
    board = Board.from_flat(3, 3, [
        None, None, "A",
        "B", None, None,
        "A", "B", None,
    ])
    path = Solver.find_path(board, Coordinate(1, 3), Coordinate(3, 1))
    assert path == [(1, 3), (0, 3), (0, 1), (3, 1)]
    _assert_valid_path(board, path)


def test_matched_tiles_still_block() -> None:
    board = Board.from_flat(3, 1, ["A", "B", "A"])
    board.get_tile(Coordinate(2, 1)).matched = True
    path = Solver.find_path(board, Coordinate(1, 1), Coordinate(3, 1))
    assert path is not None and len(path) == 4
    assert Solver.find_path(board.resolved(), Coordinate(1, 1), Coordinate(3, 1)) == [
        (1, 1), (3, 1),
    ]


# -- generated boards ---------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_every_found_path_is_legal(seed: int) -> None:
    rng = random.Random(seed)
    board = GameGenerator.generate(6, 4, ["A", "B", "C", "D", "E"], rng)
    # Punch some holes so longer routes appear.
    for coord, _ in rng.sample(board.occupied(), 8):
        board.remove_tile(coord)

    cells = board.occupied()
    for i, (a, ta) in enumerate(cells):
        for b, tb in cells[i + 1 :]:
            path = Solver.find_path(board, a, b)
            if ta.symbol != tb.symbol:
                assert path is None
            elif path is not None:
                assert path[0] == a and path[-1] == b
                _assert_valid_path(board, path)
