"""Board model for the tile link game."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple


class Coordinate(NamedTuple):
    """A cell in the *padded* grid (column ``x``, row ``y``)."""

    x: int
    y: int


@dataclass
class Tile:
    id: str
    symbol: str
    matched: bool = False


@dataclass
class Board:
    """Represents the tile link board.

    ``width`` × ``height`` is the playable area.  Cells are stored as a
    ``(height + 2)`` × ``(width + 2)`` grid indexed ``cells[y][x]``; the
    outer ring is always empty so paths can run around the edge.
    """

    width: int
    height: int
    cells: list[list[Tile | None]] = field(default_factory=list)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        cells: list[list[Tile | None]] = [
            [None] * (width + 2) for _ in range(height + 2)
        ]
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_flat(
        cls, width: int, height: int, symbols: list[str | None]
    ) -> Board:
        """Create a board from a flat row-major list of interior symbols.

        ``None`` leaves the cell empty.  Example::

            Board.from_flat(4, 2, ["A", "A", "B", "B", "C", "C", "D", "D"])
        """
        if len(symbols) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}×{height} board, "
                f"got {len(symbols)}."
            )
        board = cls.empty(width, height)
        for i, symbol in enumerate(symbols):
            if symbol is None:
                continue
            y, x = divmod(i, width)
            board.cells[y + 1][x + 1] = Tile(id=f"t{i}", symbol=symbol)
        return board

    # -- geometry -------------------------------------------------------------

    @property
    def grid_width(self) -> int:
        return self.width + 2

    @property
    def grid_height(self) -> int:
        return self.height + 2

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.grid_width and 0 <= y < self.grid_height

    def is_interior(self, coord: Coordinate) -> bool:
        x, y = coord
        return 1 <= x <= self.width and 1 <= y <= self.height

    # -- queries --------------------------------------------------------------

    def get_tile(self, coord: Coordinate) -> Tile | None:
        if not self.in_bounds(coord):
            return None
        return self.cells[coord[1]][coord[0]]

    def is_empty(self, coord: Coordinate) -> bool:
        """True iff *coord* is inside the padded grid and holds no tile.

        Out-of-bounds cells count as blocked so a path can never leave
        the grid.
        """
        return self.in_bounds(coord) and self.cells[coord[1]][coord[0]] is None

    def is_match(self, c1: Coordinate, c2: Coordinate) -> bool:
        """True if both cells hold distinct tiles with the same symbol."""
        t1 = self.get_tile(c1)
        t2 = self.get_tile(c2)
        return (
            t1 is not None
            and t2 is not None
            and t1.symbol == t2.symbol
            and t1.id != t2.id
        )

    def occupied(
        self, include_matched: bool = True
    ) -> list[tuple[Coordinate, Tile]]:
        """Return ``(coord, tile)`` for every occupied interior cell, row-major."""
        result: list[tuple[Coordinate, Tile]] = []
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                tile = self.cells[y][x]
                if tile is None:
                    continue
                if tile.matched and not include_matched:
                    continue
                result.append((Coordinate(x, y), tile))
        return result

    @property
    def tile_count(self) -> int:
        return len(self.occupied())

    def is_cleared(self) -> bool:
        return self.tile_count == 0

    # -- mutation -------------------------------------------------------------

    def set_tile(self, coord: Coordinate, tile: Tile | None) -> None:
        if not self.is_interior(coord):
            raise ValueError(f"{coord} is not an interior cell")
        self.cells[coord[1]][coord[0]] = tile

    def remove_tile(self, coord: Coordinate) -> Tile | None:
        tile = self.get_tile(coord)
        if tile is not None:
            self.cells[coord[1]][coord[0]] = None
        return tile

    def copy(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            cells=[
                [replace(t) if t is not None else None for t in row]
                for row in self.cells
            ],
        )

    def resolved(self) -> Board:
        """Return a copy with every matched tile already cleared."""
        board = self.copy()
        for coord, tile in board.occupied():
            if tile.matched:
                board.remove_tile(coord)
        return board
