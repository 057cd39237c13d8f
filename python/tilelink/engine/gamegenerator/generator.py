"""Builds and reshuffles tile link boards."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from tilelink.engine.gamesolver.analyzer import BoardAnalyzer
from tilelink.models.board import Board, Coordinate, Tile
from tilelink.models.difficulty import DIFFICULTIES, Difficulty

logger = logging.getLogger(__name__)

# Shuffles attempted before ensure_playable gives up.
MAX_RESHUFFLES = 1000


class GameGenerator:
    """Creates fully paired boards and re-deals the tiles left on them."""

    @staticmethod
    def make_tiles(pair_count: int, symbols: Sequence[str]) -> list[Tile]:
        """Return ``2 * pair_count`` tiles, cycling through *symbols*."""
        if not symbols:
            raise ValueError("Cannot build tiles from an empty symbol set.")
        tiles: list[Tile] = []
        for i in range(pair_count):
            symbol = symbols[i % len(symbols)]
            tiles.append(Tile(id=f"p{i}-a", symbol=symbol))
            tiles.append(Tile(id=f"p{i}-b", symbol=symbol))
        return tiles

    @staticmethod
    def generate(
        width: int,
        height: int,
        symbols: Sequence[str],
        rng: random.Random | None = None,
    ) -> Board:
        """Return a fresh board with its interior filled by shuffled pairs."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Board must be at least 1×1, got {width}×{height}.")
        if (width * height) % 2:
            raise ValueError(
                f"A {width}×{height} board has an odd number of cells."
            )

        tiles = GameGenerator.make_tiles(width * height // 2, symbols)
        (rng or random).shuffle(tiles)

        board = Board.empty(width, height)
        it = iter(tiles)
        for y in range(1, height + 1):
            for x in range(1, width + 1):
                board.cells[y][x] = next(it)

        logger.debug(
            "Generated %dx%d board with %d pairs over %d symbols",
            width, height, len(tiles) // 2, len(symbols),
        )
        return board

    @staticmethod
    def for_difficulty(
        difficulty: Difficulty,
        symbols: Sequence[str],
        rng: random.Random | None = None,
    ) -> Board:
        config = DIFFICULTIES[difficulty]
        return GameGenerator.generate(config.width, config.height, symbols, rng)

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> Board:
        """Re-deal the remaining tiles in-place over the same occupied cells.

        Tiles already matched and waiting to be cleared stay where they are.
        """
        occupied = board.occupied(include_matched=False)
        positions: list[Coordinate] = [coord for coord, _ in occupied]
        tiles: list[Tile] = [tile for _, tile in occupied]
        (rng or random).shuffle(tiles)
        for coord, tile in zip(positions, tiles):
            board.set_tile(coord, tile)
        logger.debug("Shuffled %d tiles", len(tiles))
        return board

    @staticmethod
    def ensure_playable(board: Board, rng: random.Random | None = None) -> int:
        """Shuffle until a move exists (or the board is empty).

        Returns the number of shuffles performed.
        """
        shuffles = 0
        while board.resolved().tile_count and not BoardAnalyzer.has_valid_moves(board):
            if shuffles >= MAX_RESHUFFLES:
                raise RuntimeError(
                    f"No playable layout after {MAX_RESHUFFLES} shuffles."
                )
            GameGenerator.shuffle(board, rng)
            shuffles += 1
        if shuffles > 1:
            logger.warning("Board needed %d shuffles to become playable", shuffles)
        elif shuffles:
            logger.info("No moves left; board reshuffled")
        return shuffles
