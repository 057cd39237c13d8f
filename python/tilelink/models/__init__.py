from tilelink.models.board import Board, Coordinate, Tile
from tilelink.models.difficulty import DIFFICULTIES, Difficulty, DifficultyConfig
from tilelink.models.theme import PRESET_THEMES, Theme

__all__ = [
    "Board",
    "Coordinate",
    "DIFFICULTIES",
    "Difficulty",
    "DifficultyConfig",
    "PRESET_THEMES",
    "Theme",
    "Tile",
]
