"""Difficulty presets — board size and time limit per level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyConfig:
    label: str
    width: int
    height: int
    time_limit: int  # seconds

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board must be at least 1×1, got {self.width}×{self.height}."
            )
        if (self.width * self.height) % 2:
            raise ValueError(
                f"A {self.width}×{self.height} board has an odd number of "
                "cells and cannot be filled with pairs."
            )

    @property
    def pair_count(self) -> int:
        return self.width * self.height // 2


DIFFICULTIES: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig("Easy (6×4)", 6, 4, 90),
    Difficulty.MEDIUM: DifficultyConfig("Medium (8×6)", 8, 6, 180),
    Difficulty.HARD: DifficultyConfig("Hard (10×8)", 10, 8, 300),
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM
