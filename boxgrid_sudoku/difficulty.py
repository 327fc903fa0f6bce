"""Difficulty labels and the lives / hint allowance derived from them."""

from dataclasses import dataclass

from .grid import box_dimensions

DIFFICULTY_LEVELS = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY = "easy"

# fraction of cells removed when carving
REMOVAL_RATIOS = {
    "easy": 0.40,
    "medium": 0.55,
    "hard": 0.65,
}


@dataclass(frozen=True)
class DifficultySettings:
    lives: int
    hints: int


def box_count(size: int) -> int:
    box = box_dimensions(size)
    return (size // box.rows) * (size // box.cols)


def base_hints(size: int) -> int:
    # floor(boxes * 0.7) in integer arithmetic
    return max(1, box_count(size) * 7 // 10)


def difficulty_settings(difficulty: str, size: int) -> DifficultySettings:
    """Lives and hint budget for a difficulty label; unknown labels count as easy."""
    base = base_hints(size)
    if difficulty == "medium":
        return DifficultySettings(lives=4, hints=base)
    if difficulty == "hard":
        return DifficultySettings(lives=3, hints=max(1, base - 1))
    return DifficultySettings(lives=5, hints=base + 1)
