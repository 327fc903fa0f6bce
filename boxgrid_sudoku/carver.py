"""Turn a solved grid into a playable puzzle by blanking cells."""

import math
import random
from typing import Optional

from .difficulty import DEFAULT_DIFFICULTY, REMOVAL_RATIOS
from .grid import Grid, copy_grid


def removal_ratio(difficulty: str) -> float:
    return REMOVAL_RATIOS.get(difficulty, REMOVAL_RATIOS[DEFAULT_DIFFICULTY])


def cells_to_remove(size: int, difficulty: str) -> int:
    total = size * size
    return min(total, math.floor(total * removal_ratio(difficulty)))


def carve(
    solution: Grid, difficulty: str, size: int, rng: Optional[random.Random] = None
) -> Grid:
    """Copy the solution and zero out a difficulty-dependent number of cells.

    Positions are picked by shuffling all N*N coordinates and taking the
    first ones. The result is not checked for a unique solution.
    """
    if rng is None:
        rng = random.Random()

    puzzle = copy_grid(solution)
    positions = [(r, c) for r in range(size) for c in range(size)]
    rng.shuffle(positions)
    for r, c in positions[: cells_to_remove(size, difficulty)]:
        puzzle[r][c] = 0
    return puzzle
