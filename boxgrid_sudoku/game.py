"""Entry point for starting a new game: solution, puzzle and allowances."""

import logging
import random
import string
from dataclasses import dataclass
from typing import Optional

from .carver import carve
from .difficulty import difficulty_settings
from .generator import DEFAULT_MAX_ATTEMPTS, generate_solution
from .grid import Grid, box_dimensions

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_uppercase + string.digits


@dataclass
class NewGame:
    size: int
    difficulty: str
    solution: Grid
    puzzle: Grid
    lives: int
    hints: int
    puzzle_id: str


def new_id(rng: random.Random, length: int = 8) -> str:
    return "".join(rng.choices(ID_ALPHABET, k=length))


def generate(
    size: int,
    difficulty: str,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> NewGame:
    """Generate a solved grid, carve it, and attach the difficulty allowances.

    Pass random.Random(seed) to make the whole game reproducible. Raises
    UnsupportedGridSize for sizes other than 4, 6 and 9.
    """
    box_dimensions(size, strict=True)
    if rng is None:
        rng = random.Random()

    solution = generate_solution(size, rng, max_attempts)
    puzzle = carve(solution, difficulty, size, rng)
    settings = difficulty_settings(difficulty, size)
    puzzle_id = new_id(rng)
    logger.info(
        "Generated %dx%d %s puzzle %s (%d lives, %d hints)",
        size,
        size,
        difficulty,
        puzzle_id,
        settings.lives,
        settings.hints,
    )
    return NewGame(
        size=size,
        difficulty=difficulty,
        solution=solution,
        puzzle=puzzle,
        lives=settings.lives,
        hints=settings.hints,
        puzzle_id=puzzle_id,
    )
