"""
Solution generator: randomized MRV backtracking with a bounded retry budget
and a closed-form fallback grid.

Every call works on its own copy of the board and draws randomness only from
the random.Random instance it is given, so a seeded generator reproduces the
same grids.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .grid import (
    BoxDimensions,
    Grid,
    box_dimensions,
    box_origin,
    copy_grid,
    empty_grid,
    is_valid_solution,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 50

# ------------------------------
# Search result
# ------------------------------


@dataclass(frozen=True)
class Solved:
    grid: Grid


class Exhausted:
    """Search ran out of candidates without completing the board."""

    def __repr__(self) -> str:
        return "Exhausted"


EXHAUSTED = Exhausted()

SolveResult = Union[Solved, Exhausted]

# ------------------------------
# Candidates and MRV
# ------------------------------


def legal_candidates(
    board: Grid, row: int, col: int, size: int, box: BoxDimensions
) -> List[int]:
    """Symbols in 1..N not yet used in the cell's row, column or box."""
    used = set(board[row])
    used.update(board[i][col] for i in range(size))
    start_row, start_col = box_origin(row, col, box)
    for r in range(start_row, start_row + box.rows):
        used.update(board[r][start_col : start_col + box.cols])
    return [n for n in range(1, size + 1) if n not in used]


def find_most_constrained(
    board: Grid, size: int, box: BoxDimensions
) -> Optional[Tuple[int, int, List[int]]]:
    """Pick the empty cell with the fewest legal candidates.

    Returns None when the board has no empty cell. A cell with no candidates
    is returned immediately with an empty list (dead end). Ties go to the
    first cell in row-major order.
    """
    best = None
    best_cands = None
    for r in range(size):
        for c in range(size):
            if board[r][c] == 0:
                cands = legal_candidates(board, r, c, size, box)
                if not cands:
                    return (r, c, [])
                if best is None or len(cands) < len(best_cands):
                    best = (r, c)
                    best_cands = cands
    if best is None:
        return None
    return (best[0], best[1], best_cands)


# ------------------------------
# Solver
# ------------------------------


def solve(board: Grid, size: int, rng: random.Random) -> SolveResult:
    """Complete a (possibly partial) board by MRV backtracking.

    The input board is not modified; on success the filled copy is returned
    inside Solved.
    """
    box = box_dimensions(size)
    g = copy_grid(board)

    def dfs() -> bool:
        pos = find_most_constrained(g, size, box)
        if pos is None:
            return True
        r, c, cands = pos
        if not cands:
            return False
        rng.shuffle(cands)
        for n in cands:
            g[r][c] = n
            if dfs():
                return True
            # backtrack
            g[r][c] = 0
        return False

    if dfs():
        return Solved(g)
    return EXHAUSTED


def count_solutions(board: Grid, size: int, limit: int = 2) -> int:
    """Count completions of a board, stopping once `limit` is reached."""
    box = box_dimensions(size)
    g = copy_grid(board)
    count = 0

    def dfs() -> bool:
        nonlocal count
        pos = find_most_constrained(g, size, box)
        if pos is None:
            count += 1
            return count >= limit
        r, c, cands = pos
        for n in cands:
            g[r][c] = n
            stop = dfs()
            g[r][c] = 0
            if stop:
                return True
        return False

    if limit > 0:
        dfs()
    return count


# ------------------------------
# Fallback
# ------------------------------


def base_pattern(size: int) -> Grid:
    """Closed-form grid satisfying row, column and box constraints."""
    box = box_dimensions(size)
    return [
        [((row * box.cols + row // box.rows + col) % size) + 1 for col in range(size)]
        for row in range(size)
    ]


def fallback_grid(size: int, rng: random.Random) -> Grid:
    """Base pattern with its symbols relabelled through a random permutation."""
    mapping = list(range(1, size + 1))
    rng.shuffle(mapping)
    return [[mapping[n - 1] for n in row] for row in base_pattern(size)]


# ------------------------------
# Generator
# ------------------------------


def generate_solution(
    size: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Grid:
    """Produce a fully solved grid of the given size.

    Each attempt seeds the first row with a random permutation and runs the
    backtracking solver. Once max_attempts attempts have failed the fallback
    grid is returned, so a supported size never fails. Sizes without a box
    shape raise UnsupportedGridSize before any search starts.
    """
    box_dimensions(size, strict=True)
    if rng is None:
        rng = random.Random()

    for attempt in range(max_attempts):
        board = empty_grid(size)
        first_row = list(range(1, size + 1))
        rng.shuffle(first_row)
        board[0] = first_row

        result = solve(board, size, rng)
        if isinstance(result, Solved):
            if is_valid_solution(result.grid, size):
                logger.debug("Solved %dx%d grid on attempt %d", size, size, attempt + 1)
                return result.grid
            logger.debug("Attempt %d produced an invalid grid, discarding", attempt + 1)
        else:
            logger.debug("Attempt %d exhausted the search", attempt + 1)

    logger.warning(
        "No %dx%d solution after %d attempts, using fallback grid",
        size,
        size,
        max_attempts,
    )
    return fallback_grid(size, rng)
