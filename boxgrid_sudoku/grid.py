"""
Grid primitives: box dimensions, region checks and board helpers.

A grid is a list of rows, each a list of ints in [0, N] where 0 marks an
empty cell.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from .errors import UnsupportedGridSize

logger = logging.getLogger(__name__)

Grid = List[List[int]]
CellPosition = Tuple[int, int]

# ------------------------------
# Box dimensions
# ------------------------------


class BoxDimensions(NamedTuple):
    rows: int
    cols: int


BOX_SHAPES = {
    4: BoxDimensions(2, 2),
    6: BoxDimensions(2, 3),
    9: BoxDimensions(3, 3),
}
SUPPORTED_SIZES = tuple(sorted(BOX_SHAPES))
DEFAULT_BOX = BoxDimensions(3, 3)


def is_supported_size(size: int) -> bool:
    return size in BOX_SHAPES


def box_dimensions(size: int, strict: bool = False) -> BoxDimensions:
    """Return the (rows, cols) shape of one box for a grid of the given size.

    Unknown sizes get a 3x3 box, which only tiles correctly for N = 9.
    With strict=True an unknown size raises UnsupportedGridSize instead.
    """
    try:
        return BOX_SHAPES[size]
    except KeyError:
        if strict:
            raise UnsupportedGridSize(size) from None
        logger.warning("No box shape for size %d, using %dx%d", size, *DEFAULT_BOX)
        return DEFAULT_BOX


def box_origin(row: int, col: int, box: BoxDimensions) -> CellPosition:
    return row // box.rows * box.rows, col // box.cols * box.cols


# ------------------------------
# Board helpers
# ------------------------------


def empty_grid(size: int) -> Grid:
    return [[0 for _ in range(size)] for _ in range(size)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def is_complete(board: Grid, size: Optional[int] = None) -> bool:
    # every cell nonzero; size is accepted for symmetry with the other checks
    return all(cell != 0 for row in board for cell in row)


def empty_cells(board: Grid) -> List[CellPosition]:
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, value in enumerate(row)
        if value == 0
    ]


def format_grid(board: Grid) -> str:
    # console rendering, "." for empty cells
    return "\n".join(" ".join(str(x) if x != 0 else "." for x in row) for row in board)


# ------------------------------
# Validity
# ------------------------------


def is_valid_solution(grid: Grid, size: int) -> bool:
    """Check that every row, column and box of a filled grid is a permutation of 1..N.

    Only meaningful for completely filled grids; use play.validate_move for
    partial boards.
    """
    box = box_dimensions(size)

    for row in range(size):
        seen = set()
        for col in range(size):
            num = grid[row][col]
            if num < 1 or num > size or num in seen:
                return False
            seen.add(num)

    for col in range(size):
        seen = set()
        for row in range(size):
            num = grid[row][col]
            if num in seen:
                return False
            seen.add(num)

    for start_row in range(0, size, box.rows):
        for start_col in range(0, size, box.cols):
            seen = set()
            for r in range(start_row, start_row + box.rows):
                for c in range(start_col, start_col + box.cols):
                    num = grid[r][c]
                    if num in seen:
                        return False
                    seen.add(num)

    return True
