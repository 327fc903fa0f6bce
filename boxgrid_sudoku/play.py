"""Checks and helpers used while a puzzle is being played."""

import random
from typing import List, Optional, Set, Tuple

from .grid import CellPosition, Grid, box_dimensions, box_origin, empty_cells


def validate_move(board: Grid, row: int, col: int, symbol: int, size: int) -> bool:
    """Return True if `symbol` may sit at (row, col) on the current board.

    The target cell itself is ignored, so a cell already holding the symbol
    is fine, and empty cells never collide. Sizes without a box shape raise
    UnsupportedGridSize.
    """
    box = box_dimensions(size, strict=True)
    # clearing a cell is always allowed
    if symbol == 0:
        return True

    for x in range(size):
        if x != col and board[row][x] == symbol:
            return False

    for x in range(size):
        if x != row and board[x][col] == symbol:
            return False

    start_row, start_col = box_origin(row, col, box)
    for r in range(start_row, start_row + box.rows):
        for c in range(start_col, start_col + box.cols):
            if (r != row or c != col) and board[r][c] == symbol:
                return False

    return True


def open_cells(board: Grid, locked: Set[CellPosition], size: int) -> List[CellPosition]:
    return [pos for pos in empty_cells(board) if pos not in locked]


def hint(
    board: Grid,
    solution: Grid,
    locked: Set[CellPosition],
    size: int,
    rng: Optional[random.Random] = None,
) -> Optional[Tuple[int, int, int]]:
    """Reveal the solution value of one random empty, unlocked cell.

    Writes the value into `board` and adds the cell to `locked`. Returns
    (row, col, symbol), or None without touching anything when no cell is
    open. The hint budget is checked by the caller.
    """
    candidates = open_cells(board, locked, size)
    if not candidates:
        return None

    if rng is None:
        rng = random.Random()
    row, col = rng.choice(candidates)
    symbol = solution[row][col]
    board[row][col] = symbol
    locked.add((row, col))
    return (row, col, symbol)
