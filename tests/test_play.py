import random

import pytest

from boxgrid_sudoku.errors import UnsupportedGridSize
from boxgrid_sudoku.generator import generate_solution
from boxgrid_sudoku.grid import is_complete
from boxgrid_sudoku.play import hint, open_cells, validate_move


@pytest.mark.parametrize("size", [4, 6, 9])
def test_self_placement_is_always_legal(size):
    grid = generate_solution(size, random.Random(size))
    for r in range(size):
        for c in range(size):
            assert validate_move(grid, r, c, grid[r][c], size)


@pytest.mark.parametrize("size", [4, 6, 9])
def test_row_collision_is_detected(size):
    grid = generate_solution(size, random.Random(21))
    for r in range(size):
        for c in range(size):
            other = (c + 1) % size
            board = [row[:] for row in grid]
            board[r][c] = grid[r][other]
            assert not validate_move(board, r, c, board[r][c], size)


def test_column_and_box_collisions():
    board = [
        [1, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    # same column
    assert not validate_move(board, 3, 0, 1, 4)
    # same box
    assert not validate_move(board, 1, 1, 1, 4)
    # different row, column and box
    assert validate_move(board, 2, 2, 1, 4)
    assert validate_move(board, 1, 1, 2, 4)


def test_zeros_never_collide():
    board = [[0] * 6 for _ in range(6)]
    assert validate_move(board, 3, 4, 0, 6)
    assert validate_move(board, 3, 4, 5, 6)


def test_hint_reveals_solution_value():
    solution = generate_solution(4, random.Random(8))
    board = [row[:] for row in solution]
    board[1][2] = 0
    board[3][0] = 0
    locked = set()

    result = hint(board, solution, locked, 4, random.Random(0))

    assert result is not None
    row, col, symbol = result
    assert (row, col) in {(1, 2), (3, 0)}
    assert symbol == solution[row][col]
    assert board[row][col] == symbol
    assert (row, col) in locked


def test_hint_skips_locked_cells():
    solution = generate_solution(4, random.Random(8))
    board = [row[:] for row in solution]
    board[0][0] = 0
    board[2][2] = 0
    locked = {(0, 0)}

    for seed in range(10):
        trial = [row[:] for row in board]
        assert hint(trial, solution, set(locked), 4, random.Random(seed))[:2] == (2, 2)


def test_hint_exhaustion_returns_none():
    solution = generate_solution(6, random.Random(3))
    board = [row[:] for row in solution]
    board[4][4] = 0
    locked = {(4, 4)}
    snapshot = [row[:] for row in board]

    assert hint(board, solution, locked, 6, random.Random(0)) is None
    assert board == snapshot
    assert locked == {(4, 4)}


def test_hints_fill_the_board_then_stop():
    solution = generate_solution(4, random.Random(2))
    board = [[0] * 4 for _ in range(4)]
    locked = set()
    rng = random.Random(4)

    revealed = [hint(board, solution, locked, 4, rng) for _ in range(16)]

    assert all(r is not None for r in revealed)
    assert len({(r, c) for r, c, _ in revealed}) == 16
    assert board == solution
    assert is_complete(board)
    assert open_cells(board, locked, 4) == []
    assert hint(board, solution, locked, 4, rng) is None


def test_hint_does_not_touch_solution():
    solution = generate_solution(4, random.Random(6))
    snapshot = [row[:] for row in solution]
    board = [[0] * 4 for _ in range(4)]
    hint(board, solution, set(), 4, random.Random(1))
    board[0][0] = 9
    assert solution == snapshot


def test_clearing_a_cell_is_legal_on_a_partial_board():
    solution = generate_solution(4, random.Random(13))
    board = [row[:] for row in solution]
    board[0][1] = 0
    board[2][3] = 0
    assert validate_move(board, 0, 1, 0, 4)
    assert validate_move(board, 1, 1, 0, 4)


def test_open_cells_skip_locked_and_filled():
    board = [
        [1, 0, 0, 0],
        [0, 2, 0, 0],
        [0, 0, 3, 0],
        [0, 0, 0, 4],
    ]
    cells = open_cells(board, {(0, 1), (3, 0)}, 4)
    assert (0, 1) not in cells and (3, 0) not in cells
    assert (0, 0) not in cells
    assert len(cells) == 10


def test_validate_move_rejects_unsupported_size():
    board = [[0] * 8 for _ in range(8)]
    with pytest.raises(UnsupportedGridSize):
        validate_move(board, 7, 7, 3, 8)
