import logging
import random

import pytest

from boxgrid_sudoku import generate
from boxgrid_sudoku.errors import UnsupportedGridSize
from boxgrid_sudoku.grid import is_valid_solution


def count_zeros(grid):
    return sum(1 for row in grid for cell in row if cell == 0)


def test_small_easy_game():
    game = generate(4, "easy", random.Random(42))

    assert is_valid_solution(game.solution, 4)
    assert count_zeros(game.puzzle) == 6
    assert game.lives == 5
    # boxes = 4, base hints = max(1, floor(4 * 0.7)) = 2
    assert game.hints == 3
    assert game.size == 4
    assert game.difficulty == "easy"


@pytest.mark.parametrize("size", [4, 6, 9])
@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_every_size_and_difficulty(size, difficulty):
    game = generate(size, difficulty, random.Random(size * 10))
    assert is_valid_solution(game.solution, size)
    for r in range(size):
        for c in range(size):
            assert game.puzzle[r][c] in (0, game.solution[r][c])


def test_same_seed_same_game():
    first = generate(9, "medium", random.Random(99))
    second = generate(9, "medium", random.Random(99))
    assert first == second
    assert len(first.puzzle_id) == 8
    assert first.puzzle_id.isalnum()


def test_puzzle_and_solution_are_independent():
    game = generate(6, "hard", random.Random(5))
    for row in game.puzzle:
        for c in range(len(row)):
            row[c] = 0
    assert is_valid_solution(game.solution, 6)


def test_fallback_game(caplog):
    with caplog.at_level(logging.WARNING, logger="boxgrid_sudoku.generator"):
        game = generate(9, "easy", random.Random(1), max_attempts=0)
    assert is_valid_solution(game.solution, 9)
    assert count_zeros(game.puzzle) == 32
    assert "fallback" in caplog.text


def test_default_random_source():
    game = generate(4, "medium")
    assert is_valid_solution(game.solution, 4)
    assert count_zeros(game.puzzle) == 8


@pytest.mark.parametrize("size", [8, 12])
def test_unsupported_size_is_rejected_before_searching(size):
    with pytest.raises(UnsupportedGridSize) as excinfo:
        generate(size, "easy", random.Random(0), max_attempts=1)
    assert excinfo.value.size == size
