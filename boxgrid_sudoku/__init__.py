"""Sudoku generation and move validation for 4x4, 6x6 and 9x9 grids."""

from .carver import carve, cells_to_remove, removal_ratio
from .difficulty import DifficultySettings, difficulty_settings
from .errors import ExportError, SudokuError, UnsupportedGridSize
from .game import NewGame, generate
from .generator import (
    EXHAUSTED,
    Exhausted,
    Solved,
    count_solutions,
    fallback_grid,
    generate_solution,
    solve,
)
from .grid import (
    BoxDimensions,
    box_dimensions,
    is_complete,
    is_supported_size,
    is_valid_solution,
)
from .play import hint, validate_move

__version__ = "0.1.0"
