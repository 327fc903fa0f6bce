"""Exceptions raised by boxgrid_sudoku.

Generation itself never raises; these cover strict size checks and export.
"""


class SudokuError(Exception):
    pass


class UnsupportedGridSize(SudokuError):
    def __init__(self, size: int):
        super().__init__(f"Unsupported grid size: {size}")
        self.size = size


class ExportError(SudokuError):
    pass
