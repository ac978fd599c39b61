import numpy as np
from typing import NamedTuple, Optional

SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)
DIGIT_CHARS = '0123456789'


class FormatError(ValueError):
    """Raised when puzzle input can't be turned into a 9x9 grid"""


class Cell(NamedTuple):
    row: int
    col: int
    value: Optional[int]
    given: bool

    @property
    def is_empty(self):
        return self.value is None


class Grid:
    """9x9 Sudoku grid.

    Values live in a numpy int8 array where 0 marks an empty cell. A second
    boolean array remembers which cells were part of the original puzzle.
    Copies never share arrays with their source.
    """

    def __init__(self, values=None, given=None):
        if values is None:
            values = np.zeros((SIZE, SIZE), dtype=np.int8)
        self.values = np.array(values, dtype=np.int8)
        assert self.values.shape == (SIZE, SIZE)

        if given is None:
            given = self.values != 0
        self.given = np.array(given, dtype=bool)
        assert self.given.shape == (SIZE, SIZE)

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from 9 strings of 9 digits each, '0' for empty"""
        rows = list(rows)
        if len(rows) != SIZE:
            raise FormatError(f"Expected {SIZE} rows, got {len(rows)}")

        matrix = []
        for i, row in enumerate(rows):
            if not isinstance(row, str):
                raise FormatError(f"Row {i} must be a string, got {type(row).__name__}")
            if len(row) != SIZE:
                raise FormatError(f"Row {i} has {len(row)} characters, expected {SIZE}: {row!r}")
            if any(ch not in DIGIT_CHARS for ch in row):
                raise FormatError(f"Row {i} contains a non-digit character: {row!r}")
            matrix.append([int(ch) for ch in row])

        return cls(matrix)

    @classmethod
    def from_list(cls, matrix):
        """Build a grid from a nested list of ints 0-9"""
        try:
            values = np.array(matrix, dtype=np.int64)
        except (TypeError, ValueError) as e:
            raise FormatError(f"Grid must be a {SIZE}x{SIZE} list of integers") from e

        if values.shape != (SIZE, SIZE):
            raise FormatError(f"Grid must be {SIZE}x{SIZE}, got shape {values.shape}")
        if values.min() < 0 or values.max() > SIZE:
            raise FormatError(f"Grid values must be between 0 and {SIZE}")

        return cls(values)

    @classmethod
    def from_string(cls, text):
        """Build a grid from 81 characters, '0' or '.' for empty"""
        text = text.strip()
        if len(text) != SIZE * SIZE:
            raise FormatError(f"Expected {SIZE * SIZE} characters, got {len(text)}")

        text = text.replace('.', '0')
        return cls.from_rows(text[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE))

    def to_list(self):
        return self.values.tolist()

    def to_string(self):
        return ''.join(str(v) for v in self.values.flat)

    def cell(self, row, col):
        assert 0 <= row < SIZE and 0 <= col < SIZE, f"Cell ({row}, {col}) out of range"
        value = int(self.values[row, col])
        return Cell(row, col, value if value else None, bool(self.given[row, col]))

    def __getitem__(self, pos):
        row, col = pos
        return self.cell(row, col)

    def cells(self):
        for row in range(SIZE):
            for col in range(SIZE):
                yield self.cell(row, col)

    def row(self, row):
        assert 0 <= row < SIZE, f"Row {row} out of range"
        return [self.cell(row, col) for col in range(SIZE)]

    def column(self, col):
        assert 0 <= col < SIZE, f"Column {col} out of range"
        return [self.cell(row, col) for row in range(SIZE)]

    def box(self, cell):
        """Other 8 cells of the 3x3 box containing cell, row-major"""
        start_row = (cell.row // BOX_SIZE) * BOX_SIZE
        start_col = (cell.col // BOX_SIZE) * BOX_SIZE

        return [self.cell(i, j)
                for i in range(start_row, start_row + BOX_SIZE)
                for j in range(start_col, start_col + BOX_SIZE)
                if (i, j) != (cell.row, cell.col)]

    def place(self, row, col, value):
        assert value in DIGITS, f"Invalid digit {value}"
        assert not self.given[row, col], f"Cell ({row}, {col}) is a given clue"
        self.values[row, col] = value

    def clear(self, row, col):
        assert not self.given[row, col], f"Cell ({row}, {col}) is a given clue"
        self.values[row, col] = 0

    def copy(self):
        return Grid(self.values.copy(), self.given.copy())

    def is_solved(self):
        return bool(np.all(self.values != 0))

    def first_empty_cell(self):
        # argwhere walks the array in C order, i.e. row-major
        empty = np.argwhere(self.values == 0)
        if len(empty) == 0:
            return None
        row, col = empty[0]
        return self.cell(int(row), int(col))

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    __hash__ = None

    def __repr__(self):
        return f"Grid({self.to_string()!r})"
