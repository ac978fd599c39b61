import pytest
from models.grid import Grid

PUZZLE = [
    "120070560",
    "507932080",
    "000001000",
    "010240050",
    "308000402",
    "070085010",
    "000700000",
    "080423701",
    "034010028",
]

SOLUTION = [
    "123874569",
    "567932184",
    "849651237",
    "916247853",
    "358196472",
    "472385916",
    "291768345",
    "685423791",
    "734519628",
]


def units(grid):
    """All 27 rows, columns and boxes as lists of values"""
    values = grid.to_list()
    rows = [list(row) for row in values]
    cols = [[values[r][c] for r in range(9)] for c in range(9)]
    boxes = [[values[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
             for br in (0, 3, 6) for bc in (0, 3, 6)]
    return rows + cols + boxes


def is_valid_solution(grid):
    return all(sorted(unit) == list(range(1, 10)) for unit in units(grid))


@pytest.fixture
def puzzle():
    return Grid.from_rows(PUZZLE)


@pytest.fixture
def solution():
    return Grid.from_rows(SOLUTION)


@pytest.fixture
def valid_solution():
    return is_valid_solution


@pytest.fixture
def puzzle_rows():
    return list(PUZZLE)


@pytest.fixture
def solution_rows():
    return list(SOLUTION)
