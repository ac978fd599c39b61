from models.grid import DIGITS
from utils.rendering import format_grid


class SudokuSolver:
    def __init__(self, verbose=False, in_place=False):
        self.verbose = verbose
        self.in_place = in_place
        self.steps = 0

    def allowed_values(self, grid, cell):
        """Digits 1-9 not already used in the cell's row, column or box, ascending"""
        peers = grid.row(cell.row) + grid.column(cell.col) + grid.box(cell)
        taken = {peer.value for peer in peers
                 if peer.value is not None and (peer.row, peer.col) != (cell.row, cell.col)}

        return [num for num in DIGITS if num not in taken]

    def is_valid(self, grid, row, col, num):
        """Check if placing num at (row, col) is valid"""
        return num in self.allowed_values(grid, grid.cell(row, col))

    def is_valid_sudoku(self, grid):
        """Check that no two filled cells clash"""
        for cell in grid.cells():
            if cell.value is not None and not self.is_valid(grid, cell.row, cell.col, cell.value):
                return False
        return True

    def solve(self, grid):
        """Solve Sudoku using backtracking.

        Returns a solved copy of the grid, or None when the puzzle has no
        solution. The grid passed in is never modified.
        """
        self.steps = 0

        # Candidate filtering never re-checks filled cells, so clashing clues
        # would otherwise only be found by exhausting the whole search tree
        if not self.is_valid_sudoku(grid):
            return None

        if self.in_place:
            # Create a copy to avoid modifying original
            working = grid.copy()
            if self._solve_in_place(working):
                return working
            return None

        return self._solve_helper(grid.copy())

    def _solve_helper(self, grid):
        """Recursive helper that copies the grid before every placement"""
        self._trace(grid)

        cell = grid.first_empty_cell()
        if cell is None:
            return grid

        for num in self.allowed_values(grid, cell):
            branch = grid.copy()
            branch.place(cell.row, cell.col, num)

            solution = self._solve_helper(branch)
            if solution is not None:
                return solution

        return None

    def _solve_in_place(self, grid):
        """Recursive helper that places and clears digits on a single grid"""
        self._trace(grid)

        cell = grid.first_empty_cell()
        if cell is None:
            return True

        for num in self.allowed_values(grid, cell):
            grid.place(cell.row, cell.col, num)

            if self._solve_in_place(grid):
                return True

            grid.clear(cell.row, cell.col)  # Backtrack

        return False

    def _trace(self, grid):
        self.steps += 1
        if self.verbose:
            print(f"Step {self.steps}:")
            print(format_grid(grid))
