import argparse
import sys
from models.grid import FormatError, Grid
from models.sudoku_solver import SudokuSolver
from utils.rendering import print_grid

DEFAULT_PUZZLE = [
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


class SudokuApp:
    def __init__(self, verbose=False, in_place=False):
        self.sudoku_solver = SudokuSolver(verbose=verbose, in_place=in_place)
        self.current_grid = None
        self.solution_grid = None

    def run(self, rows):
        """Parse rows, print the puzzle, solve it and print the outcome.

        FormatError from parsing is left for the caller to handle.
        """
        self.current_grid = Grid.from_rows(rows)
        print_grid(self.current_grid, "Puzzle:")

        print("Solving Sudoku...")
        self.solution_grid = self.sudoku_solver.solve(self.current_grid)

        if self.solution_grid is not None:
            print(f"Solution found ({self.sudoku_solver.steps} steps)")
            print_grid(self.solution_grid, "Solution:")

        return self.solution_grid


def read_rows(path):
    with open(path) as f:
        return [line.strip() for line in f if line.strip()]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle by backtracking.")
    parser.add_argument('rows', nargs='*',
                        help="9 rows of 9 digits each, 0 for an empty cell")
    parser.add_argument('-f', '--file',
                        help="read the puzzle rows from a file, one row per line")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="print the grid at every search step")
    parser.add_argument('--in-place', action='store_true',
                        help="search on a single grid with undo instead of copying")
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)

    if args.rows:
        rows = args.rows
    elif args.file:
        rows = read_rows(args.file)
    else:
        rows = DEFAULT_PUZZLE

    app = SudokuApp(verbose=args.verbose, in_place=args.in_place)
    try:
        app.run(rows)
    except FormatError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
