"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

from .formatting import format_board
from .grid import Grid, ParseGridError
from .puzzles import CLASSIC_PUZZLE
from .solver import InconsistentPuzzleError, solve_puzzle
from .validator import find_conflicts

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_NO_SOLUTION = 3


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    Runs a puzzle through the full pipeline: load, consistency check,
    backtracking search and verification of the result.
    """

    def __init__(self, verbose=False):
        """
        Initialize the Sudoku Solver.

        Args:
            verbose (bool): Whether to print a progress report for each step
        """
        self.verbose = verbose

    def _log(self, message=""):
        if self.verbose:
            print(message)

    def process_file(self, puzzle_path):
        """
        Load a puzzle from a text file and solve it.

        Args:
            puzzle_path (str): Path to the puzzle file

        Returns:
            dict: Results, see process_grid()

        Raises:
            ParseGridError: if the file does not hold a valid puzzle
            InconsistentPuzzleError: if the givens break the Sudoku rules
        """
        self._log(f"\n{'='*60}")
        self._log(f"Processing: {os.path.basename(puzzle_path)}")
        self._log(f"{'='*60}")

        with open(puzzle_path, encoding="utf-8") as f:
            text = f.read()
        grid = Grid.from_text(text)
        return self.process_grid(grid)

    def process_grid(self, grid):
        """
        Solve an already constructed puzzle.

        Pipeline steps:
        1. Report the puzzle
        2. Check the givens for duplicates
        3. Backtracking search and verification

        Args:
            grid (Grid): The puzzle; it is not modified

        Returns:
            dict: 'puzzle', 'solution' (Grid or None), 'message', 'solved'
        """
        self._log("\n[1/3] Loading puzzle...")
        givens = sum(1 for _, _, digit in grid.cells() if digit != 0)
        self._log(f"      Givens: {givens}")
        self._log(format_board(grid))

        self._log("\n[2/3] Checking givens...")
        conflicts = find_conflicts(grid)
        if conflicts:
            for note in conflicts:
                self._log(f"      ✗ {note}")
        else:
            self._log("      ✓ No duplicate givens")

        self._log("\n[3/3] Searching...")
        solution, message = solve_puzzle(grid)
        if solution is None:
            self._log(f"      ✗ Could not solve: {message}")
        else:
            self._log(f"      ✓ Solved puzzle ({message}):")
            self._log(format_board(solution))

        return {
            'puzzle': grid,
            'solution': solution,
            'message': message,
            'solved': solution is not None,
        }


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and solves one puzzle.
    Returns the process exit code.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - backtracking search over a 9x9 grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve the built-in example puzzle:
    python -m sudoku_backtrack

  Solve a puzzle file with a progress report:
    python -m sudoku_backtrack --puzzle puzzle.txt --verbose

Puzzle files hold nine rows of nine cells; use 0 or . for empty cells.
        """
    )

    parser.add_argument('--puzzle', '-p', default=None,
                        help='Path to a puzzle text file (default: built-in example)')
    parser.add_argument('--pretty', action='store_true',
                        help='Print the solution with region separators')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print a step-by-step progress report')

    args = parser.parse_args(argv)

    solver = SudokuSolver(verbose=args.verbose)

    try:
        if args.puzzle is None:
            result = solver.process_grid(Grid(CLASSIC_PUZZLE))
        else:
            if not os.path.exists(args.puzzle):
                print(f"Error: Puzzle file not found: {args.puzzle}")
                return EXIT_INVALID
            result = solver.process_file(args.puzzle)
    except (ParseGridError, InconsistentPuzzleError) as e:
        print(f"Error: {e}")
        return EXIT_INVALID
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read puzzle file: {e}")
        return EXIT_INVALID

    if not result['solved']:
        print("No solution could be found")
        return EXIT_NO_SOLUTION

    if args.verbose:
        print()
    if args.pretty:
        print(format_board(result['solution']))
    else:
        print(result['solution'])
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
