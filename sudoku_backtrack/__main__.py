"""
Entry point for running the sudoku_backtrack package as a module.

Usage:
    python -m sudoku_backtrack --puzzle path/to/puzzle.txt
"""

import sys

from .sudoku_solver import main

if __name__ == '__main__':
    sys.exit(main())
