#!/usr/bin/env python3
"""
Convenience script to solve a Sudoku puzzle file.

This script provides a simple interface to the Sudoku Solver pipeline.

Usage:
    python solve_puzzle.py --puzzle puzzles/classic.txt
    python solve_puzzle.py -p path/to/puzzle.txt --verbose
"""

import sys
import os

# Add the package directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_backtrack.sudoku_solver import main

if __name__ == '__main__':
    sys.exit(main())
