"""
Sudoku Solver - Backtracking Search

This package contains modules for:
- The 9x9 grid type and its text format
- Candidate digits for a cell
- Backtracking search
- Validity and solution checks
"""

__version__ = "1.0.0"
__author__ = "Sudoku Solver Project Team"
