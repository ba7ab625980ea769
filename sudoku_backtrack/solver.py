"""
Simple backtracking Sudoku solver with basic safety checks.

Each placement is tried on a fresh copy of the grid, so a failed branch
never leaves digits behind in its parent or siblings. Empty cells are
filled in row-major order and candidates are tried in ascending order,
which makes the returned solution deterministic.
"""

from typing import Optional

from .candidates import valid_numbers
from .grid import Grid
from .validator import find_conflicts, is_solution_to


class InconsistentPuzzleError(ValueError):
    """Raised when the givens of a puzzle already break the Sudoku rules."""


def find_next_empty_cell(grid: Grid) -> Optional[tuple[int, int]]:
    """Return (col, row) of the first empty cell, scanning row by row."""
    return grid.first_empty_cell()


def solve(grid: Grid, step_counter: Optional[list[int]] = None) -> Optional[Grid]:
    """
    Backtracking search. Returns a solved grid, or None if no solution
    exists from this state. ``grid`` itself is never modified.

    If ``step_counter`` is given, its single element is incremented for
    every digit placed.
    """
    empty = find_next_empty_cell(grid)
    if empty is None:
        return grid

    col, row = empty
    for num in valid_numbers(grid, col, row):
        attempt = grid.copy()
        attempt.set(col, row, num)
        if step_counter is not None:
            step_counter[0] += 1
        solved = solve(attempt, step_counter)
        if solved is not None:
            return solved

    return None


def solve_puzzle(grid: Grid) -> tuple[Optional[Grid], str]:
    """
    Return (solved grid, message), or (None, reason) if the puzzle has no solution.

    Raises InconsistentPuzzleError if the givens clash; such a puzzle is
    rejected before any search is attempted.
    """
    conflicts = find_conflicts(grid)
    if conflicts:
        raise InconsistentPuzzleError(f"Cannot begin to solve invalid sudoku: {conflicts[0]}")

    steps = [0]
    solution = solve(grid, steps)
    if solution is None:
        return None, "No solution found"

    if not is_solution_to(grid, solution):
        raise RuntimeError("Solver produced a grid that does not solve the puzzle")
    return solution, f"Solved in {steps[0]} steps"
