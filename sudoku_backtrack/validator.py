"""
Predicates for checking Sudoku grids.

Used before the search (reject a puzzle whose givens already clash) and
after it (confirm a found grid is complete, consistent and keeps every
given clue).
"""

from typing import Sequence

from .grid import REGION_SIZE, SIZE, Grid


def contains_duplicate(values: Sequence[int]) -> bool:
    """True if some nonzero digit appears more than once. Zeros never count."""
    seen = set()
    for v in values:
        if v == 0:
            continue
        if v in seen:
            return True
        seen.add(v)
    return False


def is_full(grid: Grid) -> bool:
    return all(digit != 0 for _, _, digit in grid.cells())


def is_consistent(grid: Grid) -> bool:
    """True if no row, column or region holds a duplicate digit. Empty cells are allowed."""
    for i in range(SIZE):
        if contains_duplicate(grid.row(i)):
            return False
        if contains_duplicate(grid.column(i)):
            return False
        if contains_duplicate(grid.region(i % REGION_SIZE, i // REGION_SIZE)):
            return False
    return True


def is_solved(grid: Grid) -> bool:
    return is_full(grid) and is_consistent(grid)


def is_faithful(original: Grid, candidate: Grid) -> bool:
    """True if every given clue of ``original`` is kept unchanged in ``candidate``."""
    return all(
        digit == 0 or candidate.get(col, row) == digit
        for col, row, digit in original.cells()
    )


def is_solution_to(original: Grid, candidate: Grid) -> bool:
    return is_faithful(original, candidate) and is_solved(candidate)


def _duplicates(values: Sequence[int]) -> list[int]:
    filled = [v for v in values if v != 0]
    return sorted({v for v in filled if filled.count(v) > 1})


def find_conflicts(grid: Grid) -> list[str]:
    """
    Describe every house that holds a duplicate digit.

    Houses are numbered from 1 in the messages. The list is empty exactly
    when ``is_consistent(grid)`` is true.
    """
    conflicts = []
    for i in range(SIZE):
        for digit in _duplicates(grid.row(i)):
            conflicts.append(f"Row {i+1} has duplicate digit {digit}")
    for i in range(SIZE):
        for digit in _duplicates(grid.column(i)):
            conflicts.append(f"Column {i+1} has duplicate digit {digit}")
    for rr in range(REGION_SIZE):
        for rc in range(REGION_SIZE):
            for digit in _duplicates(grid.region(rc, rr)):
                conflicts.append(f"Region ({rr+1},{rc+1}) has duplicate digit {digit}")
    return conflicts
