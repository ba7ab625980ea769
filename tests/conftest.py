# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_backtrack" and the root scripts can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_backtrack.grid import Grid  # noqa: E402
from sudoku_backtrack.puzzles import CLASSIC_PUZZLE  # noqa: E402

CLASSIC_SOLUTION = [
    [8, 2, 3, 1, 7, 9, 4, 6, 5],
    [6, 4, 7, 3, 8, 5, 9, 2, 1],
    [5, 1, 9, 4, 2, 6, 8, 3, 7],
    [9, 3, 4, 8, 5, 2, 1, 7, 6],
    [1, 8, 6, 7, 9, 3, 5, 4, 2],
    [7, 5, 2, 6, 1, 4, 3, 9, 8],
    [2, 9, 1, 5, 4, 7, 6, 8, 3],
    [3, 7, 5, 9, 6, 8, 2, 1, 4],
    [4, 6, 8, 2, 3, 1, 7, 5, 9],
]

EMPTY_SOLUTION = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9],
    [4, 5, 6, 7, 8, 9, 1, 2, 3],
    [7, 8, 9, 1, 2, 3, 4, 5, 6],
    [2, 1, 4, 3, 6, 5, 8, 9, 7],
    [3, 6, 5, 8, 9, 7, 2, 1, 4],
    [8, 9, 7, 2, 1, 4, 3, 6, 5],
    [5, 3, 1, 6, 4, 2, 9, 7, 8],
    [6, 4, 2, 9, 7, 8, 5, 3, 1],
    [9, 7, 8, 5, 3, 1, 6, 4, 2],
]


@pytest.fixture
def classic():
    return Grid(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return Grid(CLASSIC_SOLUTION)


@pytest.fixture
def solved_grid():
    return Grid(EMPTY_SOLUTION)


@pytest.fixture
def dead_end():
    # consistent, but the cell at (8, 0) has no candidate left
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    rows[1][8] = 9
    return Grid(rows)
