"""
Candidate digits for a single cell.
"""

from .grid import SIZE, Grid


def valid_numbers(grid: Grid, col: int, row: int) -> list[int]:
    """Digits 1-9, ascending, that are absent from the cell's row, column and region."""
    used = set(grid.row(row)) | set(grid.column(col)) | set(grid.region_of(col, row))
    return [n for n in range(1, SIZE + 1) if n not in used]
