"""
9x9 Sudoku grid backed by a numpy array.

Cells are addressed as (col, row), both in 0..8. A value of 0 marks an
empty cell; 1..9 are placed digits. Only the shape is guaranteed by the
type: whether the digits respect the Sudoku rules is checked separately
(see ``validator``).
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

import numpy as np

SIZE = 9
REGION_SIZE = 3

EMPTY_MARKS = {".", "_"}
DIGITS = set("0123456789")


class ParseGridError(ValueError):
    """Raised when puzzle text cannot be turned into a grid."""


def _check_index(value: int, limit: int, name: str) -> None:
    if not 0 <= value < limit:
        raise IndexError(f"{name} {value} out of range (allowed: 0..{limit - 1})")


class Grid:
    """A 9x9 board of digits stored as ``uint8`` in ``[row, col]`` order."""

    def __init__(self, rows: Optional[Sequence[Sequence[int]]] = None):
        if rows is None:
            self._cells = np.zeros((SIZE, SIZE), dtype=np.uint8)
            return

        array = np.asarray(rows)
        if array.shape != (SIZE, SIZE):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}, got shape {array.shape}")
        if not np.issubdtype(array.dtype, np.integer):
            raise ValueError(f"Grid values must be integers, got {array.dtype}")
        if array.min() < 0 or array.max() > SIZE:
            raise ValueError(f"Grid values must be in 0..{SIZE}")
        self._cells = array.astype(np.uint8)

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse a puzzle from text.

        Accepted layouts:
        - nine lines of nine whitespace-separated cells
        - nine lines of nine contiguous characters
        - a single line of 81 characters

        A cell is a digit 0-9, or '.' / '_' for an empty cell. Blank lines,
        lines starting with '#', '|' separators and '---' separator rows
        are skipped, so the output of ``format_board`` parses back.
        """
        cells: list[int] = []
        for line_no, raw in enumerate(text.splitlines(), 1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            # region separator rows as printed by format_board
            if set(line) <= set("-+ "):
                continue
            tokens = line.replace("|", " ").split()
            if any(len(token) > 1 for token in tokens):
                tokens = list("".join(tokens))
            for token in tokens:
                if token in EMPTY_MARKS:
                    cells.append(0)
                elif token in DIGITS:
                    cells.append(int(token))
                else:
                    raise ParseGridError(f"Line {line_no}: invalid cell '{token}'")
            if len(cells) % SIZE != 0:
                raise ParseGridError(f"Line {line_no}: row does not hold a multiple of {SIZE} cells")

        if len(cells) != SIZE * SIZE:
            raise ParseGridError(f"Expected {SIZE * SIZE} cells, found {len(cells)}")

        return cls(np.array(cells, dtype=np.uint8).reshape(SIZE, SIZE))

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = self._cells.copy()
        return clone

    def get(self, col: int, row: int) -> int:
        _check_index(col, SIZE, "Column")
        _check_index(row, SIZE, "Row")
        return int(self._cells[row, col])

    def set(self, col: int, row: int, digit: int) -> None:
        _check_index(col, SIZE, "Column")
        _check_index(row, SIZE, "Row")
        if isinstance(digit, (bool, np.bool_)) or not isinstance(digit, (int, np.integer)):
            raise ValueError(f"Cannot place {digit!r} at ({col},{row}): digit must be an integer")
        if not 1 <= digit <= SIZE:
            raise ValueError(f"Cannot place {digit} at ({col},{row}): digit must be in 1..{SIZE}")
        self._cells[row, col] = digit

    def row(self, r: int) -> list[int]:
        _check_index(r, SIZE, "Row")
        return self._cells[r, :].tolist()

    def column(self, c: int) -> list[int]:
        _check_index(c, SIZE, "Column")
        return self._cells[:, c].tolist()

    def region(self, rc: int, rr: int) -> list[int]:
        _check_index(rc, REGION_SIZE, "Region column")
        _check_index(rr, REGION_SIZE, "Region row")
        r0 = rr * REGION_SIZE
        c0 = rc * REGION_SIZE
        block = self._cells[r0:r0 + REGION_SIZE, c0:c0 + REGION_SIZE]
        return block.ravel().tolist()

    def region_of(self, col: int, row: int) -> list[int]:
        _check_index(col, SIZE, "Column")
        _check_index(row, SIZE, "Row")
        return self.region(col // REGION_SIZE, row // REGION_SIZE)

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (col, row, digit) for every cell in row-major order."""
        for row in range(SIZE):
            for col in range(SIZE):
                yield col, row, int(self._cells[row, col])

    def first_empty_cell(self) -> Optional[tuple[int, int]]:
        """(col, row) of the first empty cell in row-major order, or None."""
        positions = np.argwhere(self._cells == 0)
        if positions.size == 0:
            return None
        row, col = positions[0]
        return int(col), int(row)

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        from .formatting import format_grid
        return format_grid(self)

    def __repr__(self) -> str:
        from .formatting import format_debug
        return f"Grid({format_debug(self)})"
