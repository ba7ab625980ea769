from sudoku_backtrack.candidates import valid_numbers
from sudoku_backtrack.grid import Grid


def test_corner_cell(classic):
    # row 0 holds 2 and 5, column 0 holds 9, 1, 4, the region holds 2, 7, 9
    assert valid_numbers(classic, 0, 0) == [3, 6, 8]


def test_centre_cell(classic):
    assert valid_numbers(classic, 4, 4) == [2, 3, 5, 7, 9]


def test_empty_grid_allows_every_digit():
    assert valid_numbers(Grid(), 5, 5) == list(range(1, 10))


def test_complement_of_row_column_and_region(classic):
    empty = [(col, row) for col, row, digit in classic.cells() if digit == 0]
    assert len(empty) == 57
    for col, row in empty:
        used = set(classic.row(row)) | set(classic.column(col)) | set(classic.region_of(col, row))
        expected = sorted(set(range(1, 10)) - used)
        numbers = valid_numbers(classic, col, row)
        assert numbers == expected
        assert all(a < b for a, b in zip(numbers, numbers[1:]))


def test_does_not_modify_grid(classic):
    before = classic.copy()
    valid_numbers(classic, 3, 3)
    assert classic == before


def test_no_candidates_left(dead_end):
    assert valid_numbers(dead_end, 8, 0) == []
