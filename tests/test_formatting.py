from sudoku_backtrack.formatting import format_board, format_debug, format_grid
from sudoku_backtrack.grid import Grid


def test_format_grid_layout(solved_grid):
    text = format_grid(solved_grid)
    lines = text.split("\n")
    assert len(lines) == 9
    assert lines[0] == "1 2 3 4 5 6 7 8 9"
    assert all(len(line.split(" ")) == 9 for line in lines)
    assert not any(line.endswith(" ") for line in lines)
    assert not text.endswith("\n")


def test_format_grid_shows_zeros():
    assert format_grid(Grid()).split("\n")[4] == "0 0 0 0 0 0 0 0 0"


def test_format_board_marks_regions_and_blanks(classic):
    lines = format_board(classic).split("\n")
    assert len(lines) == 11
    assert lines[0] == ". 2 . | . . . | . . 5"
    assert set(lines[3]) == {"-"}
    assert len(lines[3]) == len(lines[0])


def test_format_debug(classic):
    text = format_debug(classic)
    assert text.startswith("[0, 2, 0, 0, 0, 0, 0, 0, 5,\n 0, 0, 7")
    assert text.endswith("4, 0, 0, 0, 0, 0, 7, 0, 0]")
    assert text.count("\n") == 8
