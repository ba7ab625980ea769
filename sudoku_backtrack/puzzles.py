"""Built-in example puzzles."""

CLASSIC_PUZZLE = [
    [0, 2, 0, 0, 0, 0, 0, 0, 5],
    [0, 0, 7, 0, 8, 5, 0, 2, 0],
    [0, 0, 9, 0, 0, 0, 0, 0, 0],
    [9, 0, 4, 0, 0, 0, 1, 0, 0],
    [1, 8, 6, 0, 0, 0, 0, 0, 0],
    [0, 5, 0, 0, 0, 4, 0, 0, 8],
    [0, 0, 1, 0, 0, 0, 6, 0, 0],
    [0, 7, 5, 9, 0, 8, 0, 0, 0],
    [4, 0, 0, 0, 0, 0, 7, 0, 0],
]
