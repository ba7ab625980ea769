"""
Text renderings of a grid.
"""

from .grid import SIZE, Grid


def format_grid(grid: Grid) -> str:
    """All 81 digits, one row per line, separated by single spaces."""
    return "\n".join(" ".join(str(v) for v in grid.row(r)) for r in range(SIZE))


def format_board(grid: Grid) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r in range(SIZE):
        parts = []
        for c, val in enumerate(grid.row(r)):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)


def format_debug(grid: Grid) -> str:
    rows = [", ".join(str(v) for v in grid.row(r)) for r in range(SIZE)]
    return "[" + ",\n ".join(rows) + "]"
