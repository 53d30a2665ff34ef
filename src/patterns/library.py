"""Canonical Game of Life patterns and placement into a universe.

Patterns are 2D boolean arrays written as they are drawn: row 0 is the
northmost row. Placing a pattern at (x, y) puts its lower-left cell at that
world coordinate.
"""

from typing import Dict, Set, Tuple

import numpy as np

from ..core.universe import Universe

ALIVE_CHARS = 'XO*#'
DEAD_CHARS = '.-_ '


def parse_pattern(text: str) -> np.ndarray:
    """Parse a drawn pattern such as ".X.\\n..X\\nXXX".

    Short rows are padded with dead cells on the right.

    Raises:
        ValueError: If the text is empty or contains unknown characters
    """
    rows = [line.rstrip('\n') for line in text.strip('\n').splitlines()]
    if not rows:
        raise ValueError("Pattern text is empty")

    width = max(len(row) for row in rows)
    pattern = np.zeros((len(rows), width), dtype=bool)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char in ALIVE_CHARS:
                pattern[r, c] = True
            elif char not in DEAD_CHARS:
                raise ValueError(f"Unknown pattern character {char!r} at row {r}, column {c}")
    return pattern


BLOCK = parse_pattern("""
XX
XX
""")

BLINKER = parse_pattern("XXX")

# Travels one cell east and one cell south every 4 generations
GLIDER = parse_pattern("""
.X.
..X
XXX
""")

R_PENTOMINO = parse_pattern("""
.XX
XX.
.X.
""")

PATTERNS: Dict[str, np.ndarray] = {
    'block': BLOCK,
    'blinker': BLINKER,
    'glider': GLIDER,
    'r-pentomino': R_PENTOMINO,
}


def get_pattern(name: str) -> np.ndarray:
    """Get a copy of a named pattern.

    Raises:
        KeyError: If no pattern has that name
    """
    return PATTERNS[name].copy()


def rotate_pattern(pattern: np.ndarray, clockwise_rotations: int = 1) -> np.ndarray:
    """Rotate a pattern clockwise by 90 degree steps.

    A glider rotated once clockwise heads 90 degrees clockwise of where it
    headed before.
    """
    return np.rot90(pattern, k=-(clockwise_rotations % 4)).copy()


def pattern_cells(pattern: np.ndarray, x: int, y: int) -> Set[Tuple[int, int]]:
    """World coordinates of the live cells of pattern placed at (x, y).

    Raises:
        ValueError: If pattern is not 2D
    """
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be 2D, got {pattern.ndim}D")

    rows = pattern.shape[0]
    live_rows, live_cols = np.nonzero(pattern)
    return {(x + int(c), y + rows - 1 - int(r)) for r, c in zip(live_rows, live_cols)}


def stamp(universe: Universe, pattern: np.ndarray, x: int, y: int) -> int:
    """Write the live cells of pattern into universe with its lower-left at (x, y).

    Dead pattern cells leave the universe untouched.

    Returns:
        Number of live cells written
    """
    cells = pattern_cells(pattern, x, y)
    for cell in cells:
        universe.set_cell(cell, True)
    return len(cells)
