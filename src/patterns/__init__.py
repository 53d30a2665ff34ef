"""Pattern library for seeding universes."""

from .library import (
    BLINKER, BLOCK, GLIDER, PATTERNS, R_PENTOMINO,
    get_pattern, parse_pattern, pattern_cells, rotate_pattern, stamp
)

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'PATTERNS',
    'R_PENTOMINO',
    'get_pattern',
    'parse_pattern',
    'pattern_cells',
    'rotate_pattern',
    'stamp',
]
