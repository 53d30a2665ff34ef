"""Compass directions around a chunk.

Neighbor grids are always handed to a chunk as an 8-entry sequence, clockwise
from west. The enum value is the position in that sequence and the offset is
the step in chunk coordinates (north is +y).
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Neighbor directions, valued by their index in a neighbor sequence."""
    W = 0
    NW = 1
    N = 2
    NE = 3
    E = 4
    SE = 5
    S = 6
    SW = 7

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) step from a chunk to this neighbor."""
        return DIRECTION_OFFSETS[self]

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> 'Direction':
        """Look up the direction for a unit step.

        Raises:
            KeyError: If (dx, dy) is not one of the eight unit steps
        """
        return _OFFSET_DIRECTIONS[(dx, dy)]


DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.W: (-1, 0),
    Direction.NW: (-1, 1),
    Direction.N: (0, 1),
    Direction.NE: (1, 1),
    Direction.E: (1, 0),
    Direction.SE: (1, -1),
    Direction.S: (0, -1),
    Direction.SW: (-1, -1),
}

_OFFSET_DIRECTIONS: Dict[Tuple[int, int], Direction] = {
    offset: direction for direction, offset in DIRECTION_OFFSETS.items()
}


def neighbor_coordinates(cx: int, cy: int) -> Tuple[Tuple[int, int], ...]:
    """Get the eight neighboring chunk coordinates in neighbor-sequence order."""
    return tuple((cx + dx, cy + dy) for dx, dy in
                 (DIRECTION_OFFSETS[direction] for direction in Direction))
