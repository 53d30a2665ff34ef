"""Coordinate mapping between world cells, chunks and chunk-local cells.

The plane is split into square chunks of ``CHUNK_SIZE`` cells. World
coordinates may be any real number (cursor positions arrive as floats), so
every conversion goes through floating point and uses a true floor.
"""

import math
from typing import Tuple

# Side length of every chunk, in cells
CHUNK_SIZE: int = 50


def to_chunk_coordinate(x: float, y: float) -> Tuple[int, int]:
    """Get the coordinate of the chunk containing world cell (x, y).

    Args:
        x: World x coordinate
        y: World y coordinate

    Returns:
        (cx, cy) chunk coordinate. Negative coordinates floor away from zero,
        so x=-1 lands in chunk -1, not 0.
    """
    return (math.floor(float(x) / CHUNK_SIZE),
            math.floor(float(y) / CHUNK_SIZE))


def from_chunk_coordinate(cx: int, cy: int) -> Tuple[int, int]:
    """Get the world position of a chunk's origin (lowest x, lowest y) cell."""
    return (int(cx) * CHUNK_SIZE, int(cy) * CHUNK_SIZE)


def to_local_coordinate(x: float, y: float) -> Tuple[int, int]:
    """Get the position of world cell (x, y) inside its chunk.

    Returns:
        (lx, ly) with both components in [0, CHUNK_SIZE)
    """
    return (_local_axis(x), _local_axis(y))


def _local_axis(value: float) -> int:
    # Positive modulo so negative world coordinates still index from 0
    return int((CHUNK_SIZE + math.fmod(float(value), CHUNK_SIZE)) % CHUNK_SIZE)
