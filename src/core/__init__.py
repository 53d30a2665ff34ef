"""
Chunked Game of Life core

Coordinate mapping, chunks and the universe that ticks them. Everything a
caller needs to edit and advance an unbounded Life plane.
"""

from .chunk import DEAD_GENERATION, Chunk
from .coords import CHUNK_SIZE, from_chunk_coordinate, to_chunk_coordinate, to_local_coordinate
from .direction import Direction
from .universe import TickStats, Universe

__all__ = [
    'CHUNK_SIZE',
    'Chunk',
    'DEAD_GENERATION',
    'Direction',
    'TickStats',
    'Universe',
    'from_chunk_coordinate',
    'to_chunk_coordinate',
    'to_local_coordinate',
]
