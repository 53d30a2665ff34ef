"""Fixed-size square region of the infinite Game of Life plane.

A chunk double-buffers its cells: ``previous_generation`` is the frozen input
of the tick in progress and ``current_generation`` is its output (and what is
shown between ticks). Grids are numpy boolean arrays indexed ``[y, x]``.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .conway_rules import apply_rules, count_live_neighbors
from .coords import CHUNK_SIZE, from_chunk_coordinate
from .direction import Direction

logger = logging.getLogger(__name__)


def empty_generation() -> np.ndarray:
    """Create an all-dead chunk grid."""
    return np.zeros((CHUNK_SIZE, CHUNK_SIZE), dtype=bool)


# Shared stand-in for neighbors that have never been created
DEAD_GENERATION = empty_generation()
DEAD_GENERATION.flags.writeable = False


def _edge_step(coordinate: int) -> int:
    """Chunk step needed to reach a local coordinate one cell past an edge."""
    if coordinate == -1:
        return -1
    if coordinate == CHUNK_SIZE:
        return 1
    if 0 <= coordinate < CHUNK_SIZE:
        return 0
    raise IndexError(f"Local coordinate {coordinate} is more than one cell outside the chunk")


class Chunk:
    """CHUNK_SIZE x CHUNK_SIZE block of cells with two generations.

    Attributes:
        position: (cx, cy) coordinate in the chunk grid
        current_generation: Generation being written (during a tick) or shown
        current_alive_count: Live cells in current_generation
        previous_generation: Read-only input of the latest tick
        previous_alive_count: Live cells in previous_generation

    A step over many chunks must call prepare_tick() on all of them before
    calling tick() on any of them.
    """

    def __init__(self, position: Tuple[int, int]):
        cx, cy = position
        self._position = (int(cx), int(cy))

        self.current_generation = empty_generation()
        self.current_alive_count = 0

        self.previous_generation = empty_generation()
        self.previous_generation.flags.writeable = False
        self.previous_alive_count = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self._position

    @property
    def world_origin(self) -> Tuple[int, int]:
        """World coordinate of local cell (0, 0)."""
        return from_chunk_coordinate(*self._position)

    def prepare_tick(self) -> None:
        """Move the current generation into the previous slot and clear it."""
        self.previous_generation = self.current_generation
        self.previous_generation.flags.writeable = False
        self.previous_alive_count = self.current_alive_count

        self.current_generation = empty_generation()
        self.current_alive_count = 0

    def neighbor_state(self, neighbors: Sequence[np.ndarray], x: int, y: int) -> bool:
        """Resolve the previous-generation state of a local cell or its halo.

        Positions inside the chunk read previous_generation. Positions one
        cell past an edge or corner read the facing cell of the neighbor in
        that direction, e.g. (-1, CHUNK_SIZE) reads the north-west neighbor
        at (CHUNK_SIZE - 1, 0).

        Args:
            neighbors: Eight previous-generation grids ordered as Direction
            x: Local x coordinate in [-1, CHUNK_SIZE]
            y: Local y coordinate in [-1, CHUNK_SIZE]

        Raises:
            IndexError: If the position is further than one cell outside
        """
        dx, dy = _edge_step(x), _edge_step(y)
        if dx == 0 and dy == 0:
            return bool(self.previous_generation[y, x])

        direction = Direction.from_offset(dx, dy)
        grid = neighbors[direction.value]
        return bool(grid[y - dy * CHUNK_SIZE, x - dx * CHUNK_SIZE])

    def _padded_previous(self, neighbors: Sequence[np.ndarray]) -> np.ndarray:
        """Previous generation surrounded by a one-cell halo from the neighbors."""
        size = CHUNK_SIZE
        padded = np.zeros((size + 2, size + 2), dtype=bool)
        padded[1:-1, 1:-1] = self.previous_generation

        for x in range(-1, size + 1):
            padded[0, x + 1] = self.neighbor_state(neighbors, x, -1)
            padded[size + 1, x + 1] = self.neighbor_state(neighbors, x, size)
        for y in range(size):
            padded[y + 1, 0] = self.neighbor_state(neighbors, -1, y)
            padded[y + 1, size + 1] = self.neighbor_state(neighbors, size, y)

        return padded

    def tick(self, neighbors: Sequence[np.ndarray]) -> None:
        """Compute current_generation from previous_generation and neighbors.

        Args:
            neighbors: Eight previous-generation grids ordered W, NW, N, NE,
                E, SE, S, SW. Missing neighbors should be DEAD_GENERATION.

        Raises:
            ValueError: If the neighbor sequence does not hold eight grids
        """
        if len(neighbors) != len(Direction):
            raise ValueError(f"Expected {len(Direction)} neighbor grids, got {len(neighbors)}")

        padded = self._padded_previous(neighbors)
        live_neighbors = count_live_neighbors(padded)
        next_generation = apply_rules(self.previous_generation, live_neighbors)

        self.current_generation[:] = next_generation
        self.current_alive_count = int(np.count_nonzero(next_generation))

    def changed(self) -> bool:
        """Check whether the last tick altered any cell."""
        return not np.array_equal(self.current_generation, self.previous_generation)

    def get_cell(self, x: int, y: int) -> bool:
        """Get current state of a local cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_local(x, y)
        return bool(self.current_generation[y, x])

    def set_cell(self, x: int, y: int, alive: bool) -> bool:
        """Set current state of a local cell.

        Returns:
            True if the cell state actually changed

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_local(x, y)
        alive = bool(alive)
        if self.current_generation[y, x] == alive:
            return False

        self.current_generation[y, x] = alive
        self.current_alive_count += 1 if alive else -1
        return True

    def live_cells(self) -> List[Tuple[int, int]]:
        """Local (x, y) coordinates of every live cell in current_generation."""
        ys, xs = np.nonzero(self.current_generation)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def is_empty(self) -> bool:
        return self.current_alive_count == 0

    def _check_local(self, x: int, y: int) -> None:
        if not (0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_SIZE):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {CHUNK_SIZE}x{CHUNK_SIZE} chunk")

    def __str__(self) -> str:
        """Current generation with north at the top."""
        alive_char = '█'
        dead_char = '░'

        lines = []
        for y in reversed(range(CHUNK_SIZE)):
            lines.append(''.join(alive_char if cell else dead_char
                                 for cell in self.current_generation[y]))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Chunk(position={self._position}, alive={self.current_alive_count})"
