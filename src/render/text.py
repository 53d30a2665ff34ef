"""Text rendering of a universe viewport.

The renderer only learns about cells through chunk refresh notifications,
the same hand-over a mesh renderer would use: a chunk, its live local cells
and its world origin.
"""

import logging
from typing import Dict, FrozenSet, Tuple

from ..core.chunk import Chunk
from ..core.universe import Universe

logger = logging.getLogger(__name__)


class TextRenderer:
    """Caches live world cells per chunk and draws rectangular viewports."""

    def __init__(self, alive_char: str = '█', dead_char: str = '░'):
        self.alive_char = alive_char
        self.dead_char = dead_char
        self.chunk_cells: Dict[Tuple[int, int], FrozenSet[Tuple[int, int]]] = {}
        self.refresh_count = 0

    def attach(self, universe: Universe) -> None:
        """Receive refreshes from universe and load its current chunks."""
        universe.renderer = self.refresh
        universe.refresh_all()

    def refresh(self, chunk: Chunk) -> None:
        """Rebuild the cached cells of one chunk."""
        origin_x, origin_y = chunk.world_origin
        self.chunk_cells[chunk.position] = frozenset(
            (origin_x + x, origin_y + y) for x, y in chunk.live_cells()
        )
        self.refresh_count += 1
        logger.debug(f"Refreshed chunk {chunk.position}: {len(self.chunk_cells[chunk.position])} live")

    def render(self, x: int, y: int, width: int, height: int) -> str:
        """Draw the viewport whose lower-left world cell is (x, y).

        Rows are emitted north (highest y) first.

        Raises:
            ValueError: If width or height is not positive
        """
        if width < 1 or height < 1:
            raise ValueError("Viewport dimensions must be positive")

        alive = set()
        for cells in self.chunk_cells.values():
            alive.update(cells)

        lines = []
        for row in reversed(range(y, y + height)):
            lines.append(''.join(self.alive_char if (column, row) in alive else self.dead_char
                                 for column in range(x, x + width)))
        return '\n'.join(lines)
