"""Sparse, unbounded Game of Life universe built from lazily created chunks.

Chunks exist only where cells have been written or where activity may spread
next generation. A step runs in strict phases across all chunks:

1. prepare   - every chunk moves current -> previous
2. frontier  - chunks that had live cells get all eight neighbors created
3. snapshot  - freeze every chunk's previous generation
4. tick      - each chunk computes its next generation from the snapshot
5. refresh   - the renderer hears about chunks that changed
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Set, Tuple

import numpy as np

from .chunk import DEAD_GENERATION, Chunk
from .coords import from_chunk_coordinate, to_chunk_coordinate, to_local_coordinate
from .direction import neighbor_coordinates

logger = logging.getLogger(__name__)

ChunkCoordinate = Tuple[int, int]
ChunkRefresh = Callable[[Chunk], None]


@dataclass
class TickStats:
    """Summary of one universe step."""
    generation: int       # Generation number reached by this step
    chunk_count: int      # Chunks in the universe after the step
    chunks_created: int   # Chunks added by frontier growth
    chunks_changed: int   # Chunks whose cells differ from the previous generation
    alive_cells: int      # Live cells across all chunks


class Universe:
    """Infinite Game of Life plane stored as a map of chunks.

    Attributes:
        chunks: Chunk coordinate -> Chunk. Only ever grows.
        generation: Number of completed steps
        renderer: Optional callback told when a chunk needs redrawing
        workers: Threads used for the per-chunk tick phase (1 = inline)
    """

    def __init__(self, renderer: Optional[ChunkRefresh] = None, workers: int = 1):
        """Initialize an empty universe.

        Args:
            renderer: Called with a chunk when it is created, edited, or
                changed by a tick
            workers: Number of threads for the per-chunk tick phase

        Raises:
            ValueError: If workers is less than 1
        """
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self.chunks: Dict[ChunkCoordinate, Chunk] = {}
        self.generation = 0
        self.renderer = renderer
        self.workers = workers

    def get_chunk(self, chunk_pos: ChunkCoordinate) -> Optional[Chunk]:
        """Get an existing chunk without creating it."""
        return self.chunks.get(chunk_pos)

    def get_or_create_chunk(self, chunk_pos: ChunkCoordinate) -> Chunk:
        """Get the chunk at chunk_pos, creating an empty one if needed."""
        chunk = self.chunks.get(chunk_pos)
        if chunk is None:
            chunk = Chunk(chunk_pos)
            self.chunks[chunk.position] = chunk
            logger.debug(f"Created chunk {chunk.position} at world {chunk.world_origin}")
            self._refresh(chunk)
        return chunk

    def set_cell(self, world_pos: Tuple[float, float], alive: bool) -> None:
        """Write a cell into the current generation.

        The chunk is created if it does not exist yet. Edits land in the
        current generation, so while paused they are visible at once and
        while running they feed the next step.
        """
        x, y = world_pos
        chunk = self.get_or_create_chunk(to_chunk_coordinate(x, y))
        local_x, local_y = to_local_coordinate(x, y)

        if chunk.set_cell(local_x, local_y, alive):
            self._refresh(chunk)

    def get_cell(self, world_pos: Tuple[float, float]) -> bool:
        """Read a cell from the current generation; absent chunks are dead."""
        x, y = world_pos
        chunk = self.chunks.get(to_chunk_coordinate(x, y))
        if chunk is None:
            return False

        local_x, local_y = to_local_coordinate(x, y)
        return chunk.get_cell(local_x, local_y)

    def toggle_cell(self, world_pos: Tuple[float, float]) -> bool:
        """Flip a cell and return its new state."""
        new_state = not self.get_cell(world_pos)
        self.set_cell(world_pos, new_state)
        return new_state

    def tick(self) -> TickStats:
        """Advance the whole universe by one generation.

        Returns:
            Statistics for the completed step
        """
        # Prepare: every chunk before any chunk ticks
        for chunk in self.chunks.values():
            chunk.prepare_tick()

        # Frontier growth around chunks that had live cells
        needed_chunks = [
            neighbor_pos
            for chunk in self.chunks.values()
            if chunk.previous_alive_count > 0
            for neighbor_pos in neighbor_coordinates(*chunk.position)
        ]
        chunk_count_before = len(self.chunks)
        for chunk_pos in needed_chunks:
            self.get_or_create_chunk(chunk_pos)
        chunks_created = len(self.chunks) - chunk_count_before

        # Frozen view of every previous generation
        snapshot = MappingProxyType({
            chunk_pos: chunk.previous_generation
            for chunk_pos, chunk in self.chunks.items()
        })

        self._tick_chunks(snapshot)

        changed_chunks = [chunk for chunk in self.chunks.values() if chunk.changed()]
        for chunk in changed_chunks:
            self._refresh(chunk)

        self.generation += 1
        stats = TickStats(
            generation=self.generation,
            chunk_count=len(self.chunks),
            chunks_created=chunks_created,
            chunks_changed=len(changed_chunks),
            alive_cells=self.alive_count(),
        )
        logger.debug(f"Generation {stats.generation}: {stats.chunk_count} chunks "
                     f"({stats.chunks_created} new, {stats.chunks_changed} changed), "
                     f"{stats.alive_cells} alive")
        return stats

    def _tick_chunks(self, snapshot: Mapping[ChunkCoordinate, np.ndarray]) -> None:
        """Run every chunk's tick against the snapshot.

        Each chunk only writes its own current generation and only reads the
        snapshot, so chunks can be ticked on separate threads. Collecting the
        results is the barrier before the refresh phase.
        """
        jobs = [
            (chunk, [snapshot.get(neighbor_pos, DEAD_GENERATION)
                     for neighbor_pos in neighbor_coordinates(*chunk_pos)])
            for chunk_pos, chunk in self.chunks.items()
        ]

        if self.workers > 1 and len(jobs) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                list(executor.map(lambda job: job[0].tick(job[1]), jobs))
        else:
            for chunk, neighbors in jobs:
                chunk.tick(neighbors)

    def _refresh(self, chunk: Chunk) -> None:
        if self.renderer is not None:
            self.renderer(chunk)

    def refresh_all(self) -> None:
        """Send every chunk to the renderer, e.g. after attaching a new one."""
        for chunk in self.chunks.values():
            self._refresh(chunk)

    def live_cells(self) -> Set[Tuple[int, int]]:
        """World coordinates of every live cell."""
        cells = set()
        for chunk in self.chunks.values():
            origin_x, origin_y = from_chunk_coordinate(*chunk.position)
            for local_x, local_y in chunk.live_cells():
                cells.add((origin_x + local_x, origin_y + local_y))
        return cells

    def alive_count(self) -> int:
        """Total live cells in the current generation."""
        return sum(chunk.current_alive_count for chunk in self.chunks.values())

    def active_chunks(self) -> List[Chunk]:
        """Chunks holding at least one live cell."""
        return [chunk for chunk in self.chunks.values() if not chunk.is_empty()]

    def __len__(self) -> int:
        return len(self.chunks)

    def __contains__(self, chunk_pos: object) -> bool:
        return chunk_pos in self.chunks

    def __repr__(self) -> str:
        return (f"Universe(generation={self.generation}, chunks={len(self.chunks)}, "
                f"alive={self.alive_count()})")
