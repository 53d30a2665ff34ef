"""
Simulation Runner

Owns the paused/running flag for a universe, advances it on a fixed
timestep while running, single-steps on request, and implements the paint
tool used to edit cells while paused. Input devices and windows are left to
the caller: it only reports elapsed time, step requests and pointer
positions in world coordinates.
"""

import logging
from typing import List, Optional, Tuple

from ..core.universe import TickStats, Universe
from .config import SimulationConfig

logger = logging.getLogger(__name__)

# Upper bound on generations run by one update() after a long stall
MAX_STEPS_PER_UPDATE = 5


class SimulationRunner:
    """Pause/step control and cell painting around a Universe.

    Attributes:
        universe: Universe being driven
        config: Tick rate, initial pause state and worker count
        paused: Whether fixed-timestep ticking is suspended
    """

    def __init__(self,
                 universe: Optional[Universe] = None,
                 config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        self.universe = universe if universe is not None else Universe(workers=self.config.workers)
        self.paused = self.config.start_paused

        self._accumulator = 0.0
        self._stroke_state: Optional[bool] = None

    def toggle_pause(self) -> bool:
        """Flip between paused and running.

        Returns:
            New paused state
        """
        self.paused = not self.paused
        self._accumulator = 0.0
        self._stroke_state = None
        logger.info(f"Simulation {'paused' if self.paused else 'running'} "
                    f"at generation {self.universe.generation}")
        return self.paused

    def step(self) -> TickStats:
        """Advance exactly one generation, whether paused or not."""
        stats = self.universe.tick()
        logger.info(f"Stepped to generation {stats.generation} "
                    f"({stats.alive_cells} alive in {stats.chunk_count} chunks)")
        return stats

    def update(self, elapsed: float) -> List[TickStats]:
        """Advance the fixed-timestep clock by elapsed seconds.

        While running, one generation is ticked per tick interval that has
        passed. While paused, time does not accumulate.

        Args:
            elapsed: Seconds since the previous update

        Returns:
            Statistics for each generation ticked during this update
        """
        if self.paused:
            return []

        self._accumulator += max(0.0, elapsed)
        interval = self.config.tick_interval

        ticks = []
        while self._accumulator >= interval and len(ticks) < MAX_STEPS_PER_UPDATE:
            self._accumulator -= interval
            ticks.append(self.universe.tick())

        if self._accumulator >= interval:
            skipped = int(self._accumulator / interval)
            logger.warning(f"Dropping {skipped} overdue generations after a slow update")
            self._accumulator %= interval

        return ticks

    def begin_stroke(self, world_pos: Tuple[float, float]) -> bool:
        """Start painting at world_pos.

        The stroke paints the inverse of the first cell touched, so dragging
        over live cells erases and dragging over dead cells draws. Ignored
        while running.

        Returns:
            True if the stroke started
        """
        if not self.paused:
            return False

        self._stroke_state = not self.universe.get_cell(world_pos)
        self.universe.set_cell(world_pos, self._stroke_state)
        return True

    def continue_stroke(self, world_pos: Tuple[float, float]) -> bool:
        """Paint world_pos with the state chosen by begin_stroke().

        Returns:
            True if a cell was painted
        """
        if not self.paused or self._stroke_state is None:
            return False

        self.universe.set_cell(world_pos, self._stroke_state)
        return True

    def end_stroke(self) -> None:
        self._stroke_state = None
