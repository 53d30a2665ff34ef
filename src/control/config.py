"""Runtime settings for driving a universe."""


class SimulationConfig:
    """Configuration for pause state, tick scheduling and tick parallelism."""

    def __init__(self,
                 tick_rate_hz: float = 1.0,
                 start_paused: bool = True,
                 workers: int = 1):
        """Initialize simulation configuration.

        Args:
            tick_rate_hz: Generations per second while running (> 0)
            start_paused: Whether the simulation starts paused
            workers: Threads for the per-chunk tick phase (1+)

        Raises:
            ValueError: If tick_rate_hz or workers is out of range
        """
        if tick_rate_hz <= 0:
            raise ValueError("tick_rate_hz must be positive")
        if workers < 1:
            raise ValueError("workers must be at least 1")

        self.tick_rate_hz = float(tick_rate_hz)
        self.start_paused = bool(start_paused)
        self.workers = int(workers)

    @property
    def tick_interval(self) -> float:
        """Seconds between generations while running."""
        return 1.0 / self.tick_rate_hz

    def copy(self) -> 'SimulationConfig':
        """Create a copy of the configuration."""
        return SimulationConfig(
            tick_rate_hz=self.tick_rate_hz,
            start_paused=self.start_paused,
            workers=self.workers
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig(tick_rate_hz={self.tick_rate_hz}, "
                f"start_paused={self.start_paused}, workers={self.workers})")
