"""
Simulation control

Pause/step scheduling and cell painting on top of the chunked core.
"""

from .config import SimulationConfig
from .runner import MAX_STEPS_PER_UPDATE, SimulationRunner

__all__ = [
    'MAX_STEPS_PER_UPDATE',
    'SimulationConfig',
    'SimulationRunner',
]
