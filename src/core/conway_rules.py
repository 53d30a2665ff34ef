"""
Conway's Game of Life Rules

The standard B3/S23 rule in two forms: a scalar form for single cells and a
vectorised form that chunks use to advance a whole generation at once.
"""

from typing import FrozenSet

import numpy as np


# Standard Conway rules
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        # Survival rule
        return live_neighbors in SURVIVAL_SET
    else:
        # Birth rule
        return live_neighbors in BIRTH_SET


def apply_rules(alive: np.ndarray, live_neighbors: np.ndarray) -> np.ndarray:
    """Apply Conway's rules elementwise.

    Args:
        alive: Boolean array of current cell states
        live_neighbors: Integer array of neighbor counts, same shape

    Returns:
        New boolean array with the next cell states
    """
    survives = alive & np.isin(live_neighbors, list(SURVIVAL_SET))
    born = ~alive & np.isin(live_neighbors, list(BIRTH_SET))
    return survives | born


def count_live_neighbors(padded: np.ndarray) -> np.ndarray:
    """Count Moore-neighborhood live cells for the interior of a padded grid.

    Args:
        padded: Boolean array with a one-cell halo on every side

    Returns:
        Integer array of shape (rows - 2, cols - 2) with counts 0-8
    """
    rows, cols = padded.shape
    counts = np.zeros((rows - 2, cols - 2), dtype=np.uint8)

    for dy in (0, 1, 2):
        for dx in (0, 1, 2):
            if dy == 1 and dx == 1:
                continue  # Skip center cell
            counts += padded[dy:dy + rows - 2, dx:dx + cols - 2]

    return counts
