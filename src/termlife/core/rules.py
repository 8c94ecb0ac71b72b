"""Conway's survival and birth rules."""

import numpy as np


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Decide whether a single cell is alive in the next generation.

    Args:
        alive: Current state of the cell
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        True if the cell lives in the next generation
    """
    if alive:
        if live_neighbors < 2:
            return False
        if live_neighbors > 3:
            return False
        return True

    return live_neighbors == 3


def apply_rules(cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
    """Apply the rules to a whole grid at once.

    Args:
        cells: Current cell states (0 or 1)
        neighbor_counts: Live neighbor count for every cell, same shape as cells

    Returns:
        New int8 array with the next generation's states
    """
    alive = cells > 0

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = ~alive & (neighbor_counts == 3)

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))

    return (birth_mask | survive_mask).astype(np.int8)
