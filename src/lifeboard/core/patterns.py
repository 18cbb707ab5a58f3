"""Classic Conway patterns as 2D boolean arrays (rows x columns)."""

import numpy as np


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_blinker_pattern(vertical: bool = False) -> np.ndarray:
    """Create blinker oscillator (3 cells, period 2)."""
    pattern = np.array([[True, True, True]], dtype=bool)
    return pattern.T.copy() if vertical else pattern


def create_glider_pattern() -> np.ndarray:
    """Create classic glider heading down and to the right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)
