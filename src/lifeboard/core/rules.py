"""
Conway's Game of Life Rules

Birth/survival rule and neighbor counting on a bounded (non-wrapping) grid.
Cells are stored as a flat row-major boolean array: index = row * width + col.
"""

from typing import Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

# Moore neighborhood as (row, col) offsets, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


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


def count_alive_neighbors(cells: 'np.ndarray', width: int, height: int, index: int) -> int:
    """Count live neighbors of the cell at a flat index.

    Offsets falling outside the grid contribute nothing; edges do not wrap.

    Args:
        cells: Flat row-major boolean array of length width * height
        width: Grid width in cells
        height: Grid height in cells
        index: Flat index of the cell

    Returns:
        Number of live neighbors (0-8)

    Raises:
        IndexError: If index is outside the grid
    """
    if not 0 <= index < width * height:
        raise IndexError(f"Cell index {index} out of bounds for {width}x{height} grid")

    row, col = divmod(index, width)
    count = 0

    for dy, dx in NEIGHBOR_OFFSETS:
        ny, nx = row + dy, col + dx

        if 0 <= ny < height and 0 <= nx < width:
            if cells[ny * width + nx]:
                count += 1

    return count
