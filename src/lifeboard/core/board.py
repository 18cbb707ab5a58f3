"""Game of Life board: bounded grid state and generation advance.

The board keeps its cells in a flat row-major numpy boolean array
(True=alive) addressed by ``index = row * width + col``. Each call to
``step`` computes the whole next generation from the current one and then
swaps it in with a single assignment.
"""

import sys

import numpy as np
from typing import Callable, Iterable, List, Optional, Tuple
import logging
from .cell import Cell
from .rules import update_cell, count_alive_neighbors

logger = logging.getLogger(__name__)

RandomSource = Callable[[], int]

# Inclusive bounds of the random source draws
RANDOM_MIN = 0
RANDOM_MAX = 100


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create a uniform integer source over [0, 100] inclusive.

    Args:
        seed: Seed for the numpy generator (None draws from OS entropy)

    Returns:
        Zero-argument callable returning one draw per call
    """
    rng = np.random.default_rng(seed)

    def draw() -> int:
        return int(rng.integers(RANDOM_MIN, RANDOM_MAX, endpoint=True))

    return draw


class Board:
    """Finite Game of Life grid with bounded (non-wrapping) edges.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        generation: Number of steps applied since construction

    Boards compare equal by dimensions and cells. They are mutable and
    therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None):
        """Initialize board with given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            cells: Optional flat row-major boolean array of length width * height

        Raises:
            ValueError: If dimensions are not positive or cells has the wrong length
        """
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.generation = 0

        if cells is not None:
            cells = np.asarray(cells, dtype=bool)
            if cells.shape != (width * height,):
                raise ValueError(f"Cell array shape {cells.shape} doesn't match board size {width}x{height}")
            self._cells = cells.copy()
        else:
            self._cells = np.zeros(width * height, dtype=bool)

    @classmethod
    def new(cls, width: int, height: int, percentage: int,
            random_source: Optional[RandomSource] = None) -> 'Board':
        """Create a randomly seeded board.

        Cell i is alive iff the i-th draw from random_source is strictly
        less than percentage; at 100 every cell is alive, including on a
        draw of 100. The source is called once per cell, in index order.

        Args:
            width: Grid width (cells), > 0
            height: Grid height (cells), > 0
            percentage: Chance of each cell starting alive, 0-100
            random_source: Uniform integer source over [0, 100]

        Returns:
            Board: New board at generation 0

        Raises:
            ValueError: If any precondition is violated
        """
        if not 0 <= percentage <= 100:
            raise ValueError(f"Percentage must be within 0-100, got {percentage}")
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        if width * height > sys.maxsize:
            raise ValueError(f"Board {width}x{height} has too many cells")

        if random_source is None:
            random_source = make_random_source()

        cells = np.fromiter(
            (random_source() < percentage or percentage == 100
             for _ in range(width * height)),
            dtype=bool,
            count=width * height,
        )
        board = cls(width, height, cells)

        logger.debug(f"Seeded {width}x{height} board at {percentage}%: {board.live_count()} alive")
        return board

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Board':
        """Create board from a 2D (height, width) boolean array."""
        array = np.asarray(array, dtype=bool)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim}D")

        height, width = array.shape
        return cls(width, height, array.reshape(-1))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Board':
        """Create board from rows of '.'/'#' glyphs.

        Whitespace inside a row is ignored, so rendered output parses back.

        Raises:
            ValueError: If rows are empty, ragged, or contain unknown glyphs
        """
        parsed = []
        for row in rows:
            glyphs = "".join(row.split())
            parsed.append([Cell.from_glyph(g).is_alive for g in glyphs])

        if not parsed or not parsed[0]:
            raise ValueError("Board needs at least one non-empty row")
        if any(len(row) != len(parsed[0]) for row in parsed):
            raise ValueError("All rows must have the same width")

        return cls.from_array(np.array(parsed, dtype=bool))

    @property
    def size(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Current generation as a row-major tuple of Cell values."""
        return tuple(Cell.from_bool(alive) for alive in self._cells)

    def index(self, row: int, col: int) -> int:
        """Flat index of (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.width}x{self.height} board")
        return row * self.width + col

    def get(self, row: int, col: int) -> Cell:
        """Get cell state at (row, col)."""
        return Cell.from_bool(self._cells[self.index(row, col)])

    def set(self, row: int, col: int, cell: Cell) -> None:
        """Set cell state at (row, col)."""
        self._cells[self.index(row, col)] = cell.is_alive

    def load_pattern(self, pattern: np.ndarray, row: int, col: int) -> None:
        """Place a 2D boolean pattern with its top-left corner at (row, col).

        Only live pattern cells are written. Patterns do not wrap.

        Raises:
            ValueError: If the pattern does not fit on the board
        """
        pattern = np.asarray(pattern, dtype=bool)
        pattern_height, pattern_width = pattern.shape

        if (row < 0 or col < 0 or
                row + pattern_height > self.height or col + pattern_width > self.width):
            raise ValueError(f"Pattern {pattern_width}x{pattern_height} at ({row}, {col}) "
                             f"does not fit on {self.width}x{self.height} board")

        grid = self._cells.reshape(self.height, self.width)
        grid[row:row + pattern_height, col:col + pattern_width] |= pattern

    def count_alive_neighbors(self, index: int) -> int:
        """Count live neighbors (0-8) of the cell at a flat index."""
        return count_alive_neighbors(self._cells, self.width, self.height, index)

    def step(self) -> int:
        """Advance the board one generation.

        Every cell of the next generation is computed from the current
        generation only; the new cells replace the old ones in one go.

        Returns:
            Number of live cells after evolution
        """
        size = self.width * self.height
        next_cells = np.zeros(size, dtype=bool)

        for i in range(size):
            neighbors = self.count_alive_neighbors(i)
            next_cells[i] = update_cell(bool(self._cells[i]), neighbors)

        self._cells = next_cells
        self.generation += 1

        live_count = int(np.count_nonzero(next_cells))
        logger.debug(f"Generation {self.generation}: {live_count} alive")
        return live_count

    def live_count(self) -> int:
        """Get total number of live cells."""
        return int(np.count_nonzero(self._cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._cells)

    def to_array(self) -> np.ndarray:
        """Get board as a (height, width) numpy array copy."""
        return self._cells.reshape(self.height, self.width).copy()

    def copy(self) -> 'Board':
        """Create a deep copy of the board, generation counter included."""
        board = Board(self.width, self.height, self._cells)
        board.generation = self.generation
        return board

    def __eq__(self, other: object) -> bool:
        """Boards are equal when dimensions and cells match."""
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self._cells, other._cells))

    def rows(self) -> List[str]:
        """Current generation as `height` lines of space-separated glyphs."""
        lines = []
        for row in range(self.height):
            start = row * self.width
            lines.append(" ".join(Cell.from_bool(alive).glyph
                                  for alive in self._cells[start:start + self.width]))
        return lines

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, generation={self.generation}, alive={self.live_count()})"


def create_board(width: int, height: int, percentage: int, seed: Optional[int] = None) -> Board:
    """Factory function for a randomly seeded board."""
    return Board.new(width, height, percentage, make_random_source(seed))
