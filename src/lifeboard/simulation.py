"""Print/sleep/step loop driving a board at a fixed cadence."""

import time
from typing import Callable, Optional
import logging
from .config import DEFAULT_DELAY
from .core.board import Board
from .render import TerminalRenderer

logger = logging.getLogger(__name__)


class Simulation:
    """Runs a board, rendering each generation over the previous one.

    Attributes:
        board: Board being evolved (owned exclusively by this loop)
        renderer: Renderer receiving each frame
        delay: Pause in seconds before each step
    """

    def __init__(self, board: Board, renderer: Optional[TerminalRenderer] = None,
                 delay: float = DEFAULT_DELAY,
                 sleep: Callable[[float], None] = time.sleep):
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")

        self.board = board
        self.renderer = renderer if renderer is not None else TerminalRenderer()
        self.delay = delay
        self._sleep = sleep

    def run(self, generations: Optional[int] = None) -> int:
        """Render the initial frame, then sleep, step and re-render.

        Args:
            generations: Number of steps to run (None runs until interrupted)

        Returns:
            Number of generations advanced
        """
        logger.debug(f"Starting simulation on {self.board!r}, delay={self.delay}s, "
                     f"generations={generations if generations is not None else 'unbounded'}")

        self.renderer.print(self.board, clear=False)

        advanced = 0
        while generations is None or advanced < generations:
            self._sleep(self.delay)
            self.board.step()
            self.renderer.print(self.board, clear=True)
            advanced += 1

        logger.debug(f"Simulation finished after {advanced} generations")
        return advanced
