"""
Terminal Rendering

Writes board generations as lines of space-separated glyphs. In clear mode
the previous frame is erased line by line first, so consecutive generations
overwrite each other in place on an ANSI terminal.
"""

import sys
from typing import List, Optional, TextIO
import logging
from .core.board import Board

logger = logging.getLogger(__name__)

ERASE_LINE = "\x1b[2K"
CURSOR_UP = "\x1b[1A"


class TerminalRenderer:
    """Line-oriented text renderer for a Board.

    Attributes:
        stream: Text sink receiving the frames
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """Initialize renderer.

        Args:
            stream: Output stream (defaults to sys.stdout at print time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def render_lines(self, board: Board) -> List[str]:
        """Render the current generation as `height` lines of `width` glyphs."""
        return board.rows()

    def render(self, board: Board) -> str:
        """Render the current generation as a single newline-joined string."""
        return "\n".join(self.render_lines(board))

    def clear_sequence(self, lines: int) -> str:
        """Escape sequence erasing the last `lines` printed lines."""
        return (ERASE_LINE + CURSOR_UP) * lines

    def print(self, board: Board, clear: bool = False) -> None:
        """Write the board to the stream.

        Each row is preceded by a newline, leaving the cursor at the end of
        the last row so the next clear erases exactly this frame.

        Args:
            board: Board to render (not modified)
            clear: Erase the previous frame of the same height first
        """
        out = []
        if clear:
            out.append(self.clear_sequence(board.height))
        for line in self.render_lines(board):
            out.append("\n")
            out.append(line)

        self.stream.write("".join(out))
        self.stream.flush()

