"""
lifeboard: Conway's Game of Life on a bounded grid, rendered to a terminal.
"""

from .core import Board, Cell, count_alive_neighbors, create_board, make_random_source
from .config import (
    BoardConfig,
    ConfigError,
    InvalidWidth,
    InvalidHeight,
    InvalidPercentage,
    TooManyArguments,
    NotEnoughArguments,
    parse_board_args,
)
from .render import TerminalRenderer
from .simulation import Simulation

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Cell',
    'count_alive_neighbors',
    'create_board',
    'make_random_source',
    'BoardConfig',
    'ConfigError',
    'InvalidWidth',
    'InvalidHeight',
    'InvalidPercentage',
    'TooManyArguments',
    'NotEnoughArguments',
    'parse_board_args',
    'TerminalRenderer',
    'Simulation',
]
