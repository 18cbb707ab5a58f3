"""Board, cell and rule primitives for the Game of Life."""

from .cell import Cell
from .rules import SURVIVAL_SET, BIRTH_SET, update_cell, count_alive_neighbors
from .board import Board, make_random_source, create_board
from .patterns import create_block_pattern, create_blinker_pattern, create_glider_pattern

__all__ = [
    'Cell',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'update_cell',
    'count_alive_neighbors',
    'Board',
    'make_random_source',
    'create_board',
    'create_block_pattern',
    'create_blinker_pattern',
    'create_glider_pattern',
]
