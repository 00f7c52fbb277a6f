"""
Domain entities for the tail-chasing snake.

This module contains the board model and occupancy grid, independent of
the HTTP transport and request parsing.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, PROBE_ORDER, LAST_RESORT_MOVE,
    MIN_TAIL_CHASE_LENGTH, Move,
)
from .snake import Coordinate, Snake, collapse_body
from .game_state import GameState
from .grid import CellState, Grid, GridIndexError

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'PROBE_ORDER', 'LAST_RESORT_MOVE',
    'MIN_TAIL_CHASE_LENGTH', 'Move',
    'Coordinate', 'Snake', 'collapse_body',
    'GameState',
    'CellState', 'Grid', 'GridIndexError',
]
