"""
Player implementations for the snake server.

This module contains the player abstraction and the tail-chasing
implementation that controls snake movement decisions.
"""

from .base import Player
from .tail_chaser import (
    TailChasingPlayer,
    MoveDecision,
    first_safe_move,
    PATH_TO_TAIL,
    SHORT_BODY,
    TAIL_UNREACHABLE,
    NO_SAFE_MOVE,
)

__all__ = [
    'Player',
    'TailChasingPlayer',
    'MoveDecision',
    'first_safe_move',
    'PATH_TO_TAIL',
    'SHORT_BODY',
    'TAIL_UNREACHABLE',
    'NO_SAFE_MOVE',
]
