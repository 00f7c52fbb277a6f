"""
Game constants for the tail-chasing snake.
"""

from enum import Enum


class Move(str, Enum):
    """
    A single-step move. The value is the wire string the game engine expects.

    Coordinates grow rightward in x and downward in y, so UP decreases y.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self):
        return MOVE_DELTAS[self]


MOVE_DELTAS = {
    Move.UP: (0, -1),
    Move.DOWN: (0, 1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}

# Movement directions
UP = Move.UP
DOWN = Move.DOWN
LEFT = Move.LEFT
RIGHT = Move.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Order used both for BFS neighbor expansion and safe-move probing.
# Changing it changes which of several equal choices wins.
PROBE_ORDER = (RIGHT, LEFT, UP, DOWN)

# Returned when every candidate move is unsafe.
LAST_RESORT_MOVE = LEFT

# Bodies shorter than this have no meaningful head/tail split.
MIN_TAIL_CHASE_LENGTH = 3
