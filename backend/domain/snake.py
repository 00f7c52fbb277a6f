"""
Snake entity as reported by the game engine for one turn.
"""

from typing import List, NamedTuple, Optional


class Coordinate(NamedTuple):
    """A board cell. x grows rightward, y grows downward."""

    x: int
    y: int

    def step(self, move) -> "Coordinate":
        dx, dy = move.delta
        return Coordinate(self.x + dx, self.y + dy)


def collapse_body(body: List[Coordinate]) -> List[Coordinate]:
    """
    Drop consecutive duplicate segments.

    At the start of a game every segment sits on the same cell, and after
    eating the tail is reported twice. Head/tail logic needs distinct cells.
    """
    collapsed: List[Coordinate] = []
    for segment in body:
        if not collapsed or collapsed[-1] != segment:
            collapsed.append(segment)
    return collapsed


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        snake_id: engine-assigned identifier
        name: display name
        health: remaining health points
        body: list of Coordinate from head at index 0 to tail at the end
        shout: last message the snake shouted
    """

    def __init__(
        self,
        snake_id: str,
        body: List[Coordinate],
        name: str = "",
        health: int = 100,
        shout: str = "",
    ):
        self.snake_id = snake_id
        self.body = list(body)
        self.name = name
        self.health = health
        self.shout = shout

    @property
    def head(self) -> Optional[Coordinate]:
        """Return the head position (first element)."""
        return self.body[0] if self.body else None

    @property
    def tail(self) -> Optional[Coordinate]:
        return self.body[-1] if self.body else None

    def normalized_body(self) -> List[Coordinate]:
        return collapse_body(self.body)

    def __repr__(self):
        return f"<Snake id={self.snake_id!r}, length={len(self.body)}, head={self.head}>"
