"""
GameState entity - the board snapshot the engine sends for one turn.
"""

from typing import List, Optional

from .snake import Coordinate, Snake


class GameState:
    """
    A snapshot of the game at a specific turn.

    Attributes:
        game_id: engine-assigned game identifier
        turn: which turn we are in (0-based)
        width, height: board dimensions
        food: list of Coordinate positions of all food on the board
        snakes: every snake on the board, including our own
        you: our own snake
    """

    def __init__(
        self,
        game_id: str,
        turn: int,
        width: int,
        height: int,
        food: List[Coordinate],
        snakes: List[Snake],
        you: Snake,
    ):
        self.game_id = game_id
        self.turn = turn
        self.width = width
        self.height = height
        self.food = food
        self.snakes = snakes
        self.you = you

    def snake_by_id(self, snake_id: str) -> Optional[Snake]:
        if self.you.snake_id == snake_id:
            return self.you
        for snake in self.snakes:
            if snake.snake_id == snake_id:
                return snake
        return None

    def all_bodies(self) -> List[List[Coordinate]]:
        """
        Bodies of every snake on the board.

        Our own snake is normally listed in `snakes` as well; it is added
        only when the engine left it out.
        """
        bodies = [snake.body for snake in self.snakes]
        if all(snake.snake_id != self.you.snake_id for snake in self.snakes):
            bodies.append(self.you.body)
        return bodies

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        0,1,2... = snake head (showing snake number)
        (0,0) is the top left, matching the engine's coordinate system.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            board[fy][fx] = 'F'

        for i, snake in enumerate(self.snakes):
            # Draw tail first so the head wins on co-located segments
            for pos_idx in range(len(snake.body) - 1, -1, -1):
                x, y = snake.body[pos_idx]
                board[y][x] = str(i) if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState game={self.game_id!r}, turn={self.turn}, "
            f"size={self.width}x{self.height}, food={len(self.food)}, "
            f"snakes={len(self.snakes)}>"
        )
