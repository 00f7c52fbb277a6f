"""
Base player interface for the snake server.
"""

from domain.constants import Move
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a move for its snake_id
    given the current game state. Players keep no state between turns.
    """

    def __init__(self, snake_id: str):
        self.snake_id = snake_id

    def get_move(self, game_state: GameState) -> Move:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT
        """
        raise NotImplementedError
