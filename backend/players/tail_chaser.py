"""
Tail-chasing player - follows the shortest path from its head to its tail.

Each turn is decided from that turn's snapshot alone:
  1. Collapse consecutive duplicate body segments.
  2. Bodies shorter than three segments take the first safe move.
  3. Longer bodies take the first move of the shortest path to the tail,
     falling back to the first safe move when the tail is unreachable.
  4. With no safe move at all, go left.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from domain.constants import LAST_RESORT_MOVE, MIN_TAIL_CHASE_LENGTH, PROBE_ORDER, Move
from domain.game_state import GameState
from domain.grid import Grid
from domain.snake import Coordinate
from services.pathfinder import PathNode, shortest_path
from .base import Player

logger = logging.getLogger(__name__)

# Decision reasons
PATH_TO_TAIL = "path_to_tail"
SHORT_BODY = "short_body"
TAIL_UNREACHABLE = "tail_unreachable"
NO_SAFE_MOVE = "no_safe_move"


@dataclass(frozen=True)
class MoveDecision:
    move: Move
    reason: str
    path: Optional[List[PathNode]] = None


def first_safe_move(grid: Grid, head: Coordinate) -> Optional[Move]:
    """Return the first move in probe order whose destination is traversable."""
    for move in PROBE_ORDER:
        if grid.is_traversable(head.step(move)):
            return move
    return None


class TailChasingPlayer(Player):
    """
    Chases its own tail, which keeps a path open for as long as one exists.
    """

    def get_move(self, game_state: GameState) -> Move:
        return self.decide(game_state).move

    def decide(self, game_state: GameState) -> MoveDecision:
        me = game_state.snake_by_id(self.snake_id)
        if me is None or not me.body:
            raise ValueError(f"Snake {self.snake_id!r} is not on the board")

        body = me.normalized_body()
        head, tail = body[0], body[-1]
        grid = Grid.from_game_state(game_state)
        logger.debug(f"Turn {game_state.turn} grid:\n{grid.render()}")

        if len(body) < MIN_TAIL_CHASE_LENGTH:
            decision = self._fallback(grid, head, SHORT_BODY)
        else:
            # The tail cell frees up as the head advances, unless we just ate
            # and the engine reports the tail twice
            if me.body[-1] != me.body[-2]:
                path_grid = Grid.from_game_state(game_state, vacated=[tail])
            else:
                path_grid = grid
            path = shortest_path(path_grid, head, tail)
            # A head sitting on its own tail yields a one-node path with no move
            if path is not None and path[0].next_move is not None:
                logger.debug(f"Path to tail: {[node.coords for node in path]}")
                decision = MoveDecision(path[0].next_move, PATH_TO_TAIL, path)
            else:
                decision = self._fallback(grid, head, TAIL_UNREACHABLE)

        logger.info(
            f"Game {game_state.game_id} turn {game_state.turn}: "
            f"moving {decision.move.value} ({decision.reason})"
        )
        return decision

    def _fallback(self, grid: Grid, head: Coordinate, reason: str) -> MoveDecision:
        move = first_safe_move(grid, head)
        if move is None:
            logger.warning(f"No safe move from {head} after {reason}, going {LAST_RESORT_MOVE.value}")
            return MoveDecision(LAST_RESORT_MOVE, NO_SAFE_MOVE)
        return MoveDecision(move, reason)
