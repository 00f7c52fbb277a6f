"""
Breadth-first shortest path search over a Grid.

Paths are lists of PathNode from source to target inclusive. Every node but
the last carries the move that reaches its successor.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from domain.constants import Move, PROBE_ORDER
from domain.grid import Grid
from domain.snake import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathNode:
    coords: Coordinate
    # Next move to take on the path, or None if path is complete
    next_move: Optional[Move] = None


def neighbors(coord: Coordinate) -> List[Coordinate]:
    """Axis-adjacent cells in expansion order (right, left, up, down)."""
    return [coord.step(move) for move in PROBE_ORDER]


def move_between(source: Coordinate, target: Coordinate) -> Move:
    """Return the move that takes `source` to the adjacent cell `target`."""
    delta = (target.x - source.x, target.y - source.y)
    for move in PROBE_ORDER:
        if move.delta == delta:
            return move
    raise ValueError(f"{source} and {target} are not adjacent")


def shortest_path(grid: Grid, source: Coordinate, target: Coordinate) -> Optional[List[PathNode]]:
    """
    Find a minimum-length path from `source` to `target`.

    Only traversable cells are entered; the source itself is never checked.
    Among equally short paths, the one found first in right, left, up, down
    expansion order wins.

    Returns:
        The path as a list of PathNode, or None if the target is unreachable.
        A source equal to the target yields a single node with no move.
    """
    predecessors = _bfs_to(grid, Coordinate(*source), Coordinate(*target))
    if predecessors is None:
        return None

    # Follow predecessors back from the target until we reach the source
    coords = [Coordinate(*target)]
    while predecessors[coords[-1]] is not None:
        coords.append(predecessors[coords[-1]])
    coords.reverse()

    path = [PathNode(current, move_between(current, following))
            for current, following in zip(coords, coords[1:])]
    path.append(PathNode(coords[-1], None))
    return path


def _bfs_to(
    grid: Grid, source: Coordinate, target: Coordinate
) -> Optional[Dict[Coordinate, Optional[Coordinate]]]:
    """
    Run BFS from `source` until `target` is dequeued.

    Returns the predecessor mapping of every visited cell (the source maps
    to None), or None if the target was never reached.
    """
    queue = deque([(source, 0, None)])
    visited: Set[Coordinate] = set()
    predecessors: Dict[Coordinate, Optional[Coordinate]] = {}

    while queue:
        current, distance, previous = queue.popleft()

        # A cell can be queued more than once before its first visit
        if current in visited:
            continue
        visited.add(current)
        predecessors[current] = previous

        if current == target:
            logger.debug(f"Reached {target} from {source} in {distance} steps")
            return predecessors

        for neighbor in neighbors(current):
            if neighbor not in visited and grid.is_traversable(neighbor):
                queue.append((neighbor, distance + 1, current))

    logger.debug(f"No path from {source} to {target} ({len(visited)} cells visited)")
    return None
