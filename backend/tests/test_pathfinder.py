"""
Tests for the breadth-first shortest path search.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Coordinate, Grid, Move  # noqa: E402
from services.pathfinder import PathNode, move_between, neighbors, shortest_path  # noqa: E402


def c(x, y):
    return Coordinate(x, y)


def empty_grid(width, height):
    return Grid.build(width, height, [], [])


def assert_well_formed(path, source, target):
    """Consecutive nodes are adjacent and each move leads to the next node."""
    assert path[0].coords == source
    assert path[-1].coords == target
    assert path[-1].next_move is None
    for node, following in zip(path, path[1:]):
        assert node.next_move is not None
        assert node.coords.step(node.next_move) == following.coords


class TestShortestPath:
    """Tests for shortest_path."""

    def test_finds_target_around_snake(self):
        """
        Board state:
          - H - - - -
          - S - - - -
          - S - - - -
          T S - - - -
          - - Y - - -
        We should be able to reach the target (T) from our position (Y).
        """
        grid = Grid.build(6, 5, [], [[c(1, 0), c(1, 1), c(1, 2), c(1, 3)]])

        path = shortest_path(grid, c(2, 4), c(0, 3))

        assert path == [
            PathNode(c(2, 4), Move.LEFT),
            PathNode(c(1, 4), Move.LEFT),
            PathNode(c(0, 4), Move.UP),
            PathNode(c(0, 3), None),
        ]

    def test_target_cut_off_by_snake(self):
        """
        Board state:
          - H - - - -
          - S - - - -
          - S - - - -
          T S - - - -
          - S Y - - -
        The snake spans the whole column, so the target is unreachable.
        """
        grid = Grid.build(6, 5, [], [[c(1, 0), c(1, 1), c(1, 2), c(1, 3), c(1, 4)]])

        assert shortest_path(grid, c(2, 4), c(0, 3)) is None

    def test_single_step_path(self):
        path = shortest_path(empty_grid(20, 20), c(0, 0), c(0, 1))

        assert path == [PathNode(c(0, 0), Move.DOWN), PathNode(c(0, 1), None)]

    def test_source_equals_target(self):
        """A path to yourself is just the source, carrying no move."""
        path = shortest_path(empty_grid(20, 20), c(0, 0), c(0, 0))

        assert path == [PathNode(c(0, 0), None)]

    def test_accepts_plain_tuples(self):
        path = shortest_path(empty_grid(3, 3), (0, 0), (1, 0))
        assert [node.coords for node in path] == [c(0, 0), c(1, 0)]

    def test_open_board_length_is_manhattan_distance(self):
        path = shortest_path(empty_grid(7, 6), c(0, 0), c(6, 5))

        assert len(path) - 1 == 11
        assert_well_formed(path, c(0, 0), c(6, 5))

    def test_detour_length(self):
        """
        A wall at x=1 with a single gap at the bottom forces a detour.
          S # . .
          . # . .
          . # . T
          . . . .
        """
        grid = Grid.build(4, 4, [], [[c(1, 0), c(1, 1), c(1, 2)]])

        path = shortest_path(grid, c(0, 0), c(3, 2))

        assert len(path) - 1 == 7
        assert_well_formed(path, c(0, 0), c(3, 2))
        assert all(grid.is_traversable(node.coords) for node in path)

    def test_enclosed_target(self):
        """Target boxed in on all four sides is unreachable."""
        walls = [c(2, 1), c(1, 2), c(3, 2), c(2, 3)]
        grid = Grid.build(5, 5, [], [walls])

        assert shortest_path(grid, c(0, 0), c(2, 2)) is None

    def test_occupied_target(self):
        grid = Grid.build(5, 5, [], [[c(4, 4)]])

        assert shortest_path(grid, c(0, 0), c(4, 4)) is None

    def test_enclosed_source(self):
        walls = [c(1, 0), c(0, 1)]
        grid = Grid.build(5, 5, [], [walls])

        assert shortest_path(grid, c(0, 0), c(4, 4)) is None

    def test_source_may_be_occupied(self):
        """The search starts from the snake's head, which is itself occupied."""
        grid = Grid.build(5, 5, [], [[c(2, 2), c(2, 3)]])

        path = shortest_path(grid, c(2, 2), c(4, 2))

        assert [node.next_move for node in path] == [Move.RIGHT, Move.RIGHT, None]

    def test_food_is_traversable(self):
        grid = Grid.build(3, 1, [c(1, 0)], [])

        path = shortest_path(grid, c(0, 0), c(2, 0))

        assert [node.coords for node in path] == [c(0, 0), c(1, 0), c(2, 0)]

    def test_ties_prefer_right_before_down(self):
        """Of the two equally short routes, the one expanded first (right) wins."""
        path = shortest_path(empty_grid(3, 3), c(0, 0), c(1, 1))

        assert path == [
            PathNode(c(0, 0), Move.RIGHT),
            PathNode(c(1, 0), Move.DOWN),
            PathNode(c(1, 1), None),
        ]

    def test_ties_prefer_left_before_up(self):
        path = shortest_path(empty_grid(3, 3), c(2, 2), c(1, 1))

        assert [node.next_move for node in path] == [Move.LEFT, Move.UP, None]

    def test_ties_prefer_up_before_down(self):
        """Going around a wall, the upper detour is expanded first."""
        grid = Grid.build(3, 3, [], [[c(1, 1)]])

        path = shortest_path(grid, c(0, 1), c(2, 1))

        assert [node.coords for node in path] == [c(0, 1), c(0, 0), c(1, 0), c(2, 0), c(2, 1)]


class TestHelpers:
    """Tests for neighbor generation and move derivation."""

    def test_neighbor_order(self):
        assert neighbors(c(5, 5)) == [c(6, 5), c(4, 5), c(5, 4), c(5, 6)]

    @pytest.mark.parametrize("target, expected", [
        ((3, 2), Move.RIGHT),
        ((1, 2), Move.LEFT),
        ((2, 1), Move.UP),
        ((2, 3), Move.DOWN),
    ])
    def test_move_between(self, target, expected):
        assert move_between(c(2, 2), c(*target)) is expected

    def test_move_between_rejects_non_adjacent(self):
        with pytest.raises(ValueError):
            move_between(c(0, 0), c(1, 1))
