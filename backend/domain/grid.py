"""
Grid - per-turn occupancy model of the board.

A Grid is built once from a turn's snapshot and never mutated afterwards.
Storage is a dense row-major list, so memory grows with board area.
"""

from enum import Enum
from typing import Iterable, List

from .snake import Coordinate


class CellState(Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"
    FOOD = "food"


CELL_GLYPHS = {
    CellState.EMPTY: '.',
    CellState.OCCUPIED: '#',
    CellState.FOOD: 'F',
}


class GridIndexError(IndexError):
    """Raised when a cell outside the board is read. Indicates a caller bug."""


class Grid:
    """
    Dense width x height map from Coordinate to CellState.

    Body segments take priority over food: occupancy is written after food
    during construction.
    """

    def __init__(self, width: int, height: int, cells: List[CellState]):
        if len(cells) != width * height:
            raise ValueError(
                f"expected {width * height} cells for a {width}x{height} grid, got {len(cells)}"
            )
        self.width = width
        self.height = height
        self._cells = tuple(cells)

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        food_cells: Iterable[Coordinate],
        snake_bodies: Iterable[Iterable[Coordinate]],
    ) -> "Grid":
        cells = [CellState.EMPTY] * (width * height)

        # Add food first, then snakes
        for x, y in food_cells:
            cells[_index(width, height, x, y)] = CellState.FOOD

        for body in snake_bodies:
            for x, y in body:
                cells[_index(width, height, x, y)] = CellState.OCCUPIED

        return cls(width, height, cells)

    @classmethod
    def from_game_state(cls, game_state, vacated: Iterable[Coordinate] = ()) -> "Grid":
        """
        Build the grid for a GameState.

        Cells listed in `vacated` are dropped from every snake body before
        occupancy is written; food already recorded there is kept.
        """
        vacated = set(vacated)
        bodies = game_state.all_bodies()
        if vacated:
            bodies = [[c for c in body if c not in vacated] for body in bodies]
        return cls.build(game_state.width, game_state.height, game_state.food, bodies)

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def state_at(self, coord: Coordinate) -> CellState:
        x, y = coord
        return self._cells[_index(self.width, self.height, x, y)]

    def is_traversable(self, coord: Coordinate) -> bool:
        """True for in-bounds Empty or Food cells."""
        return self.in_bounds(coord) and self.state_at(coord) is not CellState.OCCUPIED

    def render(self) -> str:
        rows = []
        for y in range(self.height):
            row = self._cells[y * self.width:(y + 1) * self.width]
            rows.append(''.join(CELL_GLYPHS[state] for state in row))
        return "\n".join(rows)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"


def _index(width: int, height: int, x: int, y: int) -> int:
    if not (0 <= x < width and 0 <= y < height):
        raise GridIndexError(f"cell ({x}, {y}) is outside the {width}x{height} board")
    return y * width + x
