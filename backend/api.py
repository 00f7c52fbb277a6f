"""
Request parsing and response building for the Battlesnake API (2020.01).

See https://docs.battlesnake.com/snake-api

Every request body carries the same snapshot:

    {"game": {"id": ...}, "turn": ...,
     "board": {"height": ..., "width": ..., "food": [...], "snakes": [...]},
     "you": {...}}

Anything malformed is rejected here with InvalidSnakeConfig so the
decision code only ever sees in-bounds coordinates.
"""

from typing import Any, Dict, List

from config import Settings
from domain.constants import Move
from domain.game_state import GameState
from domain.snake import Coordinate, Snake


class InvalidSnakeConfig(ValueError):
    """The request body is not a valid game snapshot."""


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise InvalidSnakeConfig(f"{where} must be an object")
    if key not in data:
        raise InvalidSnakeConfig(f"{where} is missing '{key}'")
    return data[key]


def _int(value: Any, where: str) -> int:
    # bool is an int subclass but never a valid coordinate or size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSnakeConfig(f"{where} must be an integer, got {value!r}")
    return value


def _str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise InvalidSnakeConfig(f"{where} must be a string, got {value!r}")
    return value


def _list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise InvalidSnakeConfig(f"{where} must be a list")
    return value


def parse_coords(data: Dict[str, Any], width: int, height: int, where: str) -> Coordinate:
    x = _int(_require(data, "x", where), f"{where}.x")
    y = _int(_require(data, "y", where), f"{where}.y")
    if not (0 <= x < width and 0 <= y < height):
        raise InvalidSnakeConfig(f"{where} ({x}, {y}) is outside the {width}x{height} board")
    return Coordinate(x, y)


def parse_snake(data: Dict[str, Any], width: int, height: int, where: str) -> Snake:
    snake_id = _str(_require(data, "id", where), f"{where}.id")

    body_data = _list(_require(data, "body", where), f"{where}.body")
    if not body_data:
        raise InvalidSnakeConfig(f"{where}.body must not be empty")
    body = [
        parse_coords(segment, width, height, f"{where}.body[{i}]")
        for i, segment in enumerate(body_data)
    ]

    return Snake(
        snake_id=snake_id,
        body=body,
        name=_str(data.get("name", ""), f"{where}.name"),
        health=_int(data.get("health", 100), f"{where}.health"),
        shout=_str(data.get("shout", ""), f"{where}.shout"),
    )


def parse_game_state(data: Any) -> GameState:
    """
    Build a GameState from a decoded request body.

    Raises:
        InvalidSnakeConfig: if a field is missing, mistyped, or a coordinate
            lies outside the board.
    """
    if not isinstance(data, dict):
        raise InvalidSnakeConfig("request body must be a JSON object")

    game = _require(data, "game", "request")
    game_id = _require(game, "id", "game")
    turn = _int(_require(data, "turn", "request"), "turn")

    board = _require(data, "board", "request")
    width = _int(_require(board, "width", "board"), "board.width")
    height = _int(_require(board, "height", "board"), "board.height")
    if width <= 0 or height <= 0:
        raise InvalidSnakeConfig(f"board dimensions must be positive, got {width}x{height}")

    food = [
        parse_coords(item, width, height, f"board.food[{i}]")
        for i, item in enumerate(_list(_require(board, "food", "board"), "board.food"))
    ]
    snakes = [
        parse_snake(item, width, height, f"board.snakes[{i}]")
        for i, item in enumerate(_list(_require(board, "snakes", "board"), "board.snakes"))
    ]
    you = parse_snake(_require(data, "you", "request"), width, height, "you")

    return GameState(
        game_id=str(game_id),
        turn=turn,
        width=width,
        height=height,
        food=food,
        snakes=snakes,
        you=you,
    )


def start_response(settings: Settings) -> Dict[str, str]:
    return {
        "color": settings.color,
        "headType": settings.head_type,
        "tailType": settings.tail_type,
    }


def move_response(move: Move, settings: Settings) -> Dict[str, str]:
    return {
        "move": move.value,
        "shout": settings.shout,
    }
