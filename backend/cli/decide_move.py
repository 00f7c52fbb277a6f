#!/usr/bin/env python3
"""
CLI tool to decide a move for a saved game snapshot

Usage:
    python decide_move.py <snapshot.json>

Examples:
    # Decide for the snapshot's own snake ("you")
    python decide_move.py ../fixtures/turn_12.json

    # Decide for another snake on the board and print the board
    python decide_move.py turn_12.json --snake-id gs_abc123 --show-board

    # Machine-readable output
    python decide_move.py turn_12.json --json
"""

import os
import sys
import json
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api import InvalidSnakeConfig, parse_game_state  # noqa: E402
from players.tail_chaser import TailChasingPlayer  # noqa: E402
from dotenv import load_dotenv  # noqa: E402

logger = logging.getLogger(__name__)


def load_snapshot(file_path: str) -> dict:
    """Load a request body saved as JSON"""
    logger.info(f"Loading snapshot from {file_path}")

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Snapshot file not found: {file_path}")

    with open(file_path, 'r') as f:
        return json.load(f)


def format_decision(decision) -> dict:
    result = {
        'move': decision.move.value,
        'reason': decision.reason,
    }
    if decision.path is not None:
        result['path'] = [[node.coords.x, node.coords.y] for node in decision.path]
    return result


def main():
    load_dotenv()
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(
        description='Decide the next move for a saved Battlesnake snapshot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        'snapshot',
        help='Path to a /move request body saved as JSON'
    )
    parser.add_argument(
        '--snake-id',
        type=str,
        default=None,
        help='Snake to decide for (default: the snapshot\'s "you")'
    )
    parser.add_argument(
        '--show-board',
        action='store_true',
        help='Print the board before the decision'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the decision as JSON'
    )

    args = parser.parse_args()

    try:
        game_state = parse_game_state(load_snapshot(args.snapshot))
    except (FileNotFoundError, json.JSONDecodeError, InvalidSnakeConfig) as e:
        logger.error(f"Invalid snapshot: {e}")
        sys.exit(2)

    snake_id = args.snake_id or game_state.you.snake_id
    if game_state.snake_by_id(snake_id) is None:
        logger.error(f"Snake {snake_id!r} is not on the board")
        sys.exit(2)

    if args.show_board:
        print(game_state.print_board())
        print()

    decision = TailChasingPlayer(snake_id).decide(game_state)

    if args.json:
        print(json.dumps(format_decision(decision)))
    else:
        print(f"{decision.move.value} ({decision.reason})")


if __name__ == '__main__':
    main()
