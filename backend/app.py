import logging
from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from api import InvalidSnakeConfig, parse_game_state, start_response, move_response
from config import Settings, get_settings
from players.tail_chaser import TailChasingPlayer

snake_api = Blueprint("snake_api", __name__)


def create_app(settings: Settings) -> Flask:
    """
    Build the snake server for the given settings.

    Settings are stored on the app so views never read the environment.
    """
    app = Flask(__name__)
    app.config["SNAKE_SETTINGS"] = settings

    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    CORS(app, resources={r"/*": {"origins": settings.cors_allowed_origins}})

    app.register_blueprint(snake_api)
    return app


def _settings() -> Settings:
    return current_app.config["SNAKE_SETTINGS"]


def _read_game_state():
    """
    Decode the request body into a GameState.

    Raises InvalidSnakeConfig for anything that is not a valid snapshot,
    including a body that is not JSON at all.
    """
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidSnakeConfig("request body must be JSON")
    return parse_game_state(data)


@snake_api.app_errorhandler(InvalidSnakeConfig)
def handle_invalid_config(error):
    logging.warning(f"Rejected {request.path} request: {error}")
    return jsonify({"error": str(error)}), 400


@snake_api.route("/", methods=["GET"])
def index():
    """Liveness check for the game engine and for humans."""
    return "Your Battlesnake is alive!"


@snake_api.route("/start", methods=["POST"])
def start():
    """
    Called once when a game begins. Returns the snake's appearance.
    """
    game_state = _read_game_state()
    logging.info(f"Game {game_state.game_id} started for snake {game_state.you.snake_id}")
    return jsonify(start_response(_settings()))


@snake_api.route("/move", methods=["POST"])
def move():
    """
    Called every turn. Returns the next move for our snake.

    Each request builds its own player and grid, so concurrent requests
    share nothing.
    """
    game_state = _read_game_state()

    try:
        player = TailChasingPlayer(game_state.you.snake_id)
        next_move = player.get_move(game_state)
    except Exception as error:
        logging.exception(f"Error deciding move for game {game_state.game_id}: {error}")
        return jsonify({"error": "Failed to decide move"}), 500

    return jsonify(move_response(next_move, _settings()))


@snake_api.route("/end", methods=["POST"])
def end():
    """Called once when a game ends. Nothing to clean up."""
    game_state = _read_game_state()
    logging.info(f"Game {game_state.game_id} ended after {game_state.turn} turns")
    return "", 200


settings = get_settings()
logging.basicConfig(level=settings.log_level)
app = create_app(settings)


def main():
    app.run(
        host=settings.host,
        port=settings.port,
        debug=settings.debug,
        threaded=True,
    )


if __name__ == "__main__":
    main()
