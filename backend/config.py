"""
Runtime settings for the snake server.

Values come from the environment (optionally via a .env file) with
defaults matching the snake's standard appearance.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    debug: bool = False

    # Appearance returned from /start
    color: str = "#FF0000"
    head_type: str = "beluga"
    tail_type: str = "block-bum"

    # Message returned with every move
    shout: str = "Shooooot!"

    cors_allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _split_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


def _flag(value) -> bool:
    return bool(value) and value.strip().lower() not in ("0", "false", "no", "off")


def get_settings() -> Settings:
    """Load settings from the environment."""
    load_dotenv()

    defaults = Settings()
    origins_env = os.getenv("CORS_ALLOWED_ORIGINS")

    return Settings(
        host=os.getenv("HOST", defaults.host),
        port=int(os.getenv("PORT", defaults.port)),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        debug=_flag(os.getenv("FLASK_DEBUG")),
        color=os.getenv("SNAKE_COLOR", defaults.color),
        head_type=os.getenv("SNAKE_HEAD_TYPE", defaults.head_type),
        tail_type=os.getenv("SNAKE_TAIL_TYPE", defaults.tail_type),
        shout=os.getenv("SNAKE_SHOUT", defaults.shout),
        cors_allowed_origins=_split_origins(origins_env) if origins_env else defaults.cors_allowed_origins,
    )
