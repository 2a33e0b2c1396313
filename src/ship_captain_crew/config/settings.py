"""
Ship, Captain & Crew - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Variables are prefixed with SCC_, e.g. SCC_MAX_ROLLS=4.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from ship_captain_crew.engine.base import GameConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Table defaults
    default_players: int = 2
    default_dice: int = 5
    max_rolls: int = 3
    random_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "SCC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def to_game_config(self, num_players: int | None = None) -> GameConfig:
        """Build a GameConfig from the defaults, optionally overriding the seat count."""
        return GameConfig(
            num_players=num_players if num_players is not None else self.default_players,
            num_dice=self.default_dice,
            max_rolls=self.max_rolls,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
