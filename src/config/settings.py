"""
501 Countdown - Application Settings

Loads configuration from environment variables using Pydantic Settings and
applies the configured log level.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.engine.base import STARTING_SCORE, GameConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Players
    player_one_name: str = "Player 1"
    player_two_name: str = "Player 2"

    # Game
    starting_score: int = Field(default=STARTING_SCORE, gt=0)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    def to_game_config(self) -> GameConfig:
        """Engine configuration for a new leg."""
        return GameConfig(
            starting_score=self.starting_score,
            player_one_name=self.player_one_name,
            player_two_name=self.player_two_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
