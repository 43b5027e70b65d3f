"""Game configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wargame.models.enums import MAX_PLAYERS, MIN_PLAYERS, LeftoverPolicy


class Settings(BaseSettings):
    """Game settings loaded from environment variables (prefixed ``WAR_``)."""

    model_config = SettingsConfigDict(
        env_prefix="WAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Roster
    max_players: int = Field(
        default=MAX_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS, description="Maximum players per game"
    )
    min_players: int = Field(default=MIN_PLAYERS, ge=MIN_PLAYERS, description="Min players")

    # Game Configuration
    max_rounds: int = Field(default=10_000, gt=0, description="Round cap per game")
    leftover_policy: LeftoverPolicy = Field(
        default=LeftoverPolicy.KEEP, description="What to do with cards that do not deal evenly"
    )
    shuffle_seed: Optional[int] = Field(default=None, description="Shuffle seed")

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the game logger")


# Global settings instance
settings = Settings()
