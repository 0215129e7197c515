import logging
import sys
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pawn_game import constants

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Board
    GRID_ROWS: int = constants.GRID_ROWS
    GRID_COLS: int = constants.GRID_COLS
    PIECES_PER_PLAYER: int = constants.PIECES_PER_PLAYER

    # Match format
    ROUNDS_TO_WIN: int = constants.ROUNDS_TO_WIN
    TOTAL_ROUNDS: int = constants.TOTAL_ROUNDS

    # App config
    DEBUG: bool = False

    @field_validator("GRID_ROWS", "GRID_COLS", "PIECES_PER_PLAYER", "ROUNDS_TO_WIN", "TOTAL_ROUNDS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @model_validator(mode="after")
    def validate_pieces_fit_row(self) -> "Settings":
        if self.PIECES_PER_PLAYER > self.GRID_COLS:
            raise ValueError("PIECES_PER_PLAYER cannot exceed GRID_COLS")
        return self


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    logger.info("Settings loaded successfully")
    logger.debug(
        "Board: rows=%d, cols=%d, pieces_per_player=%d",
        settings.GRID_ROWS,
        settings.GRID_COLS,
        settings.PIECES_PER_PLAYER,
    )
    logger.debug(
        "Match: rounds_to_win=%d, total_rounds=%d",
        settings.ROUNDS_TO_WIN,
        settings.TOTAL_ROUNDS,
    )
    return settings
