"""Runtime settings for the command line tools.

The validation engine never reads these; callers pass values explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MIN_MATCH_SCORE = 50


@dataclass(frozen=True)
class Settings:
    """Settings read from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL
    severity_table_path: Optional[str] = None
    min_match_score: int = DEFAULT_MIN_MATCH_SCORE


def get_settings(load_env_file: bool = True) -> Settings:
    """Build settings from environment variables.

    Args:
        load_env_file: Load a .env file from the working directory first
            (existing variables win)

    Returns:
        Settings instance

    Raises:
        ValueError: If GEARFIT_MIN_MATCH_SCORE is not an integer
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    min_score = os.getenv("GEARFIT_MIN_MATCH_SCORE", str(DEFAULT_MIN_MATCH_SCORE))
    try:
        min_match_score = int(min_score)
    except ValueError as e:
        raise ValueError(
            f"GEARFIT_MIN_MATCH_SCORE must be an integer, got '{min_score}'"
        ) from e

    return Settings(
        log_level=os.getenv("GEARFIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        severity_table_path=os.getenv("GEARFIT_SEVERITY_TABLE") or None,
        min_match_score=min_match_score,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install a basic log handler at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
