"""
Runtime settings for the distribution library.

Settings are read from environment variables, optionally populated from a
.env file via python-dotenv.
"""

import os
import random
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

VALID_LOG_LEVELS = ["debug", "info", "warning", "error"]

TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """
    Library-wide settings.

    Attributes:
        debug: Whether verbose logging is enabled
        log_level: Log level used when debug is enabled
        log_file: Optional log file path (relative paths go under logs/)
        seed: Optional seed for reproducible sampling
    """
    debug: bool = False
    log_level: str = "info"
    log_file: Optional[str] = None
    seed: Optional[int] = None

    def make_rng(self) -> Optional[random.Random]:
        """Return a seeded random source, or None when no seed is configured."""
        if self.seed is None:
            return None
        return random.Random(self.seed)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a .env file; when None, python-dotenv
            searches upward from the current working directory

    Returns:
        Settings instance

    Raises:
        ValueError: If a variable holds an invalid value
    """
    load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))

    debug = _parse_bool("DIST_LIB_DEBUG", os.getenv("DIST_LIB_DEBUG", ""))

    log_level = os.getenv("DIST_LIB_LOG_LEVEL", "info").strip().lower()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"DIST_LIB_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got {log_level!r}"
        )

    log_file = os.getenv("DIST_LIB_LOG_FILE") or None

    seed = None
    raw_seed = os.getenv("DIST_LIB_SEED")
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError as e:
            raise ValueError(f"DIST_LIB_SEED must be an integer, got {raw_seed!r}") from e

    return Settings(debug=debug, log_level=log_level, log_file=log_file, seed=seed)
