"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MIN_DAILY_CALORIES = 1000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class EngineSettings:
    """Runtime settings for the health metrics boundary.

    Attributes:
        min_daily_calories: Floor applied to stored calorie targets
        log_level: Logging level name
        log_json: Render logs as JSON instead of console output
    """

    min_daily_calories: int = DEFAULT_MIN_DAILY_CALORIES
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False


def load_environment(env_file: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Existing environment variables win over values in the file.

    Args:
        env_file: Path to the .env file, defaults to ``.env`` in the
            working directory

    Returns:
        True if a file was found and loaded
    """
    path = env_file or Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def get_min_daily_calories() -> int:
    """
    Get the calorie floor applied before storing diet targets.

    Returns:
        Value of HEALTH_MIN_DAILY_CALORIES, defaults to 1000

    Raises:
        ValueError: If the variable is set but not an integer
    """
    raw = os.getenv("HEALTH_MIN_DAILY_CALORIES")
    if raw is None or not raw.strip():
        return DEFAULT_MIN_DAILY_CALORIES
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(
            f"HEALTH_MIN_DAILY_CALORIES must be an integer, got {raw!r}"
        ) from e


def get_log_level() -> str:
    """
    Get the logging level name.

    Returns:
        Upper-cased LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_json() -> bool:
    """
    Check whether logs should be rendered as JSON.

    Returns:
        True when LOG_JSON is "true", "1" or "yes"
    """
    return os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes")


def get_engine_settings() -> EngineSettings:
    """
    Build settings from the current environment.

    Returns:
        EngineSettings snapshot
    """
    return EngineSettings(
        min_daily_calories=get_min_daily_calories(),
        log_level=get_log_level(),
        log_json=get_log_json(),
    )
