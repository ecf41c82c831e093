"""structlog setup shared by scripts and the hosting application."""

import logging
from typing import Any, List, Optional

import structlog

from .config import EngineSettings, get_engine_settings


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Configure structlog with ISO timestamps and a level filter.

    Args:
        settings: Settings to use, read from the environment when omitted
    """
    settings = settings or get_engine_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
