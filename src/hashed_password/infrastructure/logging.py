"""Process logging configuration for applications embedding the hasher."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG"})


def resolve_log_level(level: str) -> int:
    """Map a level name to a logging constant, falling back to INFO."""

    normalized_level = level.strip().upper()
    if normalized_level not in _LEVEL_NAMES:
        return logging.INFO
    return getattr(logging, normalized_level, logging.INFO)


def configure_logging(*, level: str) -> None:
    """Configure process logging with one format and the runtime level."""

    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
    )
