"""Logging setup for scripts using the client."""

from __future__ import annotations

import logging

from frs_client.config.settings import get_settings

# httpx logs every request at INFO; these only show up at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str | None = None) -> int:
    """Configure the root logger and return the level applied.

    ``level`` overrides ``LOG_LEVEL`` from the settings.
    """

    name = (level or get_settings().log_level).upper()
    resolved = getattr(logging, name, logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING)
    return resolved
