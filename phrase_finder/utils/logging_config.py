"""Logging setup for the Phrase Finder UI and command-line tools.

Searches run on every keystroke, so the search service only reports them at
``DEBUG``; the word bank loader and the app facade log at ``INFO``.  Gradio
logs each HTTP round trip through ``httpx`` and ``uvicorn.access``, which
would bury those lines, so those loggers are held at ``WARNING`` or above
unless the project itself runs at ``DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "PHRASE_FINDER_LOG_LEVEL"
PROJECT_LOGGER = "phrase_finder"
CHATTY_LOGGERS = ("httpx", "uvicorn.access")

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Install the root handler once and return the project level in effect.

    ``level`` wins over ``PHRASE_FINDER_LOG_LEVEL``; with neither set the
    project logs at ``INFO``.
    """

    global _CONFIGURED

    project_logger = logging.getLogger(PROJECT_LOGGER)
    if _CONFIGURED and not force:
        return project_logger.level

    resolved_level = _resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))
    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    project_logger.setLevel(resolved_level)

    chatty_level = resolved_level
    if resolved_level > logging.DEBUG:
        chatty_level = max(resolved_level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    _CONFIGURED = True
    return resolved_level


__all__ = ["CHATTY_LOGGERS", "LOG_LEVEL_ENV", "PROJECT_LOGGER", "configure_logging"]
