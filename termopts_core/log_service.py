"""Keep the package logger level in sync with the ``logLevel`` option."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .events import Disposable
from .options.service import OptionsService

logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "termopts_core"

# "off" sits above CRITICAL so nothing gets through
LOG_LEVELS: Dict[str, int] = {
    "trace": logging.DEBUG - 5,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}


def to_logging_level(level: str) -> Optional[int]:
    """Map a ``logLevel`` option value to a :mod:`logging` level."""
    if not isinstance(level, str):
        return None
    return LOG_LEVELS.get(level.lower())


class LogService:
    """
    Applies the ``logLevel`` option of ``options_service`` to ``target``.

    ``target`` defaults to the ``termopts_core`` package logger. The level is
    applied once at construction and again whenever the option changes.
    """

    def __init__(self, options_service: OptionsService, target: Optional[logging.Logger] = None):
        self._options = options_service
        self._target = target or logging.getLogger(ROOT_LOGGER_NAME)
        self.level = logging.INFO
        self._update_level(options_service.get("logLevel"))
        self._subscription: Disposable = options_service.on_specific_option_change(
            "logLevel", self._update_level
        )

    @property
    def target(self) -> logging.Logger:
        return self._target

    def _update_level(self, value: str) -> None:
        level = to_logging_level(value)
        if level is None:
            logger.warning("Unknown logLevel %r, falling back to info", value)
            level = logging.INFO
        self.level = level
        self._target.setLevel(level)

    def dispose(self) -> None:
        self._subscription.dispose()
