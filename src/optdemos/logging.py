from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from optdemos.env import OPTDEMOS_LOG_LEVEL

__all__ = ["configure_logger", "get_logger", "set_module_level"]

_ROOT_NAME = "optdemos"
_CONFIGURED = False


class _StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` is at emit time.

    The demo programs are run in-process by the umbrella CLI and by tests,
    both of which swap the standard streams.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


class _ColorFormatter(logging.Formatter):
    _COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    _RESET = "\033[0m"

    def __init__(self, *, use_color: bool) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        color = self._COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{message}{self._RESET}" if color else message


def _normalize_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        raise TypeError("Logging level must be an int or str.")
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def configure_logger(
    *,
    level: int | str | None = None,
    stream: TextIO | None = None,
    color: bool | None = None,
    force: bool = False,
    module_levels: Mapping[str | None, int | str] | None = None,
) -> None:
    """Configure the ``optdemos`` logger.

    Parameters
    ----------
    level:
        Logging level as int or name. Defaults to ``$OPTDEMOS_LOG_LEVEL``,
        WARNING when unset.
    stream:
        Stream to write logs to. Defaults to the current ``sys.stderr``,
        looked up on every record so the programs' stdout stays clean.
    color:
        Force enable/disable ANSI colors. Defaults to auto (enabled for TTYs).
    force:
        If True, reconfigure even if a configuration already exists.
    module_levels:
        Per-module overrides, keyed by the name passed to ``get_logger``.
    """

    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    if color is None:
        is_tty = getattr(handler.stream, "isatty", lambda: False)()
        color = is_tty and os.name != "nt"
    handler.setFormatter(_ColorFormatter(use_color=color))

    logger = logging.getLogger(_ROOT_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(_normalize_level(OPTDEMOS_LOG_LEVEL if level is None else level))
    logger.propagate = False
    _CONFIGURED = True

    for module_name, module_level in (module_levels or {}).items():
        set_module_level(module_name, module_level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``optdemos`` or ``optdemos.<name>``, configuring defaults on first use."""
    if not _CONFIGURED:
        configure_logger()

    return logging.getLogger(f"{_ROOT_NAME}.{name}" if name else _ROOT_NAME)


def set_module_level(name: str | None, level: int | str) -> None:
    get_logger(name).setLevel(_normalize_level(level))
