"""Mini README: Application-wide logging helpers for the finance tracker.

Structure:
    * configure_root_logger - installs the shared handler and sets the level.
    * resolve_level - converts level names from settings into logging ints.
    * get_logger - factory returning module loggers with baseline config.

Usage:
    Modules import ``get_logger`` to create contextual loggers. The handler
    is attached exactly once; later calls to ``configure_root_logger`` only
    adjust the level, which lets the CLI apply the configured level after
    modules have already created their loggers at import time.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False
_DEFAULT_LEVEL = logging.WARNING


def resolve_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level: {level}")
    return numeric


def configure_root_logger(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Configure the root logger once, then keep its level in sync."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
