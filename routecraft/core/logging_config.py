# ==============================================================================
# RouteCraft - Route Geometry Editing Core
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

Centralized logging setup for RouteCraft.

Usage:
    from routecraft.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Bend smoothed")
    logger.debug("Arc radius: %.2f", radius)

Log Levels:
    DEBUG    - Geometry that could not be fitted, per-pass details
    INFO     - Edits applied to a route
    WARNING  - Input cleaned up (e.g. noisy reversals removed)
    ERROR    - An operation failed

The library never configures the root logger. ``get_logger`` only
guarantees the ``routecraft`` logger exists; an embedding application
calls ``setup_logging`` if it wants RouteCraft output on a stream.
"""

import logging
import sys
from typing import Optional

LOGGER_PREFIX = "routecraft"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Attach a stream handler to the RouteCraft logger.

    Calling again replaces the previously installed handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Root logger for routecraft
    """
    global _handler

    root_logger = logging.getLogger(LOGGER_PREFIX)

    if _handler is not None:
        root_logger.removeHandler(_handler)

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate messages
    root_logger.propagate = False

    _handler = handler
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the routecraft namespace

    Example:
        logger = get_logger(__name__)
        logger.info("Module loaded")
    """
    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the logging level at runtime."""
    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug() -> None:
    """Enable DEBUG level logging."""
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    """Set logging back to INFO level."""
    set_log_level(logging.INFO)


# The library stays silent unless the application configures output.
logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
