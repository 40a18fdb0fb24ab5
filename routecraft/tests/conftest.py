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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the RouteCraft test suite.
"""

import logging
from typing import Generator

import pytest

from routecraft.core.logging_config import LOGGER_PREFIX
from routecraft.core.plane_geometry import Point3


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo any logging setup a test performed.

    setup_logging turns off propagation, which would hide records from
    caplog in later tests.
    """
    logger = logging.getLogger(LOGGER_PREFIX)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield

    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


# =============================================================================
# Route Fixtures
# =============================================================================

@pytest.fixture
def straight_route() -> list:
    """Five points heading east on level ground, 10 m apart."""
    return [Point3(10.0 * i, 0.0, 100.0) for i in range(5)]


@pytest.fixture
def right_angle_route() -> list:
    """East for 10 m, then north for 15 m, climbing."""
    return [
        Point3(0.0, 0.0, 100.0),
        Point3(10.0, 0.0, 101.0),
        Point3(20.0, 5.0, 102.0),
        Point3(20.0, 20.0, 104.0),
    ]


@pytest.fixture
def figure_eight() -> list:
    """Closed route whose first leg crosses its third at (5, 5)."""
    return [(0, 0, 0), (10, 10, 0), (10, 0, 0), (0, 10, 0), (0, 0, 0)]


@pytest.fixture
def square_loop() -> list:
    """Simple closed square, 10 m sides."""
    return [(0, 0, 0), (10, 0, 0), (10, 10, 0), (0, 10, 0), (0, 0, 0)]
