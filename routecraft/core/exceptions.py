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
RouteCraft Exceptions

Geometric failures (no arc fits, collinear points, parallel lines) are
never raised; those functions return None. Exceptions are reserved for
callers passing parameters that can never be valid.
"""


class RouteCraftError(Exception):
    """Base class for all RouteCraft errors."""


class InvalidParameterError(RouteCraftError, ValueError):
    """An editing parameter is out of range (e.g. spacing <= 0)."""


def require_positive(name: str, value: float) -> float:
    """Return value if it is strictly positive.

    Raises:
        InvalidParameterError: If value <= 0
    """
    if not value > 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")
    return value


__all__ = [
    "RouteCraftError",
    "InvalidParameterError",
    "require_positive",
]
