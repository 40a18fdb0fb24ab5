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
Editing Settings
================

Groups the caller-supplied editing parameters so an application can keep
one validated bundle per route and hand it to the editing operations.
"""

from dataclasses import dataclass, replace

from .constants import (
    CORNER_STEAL_CAP,
    DEFAULT_CORNER_SEGMENTS,
    DEFAULT_MIN_CELL_SIZE,
    DEFAULT_PICK_TOLERANCE,
    DEFAULT_SPACING,
    INTERSECTION_TOLERANCE,
    REVERSAL_THRESHOLD,
)
from .exceptions import InvalidParameterError, require_positive


@dataclass(frozen=True)
class EditSettings:
    """Editing parameters for one route.

    Attributes:
        spacing: Target distance between synthesized bend points (m)
        corner_segments: Number of arc segments when rounding a corner
        corner_steal_cap: Most taken from each side of a rounded vertex (m)
        min_cell_size: Smallest quadtree cell that may be split (m)
        intersection_tolerance: Crossings this close to a shared vertex are ignored (m)
        pick_tolerance: Radius for nearest-point picking (m)
        reversal_threshold: Turns sharper than this are removed as noise (radians)

    Example:
        >>> settings = EditSettings(spacing=2.5)
        >>> settings.with_changes(corner_segments=8).corner_segments
        8
    """

    spacing: float = DEFAULT_SPACING
    corner_segments: int = DEFAULT_CORNER_SEGMENTS
    corner_steal_cap: float = CORNER_STEAL_CAP
    min_cell_size: float = DEFAULT_MIN_CELL_SIZE
    intersection_tolerance: float = INTERSECTION_TOLERANCE
    pick_tolerance: float = DEFAULT_PICK_TOLERANCE
    reversal_threshold: float = REVERSAL_THRESHOLD

    def __post_init__(self):
        """Validate parameters after initialization."""
        require_positive("spacing", self.spacing)
        require_positive("corner_steal_cap", self.corner_steal_cap)
        require_positive("min_cell_size", self.min_cell_size)
        require_positive("intersection_tolerance", self.intersection_tolerance)
        require_positive("pick_tolerance", self.pick_tolerance)
        require_positive("reversal_threshold", self.reversal_threshold)

        if not isinstance(self.corner_segments, int) or self.corner_segments < 1:
            raise InvalidParameterError(
                f"corner_segments must be a positive integer, got {self.corner_segments}"
            )

    def with_changes(self, **changes) -> "EditSettings":
        """Return a copy with some fields replaced (validated again)."""
        return replace(self, **changes)


__all__ = ["EditSettings"]
