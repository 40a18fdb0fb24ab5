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
Circular Arc Module
===================

Planar circular arc described by centre, radius, start angle and signed
sweep, plus the through-three-points construction every fit ends with.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from ..constants import COLLINEAR_TOLERANCE
from ..logging_config import get_logger
from ..plane_geometry.vector import SimpleVector

logger = get_logger(__name__)


@dataclass(frozen=True)
class Arc:
    """Circular arc in the plane.

    Attributes:
        center: Circle centre
        radius: Circle radius (> 0)
        start_angle: Angle from centre to the start point (radians)
        swept_angle: Signed sweep; positive is counter-clockwise (left turn)
        start_point: Tangent point where the arc leaves the entry road
        end_point: Tangent point where the arc joins the exit road
    """

    center: SimpleVector
    radius: float
    start_angle: float
    swept_angle: float
    start_point: SimpleVector
    end_point: SimpleVector

    @property
    def length(self) -> float:
        """Arc length: L = R * |sweep|."""
        return abs(self.swept_angle) * self.radius

    @property
    def turn_direction(self) -> str:
        """'LEFT' for counter-clockwise, 'RIGHT' for clockwise."""
        return 'LEFT' if self.swept_angle > 0 else 'RIGHT'

    def point_at(self, fraction: float) -> SimpleVector:
        """Point at a fraction of the sweep (0 = start, 1 = end)."""
        angle = self.start_angle + self.swept_angle * fraction
        return self.center + SimpleVector.from_polar(self.radius, angle)

    def segment_points(self, segments: int) -> List[SimpleVector]:
        """Equal-angle subdivision, including both end points."""
        return [self.point_at(k / segments) for k in range(segments + 1)]


def arc_through_points(
    start: SimpleVector,
    middle: SimpleVector,
    end: SimpleVector
) -> Optional[Arc]:
    """Arc starting at start, passing through middle, ending at end.

    The circle is the circumcircle of the three points. The sweep runs
    from start towards end by way of middle, so it may exceed pi.

    Returns:
        Arc, or None if the points are (nearly) collinear
    """
    ab = middle - start
    ac = end - start
    twice_area = ab.cross(ac)

    scale = max(ab.length_squared, ac.length_squared, (end - middle).length_squared)
    if scale == 0 or abs(twice_area) < COLLINEAR_TOLERANCE * scale:
        logger.debug("Arc points are collinear, no circle")
        return None

    # Circumcentre relative to start
    d = 2.0 * twice_area
    ux = (ac.y * ab.length_squared - ab.y * ac.length_squared) / d
    uy = (ab.x * ac.length_squared - ac.x * ab.length_squared) / d
    offset = SimpleVector(ux, uy)
    center = start + offset
    radius = offset.length

    start_angle = (start - center).angle
    end_angle = (end - center).angle

    # Counter-clockwise triangle means start -> middle -> end runs CCW
    if twice_area > 0:
        swept = (end_angle - start_angle) % (2 * math.pi)
    else:
        swept = -((start_angle - end_angle) % (2 * math.pi))

    return Arc(
        center=center,
        radius=radius,
        start_angle=start_angle,
        swept_angle=swept,
        start_point=start,
        end_point=end,
    )


__all__ = ["Arc", "arc_through_points"]
