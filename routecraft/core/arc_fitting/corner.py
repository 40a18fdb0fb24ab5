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
Corner Rounding Module
======================

Rounds a single sharp vertex. An equal length is taken from the legs on
either side of the vertex (never more than half of either leg, nor more
than a fixed cap), and an arc tangent to both legs replaces the vertex.

The work happens in the sketch plane of the three points, so gradients
are carried through the rounding instead of being flattened.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..constants import CORNER_STEAL_CAP
from ..exceptions import InvalidParameterError, require_positive
from ..logging_config import get_logger
from ..plane_geometry.lines import Segment
from ..plane_geometry.vector import Point3
from .arc import Arc
from .bend import tangent_arc
from .sketch_plane import SketchPlane

logger = get_logger(__name__)


@dataclass(frozen=True)
class CornerArc:
    """Arc rounding a vertex, held in its sketch plane.

    Attributes:
        arc: The arc in sketch plane coordinates
        plane: Plane through the three original points
        start: 3D tangent point on the leg before the vertex
        end: 3D tangent point on the leg after the vertex
    """

    arc: Arc
    plane: SketchPlane
    start: Point3
    end: Point3

    @property
    def radius(self) -> float:
        return self.arc.radius

    @property
    def center(self) -> Point3:
        return self.plane.place(self.arc.center)


def fit_corner(
    before: Point3,
    vertex: Point3,
    after: Point3,
    max_steal: float = CORNER_STEAL_CAP
) -> Optional[CornerArc]:
    """Find an arc rounding vertex.

    Args:
        before: Route point before the vertex
        vertex: The corner to round
        after: Route point after the vertex
        max_steal: Most length taken from either leg (m)

    Returns:
        CornerArc, or None if the points are collinear or a leg is empty
    """
    require_positive("max_steal", max_steal)
    before, vertex, after = (Point3.coerce(p) for p in (before, vertex, after))

    leg_in = before.distance_to(vertex)
    leg_out = vertex.distance_to(after)
    if leg_in == 0 or leg_out == 0:
        logger.debug("Corner has a zero-length leg")
        return None

    steal = min(leg_in / 2, leg_out / 2, max_steal)

    plane = SketchPlane.through_points(before, vertex, after)
    if plane is None:
        logger.debug("Corner points are collinear, nothing to round")
        return None

    start = _towards(vertex, before, steal / leg_in)
    end = _towards(vertex, after, steal / leg_out)

    corner = plane.project(vertex)
    arc = tangent_arc(
        corner,
        Segment(plane.project(before), corner),
        plane.project(start),
        Segment(corner, plane.project(after)),
        plane.project(end),
    )
    if arc is None:
        return None

    return CornerArc(arc=arc, plane=plane, start=start, end=end)


def materialize_corner(corner: CornerArc, segments: int) -> List[Point3]:
    """Points replacing the rounded vertex.

    Corners are short, so the arc is split into a fixed number of
    equal-angle segments rather than by distance.

    Args:
        corner: Result of fit_corner
        segments: Number of arc segments (>= 1)

    Returns:
        [start tangent, ...interior..., end tangent] in 3D

    Raises:
        InvalidParameterError: If segments < 1
    """
    if not isinstance(segments, int) or segments < 1:
        raise InvalidParameterError(f"segments must be a positive integer, got {segments}")

    planar = corner.arc.segment_points(segments)
    interior = [corner.plane.place(p) for p in planar[1:-1]]
    return [corner.start] + interior + [corner.end]


def _towards(origin: Point3, target: Point3, fraction: float) -> Point3:
    return Point3(
        origin.x + (target.x - origin.x) * fraction,
        origin.y + (target.y - origin.y) * fraction,
        origin.z + (target.z - origin.z) * fraction,
    )


__all__ = ["CornerArc", "fit_corner", "materialize_corner"]
