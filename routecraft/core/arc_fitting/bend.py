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
Bend Fitting Module
===================

Fits a circular arc tangent to two road segments and turns it into
replacement route points.

Configurations, by where the two roads' extended lines meet (P):

    Parallel     No P. The arc is a semicircle centred midway between
                 the two roads' midpoints.
    Convergent   P after the entry road and before the exit road (an
                 ordinary bend). The arc bulges towards P.
    Divergent    P before the entry road and after the exit road (a
                 hairpin). The arc bulges away from P.

Anything else has no tangent arc and yields None.

Tangent points sit at equal distance from P, which is what makes a
single circle tangent to both lines. That distance is set by the road
whose midpoint lies farther from P.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..exceptions import require_positive
from ..logging_config import get_logger
from ..plane_geometry.lines import (
    Segment,
    intersect,
    is_after,
    is_before,
    perpendicular_through,
    point_along,
)
from ..plane_geometry.vector import Point3, SimpleVector
from .arc import Arc, arc_through_points

logger = get_logger(__name__)


@dataclass(frozen=True)
class Road3d:
    """Directed road between two route points."""

    start: Point3
    end: Point3

    @property
    def planar(self) -> Segment:
        return Segment(self.start.xy, self.end.xy)


@dataclass(frozen=True)
class SmoothedBend:
    """A fitted bend ready to splice into a route.

    Attributes:
        arc: The fitted planar arc
        points: Replacement points, first and last equal the original
            route points at start_index and end_index
        start_index: First route index covered by the replacement
        end_index: Last route index covered by the replacement
    """

    arc: Arc
    points: List[Point3]
    start_index: int
    end_index: int

    @property
    def center(self) -> SimpleVector:
        return self.arc.center

    @property
    def radius(self) -> float:
        return self.arc.radius


# =============================================================================
# Fitting
# =============================================================================

def fit_bend(entry: Segment, exit_: Segment) -> Optional[Arc]:
    """Find an arc tangent to both roads.

    Args:
        entry: Road leading into the bend
        exit_: Road leading out of the bend

    Returns:
        Arc from the entry tangent point to the exit tangent point, or
        None if no tangent arc exists for this configuration
    """
    if entry.length == 0 or exit_.length == 0:
        logger.debug("Zero-length road, no bend")
        return None

    crossing = intersect(entry.line, exit_.line)

    if crossing is None:
        return _fit_parallel(entry, exit_)

    if is_before(entry, crossing) and is_after(exit_, crossing):
        return _fit_through_crossing(crossing, entry, exit_, divergent=True)

    if is_after(entry, crossing) and is_before(exit_, crossing):
        return _fit_through_crossing(crossing, entry, exit_, divergent=False)

    logger.debug("Roads neither converge nor diverge, no bend")
    return None


def _fit_parallel(entry: Segment, exit_: Segment) -> Optional[Arc]:
    """Semicircle between two parallel roads."""
    center = (entry.midpoint + exit_.midpoint) * 0.5

    entry_tangent = intersect(entry.line, perpendicular_through(entry.line, center))
    exit_tangent = intersect(exit_.line, perpendicular_through(exit_.line, center))
    if entry_tangent is None or exit_tangent is None:
        return None

    radius = center.distance_to(entry_tangent)
    half_way = center + entry.direction * radius

    return arc_through_points(entry_tangent, half_way, exit_tangent)


def _fit_through_crossing(
    crossing: SimpleVector,
    entry: Segment,
    exit_: Segment,
    divergent: bool
) -> Optional[Arc]:
    """Arc for roads whose lines meet at crossing."""
    entry_mid = entry.midpoint
    exit_mid = exit_.midpoint
    entry_reach = crossing.distance_to(entry_mid)
    exit_reach = crossing.distance_to(exit_mid)

    if entry_reach >= exit_reach:
        entry_tangent = entry_mid
        exit_tangent = point_along(Segment(crossing, _far_end(exit_, crossing)), entry_reach)
    else:
        entry_tangent = point_along(Segment(crossing, _far_end(entry, crossing)), exit_reach)
        exit_tangent = exit_mid

    return tangent_arc(crossing, entry, entry_tangent, exit_, exit_tangent, divergent)


def tangent_arc(
    crossing: SimpleVector,
    entry: Segment,
    entry_tangent: SimpleVector,
    exit_: Segment,
    exit_tangent: SimpleVector,
    divergent: bool = False
) -> Optional[Arc]:
    """Arc touching both road lines at the given tangent points.

    The tangent points must be equidistant from crossing. The centre is
    where the perpendiculars at the two tangent points meet.

    Args:
        crossing: Where the two road lines intersect
        entry: Entry road (only its line is used)
        entry_tangent: Tangent point on the entry line
        exit_: Exit road (only its line is used)
        exit_tangent: Tangent point on the exit line
        divergent: True for a hairpin (arc on the far side of the centre)

    Returns:
        Arc, or None if the construction degenerates
    """
    center = intersect(
        perpendicular_through(entry.line, entry_tangent),
        perpendicular_through(exit_.line, exit_tangent),
    )
    if center is None:
        logger.debug("Tangent perpendiculars are parallel, no centre")
        return None

    radius = center.distance_to(entry_tangent)
    to_center = center - crossing

    if to_center.length_squared == 0 or radius == 0:
        return None

    if divergent:
        middle = crossing + to_center.normalized() * (radius + to_center.length)
    else:
        middle = center - to_center.normalized() * radius

    return arc_through_points(entry_tangent, middle, exit_tangent)


def _far_end(segment: Segment, point: SimpleVector) -> SimpleVector:
    """Endpoint of segment farther from point."""
    if point.distance_to(segment.start_at) > point.distance_to(segment.ends_at):
        return segment.start_at
    return segment.ends_at


# =============================================================================
# Discretization
# =============================================================================

def materialize_bend(
    spacing: float,
    entry_road: Road3d,
    exit_road: Road3d,
    arc: Arc
) -> List[Point3]:
    """Replacement points for a fitted bend.

    The arc is split into ceil(arc length / spacing) equal-angle pieces.
    Elevation climbs evenly over lead-in + arc + lead-out, so the two
    tangent points take their share of the height difference between
    the entry start and the exit end.

    Args:
        spacing: Target distance between arc points (m)
        entry_road: Road leading into the bend
        exit_road: Road leading out of the bend
        arc: Result of fit_bend for these roads

    Returns:
        [entry start, entry tangent, ...arc interior..., exit tangent, exit end]

    Raises:
        InvalidParameterError: If spacing <= 0
    """
    require_positive("spacing", spacing)

    start = entry_road.start
    end = exit_road.end

    segments = max(1, math.ceil(arc.length / spacing))
    lead_in = start.xy.distance_to(arc.start_point)
    lead_out = arc.end_point.distance_to(end.xy)
    total = lead_in + arc.length + lead_out

    rise = end.z - start.z
    if total > 0:
        entry_z = start.z + rise * lead_in / total
        exit_z = start.z + rise * (lead_in + arc.length) / total
    else:
        entry_z = exit_z = start.z

    points = [start]
    for k, planar in enumerate(arc.segment_points(segments)):
        z = entry_z + (exit_z - entry_z) * k / segments
        points.append(Point3.from_planar(planar, z))
    points.append(end)

    return points


def bend_for_range(
    route: Sequence,
    start_index: int,
    end_index: int,
    spacing: float
) -> Optional[SmoothedBend]:
    """Fit and discretize a bend over route[start_index..end_index].

    The entry road is the first leg of the range and the exit road the
    last one. Points outside the range are never part of the result.

    Returns:
        SmoothedBend, or None if the range is too short or no arc fits
    """
    require_positive("spacing", spacing)

    if start_index < 0 or end_index >= len(route) or end_index - start_index < 2:
        logger.debug("Range %d..%d cannot hold two roads", start_index, end_index)
        return None

    points = [Point3.coerce(p) for p in route[start_index:end_index + 1]]
    entry_road = Road3d(points[0], points[1])
    exit_road = Road3d(points[-2], points[-1])

    arc = fit_bend(entry_road.planar, exit_road.planar)
    if arc is None:
        return None

    logger.debug(
        "Bend %d..%d: radius %.2f, sweep %.1f deg",
        start_index, end_index, arc.radius, math.degrees(arc.swept_angle)
    )

    return SmoothedBend(
        arc=arc,
        points=materialize_bend(spacing, entry_road, exit_road, arc),
        start_index=start_index,
        end_index=end_index,
    )


__all__ = [
    "Road3d",
    "SmoothedBend",
    "fit_bend",
    "tangent_arc",
    "materialize_bend",
    "bend_for_range",
]
