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
Proximity Queries
=================

Spatial questions about a whole route, answered with a freshly built
quadtree:

- where does the route cross itself
- which point is nearest a picked location
- which point is nearest a pick ray (an axis through the scene)

Self-intersection scans the legs in route order. Each leg is tested
against the earlier legs whose boxes overlap its own, then added to the
index. Two legs that follow each other always touch at their common
vertex; such a touch is not a crossing and is dropped when it lies
within tolerance of that vertex. A closed route (start within tolerance
of the end) treats its last and first legs as neighbours too.

Only that shared vertex is excused. Non-neighbouring legs meeting at a
vertex (e.g. either side of a duplicated point) are still reported.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .exceptions import require_positive
from .logging_config import get_logger
from .plane_geometry.lines import Axis2d, Segment, segment_intersection
from .plane_geometry.vector import Point3, SimpleVector
from .settings import EditSettings
from .spatial_index import BoundingBox, SpatialIndex

logger = get_logger(__name__)


@dataclass(frozen=True)
class SelfIntersection:
    """A place where the route crosses itself.

    Attributes:
        first_segment: Index of the earlier leg (leg i runs from point i to i+1)
        second_segment: Index of the later leg
        point: Crossing position
    """

    first_segment: int
    second_segment: int
    point: SimpleVector


def _planar(points: Iterable) -> List[SimpleVector]:
    return [Point3.coerce(p).xy for p in points]


def route_segments(points: Iterable) -> List[Segment]:
    """Consecutive 2D legs of a route."""
    route = _planar(points)
    return [Segment(a, b) for a, b in zip(route, route[1:])]


# =============================================================================
# Self-intersection
# =============================================================================

def find_intersections(
    points: Iterable,
    tolerance: Optional[float] = None,
    min_cell_size: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> List[SelfIntersection]:
    """Report every place the route crosses itself.

    Args:
        points: Route points in order
        tolerance: Touches this close to a shared vertex are ignored (m)
        min_cell_size: Quadtree minimum cell size (m)
        settings: Defaults for parameters not given

    Returns:
        Crossings, ordered by the later leg then the earlier leg
    """
    settings = settings or EditSettings()
    tolerance = settings.intersection_tolerance if tolerance is None else tolerance
    min_cell_size = settings.min_cell_size if min_cell_size is None else min_cell_size
    require_positive("tolerance", tolerance)
    require_positive("min_cell_size", min_cell_size)

    route = _planar(points)
    segments = [Segment(a, b) for a, b in zip(route, route[1:])]
    if len(segments) < 2:
        return []

    boxes = [BoundingBox.from_points((s.start_at, s.ends_at)) for s in segments]
    root_box = boxes[0]
    for box in boxes[1:]:
        root_box = root_box.union(box)

    index = SpatialIndex(root_box, min_cell_size)
    last = len(segments) - 1
    closed = last > 1 and route[0].distance_to(route[-1]) <= tolerance

    found = []
    for later, (segment, box) in enumerate(zip(segments, boxes)):
        for earlier in sorted(index.query(box)):
            crossing = segment_intersection(segments[earlier], segment)
            if crossing is None:
                continue

            shared = _shared_vertex(route, earlier, later, last, closed)
            if shared is not None and crossing.distance_to(shared) <= tolerance:
                continue

            found.append(SelfIntersection(earlier, later, crossing))

        index.insert(later, box)

    logger.debug("Found %d self-intersection(s) in %d legs", len(found), len(segments))
    return found


def _shared_vertex(
    route: Sequence[SimpleVector],
    earlier: int,
    later: int,
    last: int,
    closed: bool
) -> Optional[SimpleVector]:
    """Common vertex of two neighbouring legs, None if not neighbours."""
    if later - earlier == 1:
        return route[later]
    if closed and earlier == 0 and later == last:
        return route[0]
    return None


# =============================================================================
# Picking
# =============================================================================

def _pick_parameters(
    tolerance: Optional[float],
    min_cell_size: Optional[float],
    settings: Optional[EditSettings]
) -> Tuple[float, float]:
    settings = settings or EditSettings()
    return (
        settings.pick_tolerance if tolerance is None else tolerance,
        settings.min_cell_size if min_cell_size is None else min_cell_size,
    )


def build_point_index(
    points: Iterable,
    tolerance: Optional[float] = None,
    min_cell_size: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> SpatialIndex:
    """Index of route point indices, each boxed by tolerance around the point."""
    tolerance, min_cell_size = _pick_parameters(tolerance, min_cell_size, settings)
    require_positive("tolerance", tolerance)
    return SpatialIndex.from_entries(
        ((i, BoundingBox.around(p, tolerance)) for i, p in enumerate(_planar(points))),
        min_cell_size,
    )


class RoutePicker:
    """Nearest-point lookups against one snapshot of a route.

    Each point is indexed with a square of half-size tolerance around
    it, so any point within tolerance of a location or axis is found.
    Tolerance and cell size default to the pick values of settings.

    Example:
        >>> picker = RoutePicker([(0, 0, 0), (10, 0, 0), (20, 0, 0)], tolerance=2.0)
        >>> picker.nearest_point(SimpleVector(9, 1))
        1
    """

    def __init__(
        self,
        points: Iterable,
        tolerance: Optional[float] = None,
        min_cell_size: Optional[float] = None,
        settings: Optional[EditSettings] = None
    ):
        tolerance, min_cell_size = _pick_parameters(tolerance, min_cell_size, settings)
        self.tolerance = require_positive("tolerance", tolerance)
        self.route = _planar(points)
        self.index = build_point_index(self.route, tolerance, min_cell_size)

    def nearest_point(self, location: SimpleVector) -> Optional[int]:
        """Index of the closest point within tolerance of location."""
        candidates = [
            i for i in self.index.query_containing(location)
            if self.route[i].distance_to(location) <= self.tolerance
        ]
        return min(
            candidates,
            key=lambda i: (self.route[i].distance_to(location), i),
            default=None,
        )

    def nearest_to_axis(self, axis: Axis2d) -> Optional[int]:
        """Index of the point closest to the axis line, within tolerance."""
        best = self.index.query_nearest_along_axis(
            axis, lambda i: axis.distance_to(self.route[i])
        )
        if best is None or axis.distance_to(self.route[best]) > self.tolerance:
            return None
        return best

    def points_in_box(self, box: BoundingBox) -> List[int]:
        """Indices of points lying inside box, in route order."""
        return sorted(
            i for i in self.index.query(box) if box.contains_point(self.route[i])
        )


def nearest_point(
    points: Iterable,
    location: SimpleVector,
    tolerance: Optional[float] = None,
    min_cell_size: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> Optional[int]:
    """Index of the route point nearest location, within tolerance."""
    return RoutePicker(points, tolerance, min_cell_size, settings).nearest_point(location)


def nearest_to_axis(
    points: Iterable,
    axis: Axis2d,
    tolerance: Optional[float] = None,
    min_cell_size: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> Optional[int]:
    """Index of the route point nearest the axis line, within tolerance."""
    return RoutePicker(points, tolerance, min_cell_size, settings).nearest_to_axis(axis)


__all__ = [
    "SelfIntersection",
    "route_segments",
    "find_intersections",
    "build_point_index",
    "RoutePicker",
    "nearest_point",
    "nearest_to_axis",
]
