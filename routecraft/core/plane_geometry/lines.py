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
Plane Line Algebra
==================

Line and segment calculations used by arc fitting and proximity queries.

Lines are held in general form ``a*x + b*y + c = 0`` so vertical lines
need no special casing. Every function here is total except the
intersections, which return None for parallel inputs instead of
dividing by a vanishing determinant.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..constants import PARALLEL_TOLERANCE
from .vector import SimpleVector


@dataclass(frozen=True)
class LineEquation:
    """Line in general form: a*x + b*y + c = 0."""

    a: float
    b: float
    c: float

    def value_at(self, point: SimpleVector) -> float:
        """Signed residual of the line equation at point."""
        return self.a * point.x + self.b * point.y + self.c


@dataclass(frozen=True)
class Segment:
    """Directed straight segment (a "road") from start_at to ends_at."""

    start_at: SimpleVector
    ends_at: SimpleVector

    @property
    def length(self) -> float:
        return self.start_at.distance_to(self.ends_at)

    @property
    def direction(self) -> SimpleVector:
        """Unit direction of travel (zero vector for a degenerate segment)."""
        return (self.ends_at - self.start_at).normalized()

    @property
    def midpoint(self) -> SimpleVector:
        return (self.start_at + self.ends_at) * 0.5

    @property
    def line(self) -> LineEquation:
        return line_from_two_points(self.start_at, self.ends_at)

    def reversed(self) -> "Segment":
        return Segment(self.ends_at, self.start_at)


@dataclass(frozen=True)
class Axis2d:
    """Infinite line given by an origin and a direction."""

    origin: SimpleVector
    direction: SimpleVector

    def distance_to(self, point: SimpleVector) -> float:
        """Perpendicular distance from point to the axis line."""
        unit = self.direction.normalized()
        if unit.length_squared == 0:
            return self.origin.distance_to(point)
        return abs(unit.cross(point - self.origin))

    def crosses_segment(self, start: SimpleVector, end: SimpleVector) -> bool:
        """True if the axis line meets the closed segment start..end."""
        side_start = self.direction.cross(start - self.origin)
        side_end = self.direction.cross(end - self.origin)
        return side_start * side_end <= 0.0


# =============================================================================
# Lines
# =============================================================================

def line_from_two_points(p1: SimpleVector, p2: SimpleVector) -> LineEquation:
    """Line through two points.

    For coincident points the result is the degenerate line (0, 0, 0),
    which intersects nothing.
    """
    return LineEquation(
        a=p1.y - p2.y,
        b=p2.x - p1.x,
        c=p1.x * p2.y - p2.x * p1.y,
    )


def perpendicular_through(line: LineEquation, point: SimpleVector) -> LineEquation:
    """Line perpendicular to line, passing through point."""
    return LineEquation(
        a=line.b,
        b=-line.a,
        c=line.a * point.y - line.b * point.x,
    )


def intersect(line_a: LineEquation, line_b: LineEquation) -> Optional[SimpleVector]:
    """Intersection of two lines.

    Returns:
        Intersection point, or None if the lines are parallel or coincident
    """
    det = line_a.a * line_b.b - line_b.a * line_a.b
    scale = math.hypot(line_a.a, line_a.b) * math.hypot(line_b.a, line_b.b)

    if scale == 0 or abs(det) < PARALLEL_TOLERANCE * scale:
        return None

    return SimpleVector(
        (line_a.b * line_b.c - line_b.b * line_a.c) / det,
        (line_b.a * line_a.c - line_a.a * line_b.c) / det,
    )


# =============================================================================
# Segments
# =============================================================================

def point_along(segment: Segment, distance: float) -> SimpleVector:
    """Point at distance from the segment start, along its direction.

    The distance is not clamped: values beyond the segment length give
    points on the extended line.
    """
    return segment.start_at + segment.direction * distance


def parameter_along(segment: Segment, point: SimpleVector) -> Optional[float]:
    """Projection parameter of point on segment (0 at start, 1 at end).

    Returns:
        Parameter t, or None for a zero-length segment
    """
    offset = segment.ends_at - segment.start_at
    length_squared = offset.length_squared
    if length_squared == 0:
        return None
    return (point - segment.start_at).dot(offset) / length_squared


def is_before(segment: Segment, point: SimpleVector) -> bool:
    """True if point lies before the segment start, along its direction."""
    t = parameter_along(segment, point)
    return t is not None and t < 0.0


def is_after(segment: Segment, point: SimpleVector) -> bool:
    """True if point lies beyond the segment end, along its direction."""
    t = parameter_along(segment, point)
    return t is not None and t > 1.0


def segment_intersection(first: Segment, second: Segment) -> Optional[SimpleVector]:
    """Exact crossing point of two closed segments.

    Touching at an endpoint counts as an intersection. Parallel and
    collinear segments return None.
    """
    r = first.ends_at - first.start_at
    s = second.ends_at - second.start_at
    if r.length_squared == 0 or s.length_squared == 0:
        return None

    denominator = r.cross(s)
    if abs(denominator) < PARALLEL_TOLERANCE * r.length * s.length:
        return None

    offset = second.start_at - first.start_at
    t = offset.cross(s) / denominator
    u = offset.cross(r) / denominator

    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return first.start_at + r * t
    return None


def bearing(start: SimpleVector, end: SimpleVector) -> float:
    """Direction from start to end, radians counter-clockwise from +X."""
    return math.atan2(end.y - start.y, end.x - start.x)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle < -math.pi:
        angle += 2 * math.pi
    return angle


__all__ = [
    "LineEquation",
    "Segment",
    "Axis2d",
    "line_from_two_points",
    "perpendicular_through",
    "intersect",
    "point_along",
    "parameter_along",
    "is_before",
    "is_after",
    "segment_intersection",
    "bearing",
    "normalize_angle",
]
