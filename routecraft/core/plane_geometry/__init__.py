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
Plane Geometry Package
======================

2D point, line and segment algebra shared by arc fitting and the
proximity queries.

This package provides:
- SimpleVector (2D) and Point3 (route point with elevation)
- Lines in general form, perpendiculars and intersections
- Directed segments with before/after classification
- Exact segment-segment intersection

Example:
    >>> from routecraft.core.plane_geometry import SimpleVector, Segment, intersect
    >>> entry = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
    >>> exit_ = Segment(SimpleVector(20, 5), SimpleVector(20, 20))
    >>> intersect(entry.line, exit_.line) == SimpleVector(20, 0)
    True
"""

from .vector import SimpleVector, Point3

from .lines import (
    LineEquation,
    Segment,
    Axis2d,
    line_from_two_points,
    perpendicular_through,
    intersect,
    point_along,
    parameter_along,
    is_before,
    is_after,
    segment_intersection,
    bearing,
    normalize_angle,
)

__all__ = [
    # Types
    "SimpleVector",
    "Point3",
    "LineEquation",
    "Segment",
    "Axis2d",
    # Line algebra
    "line_from_two_points",
    "perpendicular_through",
    "intersect",
    # Segment queries
    "point_along",
    "parameter_along",
    "is_before",
    "is_after",
    "segment_intersection",
    # Angles
    "bearing",
    "normalize_angle",
]
