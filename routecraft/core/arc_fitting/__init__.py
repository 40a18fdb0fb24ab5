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
Arc Fitting Package
===================

Tangent circular arcs for route smoothing.

This package provides:
- Two-road bend fitting (convergent, divergent and parallel roads)
- Distance-based discretization with blended elevation
- Single-vertex corner rounding in the sketch plane of three points

No fit is a normal outcome: every fitting function returns None when
the geometry admits no tangent arc, and the caller leaves the route as
it was.

Example:
    >>> from routecraft.core.plane_geometry import SimpleVector, Segment
    >>> from routecraft.core.arc_fitting import fit_bend
    >>> entry = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
    >>> exit_ = Segment(SimpleVector(20, 5), SimpleVector(20, 20))
    >>> round(fit_bend(entry, exit_).radius, 3)
    15.0
"""

from .arc import Arc, arc_through_points

from .bend import (
    Road3d,
    SmoothedBend,
    fit_bend,
    tangent_arc,
    materialize_bend,
    bend_for_range,
)

from .sketch_plane import SketchPlane

from .corner import CornerArc, fit_corner, materialize_corner

__all__ = [
    # Types
    "Arc",
    "Road3d",
    "SmoothedBend",
    "SketchPlane",
    "CornerArc",
    # Bends
    "arc_through_points",
    "fit_bend",
    "tangent_arc",
    "materialize_bend",
    "bend_for_range",
    # Corners
    "fit_corner",
    "materialize_corner",
]
