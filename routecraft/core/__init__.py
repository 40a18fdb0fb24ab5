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
RouteCraft Core Module

Pure geometry for editing route polylines recorded from GPS or drawn by
hand. Nothing here touches files, network or a user interface.

This module contains:
- Plane geometry primitives (vectors, lines, segments)
- Point enrichment (distance, bearings, direction, cost metric)
- Arc fitting for bend smoothing and corner rounding
- A quadtree spatial index and the proximity queries built on it
- Whole-route editing operations
- A local planar projection for WGS84 tracks
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .exceptions import RouteCraftError, InvalidParameterError
from .settings import EditSettings

from .plane_geometry import SimpleVector, Point3, Segment, Axis2d
from .point_enricher import EnrichedPoint, enrich, effective_direction
from .arc_fitting import Arc, fit_bend, fit_corner, materialize_bend, materialize_corner
from .spatial_index import BoundingBox, SpatialIndex
from .proximity import SelfIntersection, RoutePicker, find_intersections, nearest_point, nearest_to_axis
from .route_editing import smooth_bend, round_corner, simplify, nudge
from .projection import LocalProjection

logger = get_logger(__name__)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Errors and settings
    "RouteCraftError",
    "InvalidParameterError",
    "EditSettings",
    # Geometry
    "SimpleVector",
    "Point3",
    "Segment",
    "Axis2d",
    # Enrichment
    "EnrichedPoint",
    "enrich",
    "effective_direction",
    # Arc fitting
    "Arc",
    "fit_bend",
    "fit_corner",
    "materialize_bend",
    "materialize_corner",
    # Spatial
    "BoundingBox",
    "SpatialIndex",
    "SelfIntersection",
    "RoutePicker",
    "find_intersections",
    "nearest_point",
    "nearest_to_axis",
    # Editing
    "smooth_bend",
    "round_corner",
    "simplify",
    "nudge",
    # Projection
    "LocalProjection",
]
