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
Route Editing Operations
========================

Whole-route edits built from the core: fit, splice, re-enrich.

Every operation takes the current route and returns a new enriched
route; the input is never modified. An operation that finds nothing to
do for geometric reasons returns None so the caller can keep the route
as it was and tell the user.

Parameters can be passed one by one or bundled in an EditSettings;
explicit arguments win over the bundle.

Usage:
    >>> from routecraft.core.route_editing import smooth_bend
    >>> route = [(0, 0, 0), (10, 0, 0), (20, 5, 0), (20, 20, 0)]
    >>> smoothed = smooth_bend(route, 0, 3, spacing=2.0)
"""

import math
from typing import Iterable, List, Optional

from .arc_fitting.bend import bend_for_range
from .arc_fitting.corner import fit_corner, materialize_corner
from .constants import SIMPLIFY_FRACTION
from .exceptions import InvalidParameterError
from .logging_config import get_logger
from .plane_geometry.vector import Point3, SimpleVector
from .point_enricher import EnrichedPoint, enrich
from .settings import EditSettings

logger = get_logger(__name__)


def _points(route: Iterable) -> List[Point3]:
    return [Point3.coerce(p) for p in route]


def smooth_bend(
    route: Iterable,
    start_index: int,
    end_index: int,
    spacing: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> Optional[List[EnrichedPoint]]:
    """Replace route[start_index..end_index] with a tangent arc.

    The first leg of the range is the entry road and the last leg the
    exit road; points strictly between them are discarded.

    Args:
        route: Current route points
        start_index: First point of the range (start of the entry road)
        end_index: Last point of the range (end of the exit road)
        spacing: Distance between arc points (m)
        settings: Defaults for parameters not given

    Returns:
        New enriched route, or None if no arc fits this range
    """
    settings = settings or EditSettings()
    spacing = settings.spacing if spacing is None else spacing

    points = _points(route)
    bend = bend_for_range(points, start_index, end_index, spacing)
    if bend is None:
        logger.info("No smooth bend found for points %d..%d", start_index, end_index)
        return None

    spliced = points[:start_index] + bend.points + points[end_index + 1:]
    logger.info(
        "Smoothed points %d..%d with radius %.1f (%d points replaced by %d)",
        start_index, end_index, bend.radius,
        end_index - start_index + 1, len(bend.points)
    )
    return enrich(spliced, settings.reversal_threshold)


def round_corner(
    route: Iterable,
    index: int,
    segments: Optional[int] = None,
    max_steal: Optional[float] = None,
    settings: Optional[EditSettings] = None
) -> Optional[List[EnrichedPoint]]:
    """Round the single vertex route[index].

    Args:
        route: Current route points
        index: Interior point to round
        segments: Arc segments replacing the vertex
        max_steal: Most taken from either neighbouring leg (m)
        settings: Defaults for parameters not given

    Returns:
        New enriched route, or None at an endpoint or for a straight vertex
    """
    settings = settings or EditSettings()
    segments = settings.corner_segments if segments is None else segments
    max_steal = settings.corner_steal_cap if max_steal is None else max_steal

    points = _points(route)
    if index <= 0 or index >= len(points) - 1:
        logger.info("Point %d is not an interior point, cannot round", index)
        return None

    corner = fit_corner(points[index - 1], points[index], points[index + 1], max_steal)
    if corner is None:
        logger.info("No rounding found for point %d", index)
        return None

    spliced = points[:index] + materialize_corner(corner, segments) + points[index + 1:]
    logger.info("Rounded point %d with radius %.2f", index, corner.radius)
    return enrich(spliced, settings.reversal_threshold)


def simplify(
    route: Iterable,
    fraction: float = SIMPLIFY_FRACTION,
    settings: Optional[EditSettings] = None
) -> List[EnrichedPoint]:
    """Drop the least significant points.

    Interior points are taken cheapest cost metric first, skipping any
    point whose neighbour is already going, until the given fraction of
    the interior points is chosen. Endpoints (sentinel cost) never go.

    Args:
        route: Current route points
        fraction: Share of interior points to remove, 0..1
        settings: Supplies the reversal threshold for re-enrichment

    Raises:
        InvalidParameterError: If fraction is outside 0..1
    """
    if not 0.0 <= fraction <= 1.0:
        raise InvalidParameterError(f"fraction must be between 0 and 1, got {fraction}")
    settings = settings or EditSettings()

    enriched = enrich(route, settings.reversal_threshold)
    interior = sorted(enriched[1:-1], key=lambda p: (p.cost_metric, p.index))
    limit = int(len(interior) * fraction)

    doomed = set()
    for p in interior:
        if len(doomed) >= limit:
            break
        if p.index - 1 in doomed or p.index + 1 in doomed:
            continue
        doomed.add(p.index)

    if not doomed:
        return enriched

    logger.info("Simplify removed %d of %d points", len(doomed), len(enriched))
    return enrich(
        [p.point for p in enriched if p.index not in doomed],
        settings.reversal_threshold,
    )


def nudge(
    route: Iterable,
    start_index: int,
    end_index: int,
    horizontal: float = 0.0,
    vertical: float = 0.0,
    settings: Optional[EditSettings] = None
) -> Optional[List[EnrichedPoint]]:
    """Shift route[start_index..end_index] sideways and/or up.

    Each point moves perpendicular to its effective direction, to the
    right of travel for positive horizontal. Indices refer to the route
    as given; near-reversals are removed only from the result.

    Args:
        route: Current route points
        start_index: First point to move
        end_index: Last point to move
        horizontal: Lateral offset (m), positive to the right
        vertical: Elevation offset (m)
        settings: Supplies the reversal threshold for re-enrichment

    Returns:
        New enriched route, or None for an invalid range
    """
    settings = settings or EditSettings()

    # Directions for the caller's own points; noise is only cleaned after the move
    enriched = enrich(_points(route), reversal_threshold=math.inf)

    if start_index < 0 or end_index >= len(enriched) or start_index > end_index:
        logger.info("Range %d..%d is outside the route", start_index, end_index)
        return None

    moved = []
    for p in enriched:
        if start_index <= p.index <= end_index:
            right = SimpleVector.from_polar(1.0, p.effective_direction).perpendicular(clockwise=True)
            moved.append(Point3(
                p.x + right.x * horizontal,
                p.y + right.y * horizontal,
                p.z + vertical,
            ))
        else:
            moved.append(p.point)

    return enrich(moved, settings.reversal_threshold)


__all__ = [
    "smooth_bend",
    "round_corner",
    "simplify",
    "nudge",
]
