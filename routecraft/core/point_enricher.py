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
Point Enrichment
================

Derives the per-point attributes every editing tool relies on, for a
whole route at once:

- cumulative 3D distance from the start
- bearing before / after the point (2D, radians from +X)
- effective direction (bisector of the two bearings)
- direction change (absolute turn) and gradient change (signed)
- cost metric (area of the triangle with both neighbours)

The sequence is always recomputed wholesale after an edit. Points whose
turn is a near-reversal are taken to be GPS noise: they are dropped and
the remaining points enriched again until none are left.

Usage:
    >>> from routecraft.core.point_enricher import enrich
    >>> route = enrich([(0, 0, 100), (100, 0, 101), (100, 100, 103)])
    >>> route[1].direction_change  # 90 degree left turn
    1.5707963267948966
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .constants import COST_SENTINEL, REVERSAL_THRESHOLD
from .exceptions import require_positive
from .logging_config import get_logger
from .plane_geometry.lines import normalize_angle
from .plane_geometry.vector import Point3, SimpleVector

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnrichedPoint:
    """A route point with its derived attributes.

    Attributes:
        point: The position (planar x/y plus elevation)
        index: Position in the sequence
        distance: Cumulative 3D distance from the first point (m)
        bearing_before: Direction arriving at this point, None at the start
        bearing_after: Direction leaving this point, None at the end
        effective_direction: Bisector of the bearings (radians from +X)
        direction_change: Absolute turn at this point (radians, 0..pi)
        gradient_change: Signed change in gradient angle (radians)
        cost_metric: Triangle area with both neighbours (m^2); the
            sentinel value at either end of the sequence
    """

    point: Point3
    index: int
    distance: float = 0.0
    bearing_before: Optional[float] = None
    bearing_after: Optional[float] = None
    effective_direction: float = 0.0
    direction_change: Optional[float] = None
    gradient_change: Optional[float] = None
    cost_metric: float = COST_SENTINEL

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    @property
    def z(self) -> float:
        return self.point.z

    @property
    def xy(self) -> SimpleVector:
        return self.point.xy


# =============================================================================
# Enrichment
# =============================================================================

def enrich(
    points: Iterable,
    reversal_threshold: float = REVERSAL_THRESHOLD
) -> List[EnrichedPoint]:
    """Compute derived attributes for a whole route.

    Points whose direction change exceeds reversal_threshold are removed
    and the route is enriched again, repeatedly, until none remain. Each
    pass removes at least one point so this always terminates.

    Args:
        points: Point3, EnrichedPoint or (x, y, z) tuples, in route order
        reversal_threshold: Turn (radians) above which a point is noise

    Returns:
        New list of EnrichedPoint; empty for empty input
    """
    require_positive("reversal_threshold", reversal_threshold)

    current = [Point3.coerce(p) for p in points]
    removed = 0

    while True:
        enriched = _enrich_once(current)
        noisy = {
            p.index for p in enriched
            if p.direction_change is not None and p.direction_change > reversal_threshold
        }
        if not noisy:
            break

        logger.debug("Removing %d near-reversal points", len(noisy))
        current = [p for i, p in enumerate(current) if i not in noisy]
        removed += len(noisy)

    if removed:
        logger.warning(
            "Removed %d noisy point(s) with turns above %.1f degrees",
            removed, math.degrees(reversal_threshold)
        )

    return enriched


def _enrich_once(points: Sequence[Point3]) -> List[EnrichedPoint]:
    """Single enrichment pass, no cleanup."""
    count = len(points)
    if count == 0:
        return []
    if count == 1:
        return [EnrichedPoint(point=points[0], index=0)]

    xyz = np.array([p.to_tuple() for p in points], dtype=float)
    legs = np.diff(xyz, axis=0)

    leg_lengths = np.linalg.norm(legs, axis=1)
    distances = np.concatenate(([0.0], np.cumsum(leg_lengths)))

    planar_lengths = np.hypot(legs[:, 0], legs[:, 1])
    bearings = np.arctan2(legs[:, 1], legs[:, 0])
    gradients = np.arctan2(legs[:, 2], planar_lengths)

    # Triangle (previous, this, next) for every interior point
    areas = np.zeros(count)
    if count >= 3:
        spans_in = xyz[1:-1] - xyz[:-2]
        spans_out = xyz[2:] - xyz[:-2]
        areas[1:-1] = 0.5 * np.linalg.norm(np.cross(spans_in, spans_out), axis=1)

    enriched = []
    for i, point in enumerate(points):
        before = _leg_bearing(bearings, planar_lengths, i - 1) if i > 0 else None
        after = _leg_bearing(bearings, planar_lengths, i) if i < count - 1 else None

        direction_change = None
        gradient_change = None
        if before is not None and after is not None:
            direction_change = abs(normalize_angle(after - before))
            gradient_change = float(gradients[i] - gradients[i - 1])

        is_end = i == 0 or i == count - 1

        enriched.append(EnrichedPoint(
            point=point,
            index=i,
            distance=float(distances[i]),
            bearing_before=before,
            bearing_after=after,
            effective_direction=effective_direction(before, after),
            direction_change=direction_change,
            gradient_change=gradient_change,
            cost_metric=COST_SENTINEL if is_end else float(areas[i]),
        ))

    return enriched


def _leg_bearing(bearings: np.ndarray, planar_lengths: np.ndarray, leg: int) -> Optional[float]:
    # A leg with no planar extent (duplicate or vertical step) has no direction
    if planar_lengths[leg] == 0:
        return None
    return float(bearings[leg])


def effective_direction(before: Optional[float], after: Optional[float]) -> float:
    """Angular bisector of the incoming and outgoing bearings.

    At a route end only one bearing exists and it is used as is. For an
    exact reversal the bisector is undefined; the incoming bearing wins.
    """
    if before is None and after is None:
        return 0.0
    if before is None:
        return after
    if after is None:
        return before

    sum_x = math.cos(before) + math.cos(after)
    sum_y = math.sin(before) + math.sin(after)
    if math.hypot(sum_x, sum_y) < 1e-12:
        return before
    return math.atan2(sum_y, sum_x)


# =============================================================================
# Helpers for callers
# =============================================================================

def positions(route: Iterable[EnrichedPoint]) -> List[Point3]:
    """Strip derived attributes, keeping only positions."""
    return [p.point for p in route]


def total_length(route: Sequence[EnrichedPoint]) -> float:
    """Route length (m), zero for an empty route."""
    return route[-1].distance if route else 0.0


__all__ = [
    "EnrichedPoint",
    "enrich",
    "effective_direction",
    "positions",
    "total_length",
]
