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
Local Planar Projection
=======================

GPS tracks arrive as WGS84 longitude/latitude with elevation in metres.
Every geometric operation in RouteCraft works in a planar frame with
lengths in metres, so tracks are projected first.

The projection is azimuthal equidistant centred on an origin near the
track. Distances and bearings from the origin are exact and distortion
stays far below GPS noise over the extent of a route.

Example:
    >>> track = [(-111.90, 33.45, 350.0), (-111.89, 33.46, 360.0)]
    >>> projection = LocalProjection.from_track(track)
    >>> points = projection.project_track(track)
    >>> round(points[1].z, 1)
    10.0
"""

from typing import Iterable, List, Tuple

from pyproj import CRS, Transformer

from .exceptions import InvalidParameterError
from .logging_config import get_logger
from .plane_geometry.vector import Point3

logger = get_logger(__name__)

GEOGRAPHIC_CRS = "EPSG:4326"


class LocalProjection:
    """Round trip between WGS84 and a local metric frame.

    Elevation passes through unchanged apart from the origin offset.

    Attributes:
        origin_lon: Longitude of the local origin (degrees)
        origin_lat: Latitude of the local origin (degrees)
        origin_elevation: Elevation mapped to z = 0 (m)
        crs: pyproj CRS of the local frame
    """

    def __init__(self, origin_lon: float, origin_lat: float, origin_elevation: float = 0.0):
        """Create a projection centred on the given origin.

        Raises:
            InvalidParameterError: If the origin is not a valid WGS84 position
        """
        if not -180.0 <= origin_lon <= 180.0:
            raise InvalidParameterError(f"Longitude out of range: {origin_lon}")
        if not -90.0 <= origin_lat <= 90.0:
            raise InvalidParameterError(f"Latitude out of range: {origin_lat}")

        self.origin_lon = float(origin_lon)
        self.origin_lat = float(origin_lat)
        self.origin_elevation = float(origin_elevation)

        self.crs = CRS.from_proj4(
            f"+proj=aeqd +lat_0={self.origin_lat} +lon_0={self.origin_lon} "
            "+x_0=0 +y_0=0 +datum=WGS84 +units=m +no_defs"
        )
        self._forward = Transformer.from_crs(GEOGRAPHIC_CRS, self.crs, always_xy=True)
        self._inverse = Transformer.from_crs(self.crs, GEOGRAPHIC_CRS, always_xy=True)

        logger.debug("Local projection centred on %.6f, %.6f", self.origin_lon, self.origin_lat)

    @classmethod
    def from_track(cls, track: Iterable[Tuple[float, ...]]) -> "LocalProjection":
        """Projection centred on the first point of a track.

        Args:
            track: (lon, lat) or (lon, lat, ele) tuples

        Raises:
            InvalidParameterError: If the track is empty
        """
        for first in track:
            lon, lat = first[0], first[1]
            ele = first[2] if len(first) > 2 else 0.0
            return cls(lon, lat, ele)
        raise InvalidParameterError("Cannot centre a projection on an empty track")

    def to_local(self, lon: float, lat: float, ele: float = 0.0) -> Point3:
        """WGS84 position to local metres."""
        x, y = self._forward.transform(lon, lat)
        return Point3(float(x), float(y), float(ele) - self.origin_elevation)

    def to_geographic(self, point) -> Tuple[float, float, float]:
        """Local point back to (lon, lat, ele)."""
        point = Point3.coerce(point)
        lon, lat = self._inverse.transform(point.x, point.y)
        return float(lon), float(lat), point.z + self.origin_elevation

    def project_track(self, track: Iterable[Tuple[float, ...]]) -> List[Point3]:
        """Project a whole track; missing elevations become 0."""
        points = []
        for position in track:
            ele = position[2] if len(position) > 2 else 0.0
            points.append(self.to_local(position[0], position[1], ele))
        logger.debug("Projected %d track points", len(points))
        return points

    def __repr__(self) -> str:
        return (f"LocalProjection(origin_lon={self.origin_lon}, "
                f"origin_lat={self.origin_lat}, origin_elevation={self.origin_elevation})")


__all__ = ["LocalProjection", "GEOGRAPHIC_CRS"]
