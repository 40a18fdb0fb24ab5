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
Sketch Plane
============

The plane through three route points, with an orthonormal 2D frame so
a 3D corner can be rounded with the planar arc construction and lifted
back. Distances measured in the frame are true 3D distances.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..constants import COLLINEAR_TOLERANCE
from ..plane_geometry.vector import Point3, SimpleVector


@dataclass(frozen=True, eq=False)
class SketchPlane:
    """Plane with an origin and two orthonormal in-plane axes.

    Attributes:
        origin: Point of the plane mapped to (0, 0)
        x_axis: Unit vector mapped to (1, 0)
        y_axis: Unit vector mapped to (0, 1)
    """

    origin: np.ndarray
    x_axis: np.ndarray
    y_axis: np.ndarray

    @property
    def normal(self) -> np.ndarray:
        return np.cross(self.x_axis, self.y_axis)

    @classmethod
    def through_points(cls, first: Point3, origin: Point3, last: Point3) -> Optional["SketchPlane"]:
        """Plane through three points, origin at the middle one.

        The x axis points from origin towards first.

        Returns:
            SketchPlane, or None if the points are (nearly) collinear
        """
        o = np.array(origin.to_tuple(), dtype=float)
        u = np.array(first.to_tuple(), dtype=float) - o
        v = np.array(last.to_tuple(), dtype=float) - o

        u_len = np.linalg.norm(u)
        v_len = np.linalg.norm(v)
        normal = np.cross(u, v)
        normal_len = np.linalg.norm(normal)

        if u_len == 0 or v_len == 0 or normal_len < COLLINEAR_TOLERANCE * u_len * v_len:
            return None

        x_axis = u / u_len
        y_axis = np.cross(normal / normal_len, x_axis)
        return cls(origin=o, x_axis=x_axis, y_axis=y_axis)

    def project(self, point: Point3) -> SimpleVector:
        """Coordinates of point (assumed in the plane) in the plane frame."""
        offset = np.array(point.to_tuple(), dtype=float) - self.origin
        return SimpleVector(float(offset @ self.x_axis), float(offset @ self.y_axis))

    def place(self, planar: SimpleVector) -> Point3:
        """3D point for plane coordinates."""
        x, y, z = self.origin + planar.x * self.x_axis + planar.y * self.y_axis
        return Point3(float(x), float(y), float(z))


__all__ = ["SketchPlane"]
