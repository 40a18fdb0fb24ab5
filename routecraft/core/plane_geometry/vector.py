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
Vector and Point Types for Route Geometry
==========================================

Provides the lightweight 2D vector used by all planar calculations and
the immutable 3D route point.

Route points live in a local planar projection (metres east/north of an
origin) with elevation in the same length unit. Planar work (bearings,
line algebra, arc fitting) always uses the 2D projection ``Point3.xy``.
"""

import math
from dataclasses import dataclass


class SimpleVector:
    """Lightweight 2D vector for route geometry calculations.

    Used for projected point positions, segment directions and arc
    centres.

    Attributes:
        x: X coordinate (Easting)
        y: Y coordinate (Northing)

    Example:
        >>> v1 = SimpleVector(100.0, 200.0)
        >>> v2 = SimpleVector(150.0, 250.0)
        >>> direction = (v2 - v1).normalized()
        >>> print(f"Length: {(v2 - v1).length:.2f}")
    """

    __slots__ = ("x", "y")

    def __init__(self, x, y=0):
        """Initialize vector from coordinates or tuple/list.

        Args:
            x: X coordinate, or tuple/list of (x, y)
            y: Y coordinate (ignored if x is tuple/list)
        """
        if isinstance(x, (list, tuple)):
            self.x = float(x[0])
            self.y = float(x[1])
        else:
            self.x = float(x)
            self.y = float(y)

    def __sub__(self, other):
        return SimpleVector(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        return SimpleVector(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        return SimpleVector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return SimpleVector(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return SimpleVector(-self.x, -self.y)

    def __eq__(self, other):
        """Check equality with tolerance."""
        if not isinstance(other, SimpleVector):
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __hash__(self):
        return hash((round(self.x, 9), round(self.y, 9)))

    def __repr__(self):
        return f"SimpleVector({self.x:.3f}, {self.y:.3f})"

    @property
    def length(self) -> float:
        """Vector magnitude (length)."""
        return math.hypot(self.x, self.y)

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self.x**2 + self.y**2

    @property
    def angle(self) -> float:
        """Angle in radians from positive X axis."""
        return math.atan2(self.y, self.x)

    def normalized(self) -> "SimpleVector":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return SimpleVector(self.x / length, self.y / length)
        return SimpleVector(0, 0)

    def dot(self, other: "SimpleVector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "SimpleVector") -> float:
        """2D cross product (z-component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> "SimpleVector":
        """Rotate vector counter-clockwise by angle (radians)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return SimpleVector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a
        )

    def perpendicular(self, clockwise: bool = False) -> "SimpleVector":
        """Return perpendicular vector with the same length.

        Args:
            clockwise: If True, rotate 90° clockwise; else counter-clockwise
        """
        if clockwise:
            return SimpleVector(self.y, -self.x)
        return SimpleVector(-self.y, self.x)

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def distance_to(self, other: "SimpleVector") -> float:
        return (other - self).length

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "SimpleVector":
        """Build a vector of given length pointing at angle (radians)."""
        return cls(radius * math.cos(angle), radius * math.sin(angle))


@dataclass(frozen=True)
class Point3:
    """A route point: planar position plus elevation.

    Attributes:
        x: Easting in the local planar projection (m)
        y: Northing in the local planar projection (m)
        z: Elevation (m)
    """

    x: float
    y: float
    z: float = 0.0

    @property
    def xy(self) -> SimpleVector:
        """2D projection, ignoring elevation."""
        return SimpleVector(self.x, self.y)

    def distance_to(self, other: "Point3") -> float:
        """3D straight-line distance."""
        return math.sqrt(
            (other.x - self.x) ** 2
            + (other.y - self.y) ** 2
            + (other.z - self.z) ** 2
        )

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    @classmethod
    def from_planar(cls, vector: SimpleVector, z: float = 0.0) -> "Point3":
        return cls(vector.x, vector.y, z)

    @classmethod
    def coerce(cls, value) -> "Point3":
        """Accept a Point3, anything with x/y/z attributes, or a tuple.

        Raises:
            TypeError: If the value cannot be read as a point
        """
        if isinstance(value, cls):
            return value
        if hasattr(value, "x") and hasattr(value, "y"):
            return cls(float(value.x), float(value.y), float(getattr(value, "z", 0.0)))
        if isinstance(value, (list, tuple)) and len(value) in (2, 3):
            z = float(value[2]) if len(value) == 3 else 0.0
            return cls(float(value[0]), float(value[1]), z)
        raise TypeError(f"Cannot interpret {value!r} as a route point")


__all__ = ["SimpleVector", "Point3"]
