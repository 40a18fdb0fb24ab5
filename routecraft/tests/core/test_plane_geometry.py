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
Tests for Plane Geometry
========================

Vector arithmetic, line algebra and segment queries. Pure Python, no
external dependencies.

Run with:
    pytest routecraft/tests/core/test_plane_geometry.py -v
"""

import math

import pytest

from routecraft.core.plane_geometry import (
    Axis2d,
    Point3,
    Segment,
    SimpleVector,
    bearing,
    intersect,
    is_after,
    is_before,
    line_from_two_points,
    normalize_angle,
    parameter_along,
    perpendicular_through,
    point_along,
    segment_intersection,
)


# =============================================================================
# SimpleVector Tests
# =============================================================================

class TestSimpleVector:
    """Tests for SimpleVector utility class."""

    @pytest.mark.unit
    def test_create_from_tuple(self):
        v = SimpleVector((10.0, 20.0))
        assert v.x == 10.0
        assert v.y == 20.0

    @pytest.mark.unit
    def test_arithmetic(self):
        v1 = SimpleVector(10.0, 20.0)
        v2 = SimpleVector(5.0, 10.0)
        assert v1 + v2 == SimpleVector(15.0, 30.0)
        assert v1 - v2 == SimpleVector(5.0, 10.0)
        assert v1 * 2 == SimpleVector(20.0, 40.0)
        assert 2 * v1 == SimpleVector(20.0, 40.0)
        assert v1 / 2 == SimpleVector(5.0, 10.0)
        assert -v1 == SimpleVector(-10.0, -20.0)

    @pytest.mark.unit
    def test_length_and_normalized(self):
        v = SimpleVector(3.0, 4.0)
        assert v.length == 5.0
        assert v.length_squared == 25.0
        n = v.normalized()
        assert abs(n.x - 0.6) < 1e-9
        assert abs(n.y - 0.8) < 1e-9

    @pytest.mark.unit
    def test_normalized_zero_vector(self):
        """Zero vector stays zero instead of dividing by zero."""
        assert SimpleVector(0, 0).normalized() == SimpleVector(0, 0)

    @pytest.mark.unit
    def test_dot_and_cross(self):
        east = SimpleVector(1, 0)
        north = SimpleVector(0, 1)
        assert east.dot(north) == 0.0
        assert east.cross(north) == 1.0
        assert north.cross(east) == -1.0

    @pytest.mark.unit
    def test_perpendicular(self):
        east = SimpleVector(1, 0)
        assert east.perpendicular() == SimpleVector(0, 1)
        assert east.perpendicular(clockwise=True) == SimpleVector(0, -1)

    @pytest.mark.unit
    def test_rotate(self):
        v = SimpleVector(1, 0).rotate(math.pi / 2)
        assert v == SimpleVector(0, 1)

    @pytest.mark.unit
    def test_from_polar(self):
        v = SimpleVector.from_polar(2.0, math.pi)
        assert v == SimpleVector(-2.0, 0.0)

    @pytest.mark.unit
    def test_equality_tolerance_and_hash(self):
        assert SimpleVector(1.0, 2.0) == SimpleVector(1.0 + 1e-12, 2.0)
        assert SimpleVector(1.0, 2.0) != SimpleVector(1.1, 2.0)
        assert len({SimpleVector(1.0, 2.0), SimpleVector(1.0, 2.0)}) == 1


# =============================================================================
# Point3 Tests
# =============================================================================

class TestPoint3:
    """Tests for the route point type."""

    @pytest.mark.unit
    def test_distance_is_3d(self):
        assert Point3(0, 0, 0).distance_to(Point3(3, 0, 4)) == 5.0

    @pytest.mark.unit
    def test_xy_drops_elevation(self):
        assert Point3(1, 2, 300).xy == SimpleVector(1, 2)

    @pytest.mark.unit
    def test_coerce_tuples(self):
        assert Point3.coerce((1, 2, 3)) == Point3(1.0, 2.0, 3.0)
        assert Point3.coerce((1, 2)) == Point3(1.0, 2.0, 0.0)

    @pytest.mark.unit
    def test_coerce_object_with_attributes(self):
        assert Point3.coerce(SimpleVector(4, 5)) == Point3(4.0, 5.0, 0.0)

    @pytest.mark.unit
    def test_coerce_rejects_garbage(self):
        with pytest.raises(TypeError):
            Point3.coerce("not a point")

    @pytest.mark.unit
    def test_immutable(self):
        p = Point3(1, 2, 3)
        with pytest.raises(AttributeError):
            p.x = 10


# =============================================================================
# Line Tests
# =============================================================================

class TestLines:
    """Tests for general-form line algebra."""

    @pytest.mark.unit
    def test_line_through_points_contains_them(self):
        p1 = SimpleVector(1, 2)
        p2 = SimpleVector(7, -3)
        line = line_from_two_points(p1, p2)
        assert abs(line.value_at(p1)) < 1e-9
        assert abs(line.value_at(p2)) < 1e-9

    @pytest.mark.unit
    def test_intersect_horizontal_and_vertical(self):
        horizontal = line_from_two_points(SimpleVector(0, 0), SimpleVector(10, 0))
        vertical = line_from_two_points(SimpleVector(20, 5), SimpleVector(20, 20))
        assert intersect(horizontal, vertical) == SimpleVector(20, 0)

    @pytest.mark.unit
    def test_intersect_parallel_is_none(self):
        a = line_from_two_points(SimpleVector(0, 0), SimpleVector(10, 0))
        b = line_from_two_points(SimpleVector(10, 10), SimpleVector(0, 10))
        assert intersect(a, b) is None

    @pytest.mark.unit
    def test_intersect_degenerate_line_is_none(self):
        a = line_from_two_points(SimpleVector(0, 0), SimpleVector(10, 0))
        b = line_from_two_points(SimpleVector(3, 3), SimpleVector(3, 3))
        assert intersect(a, b) is None

    @pytest.mark.unit
    def test_perpendicular_through(self):
        line = line_from_two_points(SimpleVector(0, 0), SimpleVector(10, 10))
        point = SimpleVector(0, 10)
        perpendicular = perpendicular_through(line, point)

        assert abs(perpendicular.value_at(point)) < 1e-9
        assert intersect(line, perpendicular) == SimpleVector(5, 5)

    @pytest.mark.unit
    def test_bearing(self):
        origin = SimpleVector(0, 0)
        assert bearing(origin, SimpleVector(1, 0)) == 0.0
        assert abs(bearing(origin, SimpleVector(0, 1)) - math.pi / 2) < 1e-12

    @pytest.mark.unit
    @pytest.mark.parametrize("angle,expected", [
        (0.0, 0.0),
        (3 * math.pi / 2, -math.pi / 2),
        (-3 * math.pi / 2, math.pi / 2),
        (5 * math.pi, math.pi),
    ])
    def test_normalize_angle(self, angle, expected):
        assert abs(normalize_angle(angle) - expected) < 1e-9


# =============================================================================
# Segment Tests
# =============================================================================

class TestSegment:
    """Tests for directed segments."""

    @pytest.fixture
    def road(self):
        return Segment(SimpleVector(0, 0), SimpleVector(10, 0))

    @pytest.mark.unit
    def test_properties(self, road):
        assert road.length == 10.0
        assert road.direction == SimpleVector(1, 0)
        assert road.midpoint == SimpleVector(5, 0)
        assert road.reversed().start_at == SimpleVector(10, 0)

    @pytest.mark.unit
    def test_point_along_is_not_clamped(self, road):
        assert point_along(road, 4.0) == SimpleVector(4, 0)
        assert point_along(road, 25.0) == SimpleVector(25, 0)

    @pytest.mark.unit
    def test_parameter_along(self, road):
        assert parameter_along(road, SimpleVector(5, 3)) == 0.5
        assert parameter_along(Segment(SimpleVector(1, 1), SimpleVector(1, 1)), SimpleVector(0, 0)) is None

    @pytest.mark.unit
    def test_before_and_after(self, road):
        assert is_before(road, SimpleVector(-1, 0))
        assert not is_before(road, SimpleVector(0, 0))
        assert is_after(road, SimpleVector(11, 0))
        assert not is_after(road, SimpleVector(10, 0))
        assert not is_before(road, SimpleVector(5, 0))
        assert not is_after(road, SimpleVector(5, 0))


class TestSegmentIntersection:
    """Tests for exact segment crossings."""

    @pytest.mark.unit
    def test_crossing(self):
        a = Segment(SimpleVector(0, 0), SimpleVector(10, 10))
        b = Segment(SimpleVector(10, 0), SimpleVector(0, 10))
        assert segment_intersection(a, b) == SimpleVector(5, 5)

    @pytest.mark.unit
    def test_touching_endpoint_counts(self):
        a = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
        b = Segment(SimpleVector(10, 0), SimpleVector(10, 10))
        assert segment_intersection(a, b) == SimpleVector(10, 0)

    @pytest.mark.unit
    def test_lines_cross_outside_segments(self):
        a = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
        b = Segment(SimpleVector(20, 5), SimpleVector(20, 20))
        assert segment_intersection(a, b) is None

    @pytest.mark.unit
    def test_parallel_and_collinear(self):
        a = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
        assert segment_intersection(a, Segment(SimpleVector(0, 1), SimpleVector(10, 1))) is None
        assert segment_intersection(a, Segment(SimpleVector(5, 0), SimpleVector(15, 0))) is None

    @pytest.mark.unit
    def test_zero_length_segment(self):
        a = Segment(SimpleVector(0, 0), SimpleVector(10, 0))
        assert segment_intersection(a, Segment(SimpleVector(5, 0), SimpleVector(5, 0))) is None


class TestAxis2d:
    """Tests for pick axes."""

    @pytest.mark.unit
    def test_distance_to(self):
        axis = Axis2d(SimpleVector(0, 0), SimpleVector(2, 0))
        assert axis.distance_to(SimpleVector(5, -3)) == 3.0

    @pytest.mark.unit
    def test_crosses_segment(self):
        axis = Axis2d(SimpleVector(0, 0), SimpleVector(1, 1))
        assert axis.crosses_segment(SimpleVector(0, 10), SimpleVector(10, 0))
        assert not axis.crosses_segment(SimpleVector(0, 10), SimpleVector(1, 20))
