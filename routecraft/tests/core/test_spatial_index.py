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
Tests for the Quadtree Spatial Index
====================================

Bounding box helpers and quadtree queries, checked against brute force
over seeded random inputs.

Run with:
    pytest routecraft/tests/core/test_spatial_index.py -v
"""

import random

import pytest

from routecraft.core.exceptions import InvalidParameterError
from routecraft.core.plane_geometry import Axis2d, SimpleVector
from routecraft.core.spatial_index import BoundingBox, SpatialIndex


def random_box(rng, low=-100.0, high=1100.0, max_size=80.0):
    x = rng.uniform(low, high)
    y = rng.uniform(low, high)
    return BoundingBox(x, y, x + rng.uniform(0.0, max_size), y + rng.uniform(0.0, max_size))


# =============================================================================
# BoundingBox Tests
# =============================================================================

class TestBoundingBox:
    """Tests for axis-aligned boxes."""

    @pytest.mark.unit
    def test_inverted_box_rejected(self):
        with pytest.raises(InvalidParameterError):
            BoundingBox(10, 0, 0, 10)

    @pytest.mark.unit
    def test_from_points(self):
        box = BoundingBox.from_points([SimpleVector(3, -1), SimpleVector(-2, 4), SimpleVector(0, 0)])
        assert box == BoundingBox(-2, -1, 3, 4)
        assert box.width == 5
        assert box.height == 5

    @pytest.mark.unit
    def test_from_no_points(self):
        with pytest.raises(InvalidParameterError):
            BoundingBox.from_points([])

    @pytest.mark.unit
    def test_intersects_includes_edges(self):
        box = BoundingBox(0, 0, 10, 10)
        assert box.intersects(BoundingBox(10, 10, 20, 20))
        assert not box.intersects(BoundingBox(10.01, 0, 20, 10))

    @pytest.mark.unit
    def test_contains(self):
        box = BoundingBox(0, 0, 10, 10)
        assert box.contains(BoundingBox(0, 0, 5, 5))
        assert not box.contains(BoundingBox(5, 5, 11, 6))
        assert box.contains_point(SimpleVector(10, 0))

    @pytest.mark.unit
    def test_quadrants_cover_box(self):
        quadrants = BoundingBox(0, 0, 10, 20).quadrants()
        assert quadrants[0] == BoundingBox(0, 0, 5, 10)
        assert quadrants[3] == BoundingBox(5, 10, 10, 20)
        assert BoundingBox.union(quadrants[0], quadrants[3]) == BoundingBox(0, 0, 10, 20)

    @pytest.mark.unit
    def test_around_and_expanded(self):
        box = BoundingBox.around(SimpleVector(5, 5), 2)
        assert box == BoundingBox(3, 3, 7, 7)
        assert box.expanded(1) == BoundingBox(2, 2, 8, 8)
        assert box.center == SimpleVector(5, 5)

    @pytest.mark.unit
    def test_crossed_by(self):
        box = BoundingBox(0, 0, 10, 10)
        assert box.crossed_by(Axis2d(SimpleVector(-5, 5), SimpleVector(1, 0)))
        assert box.crossed_by(Axis2d(SimpleVector(0, 0), SimpleVector(1, 1)))
        assert not box.crossed_by(Axis2d(SimpleVector(0, 20), SimpleVector(1, 0)))


# =============================================================================
# SpatialIndex Tests
# =============================================================================

class TestSpatialIndex:
    """Tests for quadtree insertion and queries."""

    @pytest.mark.unit
    def test_docstring_example(self):
        index = SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=10)
        index.insert("a", BoundingBox(1, 1, 2, 2))
        index.insert("b", BoundingBox(40, 40, 60, 60))
        assert index.query(BoundingBox(0, 0, 5, 5)) == ["a"]
        assert sorted(index.query(BoundingBox(0, 0, 50, 50))) == ["a", "b"]
        assert len(index) == 2

    @pytest.mark.unit
    def test_empty_index(self):
        index = SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=10)
        assert index.query(BoundingBox(0, 0, 100, 100)) == []
        assert index.query_nearest_along_axis(Axis2d(SimpleVector(0, 0), SimpleVector(1, 0)), abs) is None

    @pytest.mark.unit
    def test_out_of_bounds_item_is_found(self):
        index = SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=10)
        index.insert("far", BoundingBox(500, 500, 510, 510))
        assert index.query(BoundingBox(505, 505, 506, 506)) == ["far"]
        assert index.query_containing(SimpleVector(501, 501)) == ["far"]

    @pytest.mark.unit
    def test_root_items_always_valued_along_axis(self):
        index = SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=10)
        index.insert("far", BoundingBox(500, 500, 510, 510))
        index.insert("inside", BoundingBox(1, 1, 2, 2))
        # Horizontal line above the root box, away from both items
        axis = Axis2d(SimpleVector(0, 300), SimpleVector(1, 0))

        assert index.query_nearest_along_axis(axis, lambda item: 0.0) == "far"

    @pytest.mark.unit
    def test_invalid_min_cell_size(self):
        with pytest.raises(InvalidParameterError):
            SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=0)

    @pytest.mark.unit
    def test_from_entries_covers_everything(self):
        entries = [(i, BoundingBox(i * 10, 0, i * 10 + 5, 5)) for i in range(10)]
        index = SpatialIndex.from_entries(entries, min_cell_size=1)
        assert index.box == BoundingBox(0, 0, 95, 5)
        assert sorted(entry.content for entry in index.items()) == list(range(10))

    @pytest.mark.unit
    def test_from_no_entries(self):
        index = SpatialIndex.from_entries([], min_cell_size=1)
        assert len(index) == 0
        assert list(index.items()) == []

    @pytest.mark.unit
    def test_nearest_along_axis(self):
        entries = [(x, BoundingBox.around(SimpleVector(x, 0), 1)) for x in range(0, 100, 10)]
        index = SpatialIndex.from_entries(entries, min_cell_size=2)
        axis = Axis2d(SimpleVector(42, -50), SimpleVector(0, 1))

        assert index.query_nearest_along_axis(axis, lambda x: abs(x - 42)) == 40

    @pytest.mark.unit
    def test_query_matches_brute_force(self):
        rng = random.Random(20240611)
        index = SpatialIndex(BoundingBox(0, 0, 1000, 1000), min_cell_size=10)
        boxes = [random_box(rng) for _ in range(400)]
        for i, box in enumerate(boxes):
            index.insert(i, box)

        for _ in range(200):
            query = random_box(rng, max_size=300.0)
            expected = [i for i, box in enumerate(boxes) if box.intersects(query)]
            assert sorted(index.query(query)) == expected

    @pytest.mark.unit
    def test_query_containing_matches_brute_force(self):
        rng = random.Random(99)
        index = SpatialIndex(BoundingBox(0, 0, 1000, 1000), min_cell_size=10)
        boxes = [random_box(rng, max_size=200.0) for _ in range(300)]
        for i, box in enumerate(boxes):
            index.insert(i, box)

        for _ in range(200):
            point = SimpleVector(rng.uniform(-100, 1100), rng.uniform(-100, 1100))
            expected = [i for i, box in enumerate(boxes) if box.contains_point(point)]
            assert sorted(index.query_containing(point)) == expected
