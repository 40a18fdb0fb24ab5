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
Quadtree Spatial Index
======================

Bounded quadtree over 2D bounding boxes.

Each node covers a box and may own up to four children, one per
quadrant, created only when an item fits entirely inside that quadrant
and the node is still more than twice the minimum cell size across.
An item straddling a quadrant boundary stays in the node that contains
it fully; items are never split or duplicated. Items lying outside the
root box are kept on the root, so nothing inserted is ever lost.

The tree is not rebalanced. Heavily clustered items degrade towards a
flat list at the minimum cell size, which route data (roughly even
point spacing) does not provoke in practice.

Indexes are cheap to build and are rebuilt from the current route for
every query session; none is kept across edits.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .exceptions import InvalidParameterError, require_positive
from .plane_geometry.lines import Axis2d
from .plane_geometry.vector import SimpleVector


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box; edges count as inside."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise InvalidParameterError(f"Inverted bounding box: {self}")

    @classmethod
    def from_points(cls, points: Iterable[SimpleVector]) -> "BoundingBox":
        """Smallest box containing all points.

        Raises:
            InvalidParameterError: If points is empty
        """
        xs = []
        ys = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        if not xs:
            raise InvalidParameterError("Cannot bound an empty set of points")
        return cls(min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def around(cls, point: SimpleVector, half_size: float) -> "BoundingBox":
        """Square centred on point."""
        return cls(point.x - half_size, point.y - half_size,
                   point.x + half_size, point.y + half_size)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> SimpleVector:
        return SimpleVector((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def expanded(self, margin: float) -> "BoundingBox":
        return BoundingBox(self.min_x - margin, self.min_y - margin,
                           self.max_x + margin, self.max_y + margin)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(min(self.min_x, other.min_x), min(self.min_y, other.min_y),
                           max(self.max_x, other.max_x), max(self.max_y, other.max_y))

    def intersects(self, other: "BoundingBox") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y)

    def contains(self, other: "BoundingBox") -> bool:
        """True if other lies entirely inside this box."""
        return (self.min_x <= other.min_x and other.max_x <= self.max_x
                and self.min_y <= other.min_y and other.max_y <= self.max_y)

    def contains_point(self, point: SimpleVector) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def quadrants(self) -> Tuple["BoundingBox", "BoundingBox", "BoundingBox", "BoundingBox"]:
        """South-west, south-east, north-west, north-east quarters."""
        mid = self.center
        return (
            BoundingBox(self.min_x, self.min_y, mid.x, mid.y),
            BoundingBox(mid.x, self.min_y, self.max_x, mid.y),
            BoundingBox(self.min_x, mid.y, mid.x, self.max_y),
            BoundingBox(mid.x, mid.y, self.max_x, self.max_y),
        )

    def edges(self) -> List[Tuple[SimpleVector, SimpleVector]]:
        sw = SimpleVector(self.min_x, self.min_y)
        se = SimpleVector(self.max_x, self.min_y)
        ne = SimpleVector(self.max_x, self.max_y)
        nw = SimpleVector(self.min_x, self.max_y)
        return [(sw, se), (se, ne), (ne, nw), (nw, sw)]

    def crossed_by(self, axis: Axis2d) -> bool:
        """True if the axis line meets any of the four edges."""
        return any(axis.crosses_segment(start, end) for start, end in self.edges())


@dataclass(frozen=True)
class SpatialEntry:
    """An indexed item and the box it occupies."""

    content: Any
    box: BoundingBox


class _QuadNode:
    """One quadtree cell. Absent children are None."""

    __slots__ = ("box", "entries", "children")

    def __init__(self, box: BoundingBox):
        self.box = box
        self.entries: List[SpatialEntry] = []
        self.children: List[Optional["_QuadNode"]] = [None, None, None, None]

    def child_nodes(self) -> Iterator["_QuadNode"]:
        return (child for child in self.children if child is not None)


class SpatialIndex:
    """Quadtree of boxed items.

    Attributes:
        min_cell_size: Nodes are split only while both sides exceed twice this

    Example:
        >>> index = SpatialIndex(BoundingBox(0, 0, 100, 100), min_cell_size=10)
        >>> index.insert("a", BoundingBox(1, 1, 2, 2))
        >>> index.insert("b", BoundingBox(40, 40, 60, 60))
        >>> index.query(BoundingBox(0, 0, 5, 5))
        ['a']
    """

    def __init__(self, box: BoundingBox, min_cell_size: float):
        """Create an empty index.

        Args:
            box: Region the tree subdivides
            min_cell_size: Smallest splittable cell (> 0)

        Raises:
            InvalidParameterError: If min_cell_size <= 0
        """
        self.min_cell_size = require_positive("min_cell_size", min_cell_size)
        self._root = _QuadNode(box)
        self._count = 0

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[Any, BoundingBox]],
        min_cell_size: float
    ) -> "SpatialIndex":
        """Build an index whose root box covers every entry.

        Args:
            entries: (content, box) pairs
            min_cell_size: Smallest splittable cell (> 0)
        """
        entries = list(entries)
        if entries:
            root_box = entries[0][1]
            for _, box in entries[1:]:
                root_box = root_box.union(box)
        else:
            root_box = BoundingBox(0.0, 0.0, 0.0, 0.0)

        index = cls(root_box, min_cell_size)
        for content, box in entries:
            index.insert(content, box)
        return index

    @property
    def box(self) -> BoundingBox:
        return self._root.box

    def __len__(self) -> int:
        return self._count

    def insert(self, content: Any, box: BoundingBox) -> None:
        """Add an item, stored at the deepest node containing its box."""
        node = self._root

        while self._can_split(node.box):
            for i, quadrant in enumerate(node.box.quadrants()):
                if quadrant.contains(box):
                    if node.children[i] is None:
                        node.children[i] = _QuadNode(quadrant)
                    node = node.children[i]
                    break
            else:
                break

        node.entries.append(SpatialEntry(content, box))
        self._count += 1

    def _can_split(self, box: BoundingBox) -> bool:
        limit = 2 * self.min_cell_size
        return box.width > limit and box.height > limit

    # =========================================================================
    # Queries
    # =========================================================================

    def query(self, box: BoundingBox) -> List[Any]:
        """Every item whose box intersects box."""
        return self._collect(
            lambda node_box: node_box.intersects(box),
            lambda entry: entry.box.intersects(box),
        )

    def query_containing(self, point: SimpleVector) -> List[Any]:
        """Every item whose box contains point."""
        return self._collect(
            lambda node_box: node_box.contains_point(point),
            lambda entry: entry.box.contains_point(point),
        )

    def query_nearest_along_axis(
        self,
        axis: Axis2d,
        valuation: Callable[[Any], float]
    ) -> Optional[Any]:
        """Item with the lowest valuation among nodes the axis crosses.

        Only items in cells the axis line passes through are valued, so
        an item is a candidate when its own box is crossed by the axis.
        Items held on the root node, including any outside the root box,
        are always valued.

        Args:
            axis: Line to search along
            valuation: Score for an item's content; lower is better

        Returns:
            Content of the best item, or None if no candidate was found
        """
        best = None
        best_value = float("inf")

        for node in self._walk(lambda node_box: node_box.crossed_by(axis)):
            for entry in node.entries:
                value = valuation(entry.content)
                if value < best_value:
                    best_value = value
                    best = entry.content

        return best

    def items(self) -> Iterator[SpatialEntry]:
        """All entries, in no particular order."""
        for node in self._walk(lambda node_box: True):
            yield from node.entries

    def _collect(self, visit_node, keep_entry) -> List[Any]:
        found = []
        for node in self._walk(visit_node):
            found.extend(entry.content for entry in node.entries if keep_entry(entry))
        return found

    def _walk(self, visit_node) -> Iterator[_QuadNode]:
        # The root is always visited: it holds any out-of-bounds items.
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in node.child_nodes() if visit_node(child.box))


__all__ = ["BoundingBox", "SpatialEntry", "SpatialIndex"]
