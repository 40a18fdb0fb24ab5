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
Route Editing Default Values
=============================

Defaults for the editing parameters. Every function that uses one of
these takes it as an explicit keyword argument; the values here are
only what callers get when they do not pass one.

Lengths are in the unit of the local planar projection (metres).
"""

import math
import sys

# Cost metric given to the first and last point of every sequence.
COST_SENTINEL = sys.float_info.max

# Turns sharper than this are treated as GPS noise and removed.
REVERSAL_THRESHOLD = 0.9 * math.pi

# Bend smoothing: target distance between synthesized arc points (m)
DEFAULT_SPACING = 5.0

# Corner rounding: most that may be taken from either side of a vertex (m)
CORNER_STEAL_CAP = 4.0
DEFAULT_CORNER_SEGMENTS = 4

# Quadtree cells are not split below this size (m)
DEFAULT_MIN_CELL_SIZE = 10.0

# Crossings this close to a shared vertex are not reported (m)
INTERSECTION_TOLERANCE = 0.1

# Simplify: share of candidate points removed per pass
SIMPLIFY_FRACTION = 0.2

# Click / pick tolerance for nearest-point queries (m)
DEFAULT_PICK_TOLERANCE = 5.0

# Numerical guards
PARALLEL_TOLERANCE = 1e-10   # sine of the angle between two lines
COLLINEAR_TOLERANCE = 1e-9   # relative triangle area

__all__ = [
    "COST_SENTINEL",
    "REVERSAL_THRESHOLD",
    "DEFAULT_SPACING",
    "CORNER_STEAL_CAP",
    "DEFAULT_CORNER_SEGMENTS",
    "DEFAULT_MIN_CELL_SIZE",
    "INTERSECTION_TOLERANCE",
    "DEFAULT_PICK_TOLERANCE",
    "SIMPLIFY_FRACTION",
    "PARALLEL_TOLERANCE",
    "COLLINEAR_TOLERANCE",
]
