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
RouteCraft
Version 0.1.0

Geometry core for editing cycling and hiking routes: enrichment of GPS
points, tangent-arc smoothing, corner rounding, self-intersection
detection and point picking.
"""

from . import core

__version__ = "0.1.0"
__author__ = "Michael Yoder"

__all__ = ["core"]
