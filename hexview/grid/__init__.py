"""
hexview Grid Module

Hexagonal grid capability and polygon enumeration.
"""

from hexview.grid.base import CellGrid
from hexview.grid.enumerator import cells_for_polygons
from hexview.grid.h3_grid import MAX_RESOLUTION, H3Grid, get_default_grid

__all__ = [
    "CellGrid",
    "H3Grid",
    "MAX_RESOLUTION",
    "cells_for_polygons",
    "get_default_grid",
]
