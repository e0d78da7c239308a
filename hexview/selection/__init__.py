"""
hexview Selection Module

Highlighted cell state and polygon covering.
"""

from hexview.selection.cover import (
    cover_polygon,
    max_acceptable_resolution,
    parse_polygon,
    polygon_area_m2,
)
from hexview.selection.state import SelectionState

__all__ = [
    "SelectionState",
    "cover_polygon",
    "max_acceptable_resolution",
    "parse_polygon",
    "polygon_area_m2",
]
