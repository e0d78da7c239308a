"""
hexview - H3 grid viewport engine and cell selection toolkit

Computes the exact set of grid cells visible in a map viewport (antimeridian
safe, rate limited) and resolves freeform text into canonical cell ids.

Quick Start:
    >>> import hexview as hv
    >>>
    >>> # Visible cells for a viewport
    >>> engine = hv.ViewportGridEngine()
    >>> update = engine.compute(hv.Viewport(37.7, -122.4, zoom=11, width=800, height=600))
    >>> update.resolution
    7
    >>>
    >>> # Pasted identifiers
    >>> sorted(hv.parse("[8a1fb46622dffff, 8a1fb46622affff]"))
    ['8a1fb46622affff', '8a1fb46622dffff']
"""

from hexview.cells import ResolveResult, parse, resolve_token, resolve_tokens
from hexview.config import HexViewConfig
from hexview.core import (
    ConfigurationError,
    GeoBounds,
    GeometryError,
    HexViewError,
    InvalidCellError,
    Viewport,
)
from hexview.grid import H3Grid, cells_for_polygons
from hexview.render import cell_tooltip, color_of, line_color_of
from hexview.selection import SelectionState, cover_polygon, max_acceptable_resolution
from hexview.session import HexSession
from hexview.viewport import (
    GridUpdate,
    ViewportGridEngine,
    resolution_for_zoom,
    split_longitude_range,
    visible_bounds,
    zoom_for_resolution,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GeoBounds",
    "GeometryError",
    "GridUpdate",
    "H3Grid",
    "HexSession",
    "HexViewConfig",
    "HexViewError",
    "InvalidCellError",
    "ResolveResult",
    "SelectionState",
    "Viewport",
    "ViewportGridEngine",
    "__version__",
    "cell_tooltip",
    "cells_for_polygons",
    "color_of",
    "cover_polygon",
    "line_color_of",
    "max_acceptable_resolution",
    "parse",
    "resolution_for_zoom",
    "resolve_token",
    "resolve_tokens",
    "split_longitude_range",
    "visible_bounds",
    "zoom_for_resolution",
]
