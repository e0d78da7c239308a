"""
Render helpers

Pure functions the map renderer calls per cell. The core never paints;
it only answers "what color" and "what tooltip" for a cell.
"""

from typing import Container

from hexview.config import Color, HexViewConfig
from hexview.grid.base import CellGrid
from hexview.grid.h3_grid import get_default_grid

# Areas above this many m^2 are shown in km^2
KM2_THRESHOLD_M2 = 100_000


def color_of(cell: str, selection: Container[str], config: HexViewConfig | None = None) -> Color:
    """
    Fill color for a cell, keyed by selection membership

    Examples:
        >>> color_of("8a1fb46622dffff", {"8a1fb46622dffff"})
        (255, 100, 100, 150)
        >>> color_of("8a1fb46622dffff", set())
        (0, 0, 0, 1)
    """
    config = config or HexViewConfig()
    if cell in selection:
        return config.selected_color
    return config.background_color


def line_color_of(cell: str, config: HexViewConfig | None = None) -> Color:
    """Outline color for a cell; every cell shares the configured outline"""
    config = config or HexViewConfig()
    return config.line_color


def format_area(area_m2: float) -> str:
    """
    Human readable area with two significant digits

    Examples:
        >>> format_area(1234.0)
        '1,200 m^2'
        >>> format_area(5_161_293.0)
        '5.2 km^2'
    """
    if area_m2 > KM2_THRESHOLD_M2:
        return f"{_significant(area_m2 / 1_000_000)} km^2"
    return f"{_significant(area_m2)} m^2"


def _significant(value: float, digits: int = 2) -> str:
    rounded = float(f"{value:.{digits}g}")
    if rounded.is_integer():
        return f"{int(rounded):,}"
    return f"{rounded:,}"


def cell_tooltip(cell: str | None, grid: CellGrid | None = None) -> str | None:
    """
    Hover tooltip text for a cell

    Returns:
        Multi-line text with the cell id, resolution and area, or None when
        nothing is hovered
    """
    if not cell:
        return None
    grid = grid or get_default_grid()
    return "\n".join(
        [
            f"Hex: {cell}",
            f"Resolution: {grid.get_resolution(cell)}",
            f"Area: {format_area(grid.cell_area_m2(cell))}",
        ]
    )
