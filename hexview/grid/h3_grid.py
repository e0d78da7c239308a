"""
H3Grid Implementation

CellGrid backed by the h3 library (h3-py v4).
"""

import logging
from typing import Any, Iterable

import h3

from hexview.core.exceptions import InvalidCellError

logger = logging.getLogger(__name__)

#: Number of resolutions in the H3 scheme (0-15)
RESOLUTION_COUNT = 16
MAX_RESOLUTION = RESOLUTION_COUNT - 1

#: Containment modes accepted by h3shape_to_cells_experimental
CONTAINMENT_MODES = ("center", "full", "overlap", "bbox_overlap")

_UINT32_MASK = 0xFFFFFFFF


class H3Grid:
    """
    H3 hexagonal grid

    Polygons are filled with the ``overlap`` containment mode by default, so a
    cell is returned when it intersects the polygon rather than only when its
    center falls inside.

    Examples:
        >>> grid = H3Grid()
        >>> grid.is_valid_cell("8a1fb46622dffff")
        True
        >>> grid.get_resolution("8a1fb46622dffff")
        10
        >>> grid.int_pair_to_cell(0x622DFFFF, 0x08A1FB46)
        '8a1fb46622dffff'
    """

    def __init__(self, containment: str = "overlap"):
        """
        Initialize grid

        Args:
            containment: Polygon containment mode (center, full, overlap, bbox_overlap)
        """
        if containment not in CONTAINMENT_MODES:
            raise ValueError(f"Unknown containment mode: {containment}")
        self.containment = containment

    def polygon_to_cells(self, polygon: Any, resolution: int) -> list[str]:
        shape = h3.geo_to_h3shape(polygon)
        return list(h3.h3shape_to_cells_experimental(shape, resolution, contain=self.containment))

    def is_valid_cell(self, cell: str) -> bool:
        if not isinstance(cell, str) or not cell:
            return False
        try:
            return bool(h3.is_valid_cell(cell))
        except (ValueError, TypeError, OverflowError, h3.H3BaseException):
            return False

    def cell_to_latlng(self, cell: str) -> tuple[float, float]:
        lat, lng = h3.cell_to_latlng(cell)
        return (lat, lng)

    def get_resolution(self, cell: str) -> int:
        return int(h3.get_resolution(cell))

    def compact_cells(self, cells: Iterable[str]) -> list[str]:
        return list(h3.compact_cells(list(cells)))

    def int_pair_to_cell(self, low: int, high: int) -> str:
        value = ((high & _UINT32_MASK) << 32) | (low & _UINT32_MASK)
        return h3.int_to_str(value)

    def canonical(self, cell: str) -> str:
        return h3.int_to_str(h3.str_to_int(cell))

    def cell_area_m2(self, cell: str) -> float:
        """Exact area of a cell in square meters"""
        return float(h3.cell_area(cell, unit="m^2"))

    def average_cell_area_m2(self, resolution: int) -> float:
        """Average hexagon area at a resolution in square meters"""
        return float(h3.average_hexagon_area(resolution, unit="m^2"))

    def require_cell(self, cell: str) -> str:
        """
        Strict lookup used by outer surfaces

        Args:
            cell: Candidate cell identifier

        Returns:
            Canonical cell string

        Raises:
            InvalidCellError: If ``cell`` is not a valid cell
        """
        candidate = cell.strip() if isinstance(cell, str) else cell
        if not self.is_valid_cell(candidate):
            raise InvalidCellError(f"Invalid cell identifier: {cell!r}")
        return self.canonical(candidate)


_default_grid: H3Grid | None = None


def get_default_grid() -> H3Grid:
    """Shared H3Grid used when callers do not pass one."""
    global _default_grid
    if _default_grid is None:
        _default_grid = H3Grid()
        logger.debug("Created default H3 grid (containment=%s)", _default_grid.containment)
    return _default_grid
