"""
Grid enumeration

Turn one or more bounding polygons into the deduplicated set of covering cells.
"""

import logging
from typing import Any, Iterable

import h3

from hexview.grid.base import CellGrid
from hexview.grid.h3_grid import get_default_grid

logger = logging.getLogger(__name__)


def cells_for_polygons(
    polygons: Iterable[Any],
    resolution: int,
    grid: CellGrid | None = None,
) -> list[str]:
    """
    Cells covering every polygon at a resolution

    Cells straddling a seam are produced by both neighbouring sub-polygons;
    the result keeps only the first occurrence.

    Args:
        polygons: Shapely polygons (or GeoJSON geometry dicts) in (lon, lat)
        resolution: Grid resolution (0-15)
        grid: CellGrid instance (default: shared H3Grid)

    Returns:
        Unique cell identifiers in first-seen order

    Examples:
        >>> from shapely.geometry import box
        >>> cells = cells_for_polygons([box(-10, -5, 0, 5), box(0, -5, 10, 5)], 2)
        >>> len(cells) == len(set(cells))
        True
    """
    grid = grid or get_default_grid()

    seen: dict[str, None] = {}
    for polygon in polygons:
        if _is_degenerate(polygon):
            continue
        try:
            cells = grid.polygon_to_cells(polygon, resolution)
        except (ValueError, h3.H3BaseException) as e:
            logger.debug("Grid rejected polygon at resolution %d: %s", resolution, e)
            continue
        for cell in cells:
            seen.setdefault(cell, None)

    return list(seen)


def _is_degenerate(polygon: Any) -> bool:
    """Zero-area polygons cover nothing"""
    area = getattr(polygon, "area", None)
    if area is not None:
        return area <= 0
    return False
