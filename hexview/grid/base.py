"""
Cell Grid Protocol

The hierarchical hexagonal grid capability the viewer is built on.
"""

from typing import Any, Iterable, Protocol


class CellGrid(Protocol):
    """
    Hierarchical hexagonal grid with 16 resolutions (0-15)

    Cells are 64-bit integers with a canonical lowercase hex string encoding.
    The viewer only ever handles the string form.
    """

    def polygon_to_cells(self, polygon: Any, resolution: int) -> list[str]:
        """
        Cells intersecting a polygon

        Args:
            polygon: Object exposing ``__geo_interface__`` (shapely Polygon or
                MultiPolygon) or a GeoJSON geometry dict, coordinates in (lon, lat)
            resolution: Grid resolution (0-15)

        Returns:
            Cell identifiers, boundary-touching cells included
        """
        ...

    def is_valid_cell(self, cell: str) -> bool:
        """Return True if ``cell`` is a valid cell identifier string; never raises"""
        ...

    def cell_to_latlng(self, cell: str) -> tuple[float, float]:
        """Center of a cell as (lat, lon)"""
        ...

    def get_resolution(self, cell: str) -> int:
        """Resolution of a cell"""
        ...

    def compact_cells(self, cells: Iterable[str]) -> list[str]:
        """Replace every complete group of siblings with its parent, recursively"""
        ...

    def int_pair_to_cell(self, low: int, high: int) -> str:
        """
        Pack two 32-bit halves into a cell identifier string

        Args:
            low: Lower 32 bits
            high: Upper 32 bits

        Returns:
            Canonical string form (validity is not checked)
        """
        ...

    def canonical(self, cell: str) -> str:
        """Canonical (lowercase) string form of a valid cell"""
        ...

    def cell_area_m2(self, cell: str) -> float:
        """Area of a cell in square meters"""
        ...

    def average_cell_area_m2(self, resolution: int) -> float:
        """Average cell area at a resolution in square meters"""
        ...
