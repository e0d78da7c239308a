"""
Selection state

The set of user-highlighted cells and the properties used to recentre the map.
"""

import logging
from typing import Iterable, Iterator

import numpy as np

from hexview.core.types import Viewport
from hexview.grid.base import CellGrid
from hexview.grid.h3_grid import get_default_grid
from hexview.viewport.resolution import zoom_for_resolution

logger = logging.getLogger(__name__)


class SelectionState:
    """
    Insertion-ordered set of highlighted cells

    All mutations are idempotent. Cells are stored as given; callers pass
    canonical identifiers (the resolver and the grid produce them).

    Examples:
        >>> selection = SelectionState()
        >>> selection.add(["8a1fb46622dffff", "8a1fb46622affff"])
        >>> len(selection)
        2
        >>> selection.min_resolution()
        10
        >>> selection.remove(["8a1fb46622affff"])
        >>> selection.cells
        ['8a1fb46622dffff']
    """

    def __init__(self, cells: Iterable[str] | None = None, grid: CellGrid | None = None):
        self.grid = grid or get_default_grid()
        self._cells: dict[str, None] = dict.fromkeys(cells or ())

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __bool__(self) -> bool:
        return bool(self._cells)

    def __repr__(self) -> str:
        return f"SelectionState({len(self._cells)} cells)"

    @property
    def cells(self) -> list[str]:
        """Selected cells in insertion order"""
        return list(self._cells)

    def replace(self, cells: Iterable[str]) -> None:
        """Replace the whole selection"""
        self._cells = dict.fromkeys(cells)
        logger.debug("Selection replaced (%d cells)", len(self._cells))

    def add(self, cells: Iterable[str]) -> None:
        """Union ``cells`` into the selection"""
        for cell in cells:
            self._cells.setdefault(cell, None)

    def remove(self, cells: Iterable[str]) -> None:
        """Remove ``cells`` from the selection; absent cells are ignored"""
        for cell in cells:
            self._cells.pop(cell, None)

    def clear(self) -> None:
        self._cells.clear()

    def toggle(self, cell: str, extend: bool = False) -> None:
        """
        Click handling for a single cell

        A selected cell is deselected. An unselected cell is added to the
        selection when ``extend`` is set, otherwise it becomes the only
        selected cell.
        """
        if cell in self._cells:
            del self._cells[cell]
        elif extend:
            self._cells[cell] = None
        else:
            self._cells = {cell: None}

    def centroid(self) -> tuple[float, float] | None:
        """
        Arithmetic mean of the selected cells' centers

        Not a spherical mean; good enough to recentre the map.

        Returns:
            (lat, lon), or None when nothing is selected
        """
        if not self._cells:
            return None
        centers = np.array([self.grid.cell_to_latlng(cell) for cell in self._cells])
        lat, lon = centers.mean(axis=0)
        return (float(lat), float(lon))

    def min_resolution(self) -> int | None:
        """Coarsest resolution among selected cells, None when empty"""
        if not self._cells:
            return None
        return min(self.grid.get_resolution(cell) for cell in self._cells)

    def recenter(self, viewport: Viewport) -> Viewport | None:
        """
        Viewport centred on the selection at a zoom that shows its coarsest cells

        Args:
            viewport: Current viewport (size and orientation are kept)

        Returns:
            New Viewport, or None when nothing is selected
        """
        center = self.centroid()
        if center is None:
            return None
        resolution = self.min_resolution()
        return viewport.with_center(center[0], center[1], zoom=zoom_for_resolution(resolution))
