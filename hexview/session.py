"""
Viewer session

The single context object that owns the viewport engine, the selection and the
cover settings, and translates renderer/UI events into core operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from hexview.cells.resolver import resolve_tokens
from hexview.config import Color, HexViewConfig
from hexview.core.types import Viewport
from hexview.grid.base import CellGrid
from hexview.grid.h3_grid import MAX_RESOLUTION, get_default_grid
from hexview.render import color_of, line_color_of
from hexview.selection.cover import GeometryLike, cover_polygon, max_acceptable_resolution
from hexview.selection.state import SelectionState
from hexview.viewport.engine import GridObserver, GridUpdate, ViewportGridEngine
from hexview.viewport.resolution import get_policy
from hexview.viewport.throttle import Scheduler

logger = logging.getLogger(__name__)


@dataclass
class TextSubmission:
    """
    Result of a selection-text event

    Attributes:
        cells: Ordered unique canonical cells now selected
        rejected: Tokens that resolved to nothing
        viewport: Recentred viewport, or None when nothing resolved
    """

    cells: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    viewport: Viewport | None = None


@dataclass
class CoverSettings:
    """Polygon cover switches from the drawing panel"""

    enabled: bool = False
    resolution: int = 0
    compact: bool = False
    max_resolution: int = MAX_RESOLUTION


class HexSession:
    """
    Orchestrates one viewer session

    Examples:
        >>> session = HexSession()
        >>> vp = Viewport(37.7, -122.4, zoom=11, width=800, height=600)
        >>> result = session.on_text_submitted(["8a1fb46622dffff"], vp)
        >>> result.cells
        ['8a1fb46622dffff']
        >>> result.viewport.zoom
        14
    """

    def __init__(
        self,
        config: HexViewConfig | None = None,
        grid: CellGrid | None = None,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.config = config or HexViewConfig()
        self.grid = grid or get_default_grid()
        self.selection = SelectionState(grid=self.grid)
        self.cover = CoverSettings(resolution=self.config.default_cover_resolution)
        self.viewport: Viewport | None = None
        self.engine = ViewportGridEngine(
            grid=self.grid,
            policy=get_policy(self.config.resolution_policy),
            throttle_wait=self.config.throttle_wait_s,
            scheduler=scheduler,
            clock=clock,
        )

    # -------------------------------------------------------------------------
    # Viewport
    # -------------------------------------------------------------------------

    def on_viewport_change(self, viewport: Viewport) -> None:
        """Renderer reported a new viewport"""
        self.viewport = viewport
        self.engine.on_viewport_change(viewport)

    def subscribe(self, observer: GridObserver) -> Callable[[], None]:
        """Observe background grid updates"""
        return self.engine.subscribe(observer)

    @property
    def background(self) -> GridUpdate | None:
        """Most recently published background grid"""
        return self.engine.latest

    def set_resolution_frozen(self, frozen: bool) -> None:
        """
        Freeze the background resolution at its current value, or release it
        """
        if not frozen:
            self.engine.freeze_resolution(None)
            return
        if self.engine.latest is not None:
            resolution = self.engine.latest.resolution
        elif self.viewport is not None:
            resolution = self.engine.resolution_for(self.viewport)
        else:
            resolution = 0
        self.engine.freeze_resolution(resolution)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def on_text_submitted(self, tokens: Iterable[Any], viewport: Viewport | None = None) -> TextSubmission:
        """
        Replace the selection with the cells typed or pasted by the user

        Args:
            tokens: Raw display tokens in order
            viewport: Viewport to recentre (default: last reported viewport)

        Returns:
            TextSubmission with the selected cells and the recentred viewport
        """
        result = resolve_tokens(tokens, grid=self.grid)
        self.selection.replace(result.cells)
        logger.info(
            "Selected %d cell(s) from text, %d token(s) rejected",
            len(result.cells),
            len(result.rejected),
        )

        current = viewport or self.viewport
        recentred = None
        if current is not None and result.cells:
            recentred = self.selection.recenter(current)
            self.viewport = recentred

        return TextSubmission(cells=result.cells, rejected=result.rejected, viewport=recentred)

    def on_cell_clicked(self, cell: str | None, extend: bool = False) -> list[str]:
        """
        Toggle a clicked cell

        Clicks are ignored while cover mode drives the selection or when
        nothing was picked.

        Returns:
            Selected cells after the click
        """
        if cell and not self.cover.enabled:
            self.selection.toggle(cell, extend=extend)
        return self.selection.cells

    def clear_selection(self) -> None:
        self.selection.clear()

    def color_of(self, cell: str) -> Color:
        """Fill color for a background cell"""
        return color_of(cell, self.selection, self.config)

    def line_color_of(self, cell: str) -> Color:
        """Outline color for a background cell"""
        return line_color_of(cell, self.config)

    # -------------------------------------------------------------------------
    # Polygon cover
    # -------------------------------------------------------------------------

    def set_cover(
        self,
        enabled: bool | None = None,
        resolution: int | None = None,
        compact: bool | None = None,
    ) -> CoverSettings:
        """Update cover switches; enabling or disabling cover clears the selection"""
        if enabled is not None and enabled != self.cover.enabled:
            self.cover.enabled = enabled
            self.selection.clear()
        if resolution is not None:
            self.cover.resolution = max(0, min(MAX_RESOLUTION, resolution))
        if compact is not None:
            self.cover.compact = compact
        return self.cover

    def on_polygon_drawn(self, geometry: GeometryLike) -> list[str]:
        """
        A polygon was drawn

        The cover resolution is capped by the finest resolution that keeps the
        expected cell count under ``config.max_cover_cells``. When cover mode
        is on, the covering replaces the selection.

        Returns:
            The covering cells (empty when cover mode is off)

        Raises:
            GeometryError: If the drawing is not a polygon
        """
        self.cover.max_resolution = max_acceptable_resolution(
            geometry, max_cells=self.config.max_cover_cells, grid=self.grid
        )
        self.cover.resolution = min(self.cover.resolution, self.cover.max_resolution)

        if not self.cover.enabled:
            return []

        cells = cover_polygon(
            geometry,
            self.cover.resolution,
            compact=self.cover.compact,
            grid=self.grid,
        )
        self.selection.replace(cells)
        logger.info(
            "Covered polygon with %d cell(s) at resolution %d (compact=%s)",
            len(cells),
            self.cover.resolution,
            self.cover.compact,
        )
        return cells
