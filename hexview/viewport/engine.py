"""
Viewport grid engine

Answers "which cells are visible now, at what resolution" for every viewport
change, rate limited so a drag gesture does not recompute on every frame.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable

from hexview.core.types import GeoBounds, Viewport
from hexview.grid.base import CellGrid
from hexview.grid.enumerator import cells_for_polygons
from hexview.grid.h3_grid import MAX_RESOLUTION, get_default_grid
from hexview.viewport.antimeridian import bounds_to_polygons
from hexview.viewport.bounds import visible_bounds
from hexview.viewport.resolution import ResolutionPolicy, TableResolutionPolicy
from hexview.viewport.throttle import DEFAULT_WAIT_S, Scheduler, Throttle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridUpdate:
    """
    Background grid for one viewport

    Attributes:
        resolution: Grid resolution the cells were enumerated at
        cells: Visible cell identifiers (unique, stable order)
        bounds: Geographic bounds the cells were computed for
        viewport: Viewport the update belongs to
    """

    resolution: int
    cells: list[str] = field(default_factory=list)
    bounds: GeoBounds | None = None
    viewport: Viewport | None = None

    def __len__(self) -> int:
        return len(self.cells)


GridObserver = Callable[[GridUpdate], None]


class ViewportGridEngine:
    """
    Computes the visible cell set for a viewport

    Pipeline: bounds -> antimeridian split -> polygons -> resolution -> cells.
    :meth:`on_viewport_change` is throttled; :meth:`compute` runs the pipeline
    directly. Observers receive every published :class:`GridUpdate`.

    Throttled recomputations run on the calling thread (leading edge) or on the
    scheduler's thread (trailing edge), and observers are called on that same
    thread. When two recomputations overlap, the one started last is
    published and an older result finishing after it is dropped.

    Examples:
        >>> engine = ViewportGridEngine()
        >>> update = engine.compute(Viewport(37.7, -122.4, zoom=11, width=800, height=600))
        >>> update.resolution
        7
    """

    def __init__(
        self,
        grid: CellGrid | None = None,
        policy: ResolutionPolicy | None = None,
        throttle_wait: float = DEFAULT_WAIT_S,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.grid = grid or get_default_grid()
        self.policy = policy or TableResolutionPolicy()
        self.frozen_resolution: int | None = None
        self.latest: GridUpdate | None = None
        self._observers: list[GridObserver] = []
        self._publish_lock = threading.Lock()
        self._started = 0
        self._published = 0

        throttle_kwargs = {"wait": throttle_wait, "scheduler": scheduler}
        if clock is not None:
            throttle_kwargs["clock"] = clock
        self._throttle = Throttle(self._recompute, **throttle_kwargs)

    def subscribe(self, observer: GridObserver) -> Callable[[], None]:
        """
        Register an observer for published updates

        Returns:
            Function that unsubscribes the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def freeze_resolution(self, resolution: int | None) -> None:
        """Pin the resolution (``None`` unpins and follows the zoom again)"""
        if resolution is not None and not 0 <= resolution <= MAX_RESOLUTION:
            raise ValueError(f"Resolution must be between 0 and {MAX_RESOLUTION}, got {resolution}")
        self.frozen_resolution = resolution
        logger.debug("Frozen resolution set to %s", resolution)

    def resolution_for(self, viewport: Viewport) -> int:
        """Resolution the engine would use for a viewport"""
        if self.frozen_resolution is not None:
            return self.frozen_resolution
        return self.policy.resolution_for_zoom(viewport.zoom)

    def on_viewport_change(self, viewport: Viewport) -> None:
        """Throttled entry point for renderer viewport events"""
        self._throttle(viewport)

    def flush(self) -> None:
        """Run any pending trailing recomputation now"""
        self._throttle.flush()

    def cancel_pending(self) -> None:
        self._throttle.cancel()

    @property
    def pending(self) -> bool:
        return self._throttle.pending

    def compute(self, viewport: Viewport) -> GridUpdate:
        """
        Run the pipeline for a viewport without publishing

        Args:
            viewport: Viewport description

        Returns:
            GridUpdate with the visible cells; empty for a zero-area viewport
        """
        resolution = self.resolution_for(viewport)
        bounds = visible_bounds(viewport)

        if bounds.is_empty:
            logger.debug("Viewport has no visible area, resolution %d", resolution)
            return GridUpdate(resolution=resolution, cells=[], bounds=bounds, viewport=viewport)

        polygons = bounds_to_polygons(bounds)
        cells = cells_for_polygons(polygons, resolution, grid=self.grid)
        logger.debug(
            "Enumerated %d cells at resolution %d over %d polygon(s)",
            len(cells),
            resolution,
            len(polygons),
        )
        return GridUpdate(resolution=resolution, cells=cells, bounds=bounds, viewport=viewport)

    def _recompute(self, viewport: Viewport) -> None:
        with self._publish_lock:
            self._started += 1
            generation = self._started

        update = self.compute(viewport)

        with self._publish_lock:
            if generation < self._published:
                logger.debug("Dropping stale grid update %d (latest %d)", generation, self._published)
                return
            self._published = generation
            self.latest = update
            observers = list(self._observers)

        for observer in observers:
            observer(update)
