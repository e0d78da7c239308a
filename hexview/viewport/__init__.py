"""
hexview Viewport Module

Viewport bounds, antimeridian splitting, resolution selection, throttling
and the viewport grid engine.
"""

from hexview.viewport.antimeridian import (
    bounds_to_polygons,
    bounds_to_ring,
    normalize_longitude,
    split_bounds,
    split_longitude_range,
)
from hexview.viewport.bounds import visible_bounds
from hexview.viewport.engine import GridUpdate, ViewportGridEngine
from hexview.viewport.resolution import (
    RESOLUTION_TO_ZOOM,
    ZOOM_TO_RESOLUTION,
    LogisticResolutionPolicy,
    TableResolutionPolicy,
    get_policy,
    resolution_for_zoom,
    zoom_for_resolution,
)
from hexview.viewport.throttle import Throttle, TimerScheduler

__all__ = [
    "GridUpdate",
    "LogisticResolutionPolicy",
    "RESOLUTION_TO_ZOOM",
    "TableResolutionPolicy",
    "Throttle",
    "TimerScheduler",
    "ViewportGridEngine",
    "ZOOM_TO_RESOLUTION",
    "bounds_to_polygons",
    "bounds_to_ring",
    "get_policy",
    "normalize_longitude",
    "resolution_for_zoom",
    "split_bounds",
    "split_longitude_range",
    "visible_bounds",
    "zoom_for_resolution",
]
