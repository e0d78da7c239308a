"""
Resolution selection

Map a continuous zoom level to a discrete grid resolution.

Two policies are available:
- ``table``: fixed zoom -> resolution lookup (primary)
- ``logistic``: smooth S-curve, also used when a custom table has a gap
"""

import logging
import math
from typing import Mapping, Protocol

from hexview.core.exceptions import ConfigurationError
from hexview.grid.h3_grid import MAX_RESOLUTION

logger = logging.getLogger(__name__)

ZOOM_TO_RESOLUTION: dict[int, int] = {
    0: 0,
    1: 0,
    2: 1,
    3: 2,
    4: 2,
    5: 3,
    6: 4,
    7: 5,
    8: 5,
    9: 6,
    10: 6,
    11: 7,
    12: 8,
    13: 9,
    14: 10,
    15: 11,
    16: 11,
    17: 12,
    18: 12,
    19: 13,
    20: 14,
}


def _build_resolution_to_zoom(table: Mapping[int, int]) -> dict[int, int]:
    """Smallest zoom showing at least each resolution; the deepest zoom past the table"""
    max_zoom = max(table)
    inverse = {}
    for resolution in range(MAX_RESOLUTION + 1):
        zooms = [z for z, r in sorted(table.items()) if r >= resolution]
        inverse[resolution] = zooms[0] if zooms else max_zoom
    return inverse


RESOLUTION_TO_ZOOM: dict[int, int] = _build_resolution_to_zoom(ZOOM_TO_RESOLUTION)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ResolutionPolicy(Protocol):
    """Zoom -> resolution mapping"""

    name: str

    def resolution_for_zoom(self, zoom: float) -> int: ...


class LogisticResolutionPolicy:
    """
    Logistic zoom -> resolution curve

    ``floor(15 / (1 + exp(-0.4 * zoom + 4)))``: saturates at 0 for zoom <= 1
    and reaches 14 at zoom 20.
    """

    name = "logistic"

    def __init__(self, steepness: float = 0.4, midpoint_offset: float = 4.0):
        self.steepness = steepness
        self.midpoint_offset = midpoint_offset

    def resolution_for_zoom(self, zoom: float) -> int:
        value = MAX_RESOLUTION / (1.0 + math.exp(-self.steepness * zoom + self.midpoint_offset))
        return max(0, min(MAX_RESOLUTION, int(math.floor(value))))


class TableResolutionPolicy:
    """
    Fixed zoom -> resolution table

    The zoom is rounded half-up and clamped to the table's domain. Zooms the
    table has no entry for fall back to the logistic curve.

    Examples:
        >>> policy = TableResolutionPolicy()
        >>> policy.resolution_for_zoom(7)
        5
        >>> policy.resolution_for_zoom(10.6)
        7
        >>> policy.resolution_for_zoom(35)
        14
    """

    name = "table"

    def __init__(self, table: Mapping[int, int] | None = None):
        self.table = dict(ZOOM_TO_RESOLUTION if table is None else table)
        if not self.table:
            raise ConfigurationError("Resolution table must not be empty")
        self.min_zoom = min(self.table)
        self.max_zoom = max(self.table)
        self._fallback = LogisticResolutionPolicy()

    def resolution_for_zoom(self, zoom: float) -> int:
        key = max(self.min_zoom, min(self.max_zoom, _round_half_up(zoom)))
        resolution = self.table.get(key)
        if resolution is None:
            logger.debug("No table entry for zoom %s, using logistic fallback", zoom)
            return self._fallback.resolution_for_zoom(zoom)
        return resolution


_POLICIES = {
    TableResolutionPolicy.name: TableResolutionPolicy,
    LogisticResolutionPolicy.name: LogisticResolutionPolicy,
}


def get_policy(name: str) -> ResolutionPolicy:
    """
    Instantiate a resolution policy by name

    Args:
        name: "table" or "logistic"

    Raises:
        ConfigurationError: If the name is unknown
    """
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown resolution policy '{name}' (expected one of: {', '.join(sorted(_POLICIES))})"
        ) from None


def resolution_for_zoom(zoom: float, policy: str = "table") -> int:
    """Resolution for a zoom level using a named policy"""
    return get_policy(policy).resolution_for_zoom(zoom)


def zoom_for_resolution(resolution: int) -> int:
    """
    Zoom at which the table first shows a resolution

    Used to recentre the map on a selection. Resolutions finer than anything
    in the table map to the deepest table zoom.

    Examples:
        >>> zoom_for_resolution(7)
        11
        >>> zoom_for_resolution(15)
        20
    """
    resolution = max(0, min(MAX_RESOLUTION, int(resolution)))
    return RESOLUTION_TO_ZOOM[resolution]
