"""
hexview configuration

Runtime settings for the viewer session, with environment overrides.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any

from hexview.core.exceptions import ConfigurationError
from hexview.viewport.resolution import get_policy

logger = logging.getLogger(__name__)

Color = tuple[int, int, int, int]

ENV_THROTTLE_WAIT = "HEXVIEW_THROTTLE_WAIT"
ENV_RESOLUTION_POLICY = "HEXVIEW_RESOLUTION_POLICY"
ENV_MAX_COVER_CELLS = "HEXVIEW_MAX_COVER_CELLS"


@dataclass
class HexViewConfig:
    """
    Viewer settings

    Attributes:
        throttle_wait_s: Viewport recomputation window in seconds
        resolution_policy: "table" or "logistic"
        max_cover_cells: Upper bound on expected cells when covering a polygon
        default_cover_resolution: Initial resolution for polygon cover
        selected_color: RGBA fill for selected cells
        background_color: RGBA fill for unselected background cells
        line_color: RGBA outline for all cells

    Examples:
        >>> config = HexViewConfig(throttle_wait_s=0.2)
        >>> HexViewConfig.from_dict(config.to_dict()) == config
        True
    """

    throttle_wait_s: float = 0.3
    resolution_policy: str = "table"
    max_cover_cells: int = 10_000
    default_cover_resolution: int = 0
    selected_color: Color = (255, 100, 100, 150)
    background_color: Color = (0, 0, 0, 1)
    line_color: Color = (150, 150, 150, 100)

    def __post_init__(self):
        if self.throttle_wait_s < 0:
            raise ConfigurationError(f"throttle_wait_s must be >= 0, got {self.throttle_wait_s}")
        if self.max_cover_cells <= 0:
            raise ConfigurationError(f"max_cover_cells must be positive, got {self.max_cover_cells}")
        # Validates the policy name
        get_policy(self.resolution_policy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "throttle_wait_s": self.throttle_wait_s,
            "resolution_policy": self.resolution_policy,
            "max_cover_cells": self.max_cover_cells,
            "default_cover_resolution": self.default_cover_resolution,
            "selected_color": list(self.selected_color),
            "background_color": list(self.background_color),
            "line_color": list(self.line_color),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HexViewConfig":
        defaults = cls()
        return cls(
            throttle_wait_s=float(data.get("throttle_wait_s", defaults.throttle_wait_s)),
            resolution_policy=data.get("resolution_policy", defaults.resolution_policy),
            max_cover_cells=int(data.get("max_cover_cells", defaults.max_cover_cells)),
            default_cover_resolution=int(
                data.get("default_cover_resolution", defaults.default_cover_resolution)
            ),
            selected_color=tuple(data.get("selected_color", defaults.selected_color)),
            background_color=tuple(data.get("background_color", defaults.background_color)),
            line_color=tuple(data.get("line_color", defaults.line_color)),
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "HexViewConfig":
        """
        Build a config from ``HEXVIEW_*`` environment variables

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        if env.get(ENV_THROTTLE_WAIT):
            data["throttle_wait_s"] = _parse_number(ENV_THROTTLE_WAIT, env[ENV_THROTTLE_WAIT], float)
        if env.get(ENV_RESOLUTION_POLICY):
            data["resolution_policy"] = env[ENV_RESOLUTION_POLICY].strip().lower()
        if env.get(ENV_MAX_COVER_CELLS):
            data["max_cover_cells"] = _parse_number(ENV_MAX_COVER_CELLS, env[ENV_MAX_COVER_CELLS], int)

        if data:
            logger.debug("Config overrides from environment: %s", sorted(data))
        return cls.from_dict(data)


def _parse_number(name: str, raw: str, kind: type) -> Any:
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a {kind.__name__}, got {raw!r}") from None
