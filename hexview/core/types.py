"""
Core records

Viewport and geographic bounds exchanged between the renderer and the engine.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Viewport:
    """
    Camera description supplied by the map renderer on every interaction

    Attributes:
        latitude: Center latitude in decimal degrees
        longitude: Center longitude in decimal degrees
        zoom: Web-Mercator zoom level (0 = whole world in one 512px tile)
        width: Viewport width in pixels
        height: Viewport height in pixels
        bearing: Map rotation in degrees, clockwise from north
        pitch: Camera tilt in degrees from straight down (0-85)

    Examples:
        >>> vp = Viewport(latitude=37.7, longitude=-122.4, zoom=11, width=800, height=600)
        >>> vp.with_center(40.0, -74.0, zoom=9).zoom
        9
    """

    latitude: float
    longitude: float
    zoom: float
    width: float
    height: float
    bearing: float = 0.0
    pitch: float = 0.0

    def with_center(self, latitude: float, longitude: float, zoom: float | None = None) -> "Viewport":
        """Return a copy recentred on (latitude, longitude), optionally at a new zoom"""
        return replace(
            self,
            latitude=latitude,
            longitude=longitude,
            zoom=self.zoom if zoom is None else zoom,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "zoom": self.zoom,
            "width": self.width,
            "height": self.height,
            "bearing": self.bearing,
            "pitch": self.pitch,
        }


@dataclass(frozen=True)
class GeoBounds:
    """
    Geographic bounding rectangle in decimal degrees

    Longitudes may lie outside [-180, 180) until the range is split at the
    antimeridian.
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area"""
        return self.max_lat <= self.min_lat or self.max_lon <= self.min_lon

    def contains(self, lat: float, lon: float, margin: float = 0.0) -> bool:
        """Check whether a point lies inside the bounds (plus an optional margin in degrees)"""
        return (
            self.min_lat - margin <= lat <= self.max_lat + margin
            and self.min_lon - margin <= lon <= self.max_lon + margin
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Bounds as (minx, miny, maxx, maxy)"""
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)
