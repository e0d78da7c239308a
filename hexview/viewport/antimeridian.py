"""
Antimeridian splitting

Break a longitude range that may wrap past ±180° into non-wrapping pieces and
turn them into closed rectangle polygons.
"""

from shapely.geometry import Polygon

from hexview.core.types import GeoBounds

LON_MIN = -180.0
LON_MAX = 180.0


def _adjust_to_range(value: float, lower: float, upper: float) -> float:
    span = upper - lower
    return (((value - lower) % span) + span) % span + lower


def normalize_longitude(lon: float) -> float:
    """
    Wrap a longitude into [-180, 180)

    Examples:
        >>> normalize_longitude(190.0)
        -170.0
        >>> normalize_longitude(-180.0)
        -180.0
    """
    return _adjust_to_range(lon, LON_MIN, LON_MAX)


def split_longitude_range(min_lon: float, max_lon: float) -> list[tuple[float, float]]:
    """
    Split a possibly wrapping longitude range at the 0° and 180° seams

    The walk stops at both seams, so every raw piece lies inside [-180, 0] or
    [0, 180] and at most three pieces are produced; their union (mod 360)
    equals the input range. Pieces meeting at 0° are joined back while the
    joined piece stays narrower than 180°, because the grid treats a polygon
    edge wider than that as crossing the antimeridian. An empty or inverted
    range yields no pieces.

    Args:
        min_lon: Western edge (unwrapped)
        max_lon: Eastern edge (unwrapped, may exceed 180)

    Returns:
        Ordered list of (lon0, lon1) pieces

    Examples:
        >>> split_longitude_range(-10.0, 10.0)
        [(-10.0, 10.0)]
        >>> split_longitude_range(-120.0, 120.0)
        [(-120.0, 0.0), (0.0, 120.0)]
        >>> split_longitude_range(170.0, 190.0)
        [(170.0, 180.0), (-180.0, -170.0)]
    """
    pieces: list[tuple[float, float]] = []
    adjusted_max = normalize_longitude(max_lon)

    cur = min_lon
    while cur < max_lon:
        normalized = normalize_longitude(cur)
        seam = 0.0 if normalized < 0 else LON_MAX
        cur = cur + seam - normalized
        if cur > max_lon:
            pieces.append((normalized, adjusted_max))
        else:
            pieces.append((normalized, seam))

    return _join_at_prime_meridian(pieces)


def _join_at_prime_meridian(pieces: list[tuple[float, float]]) -> list[tuple[float, float]]:
    joined: list[tuple[float, float]] = []
    for lon0, lon1 in pieces:
        if joined:
            prev0, prev1 = joined[-1]
            if prev1 == 0.0 and lon0 == 0.0 and lon1 - prev0 < LON_MAX:
                joined[-1] = (prev0, lon1)
                continue
        joined.append((lon0, lon1))
    return joined


def split_bounds(bounds: GeoBounds) -> list[GeoBounds]:
    """Split bounds into non-wrapping pieces sharing the same latitude span"""
    return [
        GeoBounds(
            min_lat=bounds.min_lat,
            min_lon=lon0,
            max_lat=bounds.max_lat,
            max_lon=lon1,
        )
        for lon0, lon1 in split_longitude_range(bounds.min_lon, bounds.max_lon)
    ]


def bounds_to_ring(bounds: GeoBounds) -> list[tuple[float, float]]:
    """
    Closed rectangle ring in (lon, lat) order, five vertices, first == last
    """
    return [
        (bounds.min_lon, bounds.min_lat),
        (bounds.max_lon, bounds.min_lat),
        (bounds.max_lon, bounds.max_lat),
        (bounds.min_lon, bounds.max_lat),
        (bounds.min_lon, bounds.min_lat),
    ]


def bounds_to_polygons(bounds: GeoBounds) -> list[Polygon]:
    """Antimeridian-safe rectangle polygons for a viewport's bounds"""
    return [Polygon(bounds_to_ring(piece)) for piece in split_bounds(bounds)]
