"""
Viewport bounds

Inverse Web-Mercator projection of the viewport rectangle into geographic bounds.
"""

import math

import numpy as np

from hexview.core.types import GeoBounds, Viewport

# World size in pixels at zoom 0 (renderer convention)
TILE_SIZE = 512

# Camera height above the map center in viewport heights (renderer default)
CAMERA_ALTITUDE = 1.5

MAX_PITCH = 85.0

# Rays at or above the horizon are cut off this many camera distances out
MAX_RAY_LENGTH = 10.0


def lnglat_to_world(lon: float, lat: float, zoom: float) -> tuple[float, float]:
    """
    Project a point to world pixel coordinates (y grows southward)

    Args:
        lon: Longitude in decimal degrees
        lat: Latitude in decimal degrees
        zoom: Zoom level

    Returns:
        (x, y) in pixels of a world that is ``512 * 2**zoom`` pixels wide
    """
    world = TILE_SIZE * 2.0**zoom
    lat = max(min(lat, 89.999999), -89.999999)
    x = (lon + 180.0) / 360.0 * world
    y = (1.0 - math.log(math.tan(math.pi / 4 + math.radians(lat) / 2)) / math.pi) / 2.0 * world
    return (x, y)


def world_to_lnglat(x: np.ndarray, y: np.ndarray, zoom: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Inverse of :func:`lnglat_to_world`

    Longitudes are not wrapped: a pixel one world-width east of the origin
    maps to lon + 360.
    """
    world = TILE_SIZE * 2.0**zoom
    lon = x / world * 360.0 - 180.0
    lat = np.degrees(2.0 * np.arctan(np.exp(np.pi * (1.0 - 2.0 * y / world))) - np.pi / 2)
    return (lon, lat)


def unproject(viewport: Viewport, pixels: np.ndarray) -> np.ndarray:
    """
    Unproject screen pixels of a viewport to (lon, lat)

    Args:
        viewport: Viewport description
        pixels: Array of shape (N, 2) with (px, py), origin at the top-left

    Returns:
        Array of shape (N, 2) with (lon, lat)
    """
    pixels = np.asarray(pixels, dtype=float).reshape(-1, 2)
    cx, cy = lnglat_to_world(viewport.longitude, viewport.latitude, viewport.zoom)

    dx = pixels[:, 0] - viewport.width / 2.0
    dy = pixels[:, 1] - viewport.height / 2.0
    gx, gy = _ground_offsets(viewport, dx, dy)

    # Screen up points along the bearing
    theta = math.radians(viewport.bearing)
    wx = gx * math.cos(theta) - gy * math.sin(theta)
    wy = gx * math.sin(theta) + gy * math.cos(theta)

    lon, lat = world_to_lnglat(cx + wx, cy + wy, viewport.zoom)
    return np.column_stack([lon, lat])


def _ground_offsets(viewport: Viewport, dx: np.ndarray, dy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Ground offsets from the map center, in world pixels, for screen offsets

    The camera sits ``CAMERA_ALTITUDE * height`` pixels from the map center,
    tilted north by the pitch. Each screen ray is intersected with the ground
    plane; with no pitch the ground offsets equal the screen offsets.
    """
    pitch = math.radians(min(max(viewport.pitch, 0.0), MAX_PITCH))
    if pitch == 0.0 or viewport.height <= 0:
        return dx, dy

    distance = CAMERA_ALTITUDE * viewport.height
    sin_p, cos_p = math.sin(pitch), math.cos(pitch)

    # Ray direction (dx, dy*cos - D*sin, -(dy*sin + D*cos)) from the camera
    # at (0, D*sin, D*cos); ground reached at parameter t
    descent = np.maximum(dy * sin_p + distance * cos_p, distance * cos_p / MAX_RAY_LENGTH)
    t = distance * cos_p / descent

    gx = t * dx
    gy = distance * sin_p + t * (dy * cos_p - distance * sin_p)
    return gx, gy


def visible_bounds(viewport: Viewport) -> GeoBounds:
    """
    Geographic bounds of everything on screen

    All four rectangle corners are unprojected so a rotated or tilted map is
    still bracketed; with bearing and pitch 0 this reduces to the top-left /
    bottom-right pair. A tilted map shows more ground towards the top of the
    screen, so its bounds reach further north (before bearing).
    A zero-sized viewport yields degenerate bounds at the center.

    Args:
        viewport: Viewport description

    Returns:
        GeoBounds with unwrapped longitudes

    Examples:
        >>> vp = Viewport(latitude=0.0, longitude=0.0, zoom=0, width=512, height=512)
        >>> b = visible_bounds(vp)
        >>> round(b.min_lon), round(b.max_lon)
        (-180, 180)
    """
    w, h = viewport.width, viewport.height
    corners = np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h]])
    lonlat = unproject(viewport, corners)

    min_lon, min_lat = lonlat.min(axis=0)
    max_lon, max_lat = lonlat.max(axis=0)

    return GeoBounds(
        min_lat=float(min_lat),
        min_lon=float(min_lon),
        max_lat=float(max_lat),
        max_lon=float(max_lon),
    )
