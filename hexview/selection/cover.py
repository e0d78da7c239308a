"""
Polygon cover

Cover a user-drawn polygon with cells, optionally compacted into a
mixed-resolution covering.

Accepts:
- GeoJSON Polygon/MultiPolygon, Feature or FeatureCollection dicts
- Shapely polygons
- Plain rings of (lon, lat) pairs
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

import numpy as np
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from hexview.core.exceptions import GeometryError
from hexview.grid.base import CellGrid
from hexview.grid.enumerator import cells_for_polygons
from hexview.grid.h3_grid import MAX_RESOLUTION, get_default_grid

logger = logging.getLogger(__name__)

# WGS84 equatorial radius, same sphere as the renderer's area measure
EARTH_RADIUS_M = 6378137.0

DEFAULT_MAX_CELLS = 10_000

GeometryLike = Union[dict, BaseGeometry, list, tuple, str, Path]


def cover_polygon(
    geometry: GeometryLike,
    resolution: int,
    compact: bool = False,
    grid: CellGrid | None = None,
) -> list[str]:
    """
    Cells covering a polygon

    Args:
        geometry: Polygon as GeoJSON, shapely geometry, ring, or GeoJSON file path
        resolution: Grid resolution (0-15)
        compact: Merge complete sibling groups into their parents

    Returns:
        Covering cells; mixed resolutions when ``compact`` is set

    Raises:
        GeometryError: If the geometry cannot be parsed or is not polygonal

    Examples:
        >>> ring = [(-122.5, 37.7), (-122.3, 37.7), (-122.3, 37.8), (-122.5, 37.8)]
        >>> cells = cover_polygon(ring, 6)
        >>> len(cells) > 0
        True
    """
    if not 0 <= resolution <= MAX_RESOLUTION:
        raise ValueError(f"Resolution must be between 0 and {MAX_RESOLUTION}, got {resolution}")

    grid = grid or get_default_grid()
    geom = parse_polygon(geometry)

    cells = cells_for_polygons([geom], resolution, grid=grid)
    if compact and cells:
        compacted = grid.compact_cells(cells)
        logger.debug("Compacted %d cells into %d", len(cells), len(compacted))
        cells = compacted

    return cells


def polygon_area_m2(geometry: GeometryLike) -> float:
    """
    Geodesic area of a polygon on the WGS84 sphere

    Args:
        geometry: Polygon as GeoJSON, shapely geometry or ring

    Returns:
        Area in square meters (holes subtracted)
    """
    geom = parse_polygon(geometry)
    polygons = geom.geoms if isinstance(geom, MultiPolygon) else [geom]

    total = 0.0
    for polygon in polygons:
        total += abs(_ring_area(polygon.exterior.coords))
        for interior in polygon.interiors:
            total -= abs(_ring_area(interior.coords))
    return total


def max_acceptable_resolution(
    geometry: GeometryLike,
    max_cells: int = DEFAULT_MAX_CELLS,
    grid: CellGrid | None = None,
) -> int:
    """
    Finest resolution whose expected cell count stays within ``max_cells``

    The estimate is polygon area divided by the average cell area, so the
    actual covering (which includes boundary cells) can be somewhat larger.

    Examples:
        >>> ring = [(-122.5, 37.7), (-122.3, 37.7), (-122.3, 37.8), (-122.5, 37.8)]
        >>> 0 <= max_acceptable_resolution(ring, max_cells=100) <= 15
        True
    """
    grid = grid or get_default_grid()
    area = polygon_area_m2(geometry)

    for resolution in range(MAX_RESOLUTION + 1):
        if area / grid.average_cell_area_m2(resolution) > max_cells:
            return max(resolution - 1, 0)
    return MAX_RESOLUTION


def parse_polygon(geometry: GeometryLike) -> BaseGeometry:
    """
    Parse a polygonal geometry from the supported input formats

    Raises:
        GeometryError: If parsing fails or the result is not a (Multi)Polygon
    """
    try:
        geom = _parse_geometry(geometry)
    except GeometryError:
        raise
    except (ShapelyError, ValueError, TypeError, KeyError, AttributeError) as e:
        raise GeometryError(f"Could not parse geometry: {e}") from e

    if not isinstance(geom, (Polygon, MultiPolygon)):
        raise GeometryError(f"Expected a Polygon or MultiPolygon, got {geom.geom_type}")
    if geom.is_empty:
        raise GeometryError("Geometry is empty")
    return geom


def _ring_area(coords: Any) -> float:
    """Signed spherical area of a (lon, lat) ring"""
    points = np.asarray(coords, dtype=float)
    if len(points) > 1 and np.array_equal(points[0], points[-1]):
        points = points[:-1]
    if len(points) < 3:
        return 0.0

    lon = np.radians(points[:, 0])
    lat = np.radians(points[:, 1])
    area = np.sum((np.roll(lon, -1) - np.roll(lon, 1)) * np.sin(lat))
    return float(area * EARTH_RADIUS_M**2 / 2.0)


def _parse_geometry(geometry: GeometryLike) -> BaseGeometry:
    # Already a Shapely geometry
    if hasattr(geometry, "bounds") and hasattr(geometry, "intersects"):
        return geometry

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise GeometryError(f"GeoJSON file not found: {geometry}")
        with open(path) as f:
            geojson = json.load(f)
        return _geojson_to_geometry(geojson)

    # GeoJSON dict
    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    # Plain ring of (lon, lat)
    if isinstance(geometry, (list, tuple)):
        return Polygon([tuple(point) for point in geometry])

    raise GeometryError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles both Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise GeometryError("Empty FeatureCollection")
        if len(features) == 1:
            return shape(features[0]["geometry"])
        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
