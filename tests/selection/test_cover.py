"""
Tests for polygon cover
"""

import json

import h3
import pytest
from shapely.geometry import MultiPolygon, Polygon, box

from hexview.core.exceptions import GeometryError
from hexview.selection.cover import (
    cover_polygon,
    max_acceptable_resolution,
    parse_polygon,
    polygon_area_m2,
)

SF_RING = [(-122.5, 37.7), (-122.3, 37.7), (-122.3, 37.8), (-122.5, 37.8)]


def _polygon_geojson(minx, miny, maxx, maxy):
    return {
        "type": "Polygon",
        "coordinates": [[[minx, miny], [maxx, miny], [maxx, maxy], [minx, maxy], [minx, miny]]],
    }


class TestParsePolygon:
    def test_ring(self):
        geom = parse_polygon(SF_RING)
        assert isinstance(geom, Polygon)
        assert geom.bounds == (-122.5, 37.7, -122.3, 37.8)

    def test_shapely_passthrough(self):
        geom = box(0, 0, 1, 1)
        assert parse_polygon(geom) is geom

    def test_feature(self):
        feature = {"type": "Feature", "properties": {}, "geometry": _polygon_geojson(0, 0, 1, 1)}
        assert parse_polygon(feature).bounds == (0, 0, 1, 1)

    def test_feature_collection_union(self):
        collection = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {}, "geometry": _polygon_geojson(0, 0, 1, 1)},
                {"type": "Feature", "properties": {}, "geometry": _polygon_geojson(5, 5, 6, 6)},
            ],
        }
        geom = parse_polygon(collection)
        assert isinstance(geom, MultiPolygon)
        assert geom.bounds == (0, 0, 6, 6)

    def test_file(self, tmp_path):
        path = tmp_path / "area.geojson"
        path.write_text(json.dumps(_polygon_geojson(0, 0, 1, 1)))
        assert parse_polygon(str(path)).bounds == (0, 0, 1, 1)
        assert parse_polygon(path).bounds == (0, 0, 1, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(GeometryError, match="not found"):
            parse_polygon(str(tmp_path / "missing.geojson"))

    def test_point_rejected(self):
        with pytest.raises(GeometryError, match="Polygon"):
            parse_polygon({"type": "Point", "coordinates": [0, 0]})

    def test_empty_feature_collection(self):
        with pytest.raises(GeometryError):
            parse_polygon({"type": "FeatureCollection", "features": []})

    def test_garbage(self):
        with pytest.raises(GeometryError):
            parse_polygon({"type": "Polygon"})
        with pytest.raises(GeometryError):
            parse_polygon([(0, 0), (1, 1)])
        with pytest.raises(GeometryError):
            parse_polygon(42)


class TestCoverPolygon:
    def test_ring(self, grid):
        cells = cover_polygon(SF_RING, 7)
        assert cells
        assert len(cells) == len(set(cells))
        assert all(grid.get_resolution(c) == 7 for c in cells)

    def test_covers_interior_point(self):
        cells = cover_polygon(SF_RING, 8)
        assert h3.latlng_to_cell(37.75, -122.4, 8) in cells

    def test_deterministic(self):
        assert set(cover_polygon(SF_RING, 7)) == set(cover_polygon(SF_RING, 7))

    def test_multipolygon(self, grid):
        geom = MultiPolygon([box(0, 0, 1, 1), box(10, 10, 11, 11)])
        cells = cover_polygon(geom, 5)
        longitudes = [grid.cell_to_latlng(c)[1] for c in cells]
        assert any(lon < 3 for lon in longitudes)
        assert any(lon > 8 for lon in longitudes)

    def test_compact_is_lossless(self):
        geom = box(0, 0, 1, 1)
        cells = cover_polygon(geom, 6)
        compacted = cover_polygon(geom, 6, compact=True)

        assert len(compacted) < len(cells)
        assert set(h3.uncompact_cells(compacted, 6)) == set(cells)
        assert min(h3.get_resolution(c) for c in compacted) < 6

    @pytest.mark.parametrize("resolution", [-1, 16])
    def test_bad_resolution(self, resolution):
        with pytest.raises(ValueError):
            cover_polygon(SF_RING, resolution)

    def test_not_a_polygon(self):
        with pytest.raises(GeometryError):
            cover_polygon({"type": "LineString", "coordinates": [[0, 0], [1, 1]]}, 5)


class TestArea:
    def test_one_degree_box_at_equator(self):
        assert polygon_area_m2(box(0, 0, 1, 1)) == pytest.approx(1.2391e10, rel=1e-3)

    def test_orientation_independent(self):
        ring = [(0, 0), (1, 0), (1, 1), (0, 1)]
        assert polygon_area_m2(ring) == pytest.approx(polygon_area_m2(list(reversed(ring))))

    def test_hole_subtracted(self):
        outer = [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]
        hole = [(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5), (0.5, 0.5)]
        holed = Polygon(outer, [hole])

        expected = polygon_area_m2(Polygon(outer)) - polygon_area_m2(Polygon(hole))
        assert polygon_area_m2(holed) == pytest.approx(expected)

    def test_shrinks_towards_pole(self):
        assert polygon_area_m2(box(0, 60, 1, 61)) < polygon_area_m2(box(0, 0, 1, 1))


class TestMaxAcceptableResolution:
    def test_large_box(self):
        assert max_acceptable_resolution(box(0, 0, 10, 10), max_cells=50) == 2

    def test_tiny_box(self):
        assert max_acceptable_resolution(box(0, 0, 1e-5, 1e-5)) == 15

    def test_never_negative(self):
        assert max_acceptable_resolution(box(-170, -80, 170, 80), max_cells=1) == 0

    def test_monotonic_in_budget(self):
        resolutions = [max_acceptable_resolution(SF_RING, max_cells=n) for n in (10, 100, 1000, 10000)]
        assert resolutions == sorted(resolutions)
