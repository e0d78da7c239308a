"""
Tests for H3Grid implementation
"""

import h3
import pytest
from shapely.geometry import box

from hexview.core.exceptions import InvalidCellError
from hexview.grid.h3_grid import MAX_RESOLUTION, H3Grid, get_default_grid


class TestH3Grid:
    """Test H3Grid implementation"""

    def test_init_default(self, grid):
        """Test default containment mode"""
        assert grid.containment == "overlap"

    def test_init_invalid_containment(self):
        """Test unknown containment raises error"""
        with pytest.raises(ValueError):
            H3Grid(containment="inside-ish")

    def test_max_resolution(self):
        assert MAX_RESOLUTION == 15

    def test_is_valid_cell(self, grid, sample_cell):
        assert grid.is_valid_cell(sample_cell)
        assert grid.is_valid_cell(sample_cell.upper())

    @pytest.mark.parametrize(
        "value",
        ["", "not-a-cell", "8a1fb46622dfff", "-8a1fb46622dffff", "\x00", None, 12345],
    )
    def test_is_valid_cell_never_raises(self, grid, value):
        """Test garbage is rejected without raising"""
        assert grid.is_valid_cell(value) is False

    def test_canonical_lowercases(self, grid, sample_cell):
        assert grid.canonical(sample_cell.upper()) == sample_cell

    def test_get_resolution(self, grid, sample_cell):
        assert grid.get_resolution(sample_cell) == 10

    def test_cell_to_latlng(self, grid, sample_cell):
        lat, lon = grid.cell_to_latlng(sample_cell)
        assert 48.5 < lat < 49.2
        assert 1.8 < lon < 2.8

    def test_int_pair_to_cell(self, grid, sample_cell):
        value = int(sample_cell, 16)
        low = value & 0xFFFFFFFF
        high = value >> 32
        assert grid.int_pair_to_cell(low, high) == sample_cell

    def test_int_pair_masks_to_32_bits(self, grid, sample_cell):
        value = int(sample_cell, 16)
        low = (value & 0xFFFFFFFF) | (1 << 40)
        high = (value >> 32) | (1 << 33)
        assert grid.int_pair_to_cell(low, high) == sample_cell

    def test_polygon_to_cells_overlap_includes_boundary(self):
        """Test overlap mode returns at least the center-contained cells"""
        polygon = box(-122.45, 37.75, -122.40, 37.78)
        center = set(H3Grid(containment="center").polygon_to_cells(polygon, 8))
        overlap = set(H3Grid().polygon_to_cells(polygon, 8))
        assert center
        assert center <= overlap
        assert len(overlap) > len(center)

    def test_polygon_to_cells_resolution(self, grid):
        cells = grid.polygon_to_cells(box(-122.45, 37.75, -122.40, 37.78), 7)
        assert cells
        assert all(h3.get_resolution(c) == 7 for c in cells)

    def test_compact_cells_merges_complete_siblings(self, grid, sample_cell):
        parent = h3.cell_to_parent(sample_cell, 9)
        children = h3.cell_to_children(parent, 10)
        assert grid.compact_cells(children) == [parent]

    def test_compact_cells_keeps_incomplete_groups(self, grid, sample_cell):
        parent = h3.cell_to_parent(sample_cell, 9)
        children = h3.cell_to_children(parent, 10)[:-1]
        assert sorted(grid.compact_cells(children)) == sorted(children)

    def test_cell_area(self, grid, sample_cell):
        assert 10_000 < grid.cell_area_m2(sample_cell) < 20_000

    def test_average_cell_area_decreases(self, grid):
        areas = [grid.average_cell_area_m2(r) for r in range(MAX_RESOLUTION + 1)]
        assert areas == sorted(areas, reverse=True)

    def test_require_cell(self, grid, sample_cell):
        assert grid.require_cell(f"  {sample_cell.upper()} ") == sample_cell

    def test_require_cell_invalid(self, grid):
        with pytest.raises(InvalidCellError):
            grid.require_cell("nope")

    def test_default_grid_is_shared(self):
        assert get_default_grid() is get_default_grid()
