"""
Tests for HexSession
"""

import h3
import pytest
from shapely.geometry import box

from hexview.config import HexViewConfig
from hexview.core.exceptions import GeometryError
from hexview.session import HexSession

NEIGHBOR = "8a1fb46622affff"


@pytest.fixture
def session(clock, scheduler):
    return HexSession(scheduler=scheduler, clock=clock)


class TestViewport:
    def test_background_updates(self, session, scheduler, sf_viewport):
        seen = []
        session.subscribe(seen.append)

        session.on_viewport_change(sf_viewport)
        assert session.background.resolution == 7
        assert seen == [session.background]

        moved = sf_viewport.with_center(37.75, -122.45)
        session.on_viewport_change(moved)
        assert session.viewport == moved
        scheduler.advance(1.0)
        assert session.background.viewport == moved

    def test_freeze_uses_current_resolution(self, session, scheduler, sf_viewport):
        session.on_viewport_change(sf_viewport)
        session.set_resolution_frozen(True)

        scheduler.advance(1.0)
        session.on_viewport_change(sf_viewport.with_center(37.7, -122.4, zoom=13))
        assert session.background.resolution == 7

        session.set_resolution_frozen(False)
        scheduler.advance(1.0)
        session.on_viewport_change(sf_viewport.with_center(37.7, -122.4, zoom=13))
        assert session.background.resolution == 9

    def test_freeze_without_viewport(self, session):
        session.set_resolution_frozen(True)
        assert session.engine.frozen_resolution == 0

    def test_config_policy(self, clock, scheduler, sf_viewport):
        session = HexSession(
            config=HexViewConfig(resolution_policy="logistic"), scheduler=scheduler, clock=clock
        )
        session.on_viewport_change(sf_viewport)
        assert session.background.resolution == 8


class TestTextSelection:
    def test_submit_recentres(self, session, grid, sample_cell, sf_viewport):
        result = session.on_text_submitted([sample_cell], sf_viewport)

        assert result.cells == [sample_cell]
        assert result.rejected == []
        assert result.viewport.zoom == 14
        assert (result.viewport.latitude, result.viewport.longitude) == pytest.approx(
            grid.cell_to_latlng(sample_cell)
        )
        assert session.viewport == result.viewport
        assert session.selection.cells == [sample_cell]

    def test_submit_replaces(self, session, sample_cell):
        session.on_text_submitted([sample_cell])
        result = session.on_text_submitted([f"[{NEIGHBOR}]", "junk"])

        assert session.selection.cells == [NEIGHBOR]
        assert result.rejected == ["junk"]
        assert result.viewport is None

    def test_nothing_resolved_keeps_viewport(self, session, sf_viewport):
        session.on_viewport_change(sf_viewport)
        result = session.on_text_submitted(["junk"])
        assert result.cells == []
        assert result.viewport is None
        assert session.viewport == sf_viewport
        assert not session.selection

    def test_color_of(self, session, sample_cell):
        session.on_text_submitted([sample_cell])
        assert session.color_of(sample_cell) == session.config.selected_color
        assert session.color_of(NEIGHBOR) == session.config.background_color
        assert session.line_color_of(sample_cell) == session.config.line_color


class TestClicks:
    def test_click_toggles(self, session, sample_cell):
        assert session.on_cell_clicked(sample_cell) == [sample_cell]
        assert session.on_cell_clicked(NEIGHBOR, extend=True) == [sample_cell, NEIGHBOR]
        assert session.on_cell_clicked(sample_cell) == [NEIGHBOR]
        assert session.on_cell_clicked(sample_cell) == [sample_cell]

    def test_click_on_nothing(self, session, sample_cell):
        session.on_cell_clicked(sample_cell)
        assert session.on_cell_clicked(None) == [sample_cell]

    def test_clicks_ignored_in_cover_mode(self, session, sample_cell):
        session.set_cover(enabled=True)
        assert session.on_cell_clicked(sample_cell) == []

    def test_clear(self, session, sample_cell):
        session.on_cell_clicked(sample_cell)
        session.clear_selection()
        assert session.selection.cells == []


class TestCover:
    def test_toggle_cover_clears_selection(self, session, sample_cell):
        session.on_cell_clicked(sample_cell)
        session.set_cover(enabled=True)
        assert not session.selection

        session.selection.add([sample_cell])
        session.set_cover(enabled=True)
        assert session.selection.cells == [sample_cell]

        session.set_cover(enabled=False)
        assert not session.selection

    def test_resolution_clamped(self, session):
        assert session.set_cover(resolution=20).resolution == 15
        assert session.set_cover(resolution=-2).resolution == 0

    def test_polygon_replaces_selection(self, session, sample_cell):
        session.on_cell_clicked(sample_cell)
        session.set_cover(enabled=True, resolution=6)
        session.selection.add([sample_cell])

        cells = session.on_polygon_drawn(box(0, 0, 1, 1))

        assert cells
        assert session.selection.cells == cells
        assert all(h3.get_resolution(c) == 6 for c in cells)

    def test_compact(self, session):
        session.set_cover(enabled=True, resolution=6, compact=True)
        cells = session.on_polygon_drawn(box(0, 0, 1, 1))
        assert min(h3.get_resolution(c) for c in cells) < 6

    def test_resolution_capped_by_budget(self, clock, scheduler):
        session = HexSession(config=HexViewConfig(max_cover_cells=50), scheduler=scheduler, clock=clock)
        session.set_cover(enabled=True, resolution=9)

        cells = session.on_polygon_drawn(box(0, 0, 10, 10))

        assert session.cover.max_resolution == 2
        assert session.cover.resolution == 2
        assert all(h3.get_resolution(c) == 2 for c in cells)

    def test_cover_disabled_only_updates_limits(self, session, sample_cell):
        session.on_cell_clicked(sample_cell)
        assert session.on_polygon_drawn(box(0, 0, 1e-5, 1e-5)) == []
        assert session.cover.max_resolution == 15
        assert session.selection.cells == [sample_cell]

    def test_bad_drawing(self, session):
        session.set_cover(enabled=True)
        with pytest.raises(GeometryError):
            session.on_polygon_drawn({"type": "Point", "coordinates": [0, 0]})
