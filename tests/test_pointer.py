"""Tests for mapping pointer positions back to world cells."""

import pytest

from mapscope.core.constants import MAX_VALUE, MIN_VALUE
from mapscope.core.grid import Grid
from mapscope.view.camera import Camera
from mapscope.view.pointer import EditAction, OutsideDrawable, PointerMapper, WorldPoint, apply_edit
from mapscope.view.viewport import ViewportConfig, ViewportProjector


class TestPointerMapper:

    def test_ruler_area_is_outside(self) -> None:
        mapper = PointerMapper()
        with pytest.raises(OutsideDrawable):
            mapper.map(0, 0, Camera(), ruler_visible=True)
        with pytest.raises(OutsideDrawable):
            mapper.map(3, 5, Camera(), ruler_visible=True)
        with pytest.raises(OutsideDrawable):
            mapper.map(10, 0, Camera(), ruler_visible=True)

    def test_first_content_cell(self) -> None:
        mapper = PointerMapper()
        assert mapper.map(4, 1, Camera(), ruler_visible=True) == WorldPoint(0, 0)
        assert mapper.map(4, 1, Camera(30, 7), ruler_visible=True) == WorldPoint(30, 7)

    def test_without_rulers(self) -> None:
        mapper = PointerMapper()
        assert mapper.map(0, 0, Camera(12, 3), ruler_visible=False) == WorldPoint(12, 3)

    def test_drawable_limit(self) -> None:
        mapper = PointerMapper()
        with pytest.raises(OutsideDrawable):
            mapper.map(20, 1, Camera(), ruler_visible=True, drawable=(16, 6))
        with pytest.raises(OutsideDrawable):
            mapper.map(4, 7, Camera(), ruler_visible=True, drawable=(16, 6))
        assert mapper.map(19, 6, Camera(), ruler_visible=True, drawable=(16, 6)) == WorldPoint(15, 5)

    @pytest.mark.parametrize("rulers", [True, False])
    def test_inverts_projector_placement(self, grid: Grid, rulers: bool) -> None:
        camera = Camera(37, 12)
        viewport = ViewportConfig(30, 15, ruler_visible=rulers)
        mapper = PointerMapper()
        for cx, cy in ((0, 0), (5, 3), (viewport.drawable_width - 1, viewport.drawable_height - 1)):
            sx, sy = viewport.offset_x + cx, viewport.offset_y + cy
            point = mapper.map(sx, sy, camera, ruler_visible=rulers)
            assert point == WorldPoint(cx + camera.x, cy + camera.y)

            apply_edit(grid, point, EditAction.PAINT)
            rows = ViewportProjector().render(grid, camera, 30, 15, ruler_visible=rulers)
            assert rows[sy][sx] == "█"


class TestApplyEdit:

    def test_paint_and_erase(self, small_grid: Grid) -> None:
        point = WorldPoint(2, 3)
        assert apply_edit(small_grid, point, EditAction.PAINT) is True
        assert small_grid.get(2, 3) == MAX_VALUE
        assert apply_edit(small_grid, point, EditAction.ERASE) is True
        assert small_grid.get(2, 3) == MIN_VALUE

    def test_outside_grid_is_ignored(self, small_grid: Grid) -> None:
        assert apply_edit(small_grid, WorldPoint(12, 0), EditAction.PAINT) is False
        assert apply_edit(small_grid, WorldPoint(0, 99), EditAction.PAINT) is False
