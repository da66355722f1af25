"""Projection of the visible slice of the grid into text rows, with rulers."""

from __future__ import annotations

from dataclasses import dataclass, field

from mapscope.core.constants import (
    RULER_BOTTOM_HEIGHT,
    RULER_LABEL_MODULO,
    RULER_LEFT_WIDTH,
    RULER_TOP_HEIGHT,
    RULER_X_STEP,
    RULER_Y_STEP,
)
from mapscope.core.glyphs import CellRenderer
from mapscope.core.grid import Grid
from mapscope.view.camera import Camera


@dataclass(frozen=True)
class RulerSpec:
    """Space reserved for coordinate rulers and how often they are labelled."""
    left_width: int = RULER_LEFT_WIDTH
    top_height: int = RULER_TOP_HEIGHT
    bottom_height: int = RULER_BOTTOM_HEIGHT
    x_step: int = RULER_X_STEP
    y_step: int = RULER_Y_STEP
    modulo: int = RULER_LABEL_MODULO

    def __post_init__(self) -> None:
        if min(self.left_width, self.top_height, self.bottom_height) < 0:
            raise ValueError("ruler reservations must not be negative")
        if min(self.x_step, self.y_step, self.modulo) <= 0:
            raise ValueError("ruler steps and modulo must be positive")


@dataclass(frozen=True)
class ViewportConfig:
    """
    Per-frame screen geometry.

    area_* is the whole surface (terminal size); drawable_* is what is left
    for map content once ruler reservations are taken out.
    """
    area_width: int
    area_height: int
    ruler_visible: bool = True
    rulers: RulerSpec = field(default_factory=RulerSpec)

    @property
    def offset_x(self) -> int:
        """Screen column of the first content column."""
        return self.rulers.left_width if self.ruler_visible else 0

    @property
    def offset_y(self) -> int:
        """Screen row of the first content row."""
        return self.rulers.top_height if self.ruler_visible else 0

    @property
    def reserved_rows(self) -> int:
        if not self.ruler_visible:
            return 0
        return self.rulers.top_height + self.rulers.bottom_height

    @property
    def drawable_width(self) -> int:
        return max(0, self.area_width - self.offset_x)

    @property
    def drawable_height(self) -> int:
        return max(0, self.area_height - self.reserved_rows)


class ViewportProjector:
    """
    Renders the camera's window over a grid as a rectangle of text.

    The output always has exactly area_height rows of exactly area_width
    characters; cells beyond the grid edge are padded with blanks.
    """

    def __init__(
        self,
        renderer: CellRenderer | None = None,
        rulers: RulerSpec | None = None,
        trailing_newline: bool = False,
    ) -> None:
        self.renderer = renderer or CellRenderer()
        self.rulers = rulers or RulerSpec()
        self.trailing_newline = trailing_newline

    def render(
        self,
        grid: Grid,
        camera: Camera,
        area_width: int,
        area_height: int,
        ruler_visible: bool,
    ) -> list[str]:
        """Render the visible slice as a list of rows."""
        viewport = ViewportConfig(area_width, area_height, ruler_visible, self.rulers)
        content_width = viewport.drawable_width
        content_height = viewport.drawable_height

        rows: list[str] = []
        if ruler_visible and self.rulers.top_height:
            rows.append(" " * self.rulers.left_width + self._x_ruler(camera.x, content_width))
            rows.extend([""] * (self.rulers.top_height - 1))

        for y in range(content_height):
            world_y = y + camera.y
            prefix = self._y_label(world_y) if ruler_visible else ""
            rows.append(prefix + self._cells(grid, camera.x, world_y, content_width))

        if ruler_visible:
            rows.extend([""] * self.rulers.bottom_height)

        return [row[:area_width].ljust(area_width) for row in rows[:area_height]]

    def render_text(
        self,
        grid: Grid,
        camera: Camera,
        area_width: int,
        area_height: int,
        ruler_visible: bool,
    ) -> str:
        """Render as a single string of newline-separated rows."""
        text = "\n".join(self.render(grid, camera, area_width, area_height, ruler_visible))
        if self.trailing_newline:
            text += "\n"
        return text

    def _x_ruler(self, camera_x: int, width: int) -> str:
        """Column labels; each label starts at the column it names."""
        label_width = len(str(self.rulers.modulo - 1))
        chars = [" "] * width
        for x in range(width):
            world_x = x + camera_x
            if world_x % self.rulers.x_step:
                continue
            label = f"{world_x % self.rulers.modulo:>{label_width}}"
            for i, ch in enumerate(label[: width - x]):
                chars[x + i] = ch
        return "".join(chars)

    def _y_label(self, world_y: int) -> str:
        width = self.rulers.left_width
        if width == 0:
            return ""
        if world_y % self.rulers.y_step:
            return " " * width
        label = f"{world_y % self.rulers.modulo:>{width - 1}} "
        return label[-width:]

    def _cells(self, grid: Grid, camera_x: int, world_y: int, width: int) -> str:
        if world_y >= grid.height:
            return " " * width
        glyph_for = self.renderer.glyph_for
        out: list[str] = []
        for x in range(width):
            world_x = x + camera_x
            if world_x < grid.width:
                out.append(glyph_for(grid.get(world_x, world_y)))
            else:
                out.append(" ")
        return "".join(out)
