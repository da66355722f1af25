"""Screen-to-world pointer mapping and cell edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mapscope.core.constants import MAX_VALUE, MIN_VALUE
from mapscope.core.grid import Grid
from mapscope.view.camera import Camera
from mapscope.view.viewport import RulerSpec


class OutsideDrawable(ValueError):
    """The pointer landed on a ruler or other non-map region."""

    def __init__(self, screen_x: int, screen_y: int) -> None:
        super().__init__(f"screen ({screen_x}, {screen_y}) is outside the map area")
        self.screen_x = screen_x
        self.screen_y = screen_y


@dataclass(frozen=True)
class WorldPoint:
    """A world-space cell coordinate."""
    x: int
    y: int


class EditAction(Enum):
    """What a pointer press does to the cell under it."""
    PAINT = "paint"
    ERASE = "erase"

    @property
    def cell_value(self) -> float:
        return MAX_VALUE if self is EditAction.PAINT else MIN_VALUE


@dataclass
class PointerMapper:
    """Inverts the projector's placement of cells on screen."""
    rulers: RulerSpec = field(default_factory=RulerSpec)

    def map(
        self,
        screen_x: int,
        screen_y: int,
        camera: Camera,
        ruler_visible: bool,
        drawable: tuple[int, int] | None = None,
    ) -> WorldPoint:
        """
        Convert a screen cell to the world cell drawn there.

        Raises OutsideDrawable when the point lies on the rulers, or, if
        drawable (width, height) is given, beyond the content area. The
        result is not checked against the grid; Grid.set ignores writes
        outside it.
        """
        cx, cy = screen_x, screen_y
        if ruler_visible:
            cx -= self.rulers.left_width
            cy -= self.rulers.top_height
        if cx < 0 or cy < 0:
            raise OutsideDrawable(screen_x, screen_y)
        if drawable is not None and (cx >= drawable[0] or cy >= drawable[1]):
            raise OutsideDrawable(screen_x, screen_y)
        return WorldPoint(cx + camera.x, cy + camera.y)


def apply_edit(grid: Grid, point: WorldPoint, action: EditAction) -> bool:
    """Write one cell for a paint or erase. Returns True if a cell changed."""
    return grid.set(point.x, point.y, action.cell_value)
