"""Map display widget: camera panning, rulers and pointer editing."""

from __future__ import annotations

import logging
from typing import Optional

from mapscope.core.glyphs import CellRenderer
from mapscope.core.grid import Grid
from mapscope.cli.core.input import KeyEvent, MouseButton, MouseEvent
from mapscope.cli.core.shortcuts import ShortcutContext, ShortcutRegistry, create_default_shortcuts
from mapscope.cli.widgets.base import BaseWidget, Rect
from mapscope.view.camera import Camera, CameraController
from mapscope.view.pointer import EditAction, OutsideDrawable, PointerMapper, apply_edit
from mapscope.view.viewport import RulerSpec, ViewportConfig, ViewportProjector

logger = logging.getLogger(__name__)

BUTTON_ACTIONS = {
    MouseButton.LEFT: EditAction.PAINT,
    MouseButton.RIGHT: EditAction.ERASE,
}


class MapCanvasWidget(BaseWidget):
    """
    Shows the camera's window over a grid.

    The widget owns the camera controller; call sync() whenever the screen
    size may have changed so the camera is clamped before input is applied.
    """

    def __init__(
        self,
        grid: Grid,
        renderer: Optional[CellRenderer] = None,
        rulers: Optional[RulerSpec] = None,
        show_rulers: bool = True,
        shortcuts: Optional[ShortcutRegistry] = None,
    ) -> None:
        super().__init__()
        self.grid = grid
        self.rulers = rulers or RulerSpec()
        self.controller = CameraController(grid.width, grid.height)
        self.projector = ViewportProjector(renderer, self.rulers)
        self.pointer = PointerMapper(self.rulers)
        self.show_rulers = show_rulers
        self._shortcuts = shortcuts or create_default_shortcuts()
        self._viewport: Optional[ViewportConfig] = None

    @property
    def camera(self) -> Camera:
        return self.controller.camera

    def sync(self, width: int, height: int) -> ViewportConfig:
        """Recompute the viewport for a screen size and clamp the camera."""
        self._viewport = ViewportConfig(width, height, self.show_rulers, self.rulers)
        self.controller.update_bounds(self._viewport.drawable_width, self._viewport.drawable_height)
        return self._viewport

    def render(self, bounds: Rect) -> list[str]:
        viewport = self.sync(bounds.width, bounds.height)
        return self.projector.render(
            self.grid, self.camera, viewport.area_width, viewport.area_height, viewport.ruler_visible
        )

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def handle_input(self, event: KeyEvent) -> bool:
        shortcut = self._shortcuts.match(event, ShortcutContext.MAP)
        if shortcut is None:
            return False
        handler = getattr(self, shortcut.handler, None)
        if handler is None:
            return False
        handler()
        return True

    def handle_mouse(self, event: MouseEvent) -> bool:
        """Paint or erase the cell under a button press."""
        action = BUTTON_ACTIONS.get(event.button)
        if action is None or not event.pressed:
            return False
        drawable = None
        if self._viewport is not None:
            drawable = (self._viewport.drawable_width, self._viewport.drawable_height)
        try:
            point = self.pointer.map(event.column, event.row, self.camera, self.show_rulers, drawable)
        except OutsideDrawable as e:
            logger.debug("Ignored %s: %s", action.value, e)
            return False
        if apply_edit(self.grid, point, action):
            logger.debug("%s cell (%d, %d)", action.value.capitalize(), point.x, point.y)
            return True
        logger.debug("Ignored %s outside grid at (%d, %d)", action.value, point.x, point.y)
        return False

    def move_left(self) -> None:
        self.controller.move_by(-1, 0)

    def move_right(self) -> None:
        self.controller.move_by(1, 0)

    def move_up(self) -> None:
        self.controller.move_by(0, -1)

    def move_down(self) -> None:
        self.controller.move_by(0, 1)

    def half_page_down(self) -> None:
        self.controller.page_down()

    def half_page_up(self) -> None:
        self.controller.page_up()

    def toggle_rulers(self) -> None:
        """Show or hide the rulers; bounds follow immediately."""
        self.show_rulers = not self.show_rulers
        logger.debug("Rulers %s", "shown" if self.show_rulers else "hidden")
        if self._viewport is not None:
            self.sync(self._viewport.area_width, self._viewport.area_height)

    def get_status(self) -> str:
        """Camera position summary for the log."""
        return f"camera=({self.camera.x}, {self.camera.y}) max=({self.controller.max_x}, {self.controller.max_y})"
