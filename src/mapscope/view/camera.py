"""Camera position and the rules that keep it inside the world."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Camera:
    """Top-left world coordinate of the visible window, in cells."""
    x: int = 0
    y: int = 0


def compute_bounds(grid_width: int, grid_height: int, drawable_width: int, drawable_height: int) -> tuple[int, int]:
    """
    Largest legal camera position for a drawable area.

    Drawable dimensions must already exclude ruler reservations. When the
    area is larger than the grid the bound is 0 and the camera stays pinned
    at the origin.
    """
    return max(0, grid_width - drawable_width), max(0, grid_height - drawable_height)


def clamp(camera: Camera, max_x: int, max_y: int) -> bool:
    """Pull the camera back into [0, max]. Returns True if it moved."""
    x = min(max(camera.x, 0), max_x)
    y = min(max(camera.y, 0), max_y)
    moved = (x, y) != (camera.x, camera.y)
    camera.x, camera.y = x, y
    return moved


class CameraController:
    """
    Owns the camera and its legal pan range.

    Call update_bounds() once per frame with the current drawable size;
    every movement afterwards saturates at the recomputed bounds.
    """

    def __init__(self, grid_width: int, grid_height: int, camera: Camera | None = None) -> None:
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.camera = camera if camera is not None else Camera()
        self._max_x = 0
        self._max_y = 0
        self._drawable: tuple[int, int] | None = None

    @property
    def max_x(self) -> int:
        return self._max_x

    @property
    def max_y(self) -> int:
        return self._max_y

    @property
    def half_page(self) -> int:
        """Rows moved by a half-page jump; never less than one."""
        height = self._drawable[1] if self._drawable else 0
        return max(1, height // 2)

    def update_bounds(self, drawable_width: int, drawable_height: int) -> tuple[int, int]:
        """Recompute bounds for a drawable size and clamp the camera into them."""
        drawable = (drawable_width, drawable_height)
        self._max_x, self._max_y = compute_bounds(
            self.grid_width, self.grid_height, drawable_width, drawable_height
        )
        if drawable != self._drawable:
            logger.debug(
                "Drawable area %dx%d, camera bounds (%d, %d)",
                drawable_width, drawable_height, self._max_x, self._max_y,
            )
            self._drawable = drawable
        if clamp(self.camera, self._max_x, self._max_y):
            logger.debug("Camera clamped to (%d, %d)", self.camera.x, self.camera.y)
        return self._max_x, self._max_y

    def move_by(self, dx: int, dy: int) -> None:
        """Pan by a signed delta, saturating at the bounds."""
        self.camera.x += dx
        self.camera.y += dy
        clamp(self.camera, self._max_x, self._max_y)

    def page_down(self) -> None:
        """Jump half a page down, snapping to the bottom bound on the last page."""
        step = self.half_page
        if self.camera.y + step < self._max_y:
            self.camera.y += step
        else:
            self.camera.y = self._max_y

    def page_up(self) -> None:
        """Jump half a page up, snapping to the top on the first page."""
        step = self.half_page
        if self.camera.y - step > 0:
            self.camera.y -= step
        else:
            self.camera.y = 0
