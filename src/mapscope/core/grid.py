"""Grid - fixed-size 2D field of real values making up the world map."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from mapscope.core.constants import MAX_VALUE, NOISE_SCALE

logger = logging.getLogger(__name__)

NoiseSampler = Callable[[float, float], float]


class OutOfBounds(IndexError):
    """Raised when a read addresses a cell outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) out of bounds (size={width}x{height})")
        self.x = x
        self.y = y


class Grid:
    """
    A fixed-size, row-major 2D grid of real values.

    Dimensions never change after construction. Reads outside the grid
    raise OutOfBounds; writes outside it are ignored so stray pointer
    coordinates can never corrupt or crash the map.
    """

    __slots__ = ("_width", "_height", "_rows")

    def __init__(self, width: int, height: int, fill: float = 0.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._rows: list[list[float]] = [[fill] * width for _ in range(height)]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        """All-zero grid with landmark cells so an untouched map has reference points."""
        grid = cls(width, height)
        grid.seed_landmarks()
        return grid

    @classmethod
    def from_noise(
        cls,
        width: int,
        height: int,
        sampler: NoiseSampler,
        scale: float = NOISE_SCALE,
    ) -> "Grid":
        """
        Build a grid by sampling a 2D noise function.

        Each cell (x, y) receives sampler(x / width * scale, y / height * scale).
        The result is deterministic for a deterministic sampler.
        """
        grid = cls(width, height)
        for y, row in enumerate(grid._rows):
            ny = y / height * scale
            for x in range(width):
                row[x] = float(sampler(x / width * scale, ny))
        logger.debug("Filled %dx%d grid from noise (scale=%s)", width, height, scale)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> float:
        """Get the value at (x, y)."""
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        return self._rows[y][x]

    def set(self, x: int, y: int, value: float) -> bool:
        """
        Set the value at (x, y).

        Out-of-range coordinates are silently ignored. Returns True if a
        cell was written.
        """
        if not self.in_bounds(x, y):
            return False
        self._rows[y][x] = value
        return True

    def seed_landmarks(self, value: float = MAX_VALUE) -> None:
        """Mark the origin and a few cells near the far corner."""
        w, h = self._width, self._height
        for x, y in ((0, 0), (w - 1, h - 1), (w - 2, h - 5), (w - 10, h - 10)):
            self.set(x, y, value)

    def rows(self) -> Iterator[list[float]]:
        """Iterate over rows (top to bottom)."""
        yield from self._rows
