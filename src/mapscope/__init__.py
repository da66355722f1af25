"""
mapscope: terminal viewer and editor for large 2D maps

Pan a small window over a large fixed-size grid, toggle coordinate
rulers and paint or erase cells with the mouse.

Quick Start:
    >>> from mapscope import Grid, Camera, ViewportProjector
    >>> grid = Grid.empty(200, 200)
    >>> rows = ViewportProjector().render(grid, Camera(), 40, 12, ruler_visible=True)
    >>> print("\\n".join(rows))

Features:
    - Fixed-size scalar grid with bounds-checked access
    - Binary and four-band glyph policies
    - Camera clamped to the map on every resize
    - Toggleable X/Y rulers with cyclic two-digit labels
    - Mouse painting mapped back from screen to world cells
"""

__version__ = "0.1.0"

# Core types
from mapscope.core.grid import Grid, OutOfBounds
from mapscope.core.glyphs import CellRenderer, GlyphPolicy

# Viewport pipeline
from mapscope.view.camera import Camera, CameraController
from mapscope.view.viewport import RulerSpec, ViewportConfig, ViewportProjector
from mapscope.view.pointer import EditAction, OutsideDrawable, PointerMapper, WorldPoint

__all__ = [
    # Version
    "__version__",
    # Core types
    "Grid",
    "OutOfBounds",
    "CellRenderer",
    "GlyphPolicy",
    # Viewport
    "Camera",
    "CameraController",
    "RulerSpec",
    "ViewportConfig",
    "ViewportProjector",
    # Editing
    "EditAction",
    "OutsideDrawable",
    "PointerMapper",
    "WorldPoint",
]
