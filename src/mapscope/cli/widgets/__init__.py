"""Widgets making up the map viewer screen."""

from mapscope.cli.widgets.base import BaseWidget, Rect
from mapscope.cli.widgets.map_canvas import MapCanvasWidget
from mapscope.cli.widgets.help_overlay import HelpOverlayWidget

__all__ = [
    "BaseWidget",
    "Rect",
    "MapCanvasWidget",
    "HelpOverlayWidget",
]
