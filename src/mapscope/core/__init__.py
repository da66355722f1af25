"""Core map data: grid storage, glyph policies and noise seeding."""

from mapscope.core.grid import Grid, OutOfBounds
from mapscope.core.glyphs import CellRenderer, GlyphPolicy

__all__ = ["Grid", "OutOfBounds", "CellRenderer", "GlyphPolicy"]
