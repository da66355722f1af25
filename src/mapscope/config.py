"""
Viewer configuration.

One dataclass collects every tunable of the map viewer; defaults reproduce
the stock 200x200 map with rulers and help shown at startup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from mapscope.core.constants import MAP_HEIGHT, MAP_WIDTH, NOISE_SCALE, NOISE_SEED
from mapscope.core.glyphs import GlyphPolicy
from mapscope.view.viewport import RulerSpec

SEED_MODES = ("empty", "noise")
FRAME_TIMEOUT = 0.1
DEFAULT_LOG_FILE = Path("mapscope.log")


@dataclass
class ViewerConfig:
    """Settings for one viewer session."""
    map_width: int = MAP_WIDTH
    map_height: int = MAP_HEIGHT
    rulers: RulerSpec = field(default_factory=RulerSpec)
    show_rulers: bool = True
    show_help: bool = True
    seed_mode: str = "empty"
    glyph_policy: GlyphPolicy = GlyphPolicy.BINARY
    noise_seed: int = NOISE_SEED
    noise_scale: float = NOISE_SCALE
    noise_octaves: int = 1
    frame_timeout: float = FRAME_TIMEOUT
    log_file: Optional[Path] = DEFAULT_LOG_FILE
    log_level: str = "DEBUG"

    def validate(self) -> "ViewerConfig":
        """Raise ValueError for settings the viewer cannot run with."""
        if self.map_width <= 0 or self.map_height <= 0:
            raise ValueError(f"map size must be positive, got {self.map_width}x{self.map_height}")
        if self.seed_mode not in SEED_MODES:
            raise ValueError(f"unknown seed mode {self.seed_mode!r} (expected one of {', '.join(SEED_MODES)})")
        if self.frame_timeout <= 0:
            raise ValueError("frame timeout must be positive")
        if self.noise_octaves <= 0:
            raise ValueError("noise octaves must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level {self.log_level!r}")
        return self

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())
