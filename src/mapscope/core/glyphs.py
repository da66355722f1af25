"""Cell glyphs - mapping scalar values to single display characters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from mapscope.core.constants import BLOCK, FOUR_BAND_THRESHOLDS


class GlyphPolicy(Enum):
    """How cell values are turned into glyphs."""
    BINARY = "binary"          # Editable canvas: empty vs filled
    FOUR_BAND = "four-band"    # Continuous data, e.g. noise in [-1, 1]

    @property
    def glyphs(self) -> tuple[str, ...]:
        """Glyphs from lowest to highest band."""
        if self is GlyphPolicy.BINARY:
            return (BLOCK["light"], BLOCK["full"])
        return (BLOCK["light"], BLOCK["medium"], BLOCK["dark"], BLOCK["full"])

    @property
    def thresholds(self) -> tuple[float, ...]:
        """Inclusive upper bound of every band except the last."""
        if self is GlyphPolicy.BINARY:
            return (0.0,)
        return FOUR_BAND_THRESHOLDS


@dataclass(frozen=True)
class CellRenderer:
    """Maps a cell value to a glyph under a fixed policy."""
    policy: GlyphPolicy = GlyphPolicy.BINARY

    def band_for(self, value: float) -> int:
        """
        Index of the band containing value.

        Bands are exclusive below and inclusive above: with a threshold of
        0.0, the value 0.0 falls in the lower band. NaN always lands in
        band 0.
        """
        if math.isnan(value):
            return 0
        for band, upper in enumerate(self.policy.thresholds):
            if value <= upper:
                return band
        return len(self.policy.thresholds)

    def glyph_for(self, value: float) -> str:
        """Get the display character for a cell value."""
        return self.policy.glyphs[self.band_for(value)]
