"""Shared constants for map storage and display."""

# Default world dimensions
MAP_WIDTH = 200
MAP_HEIGHT = 200

# Cell value sentinels written by paint / erase
MAX_VALUE = 1.0
MIN_VALUE = 0.0

# Noise sampling: world coordinate / dimension * scale
NOISE_SCALE = 10.0
NOISE_SEED = 10

# Ruler reservations (columns on the left, rows above and below the map)
RULER_LEFT_WIDTH = 4
RULER_TOP_HEIGHT = 1
RULER_BOTTOM_HEIGHT = 1

# Label periods along each axis; labels wrap at RULER_LABEL_MODULO
RULER_X_STEP = 10
RULER_Y_STEP = 5
RULER_LABEL_MODULO = 100

# Block drawing characters
BLOCK = {
    "full": "█",       # Full block
    "light": "░",      # Light shade
    "medium": "▒",     # Medium shade
    "dark": "▓",       # Dark shade
}

# Four-band thresholds (upper bound of each band, inclusive)
FOUR_BAND_THRESHOLDS: tuple[float, float, float] = (-0.5, 0.0, 0.5)
