# No dependencies
from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ChannelTuple = Tuple[int, int, int]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


MAX_CHANNEL = 255
MAX_PERCENT = 100.0
HUE_360 = 360.0
MAX_CHROMA = 0.5

DEFAULT_ALPHA = 100.0

# Absolute tolerance on lightness, chroma and hue
OKLCH_EQUALITY_TOLERANCE = 0.01

# Inclusive lightness range walked by Harmony.monochromatic
MONOCHROMATIC_RANGE = (15.0, 85.0)
