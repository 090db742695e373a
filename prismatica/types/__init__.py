from .color_types import (
    ColorSpace,
    Scalar,
    ChannelTuple,
    DEFAULT_ALPHA,
    MAX_CHANNEL,
    MAX_PERCENT,
    HUE_360,
    MAX_CHROMA,
    OKLCH_EQUALITY_TOLERANCE,
    MONOCHROMATIC_RANGE,
)
from .ansi_types import (
    AnsiMode,
    Layer,
    DEFAULT_ANSI_MODE,
    DEFAULT_LAYER,
    GRAYSCALE_THRESHOLD,
    CUBE_THRESHOLDS,
    CUBE_LEVELS,
    STANDARD_COLORS,
)

__all__ = [
    "ColorSpace",
    "Scalar",
    "ChannelTuple",
    "DEFAULT_ALPHA",
    "MAX_CHANNEL",
    "MAX_PERCENT",
    "HUE_360",
    "MAX_CHROMA",
    "OKLCH_EQUALITY_TOLERANCE",
    "MONOCHROMATIC_RANGE",
    "AnsiMode",
    "Layer",
    "DEFAULT_ANSI_MODE",
    "DEFAULT_LAYER",
    "GRAYSCALE_THRESHOLD",
    "CUBE_THRESHOLDS",
    "CUBE_LEVELS",
    "STANDARD_COLORS",
]
