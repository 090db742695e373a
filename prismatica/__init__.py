"""Prismatica: color models, harmonies, linear gradients and terminal palettes."""

from .errors import ColorError, InvalidArgument, GradientError
from .types import ColorSpace, AnsiMode, Layer
from .units import (
    Hue,
    Saturation,
    Lightness,
    Chroma,
    Alpha,
    Percentage,
    Degrees,
    Direction,
)
from .colors import Color, Harmony, RGB, HSL, OKLCH, color_classes
from .gradients import (
    linear,
    balance_positions,
    Bitmap,
    Stop,
    LinearGradient,
    RGBLinearGradient,
    HSLLinearGradient,
    OKLCHLinearGradient,
)
from .palette import quantize, to_truecolor, to_256, to_16

__version__ = "0.1.0"

__all__ = [
    "ColorError",
    "InvalidArgument",
    "GradientError",
    "ColorSpace",
    "AnsiMode",
    "Layer",
    "Hue",
    "Saturation",
    "Lightness",
    "Chroma",
    "Alpha",
    "Percentage",
    "Degrees",
    "Direction",
    "Color",
    "Harmony",
    "RGB",
    "HSL",
    "OKLCH",
    "color_classes",
    "linear",
    "balance_positions",
    "Bitmap",
    "Stop",
    "LinearGradient",
    "RGBLinearGradient",
    "HSLLinearGradient",
    "OKLCHLinearGradient",
    "quantize",
    "to_truecolor",
    "to_256",
    "to_16",
]
