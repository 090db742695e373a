from .color_base import Color
from .harmony import Harmony
from .rgb import RGB
from .hsl import HSL
from .oklch import OKLCH

color_classes = {
    RGB.space: RGB,
    HSL.space: HSL,
    OKLCH.space: OKLCH,
}

__all__ = ["Color", "Harmony", "RGB", "HSL", "OKLCH", "color_classes"]
