from typing import Tuple
from .luminance import relative_luminance
from .to_hsl import rgb_to_hsl
from ..types.color_types import MAX_PERCENT

# Chroma reached by a fully saturated color at mid lightness
PEAK_CHROMA = 0.2


def rgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Approximate OKLCH from RGB: lightness is the WCAG luminance, chroma scales
    HSL saturation and peaks at mid lightness, hue is the HSL hue.
    """
    lightness = relative_luminance(r, g, b)
    hue, saturation, _ = rgb_to_hsl(r, g, b)
    chroma = (saturation / MAX_PERCENT) * PEAK_CHROMA * (1 - abs(lightness - 0.5) * 2)
    return lightness, chroma, float(hue)
