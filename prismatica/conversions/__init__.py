"""
Prismatica Color Space Conversions
==================================

Pure scalar conversions between the three supported color spaces. Every
function takes and returns plain numbers so color classes can stay thin.

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Channels 0-255 in, whole-number (h, s, l) out; achromatic input
        yields hue 0 and saturation 0.

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Whole-number channels 0-255.
    hue_to_rgb(p, q, t)
        Piecewise helper used by hsl_to_rgb.

RGB ↔ OKLCH (trigonometric approximation, not gamut accurate):
    rgb_to_oklch(r, g, b)
    oklch_to_rgb(l, c, h)

Luminance:
    relative_luminance(r, g, b)
        WCAG relative luminance in [0, 1].
    contrast_ratio(l1, l2)
        WCAG contrast ratio of two luminances.
"""
from .to_hsl import rgb_to_hsl
from .to_rgb import hsl_to_rgb, hue_to_rgb, oklch_to_rgb
from .to_oklch import rgb_to_oklch
from .luminance import relative_luminance, contrast_ratio, linearize_channel

__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hue_to_rgb",
    "oklch_to_rgb",
    "rgb_to_oklch",
    "relative_luminance",
    "contrast_ratio",
    "linearize_channel",
]
