from typing import Tuple
from ..types.color_types import MAX_CHANNEL
from ..utils.num_utils import round_half_up


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """
    Convert 0-255 RGB channels to HSL.

    Args:
        r, g, b: channels in [0, 255]

    Returns:
        (hue 0-359, saturation 0-100, lightness 0-100), each rounded to a
        whole number. Achromatic input gives hue 0 and saturation 0.
    """
    r, g, b = r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min
    lightness = (c_max + c_min) / 2

    if delta == 0:
        hue = saturation = 0.0
    else:
        if lightness > 0.5:
            saturation = delta / (2 - c_max - c_min)
        else:
            saturation = delta / (c_max + c_min)

        if c_max == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif c_max == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return (
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )
