import math
from typing import Tuple
from boundednumbers import clamp
from ..types.color_types import MAX_CHANNEL, MAX_PERCENT, HUE_360
from ..utils.num_utils import round_half_up

ONE_THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Piecewise HSL helper; ``t`` is a hue fraction and is wrapped into [0, 1]."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """
    Convert HSL (hue in degrees, saturation/lightness in percent) to 0-255 RGB.
    """
    h = (h % HUE_360) / HUE_360
    s = s / MAX_PERCENT
    l = l / MAX_PERCENT

    if s == 0:
        gray = round_half_up(l * MAX_CHANNEL)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        round_half_up(hue_to_rgb(p, q, h + ONE_THIRD) * MAX_CHANNEL),
        round_half_up(hue_to_rgb(p, q, h) * MAX_CHANNEL),
        round_half_up(hue_to_rgb(p, q, h - ONE_THIRD) * MAX_CHANNEL),
    )


def oklch_to_rgb(l: float, c: float, h: float) -> Tuple[int, int, int]:
    """
    Approximate OKLCH (lightness ratio 0-1, chroma, hue degrees) as RGB.

    A gray base ``round(l * 255)`` is offset per channel by the cosine of the
    hue shifted by 0°, 120° and 240°, scaled by ``c * 255``.
    """
    base = round_half_up(l * MAX_CHANNEL)
    amplitude = c * MAX_CHANNEL
    h_rad = math.radians(h)

    channels = []
    for k in range(3):
        offset = round_half_up(math.cos(h_rad + k * 2 * math.pi / 3) * amplitude)
        channels.append(int(clamp(base + offset, 0, MAX_CHANNEL)))
    return tuple(channels)
