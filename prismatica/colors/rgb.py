from __future__ import annotations
from typing import Tuple
from boundednumbers import clamp
from ..conversions import rgb_to_hsl, rgb_to_oklch
from ..types.color_types import ChannelTuple, ColorSpace, DEFAULT_ALPHA, MAX_CHANNEL, Scalar
from ..units.bounded import Alpha
from ..utils.num_utils import round_half_up, lerp
from .color_base import Color

DEFAULT_RGB_STEP = 0.1


def _channel(value: Scalar) -> int:
    return int(clamp(round_half_up(float(value)), 0, MAX_CHANNEL))


class RGB(Color):
    """
    sRGB color with integer channels in ``[0, 255]`` and an alpha percentage.

    Channels are rounded half away from zero, then clamped.
    """
    __slots__ = ('_red', '_green', '_blue')
    space = ColorSpace.RGB

    def __init__(self, red: Scalar = 0, green: Scalar = 0, blue: Scalar = 0,
                 alpha: Scalar = DEFAULT_ALPHA) -> None:
        self._red = _channel(red)
        self._green = _channel(green)
        self._blue = _channel(blue)
        self._alpha = Alpha(alpha)
        self._freeze()

    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def channels(self) -> ChannelTuple:
        return self._red, self._green, self._blue

    @property
    def value(self) -> Tuple[float, ...]:
        return self._red, self._green, self._blue, float(self._alpha)

    @classmethod
    def derive(cls, seed: int, brightness: float = 180, saturation: float = 0.7) -> RGB:
        """
        Deterministic color from an integer seed.

        The low three bytes of the seed give raw channels, which are pulled
        toward their average by ``saturation`` (1 keeps them, 0 makes gray)
        and scaled so that ``brightness`` 127.5 leaves them unchanged.

        Raises:
            InvalidArgument: if ``seed`` is not an integer.
        """
        h32 = cls._seed32(seed)
        bases = (h32 & 0xFF, (h32 >> 8) & 0xFF, (h32 >> 16) & 0xFF)
        average = sum(bases) / 3.0
        scale = brightness / 127.5
        channels = [
            clamp((average + (base - average) * saturation) * scale, 0, MAX_CHANNEL)
            for base in bases
        ]
        return cls(*channels)

    # ---- conversions ----
    def to_rgb(self) -> RGB:
        return self

    def to_hsl(self):
        from .hsl import HSL  # local import to avoid cycles
        return HSL(*rgb_to_hsl(*self.channels), alpha=self._alpha)

    def to_oklch(self):
        from .oklch import OKLCH  # local import to avoid cycles
        return OKLCH(*rgb_to_oklch(*self.channels), alpha=self._alpha)

    def to_hex(self) -> str:
        return f"#{self._red:02x}{self._green:02x}{self._blue:02x}"

    # ---- derived colors ----
    def blend(self, other: Color, amount: float = 0.5) -> RGB:
        """Linear per-channel mix; ``amount`` 0 keeps self, 1 gives ``other``."""
        other, t = self._blend_operands(other, amount)
        return RGB(
            lerp(self._red, other.red, t),
            lerp(self._green, other.green, t),
            lerp(self._blue, other.blue, t),
            alpha=lerp(self._alpha, other.alpha, t),
        )

    def lighten(self, amount: float = DEFAULT_RGB_STEP) -> RGB:
        return self.blend(RGB(255, 255, 255, alpha=self._alpha), amount)

    def darken(self, amount: float = DEFAULT_RGB_STEP) -> RGB:
        return self.blend(RGB(0, 0, 0, alpha=self._alpha), amount)

    def __str__(self):
        return self.to_hex()
