from __future__ import annotations
import math
from typing import Tuple
from boundednumbers import clamp
from ..conversions import oklch_to_rgb
from ..types.color_types import (
    ColorSpace,
    DEFAULT_ALPHA,
    HUE_360,
    MAX_PERCENT,
    OKLCH_EQUALITY_TOLERANCE,
    Scalar,
)
from ..units.bounded import Alpha, Chroma, Hue, Lightness
from ..utils.num_utils import lerp
from .color_base import Color

DEFAULT_LIGHTNESS_STEP = 0.03
DEFAULT_CHROMA_STEP = 0.02
DEFAULT_HUE_STEP = 10
SATURATE_CEILING = 0.4


def shortest_hue_delta(start: float, end: float) -> float:
    """Signed hue difference in ``[-180, 180)`` going the short way round."""
    return ((end - start + 540.0) % HUE_360) - 180.0


class OKLCH(Color):
    """
    Perceptual-style color: lightness ratio in ``[0, 1]``, chroma in
    ``[0, 0.5]``, hue in degrees.

    Conversions to and from RGB are a trigonometric approximation and are not
    gamut accurate; equality therefore allows an absolute drift of 0.01 on
    each component, and hashing only groups by color space.
    """
    __slots__ = ('_lightness', '_chroma', '_hue')
    space = ColorSpace.OKLCH

    def __init__(self, lightness: Scalar = 0.0, chroma: Scalar = 0.0, hue: Scalar = 0.0,
                 alpha: Scalar = DEFAULT_ALPHA) -> None:
        self._lightness = Lightness(float(lightness) * MAX_PERCENT)
        self._chroma = Chroma(chroma)
        self._hue = Hue(hue)
        self._alpha = Alpha(alpha)
        self._freeze()

    @property
    def lightness(self) -> float:
        return float(self._lightness) / MAX_PERCENT

    @property
    def lightness_percentage(self) -> Lightness:
        return self._lightness

    @property
    def chroma(self) -> Chroma:
        return self._chroma

    @property
    def hue(self) -> Hue:
        return self._hue

    @property
    def value(self) -> Tuple[float, ...]:
        return self.lightness, float(self._chroma), float(self._hue), float(self._alpha)

    @classmethod
    def derive(cls, seed: int, lightness: float = 0.58,
               chroma_range: Tuple[float, float] = (0.10, 0.18),
               hue_spread: int = 997, hue_base: float = 137.508) -> OKLCH:
        """
        Deterministic color from an integer seed.

        Hue steps by ``hue_base`` (the golden angle by default) for each of
        ``seed mod hue_spread`` positions; chroma comes from the seed's second
        byte spread over ``chroma_range``.
        """
        h32 = cls._seed32(seed)
        hue = (hue_base * (h32 % hue_spread)) % HUE_360
        low, high = chroma_range
        chroma = low + ((h32 >> 8) & 0xFF) / 255.0 * (high - low)
        return cls(lightness, chroma, hue)

    # ---- conversions ----
    def to_rgb(self):
        from .rgb import RGB  # local import to avoid cycles
        return RGB(*oklch_to_rgb(self.lightness, self._chroma, self._hue), alpha=self._alpha)

    def to_hsl(self):
        return self.to_rgb().to_hsl()

    def to_oklch(self) -> OKLCH:
        return self

    # ---- derived colors ----
    def blend(self, other: Color, amount: float = 0.5) -> OKLCH:
        """Linear lightness, chroma and alpha; hue takes the shortest arc."""
        other, t = self._blend_operands(other, amount)
        hue = (self._hue + shortest_hue_delta(self._hue, other.hue) * t) % HUE_360
        return OKLCH(
            lerp(self.lightness, other.lightness, t),
            lerp(self._chroma, other.chroma, t),
            hue,
            alpha=lerp(self._alpha, other.alpha, t),
        )

    def lighten(self, amount: float = DEFAULT_LIGHTNESS_STEP) -> OKLCH:
        return self._with(lightness=clamp(self.lightness + amount, 0.0, 1.0))

    def darken(self, amount: float = DEFAULT_LIGHTNESS_STEP) -> OKLCH:
        return self._with(lightness=clamp(self.lightness - amount, 0.0, 1.0))

    def saturate(self, amount: float = DEFAULT_CHROMA_STEP) -> OKLCH:
        return self._with(chroma=min(float(self._chroma) + amount, SATURATE_CEILING))

    def desaturate(self, amount: float = DEFAULT_CHROMA_STEP) -> OKLCH:
        return self._with(chroma=max(float(self._chroma) - amount, 0.0))

    def rotate(self, amount: float = DEFAULT_HUE_STEP) -> OKLCH:
        return self._with(hue=self._hue + amount)

    def _with(self, lightness=None, chroma=None, hue=None) -> OKLCH:
        return OKLCH(
            self.lightness if lightness is None else lightness,
            self._chroma if chroma is None else chroma,
            self._hue if hue is None else hue,
            alpha=self._alpha,
        )

    # ---- CSS output ----
    def to_css_oklch(self) -> str:
        return f"oklch({self.lightness:.4f} {float(self._chroma):.4f} {float(self._hue):.2f})"

    def to_css_vars(self) -> str:
        return f"--ul:{self.lightness:.4f};--uc:{float(self._chroma):.4f};--uh:{float(self._hue):.2f};"

    def to_css_color_mix(self, bg_css: str = "var(--bg)", a_pct: Scalar = 72, bg_pct: Scalar = 28) -> str:
        return f"color-mix(in oklch, {self.to_css_oklch()} {a_pct}%, {bg_css} {bg_pct}%)"

    def __eq__(self, other):
        if not isinstance(other, OKLCH):
            return NotImplemented
        return all(
            math.isclose(a, b, abs_tol=OKLCH_EQUALITY_TOLERANCE)
            for a, b in zip(
                (self.lightness, self._chroma, self._hue),
                (other.lightness, other.chroma, other.hue),
            )
        )

    def __hash__(self):
        return hash(self.space)

    def __str__(self):
        return self.to_css_oklch()
