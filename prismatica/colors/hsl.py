from __future__ import annotations
from collections.abc import Sequence
from typing import Callable, List, Optional, Tuple, Union
from boundednumbers import clamp
from ..conversions import hsl_to_rgb
from ..errors import InvalidArgument
from ..types.color_types import ColorSpace, DEFAULT_ALPHA, MAX_PERCENT, Scalar
from ..units.bounded import Alpha, Hue, Lightness, Saturation
from ..utils.num_utils import lerp, round_half_up
from .color_base import Color

ProgressionSpec = Union[Callable[["HSL", int], Scalar], Sequence]


class HSL(Color):
    """Hue in degrees (wrapped), saturation and lightness in percent (clamped)."""
    __slots__ = ('_hue', '_saturation', '_lightness')
    space = ColorSpace.HSL

    def __init__(self, hue: Scalar = 0.0, saturation: Scalar = 0.0, lightness: Scalar = 0.0,
                 alpha: Scalar = DEFAULT_ALPHA) -> None:
        self._hue = Hue(hue)
        self._saturation = Saturation(saturation)
        self._lightness = Lightness(lightness)
        self._alpha = Alpha(alpha)
        self._freeze()

    @property
    def hue(self) -> Hue:
        return self._hue

    @property
    def saturation(self) -> Saturation:
        return self._saturation

    @property
    def lightness(self) -> Lightness:
        return self._lightness

    @property
    def value(self) -> Tuple[float, ...]:
        return float(self._hue), float(self._saturation), float(self._lightness), float(self._alpha)

    @classmethod
    def derive(cls, seed: int, lightness: Scalar = 50,
               saturation_range: Tuple[Scalar, Scalar] = (40, 80)) -> HSL:
        """
        Deterministic color from an integer seed: hue from ``seed mod 360``,
        saturation from the seed's second byte spread over ``saturation_range``.
        """
        h32 = cls._seed32(seed)
        low, high = saturation_range
        saturation = low + ((h32 >> 8) & 0xFF) / 255.0 * (high - low)
        return cls(h32 % 360, saturation, lightness)

    # ---- conversions ----
    def to_rgb(self):
        from .rgb import RGB  # local import to avoid cycles
        return RGB(*hsl_to_rgb(self._hue, self._saturation, self._lightness), alpha=self._alpha)

    def to_hsl(self) -> HSL:
        return self

    def to_oklch(self):
        return self.to_rgb().to_oklch()

    # ---- derived colors ----
    def blend(self, other: Color, amount: float = 0.5) -> HSL:
        """
        Component-wise linear mix.

        Hue is interpolated on the raw numbers with no shortest-arc
        correction, so 10° and 350° meet at 180°.
        """
        other, t = self._blend_operands(other, amount)
        return HSL(
            lerp(self._hue, other.hue, t),
            lerp(self._saturation, other.saturation, t),
            lerp(self._lightness, other.lightness, t),
            alpha=lerp(self._alpha, other.alpha, t),
        )

    def lighten(self, amount: float = 0.1) -> HSL:
        amount = float(clamp(float(amount), 0.0, 1.0))
        lightness = self._lightness + (MAX_PERCENT - self._lightness) * amount
        return HSL(self._hue, self._saturation, lightness, alpha=self._alpha)

    def darken(self, amount: float = 0.1) -> HSL:
        amount = float(clamp(float(amount), 0.0, 1.0))
        return HSL(self._hue, self._saturation, self._lightness * (1 - amount), alpha=self._alpha)

    def progression(self, steps: int, lightness: ProgressionSpec,
                    saturation: Optional[ProgressionSpec] = None) -> List[HSL]:
        """
        Build ``steps`` colors sharing this hue and alpha.

        Args:
            steps: number of colors, at least 1
            lightness: ``callable(hsl, index) -> number`` or a sequence of
                numbers; a sequence shorter than ``steps`` repeats its last value
            saturation: same shape as ``lightness``; defaults to keeping the
                current saturation

        Raises:
            InvalidArgument: for ``steps < 1`` or an argument that is neither
                callable nor a sequence.
        """
        if steps < 1:
            raise InvalidArgument("steps must be at least 1")
        lightness_at = self._progression_source(lightness, "lightness")
        saturation_at = (
            self._progression_source(saturation, "saturation") if saturation is not None
            else (lambda index: self._saturation)
        )
        return [
            HSL(
                self._hue,
                clamp(float(saturation_at(index)), 0.0, MAX_PERCENT),
                clamp(float(lightness_at(index)), 0.0, MAX_PERCENT),
                alpha=self._alpha,
            )
            for index in range(steps)
        ]

    def _progression_source(self, source: ProgressionSpec, label: str) -> Callable[[int], Scalar]:
        if callable(source):
            return lambda index: source(self, index)
        if isinstance(source, Sequence) and not isinstance(source, str) and len(source) > 0:
            return lambda index: source[min(index, len(source) - 1)]
        raise InvalidArgument(f"{label} must be a callable or a non-empty sequence")

    def __str__(self):
        hue, saturation, lightness = (
            round_half_up(v) for v in (self._hue, self._saturation, self._lightness)
        )
        text = f"hsl({hue}, {saturation}%, {lightness}%"
        if self._alpha < MAX_PERCENT:
            text += f" / {self._alpha.ratio:g}"
        return text + ")"
