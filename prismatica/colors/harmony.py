"""
Color harmonies and variations.

All transforms are computed in HSL and re-cast to the receiver's own space,
so ``RGB(...).triadic()`` returns RGB colors and ``OKLCH(...).tints()``
returns OKLCH colors. Alpha is carried through unchanged.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple
import numpy as np
from boundednumbers import clamp
from ..errors import InvalidArgument
from ..types.color_types import MAX_PERCENT, MONOCHROMATIC_RANGE

if TYPE_CHECKING:
    from .color_base import Color
    from .hsl import HSL


def _check_steps(steps: int) -> None:
    if steps < 1:
        raise InvalidArgument("steps must be at least 1")


def _clamp_percent(value: float) -> float:
    return float(clamp(value, 0.0, MAX_PERCENT))


class Harmony:
    __slots__ = ()

    def _hsl_variant(self: Color, hue=None, saturation=None, lightness=None) -> Color:
        from .hsl import HSL  # local import to avoid cycles
        hsl = self.to_hsl()
        shifted = HSL(
            hsl.hue if hue is None else hue,
            hsl.saturation if saturation is None else saturation,
            hsl.lightness if lightness is None else lightness,
            alpha=hsl.alpha,
        )
        return shifted.convert(self.space)

    def rotate_hue(self: Color, degrees: float) -> Color:
        return self._hsl_variant(hue=self.to_hsl().hue + degrees)

    # ---- hue harmonies ----
    def complementary(self) -> Color:
        return self.rotate_hue(180)

    def analogous(self, angle: float = 30) -> Tuple[Color, Color]:
        return self.rotate_hue(-angle), self.rotate_hue(angle)

    def triadic(self) -> Tuple[Color, Color]:
        return self.rotate_hue(120), self.rotate_hue(240)

    def split_complementary(self, angle: float = 30) -> Tuple[Color, Color]:
        return self.rotate_hue(180 - angle), self.rotate_hue(180 + angle)

    def tetradic_square(self) -> Tuple[Color, Color, Color]:
        return self.rotate_hue(90), self.rotate_hue(180), self.rotate_hue(270)

    def tetradic_rectangle(self, angle: float = 60) -> Tuple[Color, Color, Color]:
        return self.rotate_hue(angle), self.rotate_hue(180), self.rotate_hue(180 + angle)

    # ---- lightness / saturation variations ----
    def monochromatic(self, steps: int = 5) -> List[Color]:
        """``steps`` colors with lightness evenly spaced from 15% to 85%, ascending."""
        _check_steps(steps)
        start, end = MONOCHROMATIC_RANGE
        return [self._hsl_variant(lightness=float(l)) for l in np.linspace(start, end, steps)]

    def shades(self, steps: int = 5, amount: float = 0.5) -> List[Color]:
        """
        Progressively darker versions of this color.

        Step ``i`` (1-based) has lightness ``L * (1 - amount / steps * i)``.
        """
        _check_steps(steps)
        lightness = self.to_hsl().lightness
        step_amount = amount / steps
        return [
            self._hsl_variant(lightness=_clamp_percent(lightness * (1 - step_amount * i)))
            for i in range(1, steps + 1)
        ]

    def tints(self, steps: int = 5, amount: float = 0.5) -> List[Color]:
        """Progressively lighter versions; step ``i`` moves ``amount / steps * i`` of the way to white."""
        _check_steps(steps)
        lightness = self.to_hsl().lightness
        step_amount = amount / steps
        return [
            self._hsl_variant(lightness=_clamp_percent(lightness + (MAX_PERCENT - lightness) * step_amount * i))
            for i in range(1, steps + 1)
        ]

    def tones(self, steps: int = 5, amount: float = 0.5) -> List[Color]:
        _check_steps(steps)
        saturation = self.to_hsl().saturation
        step_amount = amount / steps
        return [
            self._hsl_variant(saturation=_clamp_percent(saturation * (1 - step_amount * i)))
            for i in range(1, steps + 1)
        ]
