"""
Bounded scalar units used as color channels.

Each unit is a ``float`` subclass: construction never fails for numeric input,
values are wrapped (``Hue``) or clamped (everything else) into range, and the
result behaves like a plain float in arithmetic and comparisons.
"""
from __future__ import annotations
from boundednumbers import clamp
from ..types.color_types import DEFAULT_ALPHA, MAX_CHROMA, MAX_PERCENT, Scalar
from ..utils.num_utils import wrap_degrees


class Hue(float):
    """Angle on the color wheel, wrapped into ``[0, 360)``."""

    def __new__(cls, value: Scalar = 0.0):
        return super().__new__(cls, wrap_degrees(value))

    def __repr__(self):
        return f"Hue({float(self)})"


class _Clamped(float):
    lower: float = 0.0
    upper: float = MAX_PERCENT

    def __new__(cls, value: Scalar = 0.0):
        value = float(value)
        if not cls.lower <= value <= cls.upper:
            value = float(clamp(value, cls.lower, cls.upper))
        return super().__new__(cls, value)

    def __repr__(self):
        return f"{self.__class__.__name__}({float(self)})"


class Saturation(_Clamped):
    """Saturation percentage clamped to ``[0, 100]``."""


class Lightness(_Clamped):
    """Lightness percentage clamped to ``[0, 100]``."""


class Chroma(_Clamped):
    """OKLCH chroma clamped to ``[0, 0.5]``."""
    upper = MAX_CHROMA


class Alpha(_Clamped):
    """Opacity percentage clamped to ``[0, 100]``; defaults to fully opaque."""

    def __new__(cls, value: Scalar = DEFAULT_ALPHA):
        return super().__new__(cls, value)

    @property
    def ratio(self) -> float:
        return float(self) / MAX_PERCENT
