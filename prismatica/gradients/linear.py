"""
Linear gradients over a single color space.

``LinearGradient`` is generic over its color class; the per-space
subclasses only pin ``color_class``. Interpolation always goes through that
class's own ``blend``, so RGB gradients mix channels, HSL gradients walk the
hue numerically and OKLCH gradients take the shortest hue arc.
"""
from __future__ import annotations
from bisect import bisect_left
from collections.abc import Sequence
from typing import ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar
import numpy as np
from ..colors.color_base import Color
from ..colors.hsl import HSL
from ..colors.oklch import OKLCH
from ..colors.rgb import RGB
from ..errors import GradientError
from ..units.direction import Direction
from ..utils.default import value_or_default
from .balance import balance_positions
from .bitmap import Bitmap
from .stop import Stop

C = TypeVar("C", bound=Color)


def pixel_positions(width: int, height: int, angle: float) -> np.ndarray:
    """
    Gradient position in ``[0, 1]`` for every pixel of a ``height`` x ``width`` grid.

    Pixel coordinates are normalized to ``[0, 1]`` (a single row or column
    sits at 0.5) and projected on the unit vector ``(sin θ, cos θ)``, where
    0° points up and 90° points right.
    """
    y, x = np.indices((height, width), dtype=float)
    nx = x / (width - 1) if width > 1 else np.full_like(x, 0.5)
    ny = y / (height - 1) if height > 1 else np.full_like(y, 0.5)
    theta = np.radians(angle)
    positions = (nx - 0.5) * np.sin(theta) + (0.5 - ny) * np.cos(theta) + 0.5
    return np.clip(positions, 0.0, 1.0)


class LinearGradient(Generic[C]):
    __slots__ = ('_stops', '_positions', '_direction', '_is_frozen')

    color_class: ClassVar[Type[Color]] = Color

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, stops: Sequence[Stop], direction=None) -> None:
        if not isinstance(stops, Sequence) or isinstance(stops, str):
            raise GradientError("stops must be a sequence")
        if len(stops) < 2:
            raise GradientError("must have at least 2 stops")
        for i, stop in enumerate(stops):
            if not isinstance(stop, Stop):
                raise GradientError(f"stops[{i}] must be a Stop object")
            if not isinstance(stop.color, self.color_class):
                raise GradientError(
                    f"stops[{i}].color must be {self.color_class.__name__}, "
                    f"got {type(stop.color).__name__}"
                )
        for previous, current in zip(stops, stops[1:]):
            if previous.position > current.position:
                raise GradientError("stops must be sorted by position")

        self._stops: Tuple[Stop, ...] = tuple(stops)
        self._positions: List[float] = [stop.position for stop in stops]
        self._direction = Direction.build(value_or_default(direction, Direction.TOP_TO_BOTTOM))
        super().__setattr__('_is_frozen', True)

    @classmethod
    def build(cls, entries: Sequence, direction=None) -> LinearGradient[C]:
        """
        Build a gradient from colors with optional positions.

        Args:
            entries: each item is a ``Color`` or a ``(Color, position)`` pair;
                missing positions are auto-balanced, and colors from another
                space are converted into this gradient's space
            direction: anything ``Direction.build`` accepts; defaults to top
                to bottom

        Raises:
            GradientError: on an entry that is neither form, or on any
                construction failure.
        """
        colors: List[Color] = []
        positions: List[Optional[float]] = []
        for i, entry in enumerate(entries):
            if isinstance(entry, (tuple, list)) and len(entry) == 2:
                color, position = entry
            else:
                color, position = entry, None
            if not isinstance(color, Color):
                raise GradientError(f"entries[{i}] must be a Color or a (Color, position) pair")
            colors.append(color.convert(cls.color_class.space))
            positions.append(position)

        stops = [Stop(color, position) for color, position in zip(colors, balance_positions(positions))]
        return cls(stops, direction=direction)

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    @property
    def direction(self) -> Direction:
        return self._direction

    def bracket(self, position: float) -> Tuple[Stop, Stop]:
        """
        First adjacent pair of stops with ``start <= position <= end``.

        Positions before the first stop use the first pair and positions past
        the last stop use the last pair.
        """
        index = bisect_left(self._positions, position)
        index = min(max(index, 1), len(self._stops) - 1)
        return self._stops[index - 1], self._stops[index]

    def color_at(self, position: float) -> C:
        start, end = self.bracket(position)
        if start.position == end.position:
            return start.color
        amount = (position - start.position) / (end.position - start.position)
        # Exact stop colors at and beyond the bracket ends
        if amount <= 0.0:
            return start.color
        if amount >= 1.0:
            return end.color
        return start.color.blend(end.color, amount)

    def rasterize(self, width: int = 1, height: int = 1) -> Bitmap:
        """
        Sample the gradient onto a ``height`` x ``width`` bitmap.

        Raises:
            GradientError: if ``width`` or ``height`` is below 1.
        """
        if width < 1:
            raise GradientError("width must be at least 1")
        if height < 1:
            raise GradientError("height must be at least 1")

        positions = pixel_positions(width, height, float(self._direction.to))
        cache: Dict[float, C] = {}
        pixels = []
        for row in positions.tolist():
            colors = []
            for p in row:
                if p not in cache:
                    cache[p] = self.color_at(p)
                colors.append(cache[p])
            pixels.append(colors)
        return Bitmap(width, height, pixels)

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._stops)!r}, direction={self._direction!r})"


class RGBLinearGradient(LinearGradient[RGB]):
    __slots__ = ()
    color_class = RGB


class HSLLinearGradient(LinearGradient[HSL]):
    __slots__ = ()
    color_class = HSL


class OKLCHLinearGradient(LinearGradient[OKLCH]):
    __slots__ = ()
    color_class = OKLCH


gradient_classes = {
    RGB.space: RGBLinearGradient,
    HSL.space: HSLLinearGradient,
    OKLCH.space: OKLCHLinearGradient,
}
