from __future__ import annotations
from ..colors.color_base import Color
from ..errors import InvalidArgument
from ..types.color_types import Scalar


class Stop:
    """A color pinned at a position in ``[0, 1]`` along a gradient."""
    __slots__ = ('_color', '_position', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: Color, position: Scalar) -> None:
        if not isinstance(color, Color):
            raise InvalidArgument(f"Stop color must be a Color, got {type(color).__name__}")
        if isinstance(position, bool) or not isinstance(position, (int, float)):
            raise InvalidArgument(f"Stop position must be a number, got {type(position).__name__}")
        if not 0.0 <= position <= 1.0:
            raise InvalidArgument(f"Stop position must be between 0.0 and 1.0, got {position}")
        self._color = color
        self._position = float(position)
        super().__setattr__('_is_frozen', True)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def position(self) -> float:
        return self._position

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return self._position == other._position and self._color == other._color

    def __hash__(self):
        return hash((self._position, self._color))

    def __repr__(self):
        return f"Stop({self._color!r}, {self._position})"
