"""
Angles for gradient directions.

``Degrees`` wraps its value into ``[0, 360)`` and may carry a name plus
aliases ("top", "north"). Equality, hashing and ordering only look at the
wrapped value. Plain numbers compare unwrapped, so ``Degrees(90) == 90`` but
``Degrees(90) != 450``, keeping equality consistent with ``hash``.
"""
from __future__ import annotations
from functools import total_ordering
from typing import ClassVar, Iterable, Optional, Tuple, Union
from ..errors import InvalidArgument
from ..utils.num_utils import wrap_degrees


@total_ordering
class Degrees:
    __slots__ = ('_value', '_name', '_aliases', '_is_frozen')

    TOP: ClassVar[Degrees]
    TOP_RIGHT: ClassVar[Degrees]
    RIGHT: ClassVar[Degrees]
    BOTTOM_RIGHT: ClassVar[Degrees]
    BOTTOM: ClassVar[Degrees]
    BOTTOM_LEFT: ClassVar[Degrees]
    LEFT: ClassVar[Degrees]
    TOP_LEFT: ClassVar[Degrees]
    _named: ClassVar[Tuple[Degrees, ...]] = ()

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[int, float] = 0.0, name: Optional[str] = None,
                 aliases: Iterable[str] = ()) -> None:
        self._value = wrap_degrees(value)
        self._name = name
        self._aliases = tuple(aliases)
        super().__setattr__('_is_frozen', True)

    @property
    def value(self) -> float:
        return self._value

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self._aliases

    @classmethod
    def all(cls) -> Tuple[Degrees, ...]:
        return cls._named

    @classmethod
    def find_by_name(cls, search: str) -> Optional[Degrees]:
        """Look up a named constant by name or alias, ignoring case and outer whitespace."""
        needle = search.strip().lower()
        for constant in cls._named:
            if constant.name == needle or needle in constant.aliases:
                return constant
        return None

    @classmethod
    def _find_by_value(cls, value: float) -> Optional[Degrees]:
        for constant in cls._named:
            if constant.value == value:
                return constant
        return None

    @classmethod
    def build(cls, value) -> Degrees:
        """Coerce a ``Degrees`` or real number; text is not accepted."""
        if isinstance(value, Degrees):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgument(f"Expected Degrees or a number, got {type(value).__name__}")
        return cls._find_by_value(wrap_degrees(value)) or cls(value)

    def opposite(self) -> Degrees:
        opposite_value = wrap_degrees(self._value + 180.0)
        return self._find_by_value(opposite_value) or Degrees(opposite_value)

    def to_css(self) -> str:
        return f"{self._value:.1f}deg"

    def __float__(self) -> float:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    @staticmethod
    def _coerce(other) -> Optional[float]:
        if isinstance(other, Degrees):
            return other._value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __eq__(self, other):
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return self._value == other_value

    def __lt__(self, other):
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return self._value < other_value

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self._name if self._name else f"{self._value:.1f}°"

    def __repr__(self):
        if self._name:
            return f"Degrees({self._value}, name={self._name!r})"
        return f"Degrees({self._value})"


Degrees.TOP = Degrees(0, "top", ("north",))
Degrees.TOP_RIGHT = Degrees(45, "top right", ("northeast",))
Degrees.RIGHT = Degrees(90, "right", ("east",))
Degrees.BOTTOM_RIGHT = Degrees(135, "bottom right", ("southeast",))
Degrees.BOTTOM = Degrees(180, "bottom", ("south",))
Degrees.BOTTOM_LEFT = Degrees(225, "bottom left", ("southwest",))
Degrees.LEFT = Degrees(270, "left", ("west",))
Degrees.TOP_LEFT = Degrees(315, "top left", ("northwest",))
Degrees._named = (
    Degrees.TOP,
    Degrees.TOP_RIGHT,
    Degrees.RIGHT,
    Degrees.BOTTOM_RIGHT,
    Degrees.BOTTOM,
    Degrees.BOTTOM_LEFT,
    Degrees.LEFT,
    Degrees.TOP_LEFT,
)
