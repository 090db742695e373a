from __future__ import annotations
from collections.abc import Mapping
from typing import ClassVar, Tuple, Union
from ..errors import InvalidArgument
from .degrees import Degrees


class Direction:
    """
    A ``from`` -> ``to`` pair of angles. Rasterization only reads ``to``.

    Angles follow CSS: 0° points up, 90° points right.
    """
    __slots__ = ('_from', '_to', '_is_frozen')

    BOTTOM_TO_TOP: ClassVar[Direction]
    LEFT_TO_RIGHT: ClassVar[Direction]
    TOP_TO_BOTTOM: ClassVar[Direction]
    RIGHT_TO_LEFT: ClassVar[Direction]
    BOTTOM_LEFT_TO_TOP_RIGHT: ClassVar[Direction]
    TOP_LEFT_TO_BOTTOM_RIGHT: ClassVar[Direction]
    TOP_RIGHT_TO_BOTTOM_LEFT: ClassVar[Direction]
    BOTTOM_RIGHT_TO_TOP_LEFT: ClassVar[Direction]
    _named: ClassVar[Tuple[Direction, ...]] = ()

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, from_: Union[Degrees, int, float], to: Union[Degrees, int, float]) -> None:
        self._from = Degrees.build(from_)
        self._to = Degrees.build(to)
        super().__setattr__('_is_frozen', True)

    @property
    def from_(self) -> Degrees:
        return self._from

    @property
    def to(self) -> Degrees:
        return self._to

    @classmethod
    def all(cls) -> Tuple[Direction, ...]:
        return cls._named

    @classmethod
    def build(cls, value) -> Direction:
        """
        Coerce ``value`` into a ``Direction``.

        Args:
            value: a ``Direction``; a mapping with ``from`` and ``to`` keys;
                or a single angle (``Degrees`` or number) used as ``to``,
                with ``from`` set to its opposite.

        Raises:
            InvalidArgument: for anything else, including text.
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, Mapping):
            if "from" not in value or "to" not in value:
                raise InvalidArgument("Direction mapping needs 'from' and 'to' keys")
            return cls(value["from"], value["to"])
        if isinstance(value, Degrees) or (isinstance(value, (int, float)) and not isinstance(value, bool)):
            to = Degrees.build(value)
            return cls(to.opposite(), to)
        raise InvalidArgument(f"Cannot build a Direction from {type(value).__name__}")

    def to_css(self) -> str:
        return f"from {self._from} to {self._to}"

    def __eq__(self, other):
        if not isinstance(other, Direction):
            return NotImplemented
        return self._from == other._from and self._to == other._to

    def __hash__(self):
        return hash((self._from, self._to))

    def __str__(self):
        return self.to_css()

    def __repr__(self):
        return f"Direction({self._from!r}, {self._to!r})"


Direction.BOTTOM_TO_TOP = Direction(Degrees.BOTTOM, Degrees.TOP)
Direction.LEFT_TO_RIGHT = Direction(Degrees.LEFT, Degrees.RIGHT)
Direction.TOP_TO_BOTTOM = Direction(Degrees.TOP, Degrees.BOTTOM)
Direction.RIGHT_TO_LEFT = Direction(Degrees.RIGHT, Degrees.LEFT)
Direction.BOTTOM_LEFT_TO_TOP_RIGHT = Direction(Degrees.BOTTOM_LEFT, Degrees.TOP_RIGHT)
Direction.TOP_LEFT_TO_BOTTOM_RIGHT = Direction(Degrees.TOP_LEFT, Degrees.BOTTOM_RIGHT)
Direction.TOP_RIGHT_TO_BOTTOM_LEFT = Direction(Degrees.TOP_RIGHT, Degrees.BOTTOM_LEFT)
Direction.BOTTOM_RIGHT_TO_TOP_LEFT = Direction(Degrees.BOTTOM_RIGHT, Degrees.TOP_LEFT)
Direction._named = (
    Direction.BOTTOM_TO_TOP,
    Direction.LEFT_TO_RIGHT,
    Direction.TOP_TO_BOTTOM,
    Direction.RIGHT_TO_LEFT,
    Direction.BOTTOM_LEFT_TO_TOP_RIGHT,
    Direction.TOP_LEFT_TO_BOTTOM_RIGHT,
    Direction.TOP_RIGHT_TO_BOTTOM_LEFT,
    Direction.BOTTOM_RIGHT_TO_TOP_LEFT,
)
