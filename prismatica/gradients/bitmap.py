from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, Union
import numpy as np
from ..colors.color_base import Color
from ..errors import InvalidArgument
from ..types.color_types import MAX_CHANNEL
from ..utils.num_utils import round_half_up


class Bitmap:
    """
    Immutable ``height`` x ``width`` grid of colors produced by rasterization.

    ``pixels`` is a tuple of rows; ``at(x, y)`` and ``bitmap[x, y]`` index by
    column then row. Iteration and ``to_list`` are row-major.
    """
    __slots__ = ('_width', '_height', '_pixels', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, width: int, height: int, pixels: Sequence[Sequence[Color]]) -> None:
        rows = tuple(tuple(row) for row in pixels)
        if len(rows) != height or any(len(row) != width for row in rows):
            raise InvalidArgument(f"pixels must be {height} rows of {width} colors")
        self._width = width
        self._height = height
        self._pixels = rows
        super().__setattr__('_is_frozen', True)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> Tuple[Tuple[Color, ...], ...]:
        return self._pixels

    def at(self, x: int, y: int = 0) -> Color:
        return self._pixels[y][x]

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> Color:
        if isinstance(key, tuple):
            return self.at(*key)
        return self.at(key)

    def to_list(self) -> List[Color]:
        return [color for row in self._pixels for color in row]

    def __iter__(self) -> Iterator[Color]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._width * self._height

    def to_array(self) -> np.ndarray:
        """RGBA pixels as a ``(height, width, 4)`` uint8 array."""
        arr = np.empty((self._height, self._width, 4), dtype=np.uint8)
        for y, row in enumerate(self._pixels):
            for x, color in enumerate(row):
                rgb = color.to_rgb()
                arr[y, x] = (*rgb.channels, round_half_up(rgb.alpha.ratio * MAX_CHANNEL))
        return arr

    def to_image(self):
        """Render as a Pillow RGBA image."""
        from PIL import Image
        return Image.fromarray(self.to_array())

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._pixels == other._pixels

    def __hash__(self):
        return hash(self._pixels)

    def __repr__(self):
        return f"Bitmap(width={self._width}, height={self._height})"
