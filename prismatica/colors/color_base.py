from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Tuple, Union
from boundednumbers import clamp
from ..conversions.luminance import contrast_ratio as wcag_contrast_ratio, relative_luminance
from ..errors import InvalidArgument
from ..palette.quantize import quantize
from ..types.ansi_types import AnsiMode, Layer, DEFAULT_ANSI_MODE, DEFAULT_LAYER
from ..types.color_types import ColorSpace
from ..units.bounded import Alpha
from .harmony import Harmony

if TYPE_CHECKING:
    from .rgb import RGB
    from .hsl import HSL
    from .oklch import OKLCH

# Method each space's conversion goes through
space_converters = {
    ColorSpace.RGB: "to_rgb",
    ColorSpace.HSL: "to_hsl",
    ColorSpace.OKLCH: "to_oklch",
}

CONTRAST_ADJUST_AMOUNT = 0.3


class Color(Harmony):
    """
    Immutable base for the RGB, HSL and OKLCH variants.

    Subclasses set ``space``, store their channels in slots and implement the
    conversions plus ``blend``/``lighten``/``darken``. Everything that only
    needs luminance or a space change lives here.
    """
    __slots__ = ('_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    space: ClassVar[ColorSpace]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    @property
    def alpha(self) -> Alpha:
        return self._alpha

    @property
    def value(self) -> Tuple[float, ...]:
        """Channels followed by alpha."""
        raise NotImplementedError

    # ---- conversions ----
    def to_rgb(self) -> RGB:
        raise NotImplementedError

    def to_hsl(self) -> HSL:
        raise NotImplementedError

    def to_oklch(self) -> OKLCH:
        raise NotImplementedError

    def convert(self, space: Union[ColorSpace, str]) -> Color:
        """Convert to the variant registered for ``space`` (a ColorSpace or its value)."""
        try:
            method = space_converters[ColorSpace(space)]
        except ValueError:
            raise InvalidArgument(f"Unknown color space: {space!r}") from None
        return getattr(self, method)()

    # ---- derived colors ----
    def blend(self, other: Color, amount: float = 0.5) -> Color:
        raise NotImplementedError

    def lighten(self, amount: float) -> Color:
        raise NotImplementedError

    def darken(self, amount: float) -> Color:
        raise NotImplementedError

    def _blend_operands(self, other: Color, amount: float) -> Tuple[Color, float]:
        if not isinstance(other, Color):
            raise InvalidArgument(f"Cannot blend with {type(other).__name__}")
        return other.convert(self.space), float(clamp(float(amount), 0.0, 1.0))

    # ---- luminance and contrast ----
    def luminance(self) -> float:
        """WCAG relative luminance in [0, 1], always computed through RGB."""
        rgb = self.to_rgb()
        return relative_luminance(rgb.red, rgb.green, rgb.blue)

    def is_light(self) -> bool:
        return self.luminance() > 0.5

    def is_dark(self) -> bool:
        return not self.is_light()

    def contrast_ratio(self, other: Color) -> float:
        return wcag_contrast_ratio(self.luminance(), other.luminance())

    def contrast_color(self) -> RGB:
        """Black for light colors, white for dark ones."""
        from .rgb import RGB  # local import to avoid cycles
        return RGB(0, 0, 0) if self.is_light() else RGB(255, 255, 255)

    def adjust_for_contrast(self, background: Color, target_ratio: float = 4.5) -> Color:
        """
        Nudge this color so it reads on ``background``.

        Returns ``self`` if the contrast already meets ``target_ratio``;
        otherwise darkens on light backgrounds and lightens on dark ones, once.
        """
        if self.contrast_ratio(background) >= target_ratio:
            return self
        if background.is_light():
            return self.darken(CONTRAST_ADJUST_AMOUNT)
        return self.lighten(CONTRAST_ADJUST_AMOUNT)

    # ---- terminal output ----
    def to_ansi(self, layer: Union[Layer, str] = DEFAULT_LAYER,
                mode: Union[AnsiMode, str] = DEFAULT_ANSI_MODE) -> str:
        """SGR parameter string for this color, e.g. ``"38;2;255;0;0"``."""
        return quantize(self.to_rgb(), layer=layer, mode=mode)

    @staticmethod
    def _seed32(seed) -> int:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidArgument("Seed must be an integer")
        return seed & 0xFFFFFFFF

    # ---- dunder ----
    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((self.space, self.value))

    def __repr__(self):
        channels = ", ".join(f"{v:g}" for v in self.value)
        return f"{self.__class__.__name__}({channels})"
