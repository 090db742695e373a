"""
Terminal palette quantization.

Maps an RGB color to an SGR parameter string at one of three fidelities:

- truecolor: ``"38;2;R;G;B"`` / ``"48;2;R;G;B"``
- 256-color: ``"38;5;N"`` / ``"48;5;N"`` using the 6x6x6 cube or the
  24-step gray ramp
- 16-color: ``"9X"`` / ``"10X"``, always from the bright range

Escape-sequence wrapping (``\\x1b[...m``) is left to the caller.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Union
import numpy as np
from ..errors import InvalidArgument
from ..types.ansi_types import (
    AnsiMode,
    Layer,
    DEFAULT_ANSI_MODE,
    DEFAULT_LAYER,
    GRAYSCALE_THRESHOLD,
    CUBE_THRESHOLDS,
    STANDARD_COLORS,
    layer_sgr_prefixes,
    layer_bright_bases,
)
from ..utils.num_utils import round_half_up

if TYPE_CHECKING:
    from ..colors.rgb import RGB

CUBE_BLACK = 16
CUBE_WHITE = 231
GRAY_RAMP_START = 232
GRAY_RAMP_END = 255
GRAY_RAMP_STEPS = 24

_cube_thresholds = np.array(CUBE_THRESHOLDS)
_standard_colors = np.array(STANDARD_COLORS, dtype=np.int64)


def _layer(layer: Union[Layer, str]) -> Layer:
    try:
        return Layer(layer)
    except ValueError:
        raise InvalidArgument(f"Unknown layer: {layer!r}") from None


def _mode(mode: Union[AnsiMode, str, int]) -> AnsiMode:
    if isinstance(mode, int) and not isinstance(mode, bool):
        mode = str(mode)
    try:
        return AnsiMode(mode)
    except ValueError:
        raise InvalidArgument(f"Unknown ANSI mode: {mode!r}") from None


def nearest_256_index(rgb: RGB) -> int:
    """
    Index in the xterm 256-color palette closest to ``rgb``.

    Near-gray colors (channel spread below the grayscale threshold) go to the
    gray ramp, with the darkest and lightest grays snapped to the cube's black
    and white. Everything else is bucketed per channel into the 6x6x6 cube.
    """
    channels = rgb.channels
    if max(channels) - min(channels) < GRAYSCALE_THRESHOLD:
        gray = sum(channels) / 3.0
        if gray < 8:
            return CUBE_BLACK
        if gray > 238:
            return CUBE_WHITE
        index = GRAY_RAMP_START + round_half_up((gray - 8) / 247 * GRAY_RAMP_STEPS)
        return min(index, GRAY_RAMP_END)

    r, g, b = (int(bucket) for bucket in np.searchsorted(_cube_thresholds, channels, side="right"))
    return CUBE_BLACK + 36 * r + 6 * g + b


def nearest_16_index(rgb: RGB) -> int:
    """Index (0-7) of the standard color with the smallest squared distance; ties go to the lower index."""
    distances = ((_standard_colors - np.array(rgb.channels, dtype=np.int64)) ** 2).sum(axis=1)
    return int(np.argmin(distances))


def to_truecolor(rgb: RGB, layer: Union[Layer, str] = DEFAULT_LAYER) -> str:
    prefix = layer_sgr_prefixes[_layer(layer)]
    return f"{prefix};2;{rgb.red};{rgb.green};{rgb.blue}"


def to_256(rgb: RGB, layer: Union[Layer, str] = DEFAULT_LAYER) -> str:
    prefix = layer_sgr_prefixes[_layer(layer)]
    return f"{prefix};5;{nearest_256_index(rgb)}"


def to_16(rgb: RGB, layer: Union[Layer, str] = DEFAULT_LAYER) -> str:
    return str(layer_bright_bases[_layer(layer)] + nearest_16_index(rgb))


quantizers = {
    AnsiMode.TRUECOLOR: to_truecolor,
    AnsiMode.PALETTE_256: to_256,
    AnsiMode.PALETTE_16: to_16,
}


def quantize(rgb: RGB, layer: Union[Layer, str] = DEFAULT_LAYER,
             mode: Union[AnsiMode, str] = DEFAULT_ANSI_MODE) -> str:
    """
    SGR parameter string for ``rgb``.

    Args:
        rgb: color to encode; other variants should be converted with ``to_rgb()`` first
        layer: ``Layer`` or its value ("foreground"/"background")
        mode: ``AnsiMode`` or its value ("truecolor", "256", "16")

    Raises:
        InvalidArgument: for an unknown layer or mode.
    """
    return quantizers[_mode(mode)](rgb, layer)
