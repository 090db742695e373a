from __future__ import annotations
import warnings
from typing import Sequence
from ..colors.color_base import Color
from ..errors import GradientError
from .balance import balance_positions
from .bitmap import Bitmap
from .stop import Stop
from .linear import (
    LinearGradient,
    RGBLinearGradient,
    HSLLinearGradient,
    OKLCHLinearGradient,
    gradient_classes,
    pixel_positions,
)


def _entry_color(entry):
    return entry[0] if isinstance(entry, (tuple, list)) else entry


def linear(entries: Sequence, direction=None) -> LinearGradient:
    """
    Build a linear gradient in the color space of the first entry.

    Entries from other spaces are converted into that space with a warning.

    Raises:
        GradientError: if ``entries`` is empty or the first entry is not a color.
    """
    entries = list(entries)
    if not entries:
        raise GradientError("must have at least 2 stops")
    first = _entry_color(entries[0])
    if not isinstance(first, Color):
        raise GradientError("entries[0] must be a Color or a (Color, position) pair")

    mixed = sorted({
        type(color).__name__ for color in map(_entry_color, entries)
        if isinstance(color, Color) and color.space != first.space
    })
    if mixed:
        warnings.warn(
            f"Converting {', '.join(mixed)} stops to {type(first).__name__} for a linear gradient",
            UserWarning,
            stacklevel=2,
        )
    return gradient_classes[first.space].build(entries, direction=direction)


__all__ = [
    "linear",
    "balance_positions",
    "Bitmap",
    "Stop",
    "LinearGradient",
    "RGBLinearGradient",
    "HSLLinearGradient",
    "OKLCHLinearGradient",
    "gradient_classes",
    "pixel_positions",
]
