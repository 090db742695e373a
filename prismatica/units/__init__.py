from .bounded import Hue, Saturation, Lightness, Chroma, Alpha
from .percentage import Percentage
from .degrees import Degrees
from .direction import Direction

__all__ = [
    "Hue",
    "Saturation",
    "Lightness",
    "Chroma",
    "Alpha",
    "Percentage",
    "Degrees",
    "Direction",
]
