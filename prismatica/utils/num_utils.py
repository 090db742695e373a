import math
from ..types.color_types import HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (Python's round() is banker's)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)

def lerp(start: float, end: float, amount: float) -> float:
    return start + (end - start) * amount

def wrap_degrees(value: float) -> float:
    """Wrap an angle into ``[0, 360)``."""
    wrapped = float(value) % HUE_360
    # tiny negatives wrap to exactly 360.0 in float arithmetic
    return 0.0 if wrapped >= HUE_360 else wrapped
