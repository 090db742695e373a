from .default import value_or_default
from .num_utils import round_half_up, lerp, wrap_degrees

__all__ = ["value_or_default", "round_half_up", "lerp", "wrap_degrees"]
