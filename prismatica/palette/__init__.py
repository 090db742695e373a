from .quantize import (
    quantize,
    to_truecolor,
    to_256,
    to_16,
    nearest_256_index,
    nearest_16_index,
)

__all__ = [
    "quantize",
    "to_truecolor",
    "to_256",
    "to_16",
    "nearest_256_index",
    "nearest_16_index",
]
