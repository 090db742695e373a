from __future__ import annotations
import warnings
from typing import Optional
from boundednumbers import clamp
from ..types.color_types import MAX_PERCENT, Scalar


class Percentage(float):
    """
    A percentage clamped to ``[0, 100]``.

    Built either from a value already expressed in percent or from a
    ``numerator / denominator`` pair. A zero denominator yields ``0%``.

    Addition and subtraction saturate at the bounds and always return a new
    ``Percentage``.
    """

    def __new__(cls, value: Scalar = 0.0, denominator: Optional[Scalar] = None):
        if denominator is not None:
            if denominator == 0:
                warnings.warn(
                    f"Percentage({value!r}, {denominator!r}) has a zero denominator, defaulting to 0%",
                    RuntimeWarning,
                    stacklevel=2,
                )
                value = 0.0
            else:
                value = float(value) / float(denominator) * MAX_PERCENT
        return super().__new__(cls, float(clamp(float(value), 0.0, MAX_PERCENT)))

    @staticmethod
    def _operand(other) -> float:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return float(other)

    def __add__(self, other):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return Percentage(float(self) + operand)

    __radd__ = __add__

    def __sub__(self, other):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return Percentage(float(self) - operand)

    def __rsub__(self, other):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return Percentage(operand - float(self))

    def __abs__(self):
        return Percentage(float(self))

    @property
    def is_zero(self) -> bool:
        return float(self) == 0.0

    def to_ratio(self) -> float:
        return float(self) / MAX_PERCENT

    def format(self, decimal_places: int = 1) -> str:
        return f"{float(self):.{decimal_places}f}%"

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Percentage({float(self)})"
