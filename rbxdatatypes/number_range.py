"""An inclusive range of numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .util import _format_float


def _require_number(value: object) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class NumberRange:
    """A range between ``min`` and ``max``."""

    min: float = 0.0
    max: float = 0.0

    @classmethod
    def new(cls, minimum: float, maximum: Optional[float] = None) -> NumberRange:
        """Build a range; the bounds are swapped if given in the wrong order.

        With only ``minimum`` given the range holds that single value.
        """
        low = _require_number(minimum)
        if maximum is None:
            return cls(low, low)
        high = _require_number(maximum)
        return cls(min(low, high), max(low, high))

    def __str__(self) -> str:
        return f"{_format_float(self.min)}, {_format_float(self.max)}"