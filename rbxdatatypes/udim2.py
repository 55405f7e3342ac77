"""Two-dimensional user interface measurement made of two UDims."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .udim import UDim

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _scale(value: object) -> float:
    if value is None:
        return 0.0
    if not _is_number(value):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    return float(value)  # type: ignore[arg-type]


def _offset(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeError(f"Expected an integer, got {type(value).__name__}")


def _round_offset(value: float) -> int:
    """Clamp into the 32-bit range and round half away from zero."""
    if math.isnan(value):
        return 0
    clamped = max(float(_INT32_MIN), min(float(_INT32_MAX), value))
    rounded = math.floor(abs(clamped) + 0.5)
    return int(math.copysign(rounded, clamped))


@dataclass(frozen=True)
class UDim2:
    """A horizontal and a vertical UDim."""

    x: UDim = UDim()
    y: UDim = UDim()

    @classmethod
    def new(cls, *args: object) -> UDim2:
        """Build from two UDims, or from scale/offset pairs; missing parts are zero."""
        udims = (list(args[:2]) + [None, None])[:2]
        if all(u is None or isinstance(u, UDim) for u in udims):
            x, y = (u if u is not None else UDim() for u in udims)
            return cls(x, y)  # type: ignore[arg-type]
        numbers = (list(args[:4]) + [None] * 4)[:4]
        try:
            sx, sy = _scale(numbers[0]), _scale(numbers[2])
            ox, oy = _offset(numbers[1]), _offset(numbers[3])
        except TypeError:
            raise TypeError("Invalid arguments to constructor") from None
        return cls(UDim(sx, ox), UDim(sy, oy))

    @classmethod
    def from_offset(cls, x: Optional[int] = None, y: Optional[int] = None) -> UDim2:
        return cls(UDim(0.0, _offset(x)), UDim(0.0, _offset(y)))

    @classmethod
    def from_scale(cls, x: Optional[float] = None, y: Optional[float] = None) -> UDim2:
        return cls(UDim(_scale(x), 0), UDim(_scale(y), 0))

    @property
    def width(self) -> UDim:
        return self.x

    @property
    def height(self) -> UDim:
        return self.y

    def lerp(self, goal: UDim2, alpha: float) -> UDim2:
        """Interpolate scales and offsets; offsets are rounded to integers."""

        def mix(a: UDim, b: UDim) -> UDim:
            scale = a.scale + (b.scale - a.scale) * alpha
            offset = a.offset + (b.offset - a.offset) * alpha
            return UDim(scale, _round_offset(float(offset)))

        return UDim2(mix(self.x, goal.x), mix(self.y, goal.y))

    def __neg__(self) -> UDim2:
        return UDim2(-self.x, -self.y)

    def __add__(self, other: object) -> UDim2:
        if not isinstance(other, UDim2):
            return NotImplemented
        return UDim2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> UDim2:
        if not isinstance(other, UDim2):
            return NotImplemented
        return UDim2(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"