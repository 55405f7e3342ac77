"""Two-dimensional integer vector stored as 16-bit components."""

from __future__ import annotations

from dataclasses import dataclass

INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _clamp16(value: int) -> int:
    return max(INT16_MIN, min(INT16_MAX, value))


@dataclass(frozen=True)
class Vector2int16:
    """An immutable 2D integer vector."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if not (_is_int(self.x) and _is_int(self.y)):
            raise TypeError("Vector2int16 components must be integers")

    def clamped(self) -> Vector2int16:
        """Copy with each component clamped into the 16-bit range."""
        return Vector2int16(_clamp16(self.x), _clamp16(self.y))

    def __neg__(self) -> Vector2int16:
        return Vector2int16(-self.x, -self.y)

    def __add__(self, other: object) -> Vector2int16:
        if not isinstance(other, Vector2int16):
            return NotImplemented
        return Vector2int16(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2int16:
        if not isinstance(other, Vector2int16):
            return NotImplemented
        return Vector2int16(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vector2int16:
        if isinstance(other, Vector2int16):
            return Vector2int16(self.x * other.x, self.y * other.y)
        if _is_int(other):
            return Vector2int16(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2int16:
        if _is_int(other):
            return Vector2int16(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector2int16:
        if isinstance(other, Vector2int16):
            return Vector2int16(
                _trunc_div(self.x, other.x), _trunc_div(self.y, other.y)
            )
        if _is_int(other):
            return Vector2int16(_trunc_div(self.x, other), _trunc_div(self.y, other))
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"