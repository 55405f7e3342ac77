"""Three-dimensional integer vector stored as 16-bit components."""

from __future__ import annotations

from dataclasses import dataclass

from .vector2int16 import _clamp16, _is_int, _trunc_div


@dataclass(frozen=True)
class Vector3int16:
    """An immutable 3D integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self) -> None:
        if not (_is_int(self.x) and _is_int(self.y) and _is_int(self.z)):
            raise TypeError("Vector3int16 components must be integers")

    def clamped(self) -> Vector3int16:
        """Copy with each component clamped into the 16-bit range."""
        return Vector3int16(_clamp16(self.x), _clamp16(self.y), _clamp16(self.z))

    def __neg__(self) -> Vector3int16:
        return Vector3int16(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vector3int16:
        if not isinstance(other, Vector3int16):
            return NotImplemented
        return Vector3int16(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3int16:
        if not isinstance(other, Vector3int16):
            return NotImplemented
        return Vector3int16(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vector3int16:
        if isinstance(other, Vector3int16):
            return Vector3int16(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_int(other):
            return Vector3int16(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3int16:
        if _is_int(other):
            return Vector3int16(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector3int16:
        if isinstance(other, Vector3int16):
            return Vector3int16(
                _trunc_div(self.x, other.x),
                _trunc_div(self.y, other.y),
                _trunc_div(self.z, other.z),
            )
        if _is_int(other):
            return Vector3int16(
                _trunc_div(self.x, other),
                _trunc_div(self.y, other),
                _trunc_div(self.z, other),
            )
        return NotImplemented

    def __str__(self) -> str:
        # Only the first two components are shown.
        return f"{self.x}, {self.y}"