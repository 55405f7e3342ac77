"""RGB colour with floating point channels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .util import _divide, _format_float

_HEX_DIGITS = frozenset("0123456789ABCDEF")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _byte(value: Optional[float]) -> int:
    """Read a 0-255 channel value; a missing one is zero."""
    if value is None:
        return 0
    if not _is_number(value):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Value {value} is out of range for a color channel")
        value = math.trunc(value)
    if not 0 <= value <= 255:
        raise ValueError(f"Value {value} is out of range for a color channel")
    return int(value)


def _to_byte(channel: float) -> int:
    """Scale a 0-1 channel to 0-255, clamping and truncating."""
    scaled = channel * 255.0
    if math.isnan(scaled):
        return 0
    return int(max(0.0, min(255.0, scaled)))


def _parse_hex_pair(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if not digits or any(ch not in _HEX_DIGITS for ch in digits):
        return None
    return int(digits, 16)


def _hsv_sector(i: float) -> int:
    if not math.isfinite(i):
        return 0
    return int(max(0.0, math.fmod(i, 6.0)))


@dataclass(frozen=True)
class Color3:
    """An immutable colour; channels are nominally in the range 0 to 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_rgb(
        cls,
        r: Optional[int] = None,
        g: Optional[int] = None,
        b: Optional[int] = None,
    ) -> Color3:
        """Build from 0-255 channel values; missing channels are zero."""
        return cls(_byte(r) / 255.0, _byte(g) / 255.0, _byte(b) / 255.0)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color3:
        """Build from hue, saturation and value, each in the range 0 to 1."""
        scaled = h * 6.0
        i = float(math.floor(scaled)) if math.isfinite(scaled) else scaled
        f = scaled - i
        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)
        channels = (
            (v, t, p),
            (q, v, p),
            (p, v, t),
            (p, q, v),
            (t, p, v),
            (v, p, q),
        )[_hsv_sector(i)]
        return cls(*channels)

    @classmethod
    def from_hex(cls, hex_string: str) -> Color3:
        """Build from a 3 or 6 digit hex string, with or without leading ``#``."""
        trimmed = hex_string.lstrip("#").upper()
        length = len(trimmed)
        if length == 3:
            pairs = [ch * 2 for ch in trimmed]
        elif length == 6:
            pairs = [trimmed[0:2], trimmed[2:4], trimmed[4:6]]
        else:
            plural = "" if length == 1 else "s"
            raise ValueError(
                "Hex color string must be 3 or 6 characters long, "
                f"got {length} character{plural}"
            )
        values = [_parse_hex_pair(pair) for pair in pairs]
        if any(value is None for value in values):
            raise ValueError(f"Hex color string '{trimmed}' contains invalid character")
        return cls(*(value / 255.0 for value in values))  # type: ignore[operator]

    def lerp(self, goal: Color3, alpha: float) -> Color3:
        return Color3(
            self.r + (goal.r - self.r) * alpha,
            self.g + (goal.g - self.g) * alpha,
            self.b + (goal.b - self.b) * alpha,
        )

    def to_hsv(self) -> tuple[float, float, float]:
        """Return (hue, saturation, value), each in the range 0 to 1."""
        r, g, b = self.r, self.g, self.b
        low = min(r, g, b)
        high = max(r, g, b)
        diff = high - low
        if high == low:
            hue = 0.0
        elif high == r:
            hue = _divide(g - b, diff) + (6.0 if g < b else 0.0)
        elif high == g:
            hue = _divide(b - r, diff) + 2.0
        else:
            hue = _divide(r - g, diff) + 4.0
        hue /= 6.0
        sat = 0.0 if high == 0.0 else max(0.0, min(1.0, _divide(diff, high)))
        return hue, sat, high

    def to_hex(self) -> str:
        """Six upper case hex digits, channels clamped into range."""
        return "".join(f"{_to_byte(c):02X}" for c in (self.r, self.g, self.b))

    def __neg__(self) -> Color3:
        return Color3(-self.r, -self.g, -self.b)

    def __add__(self, other: object) -> Color3:
        if not isinstance(other, Color3):
            return NotImplemented
        return Color3(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: object) -> Color3:
        if not isinstance(other, Color3):
            return NotImplemented
        return Color3(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: object) -> Color3:
        if isinstance(other, Color3):
            return Color3(self.r * other.r, self.g * other.g, self.b * other.b)
        if _is_number(other):
            return Color3(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color3:
        if _is_number(other):
            return Color3(other * self.r, other * self.g, other * self.b)
        return NotImplemented

    def __truediv__(self, other: object) -> Color3:
        if isinstance(other, Color3):
            return Color3(
                _divide(self.r, other.r),
                _divide(self.g, other.g),
                _divide(self.b, other.b),
            )
        if _is_number(other):
            return Color3(
                _divide(self.r, other), _divide(self.g, other), _divide(self.b, other)
            )
        return NotImplemented

    def __str__(self) -> str:
        return f"{_format_float(self.r)}, {_format_float(self.g)}, {_format_float(self.b)}"