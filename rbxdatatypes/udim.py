"""One-dimensional user interface measurement: a scale plus a pixel offset."""

from __future__ import annotations

from dataclasses import dataclass

from .util import _format_float


@dataclass(frozen=True)
class UDim:
    """A fraction of the parent size plus an integer offset."""

    scale: float = 0.0
    offset: int = 0

    def __neg__(self) -> UDim:
        return UDim(-self.scale, -self.offset)

    def __add__(self, other: object) -> UDim:
        if not isinstance(other, UDim):
            return NotImplemented
        return UDim(self.scale + other.scale, self.offset + other.offset)

    def __sub__(self, other: object) -> UDim:
        if not isinstance(other, UDim):
            return NotImplemented
        return UDim(self.scale - other.scale, self.offset - other.offset)

    def __str__(self) -> str:
        return f"{_format_float(self.scale)}, {self.offset}"