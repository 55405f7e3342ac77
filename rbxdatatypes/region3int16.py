"""Integer box in 3D space."""

from __future__ import annotations

from dataclasses import dataclass

from .vector3int16 import Vector3int16


@dataclass(frozen=True)
class Region3int16:
    """A box given by integer minimum and maximum corners."""

    min: Vector3int16 = Vector3int16()
    max: Vector3int16 = Vector3int16()

    def __post_init__(self) -> None:
        if not (
            isinstance(self.min, Vector3int16) and isinstance(self.max, Vector3int16)
        ):
            raise TypeError("Region3int16 corners must be Vector3int16 values")

    def __str__(self) -> str:
        return f"{self.min}, {self.max}"