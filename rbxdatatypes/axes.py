"""A set of the three coordinate axes."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import EnumItem

_FROM_AXIS = {"X": "x", "Y": "y", "Z": "z"}
_FROM_NORMAL_ID = {
    "Left": "x",
    "Right": "x",
    "Top": "y",
    "Bottom": "y",
    "Front": "z",
    "Back": "z",
}


@dataclass(frozen=True)
class Axes:
    """Which of the X, Y and Z axes are enabled."""

    x: bool = False
    y: bool = False
    z: bool = False

    @classmethod
    def from_items(cls, *args: EnumItem) -> Axes:
        """Build from Axis or NormalId enum items; other enums are ignored."""
        enabled: set[str] = set()
        for index, arg in enumerate(args):
            if not isinstance(arg, EnumItem):
                raise TypeError(
                    f"Expected argument #{index} to be an EnumItem, "
                    f"got {type(arg).__name__}"
                )
            if arg.parent.name == "Axis":
                table = _FROM_AXIS
            elif arg.parent.name == "NormalId":
                table = _FROM_NORMAL_ID
            else:
                continue
            if arg.name in table:
                enabled.add(table[arg.name])
        return cls(**{name: True for name in enabled})

    @classmethod
    def from_bits(cls, bits: int) -> Axes:
        """Decode from a bit mask: bit 0 is X, bit 1 is Y, bit 2 is Z."""
        if not 0 <= bits < 1 << 3:
            raise ValueError(f"Invalid bits for Axes: {bits}")
        return cls(bool(bits & 1), bool(bits >> 1 & 1), bool(bits >> 2 & 1))

    def to_bits(self) -> int:
        return int(self.x) | int(self.y) << 1 | int(self.z) << 2

    @property
    def left(self) -> bool:
        return self.x

    @property
    def right(self) -> bool:
        return self.x

    @property
    def top(self) -> bool:
        return self.y

    @property
    def bottom(self) -> bool:
        return self.y

    @property
    def front(self) -> bool:
        return self.z

    @property
    def back(self) -> bool:
        return self.z

    def __str__(self) -> str:
        flags = ((self.x, "X"), (self.y, "Y"), (self.z, "Z"))
        return ", ".join(label for enabled, label in flags if enabled)