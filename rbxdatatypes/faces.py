"""A set of the six faces of a box."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .enums import EnumItem

_FROM_NORMAL_ID = {
    "Right": "right",
    "Top": "top",
    "Back": "back",
    "Left": "left",
    "Bottom": "bottom",
    "Front": "front",
}


@dataclass(frozen=True)
class Faces:
    """Which faces are enabled; the field order is also the bit order."""

    right: bool = False
    top: bool = False
    back: bool = False
    left: bool = False
    bottom: bool = False
    front: bool = False

    @classmethod
    def from_items(cls, *args: EnumItem) -> Faces:
        """Build from NormalId enum items; other enums are ignored."""
        enabled: set[str] = set()
        for index, arg in enumerate(args):
            if not isinstance(arg, EnumItem):
                raise TypeError(
                    f"Expected argument #{index} to be an EnumItem, "
                    f"got {type(arg).__name__}"
                )
            if arg.parent.name == "NormalId" and arg.name in _FROM_NORMAL_ID:
                enabled.add(_FROM_NORMAL_ID[arg.name])
        return cls(**{name: True for name in enabled})

    @classmethod
    def from_bits(cls, bits: int) -> Faces:
        """Decode from a bit mask in the order right, top, back, left, bottom, front."""
        if not 0 <= bits < 1 << 6:
            raise ValueError(f"Invalid bits for Faces: {bits}")
        return cls(*(bool(bits >> shift & 1) for shift in range(6)))

    def to_bits(self) -> int:
        return sum(
            int(getattr(self, f.name)) << shift for shift, f in enumerate(fields(self))
        )

    def __str__(self) -> str:
        return ", ".join(
            f.name.capitalize() for f in fields(self) if getattr(self, f.name)
        )