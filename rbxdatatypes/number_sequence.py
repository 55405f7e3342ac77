"""Number curves built from keypoints."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .util import _format_float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class NumberSequenceKeypoint:
    """A value with an envelope at a point in time along a sequence."""

    time: float
    value: float
    envelope: float = 0.0

    def __post_init__(self) -> None:
        if not all(map(_is_number, (self.time, self.value, self.envelope))):
            raise TypeError("NumberSequenceKeypoint fields must be numbers")

    def __str__(self) -> str:
        return f"{_format_float(self.time)} > {_format_float(self.value)}"


@dataclass(frozen=True)
class NumberSequence:
    """An ordered list of number keypoints."""

    keypoints: tuple[NumberSequenceKeypoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keypoints", tuple(self.keypoints))

    @classmethod
    def new(cls, *args: object) -> NumberSequence:
        """Build from one value, a start and end value, or a list of keypoints."""
        if len(args) == 1 and _is_number(args[0]):
            value = float(args[0])  # type: ignore[arg-type]
            return cls(
                (NumberSequenceKeypoint(0.0, value), NumberSequenceKeypoint(1.0, value))
            )
        if len(args) == 2 and all(map(_is_number, args)):
            start, end = (float(a) for a in args)  # type: ignore[arg-type]
            return cls(
                (NumberSequenceKeypoint(0.0, start), NumberSequenceKeypoint(1.0, end))
            )
        if (
            len(args) == 1
            and isinstance(args[0], Iterable)
            and not isinstance(args[0], (str, bytes))
        ):
            keypoints = tuple(args[0])
            if all(isinstance(k, NumberSequenceKeypoint) for k in keypoints):
                return cls(keypoints)
        raise TypeError("Invalid arguments to constructor")

    def __str__(self) -> str:
        return ", ".join(str(keypoint) for keypoint in self.keypoints)