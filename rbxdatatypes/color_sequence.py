"""Colour gradients built from keypoints."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .color3 import Color3
from .util import _format_float


@dataclass(frozen=True)
class ColorSequenceKeypoint:
    """A colour at a point in time along a sequence."""

    time: float
    value: Color3

    def __str__(self) -> str:
        return f"{_format_float(self.time)} > {self.value}"


@dataclass(frozen=True)
class ColorSequence:
    """An ordered list of colour keypoints."""

    keypoints: tuple[ColorSequenceKeypoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keypoints", tuple(self.keypoints))

    @classmethod
    def new(cls, *args: object) -> ColorSequence:
        """Build from one colour, a start and end colour, or a list of keypoints."""
        if len(args) == 1 and isinstance(args[0], Color3):
            color = args[0]
            return cls(
                (ColorSequenceKeypoint(0.0, color), ColorSequenceKeypoint(1.0, color))
            )
        if len(args) == 2 and all(isinstance(a, Color3) for a in args):
            start, end = args
            return cls(
                (ColorSequenceKeypoint(0.0, start), ColorSequenceKeypoint(1.0, end))  # type: ignore[arg-type]
            )
        if (
            len(args) == 1
            and isinstance(args[0], Iterable)
            and not isinstance(args[0], (str, bytes))
        ):
            keypoints = tuple(args[0])
            if all(isinstance(k, ColorSequenceKeypoint) for k in keypoints):
                return cls(keypoints)
        raise TypeError("Invalid arguments to constructor")

    def __str__(self) -> str:
        return ", ".join(str(keypoint) for keypoint in self.keypoints)