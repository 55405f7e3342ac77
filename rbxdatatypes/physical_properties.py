"""Physical material properties of a part."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .util import _format_float

# name: density, friction, elasticity, friction weight, elasticity weight
_MATERIALS: dict[str, tuple[float, float, float, float, float]] = {
    "Plastic": (0.70, 0.30, 0.50, 1.00, 1.00),
    "Wood": (0.35, 0.48, 0.20, 1.00, 1.00),
    "Slate": (2.69, 0.40, 0.20, 1.00, 1.00),
    "Concrete": (2.40, 0.70, 0.20, 0.30, 1.00),
    "CorrodedMetal": (7.85, 0.70, 0.20, 1.00, 1.00),
    "DiamondPlate": (7.85, 0.35, 0.25, 1.00, 1.00),
    "Foil": (2.70, 0.40, 0.25, 1.00, 1.00),
    "Grass": (0.90, 0.40, 0.10, 1.00, 1.50),
    "Ice": (0.92, 0.02, 0.15, 3.00, 1.00),
    "Marble": (2.56, 0.20, 0.17, 1.00, 1.00),
    "Granite": (2.69, 0.40, 0.20, 1.00, 1.00),
    "Brick": (1.92, 0.80, 0.15, 0.30, 1.00),
    "Pebble": (2.40, 0.40, 0.17, 1.00, 1.50),
    "Sand": (1.60, 0.50, 0.05, 5.00, 2.50),
    "Fabric": (0.70, 0.35, 0.05, 1.00, 1.00),
    "SmoothPlastic": (0.70, 0.20, 0.50, 1.00, 1.00),
    "Metal": (7.85, 0.40, 0.25, 1.00, 1.00),
    "WoodPlanks": (0.35, 0.48, 0.20, 1.00, 1.00),
    "Cobblestone": (2.69, 0.50, 0.17, 1.00, 1.00),
    "Air": (0.01, 0.01, 0.01, 1.00, 1.00),
    "Water": (1.00, 0.00, 0.01, 1.00, 1.00),
    "Rock": (2.69, 0.50, 0.17, 1.00, 1.00),
    "Glacier": (0.92, 0.05, 0.15, 2.00, 1.00),
    "Snow": (0.90, 0.30, 0.03, 3.00, 4.00),
    "Sandstone": (2.69, 0.50, 0.15, 5.00, 1.00),
    "Mud": (0.90, 0.30, 0.07, 3.00, 4.00),
    "Basalt": (2.69, 0.70, 0.15, 0.30, 1.00),
    "Ground": (0.90, 0.45, 0.10, 1.00, 1.00),
    "CrackedLava": (2.69, 0.65, 0.15, 1.00, 1.00),
    "Neon": (0.70, 0.30, 0.20, 1.00, 1.00),
    "Glass": (2.40, 0.25, 0.20, 1.00, 1.00),
    "Asphalt": (2.36, 0.80, 0.20, 0.30, 1.00),
    "LeafyGrass": (0.90, 0.40, 0.10, 2.00, 2.00),
    "Salt": (2.16, 0.50, 0.05, 1.00, 1.00),
    "Limestone": (2.69, 0.50, 0.15, 1.00, 1.00),
    "Pavement": (2.69, 0.50, 0.17, 0.30, 1.00),
    "ForceField": (2.40, 0.25, 0.20, 1.00, 1.00),
}


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class PhysicalProperties:
    """Density, friction and elasticity, with weights for friction and elasticity."""

    density: float
    friction: float
    elasticity: float
    friction_weight: float = 1.0
    elasticity_weight: float = 1.0

    @classmethod
    def new(cls, *args: Any) -> PhysicalProperties:
        """Build from a Material enum item, or from three to five numbers."""
        if len(args) == 1 and not _is_number(args[0]) and hasattr(args[0], "parent"):
            return cls.from_material(args[0])
        if 3 <= len(args) <= 5 and all(map(_is_number, args)):
            return cls(*(float(a) for a in args))
        raise TypeError("Invalid arguments to constructor")

    @classmethod
    def from_material(cls, item: Any) -> PhysicalProperties:
        """Default properties of a ``Material`` enum item."""
        if item.parent.name != "Material":
            raise ValueError(
                f"Expected argument #1 to be a Material, got {item.parent.name}"
            )
        try:
            density, friction, elasticity, fw, ew = _MATERIALS[item.name]
        except KeyError:
            raise ValueError(f"Found unknown Material '{item.name}'") from None
        return cls(density, friction, elasticity, fw, ew)

    def __str__(self) -> str:
        return ", ".join(
            _format_float(v)
            for v in (
                self.density,
                self.friction,
                self.elasticity,
                self.friction_weight,
                self.elasticity_weight,
            )
        )