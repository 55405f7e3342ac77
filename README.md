# rbxdatatypes

Immutable value types modelled on the Roblox engine datatypes, in plain Python
with no dependencies: integer vectors and regions, colors and color
gradients, number ranges and curves, UI dimensions, physical material
properties, axis and face sets, and enumerations.

## Installation

```
pip install rbxdatatypes
```

For running the test suite:

```
pip install "rbxdatatypes[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `rbxdatatypes.vector2int16` | `Vector2int16` |
| `rbxdatatypes.vector3int16` | `Vector3int16` |
| `rbxdatatypes.region3int16` | `Region3int16` |
| `rbxdatatypes.color3` | `Color3` |
| `rbxdatatypes.color_sequence` | `ColorSequence`, `ColorSequenceKeypoint` |
| `rbxdatatypes.number_range` | `NumberRange` |
| `rbxdatatypes.number_sequence` | `NumberSequence`, `NumberSequenceKeypoint` |
| `rbxdatatypes.udim` | `UDim` |
| `rbxdatatypes.udim2` | `UDim2` |
| `rbxdatatypes.physical_properties` | `PhysicalProperties` |
| `rbxdatatypes.axes` | `Axes` |
| `rbxdatatypes.faces` | `Faces` |
| `rbxdatatypes.enums` | `Enums`, `Enum`, `EnumItem` |
| `rbxdatatypes.util` | `round_float_decimal` |

All types are frozen dataclasses: they compare by value and can be used as
dictionary keys. `str()` gives the same comma-separated text form for every
type.

## Examples

### Integer vectors and regions

```python
from rbxdatatypes.vector2int16 import Vector2int16
from rbxdatatypes.vector3int16 import Vector3int16
from rbxdatatypes.region3int16 import Region3int16

print(Vector2int16(3, -4) + Vector2int16(1, 1))        # 4, -3
print(Vector2int16(7, -7) / 2)                         # 3, -3  (rounds toward zero)
print(Vector2int16(40000, -40000).clamped())           # 32767, -32768
region = Region3int16(Vector3int16(0, 0, 0), Vector3int16(4, 4, 4))
```

Components are Python integers; `clamped()` brings them into the 16-bit
range. Division by zero raises `ZeroDivisionError`. Note that `str()` of a
`Vector3int16` shows only its X and Y components.

### Colors

```python
from rbxdatatypes.color3 import Color3

c = Color3.from_hex("#FF8000")
print(c.to_hex())                    # FF8000
print(Color3.from_hex("abc").to_hex())   # AABBCC
h, s, v = c.to_hsv()
same = Color3.from_hsv(h, s, v)
print(Color3(1, 0.5, 0))             # 1, 0.5, 0
mid = Color3(0, 0, 0).lerp(Color3(1, 1, 1), 0.5)
```

`Color3.from_rgb` takes 0–255 channels (missing ones are zero). Colors
support `+`, `-`, unary `-`, and `*` / `/` by another color or by a number;
division by zero gives `inf` or `nan` rather than raising. A hex string that is
not 3 or 6 digits long, or holds a non-hex digit, raises `ValueError`.

### Sequences and ranges

```python
from rbxdatatypes.color3 import Color3
from rbxdatatypes.color_sequence import ColorSequence, ColorSequenceKeypoint
from rbxdatatypes.number_range import NumberRange
from rbxdatatypes.number_sequence import NumberSequence, NumberSequenceKeypoint

print(ColorSequence.new(Color3(1, 0, 0), Color3(0, 0, 1)))  # 0 > 1, 0, 0, 1 > 0, 0, 1
print(NumberSequence.new(0, 1))                             # 0 > 0, 1 > 1
curve = NumberSequence.new([NumberSequenceKeypoint(0, 1, 0.2), NumberSequenceKeypoint(1, 0)])
print(NumberRange.new(5, 1))                                # 1, 5
print(NumberRange.new(3))                                   # 3, 3
```

`ColorSequence.new` and `NumberSequence.new` take one value, a start and end
value, or a list of keypoints; anything else raises `TypeError`.

### UI dimensions

```python
from rbxdatatypes.udim import UDim
from rbxdatatypes.udim2 import UDim2

print(UDim(0.5, 10) + UDim(0.25, -4))                # 0.75, 6
size = UDim2.from_scale(0.5, 0.25) + UDim2.from_offset(10, 20)
print(size)                                          # 0.5, 10, 0.25, 20
print(size.lerp(UDim2.new(1, 0, 1, 0), 0.5))         # 0.75, 5, 0.625, 10
```

`UDim2.new` accepts two `UDim` values or up to four numbers
(scale X, offset X, scale Y, offset Y); missing parts are zero. `lerp` rounds
offsets to the nearest integer.

### Enums, axes and faces

Enumerations are built from a table, supplied by you, of enum names to their
items:

```python
from rbxdatatypes.enums import Enums
from rbxdatatypes.axes import Axes
from rbxdatatypes.faces import Faces

enums = Enums({
    "Axis": {"X": 0, "Y": 1, "Z": 2},
    "NormalId": {"Right": 0, "Top": 1, "Back": 2, "Left": 3, "Bottom": 4, "Front": 5},
})
print(enums.get("Axis"))                 # Enum.Axis
print(enums.item("Axis", "X"))           # Enum.Axis.X
axes = Axes.from_items(enums.item("Axis", "X"), enums.item("Axis", "Z"))
print(axes, axes.to_bits())              # X, Z 5
print(Faces.from_bits(0b100001))         # Right, Front
faces = Faces.from_items(enums.item("NormalId", "Top"))
```

Looking up an unknown enum or item raises `LookupError`. `from_items` raises
`TypeError` for an argument that is not an `EnumItem`, and `from_bits` raises
`ValueError` for bits out of range.

### Physical properties

```python
from rbxdatatypes.enums import Enums
from rbxdatatypes.physical_properties import PhysicalProperties

print(PhysicalProperties.new(1, 0.3, 0.5))   # 1, 0.3, 0.5, 1, 1
enums = Enums({"Material": {"Plastic": 256}})
plastic = PhysicalProperties.from_material(enums.item("Material", "Plastic"))
print(plastic.density)                       # 0.7
```

The friction and elasticity weights default to 1. An item of another enum,
or an unknown material name, raises `ValueError`.

### Rounding helper

`rbxdatatypes.util.round_float_decimal(value)` rounds the fractional part of a
number to the nearest 1/65536, leaving the whole part untouched, to strip
floating point noise before values are written out.

## What this package does not do

It holds values only: it does not read or write place or model files, and it
ships no enum database — enumerations come from whatever table you give
`Enums`. It has no floating-point 2D or 3D vector, coordinate frame, ray,
rectangle or floating-point box region type, no named brick color palette, and
no checks of attribute names or values.