import pytest

from rbxdatatypes.axes import Axes
from rbxdatatypes.enums import Enums


@pytest.fixture
def enums():
    return Enums(
        {
            "Axis": {"X": 0, "Y": 1, "Z": 2},
            "NormalId": {
                "Right": 0,
                "Top": 1,
                "Back": 2,
                "Left": 3,
                "Bottom": 4,
                "Front": 5,
            },
            "Material": {"Plastic": 256},
        }
    )


def test_from_axis_items(enums):
    assert Axes.from_items(enums.item("Axis", "X")) == Axes(x=True)
    assert Axes.from_items(
        enums.item("Axis", "Y"), enums.item("Axis", "Z")
    ) == Axes(y=True, z=True)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Left", Axes(x=True)),
        ("Right", Axes(x=True)),
        ("Top", Axes(y=True)),
        ("Bottom", Axes(y=True)),
        ("Front", Axes(z=True)),
        ("Back", Axes(z=True)),
    ],
)
def test_from_normal_id_items(enums, name, expected):
    assert Axes.from_items(enums.item("NormalId", name)) == expected


def test_other_enums_are_ignored(enums):
    assert Axes.from_items(enums.item("Material", "Plastic")) == Axes()


def test_non_enum_item_raises(enums):
    with pytest.raises(TypeError, match="argument #1 to be an EnumItem, got int"):
        Axes.from_items(enums.item("Axis", "X"), 5)


@pytest.mark.parametrize("bits", range(8))
def test_bits_roundtrip(bits):
    assert Axes.from_bits(bits).to_bits() == bits


def test_bit_order():
    assert Axes(x=True).to_bits() == 1
    combined = Axes(x=True).to_bits() | Axes(y=True).to_bits() | Axes(z=True).to_bits()
    assert Axes(True, True, True).to_bits() == combined


@pytest.mark.parametrize("bits", [-1, 8])
def test_invalid_bits_raise(bits):
    with pytest.raises(ValueError):
        Axes.from_bits(bits)


def test_face_aliases():
    axes = Axes(y=True)
    assert axes.top and axes.bottom
    assert not axes.left and not axes.right
    assert not axes.front and not axes.back


def test_str():
    assert str(Axes(True, False, True)) == "X, Z"
    assert str(Axes()) == ""