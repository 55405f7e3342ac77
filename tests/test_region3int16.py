import pytest

from rbxdatatypes.region3int16 import Region3int16
from rbxdatatypes.vector3int16 import Vector3int16


def test_corners_are_kept():
    lo = Vector3int16(1, 2, 3)
    hi = Vector3int16(4, 5, 6)
    region = Region3int16(lo, hi)
    assert region.min == lo
    assert region.max == hi


def test_equality():
    a = Region3int16(Vector3int16(1, 2, 3), Vector3int16(4, 5, 6))
    b = Region3int16(Vector3int16(1, 2, 3), Vector3int16(4, 5, 6))
    c = Region3int16(Vector3int16(1, 2, 3), Vector3int16(4, 5, 7))
    assert a == b
    assert a != c


def test_default_is_zero():
    assert Region3int16() == Region3int16(Vector3int16(0, 0, 0), Vector3int16(0, 0, 0))


@pytest.mark.parametrize(
    "lo, hi", [((1, 2, 3), Vector3int16()), (Vector3int16(), None)]
)
def test_rejects_non_vectors(lo, hi):
    with pytest.raises(TypeError):
        Region3int16(lo, hi)


def test_str_uses_corner_strings():
    lo = Vector3int16(1, 2, 3)
    hi = Vector3int16(4, 5, 6)
    assert str(Region3int16(lo, hi)) == f"{lo}, {hi}"
    assert str(Region3int16(lo, hi)) == "1, 2, 4, 5"