import pytest

from rbxdatatypes.udim import UDim


def test_default_is_zero():
    assert UDim() == UDim(0.0, 0)


def test_add_and_sub_round_trip():
    a = UDim(0.5, 10)
    b = UDim(0.25, 3)
    assert a + b == UDim(0.75, 13)
    assert (a + b) - b == a


def test_neg():
    a = UDim(0.5, 10)
    assert -a == UDim(-0.5, -10)
    assert a + -a == UDim(0.0, 0)


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        UDim(1.0, 1) + 1


def test_str():
    assert str(UDim(0.5, 10)) == "0.5, 10"
    assert str(UDim(1.0, -4)) == "1, -4"