import pytest

from rbxdatatypes.vector3int16 import Vector3int16


def test_default_is_zero():
    assert Vector3int16() == Vector3int16(0, 0, 0)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        Vector3int16(1, 2, 3.0)


def test_arithmetic_round_trips():
    a, b = Vector3int16(5, -3, 9), Vector3int16(2, 7, -1)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * b) / b == a
    assert (a * 5) / 5 == a


def test_division_truncates_toward_zero():
    assert Vector3int16(-7, 7, -1) / 2 == Vector3int16(-3, 3, 0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3int16(1, 2, 3) / Vector3int16(1, 1, 0)


def test_clamped():
    assert Vector3int16(40000, -40000, 5).clamped() == Vector3int16(32767, -32768, 5)


def test_str_shows_first_two_components():
    assert str(Vector3int16(1, 2, 3)) == "1, 2"