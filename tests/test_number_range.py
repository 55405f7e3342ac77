import pytest

from rbxdatatypes.number_range import NumberRange


def test_single_value():
    r = NumberRange.new(5)
    assert r.min == 5
    assert r.max == 5


def test_bounds_are_ordered():
    assert NumberRange.new(5, 1) == NumberRange.new(1, 5)
    r = NumberRange.new(5, 1)
    assert r.min == 1
    assert r.max == 5


def test_rejects_non_numbers():
    with pytest.raises(TypeError):
        NumberRange.new("1")
    with pytest.raises(TypeError):
        NumberRange.new(1, True)


def test_str():
    assert str(NumberRange.new(1, 2.5)) == "1, 2.5"