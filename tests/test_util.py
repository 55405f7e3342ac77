import math

import pytest

from rbxdatatypes.util import round_float_decimal


@pytest.mark.parametrize("value", [0.0, 1.0, -3.0, 1.5, -1.25, 2.75, 100.5])
def test_representable_values_are_unchanged(value):
    assert round_float_decimal(value) == value


def test_small_noise_is_removed():
    assert round_float_decimal(1.0 + 1e-9) == 1.0
    assert round_float_decimal(-2.0 - 1e-9) == -2.0


@pytest.mark.parametrize("value", [0.1, 0.3333, -0.7777, 12.123456789, -5.987654321])
def test_fraction_is_multiple_of_step(value):
    result = round_float_decimal(value)
    fract, whole = math.modf(result)
    assert whole == math.trunc(value)
    assert (fract * 65536).is_integer()
    assert abs(result - value) <= 1 / 65536 / 2 + 1e-15


def test_large_values_keep_whole_part():
    assert round_float_decimal(1e20) == 1e20


def test_nan_stays_nan():
    assert math.isnan(round_float_decimal(math.nan))


def test_idempotent():
    once = round_float_decimal(3.14159)
    assert round_float_decimal(once) == once