"""Numeric helpers shared by the datatypes."""

from __future__ import annotations

import math
from decimal import Decimal

_ROUNDING = 65_536  # 2 ** 16


def round_float_decimal(value: float) -> float:
    """Round the fractional part of ``value`` to the nearest 1/65536.

    The whole part is left untouched so that very large numbers keep
    their precision; only floating point noise in the fraction is removed.
    """
    if not math.isfinite(value):
        return value
    fract, whole = math.modf(value)
    scaled = fract * _ROUNDING
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return whole + rounded / _ROUNDING


def _format_float(value: float) -> str:
    """Format a number the short way: no trailing ``.0``, no exponent."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        sign = "-" if value == 0 and math.copysign(1.0, value) < 0 else ""
        return sign + str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero gives inf or NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)