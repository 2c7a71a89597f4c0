"""Numeric coercion and rounding helpers shared across the tracker."""

import math


def coerce_float(value: object) -> float:
    """Return value as a float, or 0.0 when it is not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        if math.isnan(value) or math.isinf(value):
            return 0.0
        return float(value)
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0.0
        if math.isnan(parsed) or math.isinf(parsed):
            return 0.0
        return parsed
    return 0.0


def coerce_int(value: object) -> int:
    """Return value as an int, or 0 when it is not numeric.

    Strings are parsed leniently: "70kg" is not a number, but "70" and
    "70.6" are (the latter truncates to 70, like an integer form field).
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(coerce_float(value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity."""
    return math.floor(value + 0.5)
