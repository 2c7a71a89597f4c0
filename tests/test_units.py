"""Tests for unit conversions."""

import pytest

from macro_tracker.numbers import coerce_float, coerce_int, round_half_up
from macro_tracker.services.units import (
    cm_from_feet_inches,
    display_cm,
    display_kg,
    feet_inches_from_cm,
    kg_from_pounds,
    pounds_from_kg,
)


def test_weight_conversions() -> None:
    assert kg_from_pounds(175) == pytest.approx(79.3786)
    assert display_kg(175) == 79
    assert pounds_from_kg(80) == 176


def test_height_conversions() -> None:
    assert cm_from_feet_inches(5, 10) == pytest.approx(177.8)
    assert display_cm(5, 10) == 178
    assert feet_inches_from_cm(178) == (5, 10)
    assert feet_inches_from_cm(0) == (0, 0)


def test_round_half_up_matches_clock_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(248.75) == 249
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_coercion_falls_back_to_zero() -> None:
    assert coerce_int("28") == 28
    assert coerce_int("abc") == 0
    assert coerce_int(None) == 0
    assert coerce_int("70.6") == 70
    assert coerce_float("12.5") == 12.5
    assert coerce_float(float("nan")) == 0.0
    assert coerce_float([]) == 0.0
