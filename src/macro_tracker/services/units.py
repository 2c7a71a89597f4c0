"""Pound/kilogram and feet-inch/centimetre conversions."""

import math

from macro_tracker.numbers import round_half_up

KG_PER_LB = 0.453592
LB_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def kg_from_pounds(pounds: float) -> float:
    return pounds * KG_PER_LB


def display_kg(pounds: float) -> int:
    """Whole kilograms shown for a weight stored in pounds."""
    return round_half_up(kg_from_pounds(pounds))


def pounds_from_kg(kilograms: float) -> int:
    """Whole pounds stored for a weight entered in kilograms."""
    return round_half_up(kilograms * LB_PER_KG)


def cm_from_feet_inches(feet: int, inches: int) -> float:
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def display_cm(feet: int, inches: int) -> int:
    return round_half_up(cm_from_feet_inches(feet, inches))


def feet_inches_from_cm(centimetres: float) -> tuple[int, int]:
    """Split a height in centimetres into feet and inches.

    Inches are rounded after the split, so values just under a foot boundary
    come back as 12 inches rather than carrying into the feet.
    """
    total_inches = centimetres / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = round_half_up(math.fmod(total_inches, INCHES_PER_FOOT))
    return feet, inches
