"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Macros:
    """Calories plus protein, fat and carbs in grams.

    Used both for a daily target and for the content of a single food item.
    """

    calories: int
    protein: int
    fat: int
    carbs: int


ZERO_MACROS = Macros(calories=0, protein=0, fat=0, carbs=0)


@dataclass(frozen=True)
class TargetBreakdown:
    """Intermediate values behind a daily target."""

    bmr: int
    multiplier: float
    maintenance: int
    goal_offset: int
    targets: Macros
