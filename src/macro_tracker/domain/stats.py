"""Domain models for daily summaries."""

from dataclasses import dataclass

from macro_tracker.domain.meals import FoodItem, MealType
from macro_tracker.domain.nutrition import Macros


@dataclass(frozen=True)
class MacroProgress:
    """Progress percentages (0-100) for each macro against its target."""

    calories: float
    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class DailySummary:
    """Today's totals compared against the current targets."""

    totals: Macros
    targets: Macros
    calories_remaining: int
    progress: MacroProgress
    meals: dict[MealType, list[FoodItem]]
    meal_calories: dict[MealType, int]
