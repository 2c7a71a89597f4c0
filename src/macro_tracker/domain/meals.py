"""Domain models for food logging."""

from dataclasses import dataclass
from enum import StrEnum

from macro_tracker.domain.nutrition import Macros


class MealType(StrEnum):
    """Meal bucket a food item is logged under."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class FoodState(StrEnum):
    """Preparation state of a food item."""

    RAW = "Raw"
    COOKED = "Cooked"


@dataclass(frozen=True)
class FoodDraft:
    """Food item as submitted for logging, before an id is assigned."""

    name: str
    weight: float
    macros: Macros
    meal_type: MealType
    timestamp: str
    state: FoodState | None = None


@dataclass(frozen=True)
class FoodItem:
    """Logged food item. Macros are fixed at logging time."""

    id: str
    name: str
    weight: float
    macros: Macros
    meal_type: MealType
    timestamp: str
    state: FoodState | None = None
