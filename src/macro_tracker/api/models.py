"""Pydantic request models for the tracker API."""

from pydantic import BaseModel, Field, field_validator

from macro_tracker.domain.meals import FoodState, MealType
from macro_tracker.domain.profile import Gender, Goal
from macro_tracker.numbers import coerce_float, coerce_int, round_half_up


class ProfilePayload(BaseModel):
    """Full profile submitted from the profile screen."""

    gender: Gender
    goal: Goal
    age: int
    weight: float
    height_ft: int
    height_in: int
    activity_level: int

    @field_validator("age", "height_ft", "height_in", "activity_level", mode="before")
    @classmethod
    def _coerce_int(cls, value: object) -> int:
        return coerce_int(value)

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_float(cls, value: object) -> float:
        return coerce_float(value)


class ProfilePatchPayload(BaseModel):
    """Partial profile change; omitted fields are left unchanged.

    Weight and height may be given in kilograms and centimetres instead; the
    metric value wins when both forms are sent.
    """

    gender: Gender | None = None
    goal: Goal | None = None
    age: int | None = None
    weight: float | None = None
    height_ft: int | None = None
    height_in: int | None = None
    activity_level: int | None = None
    weight_kg: float | None = None
    height_cm: float | None = None

    @field_validator("age", "height_ft", "height_in", "activity_level", mode="before")
    @classmethod
    def _coerce_int(cls, value: object) -> int | None:
        return None if value is None else coerce_int(value)

    @field_validator("weight", "weight_kg", "height_cm", mode="before")
    @classmethod
    def _coerce_float(cls, value: object) -> float | None:
        return None if value is None else coerce_float(value)


class FoodDraftPayload(BaseModel):
    """Manually entered food item."""

    name: str
    weight: float = 0.0
    calories: int = 0
    protein: int = 0
    fat: int = 0
    carbs: int = 0
    meal_type: MealType
    timestamp: str | None = None
    state: FoodState | None = None

    @field_validator("calories", "protein", "fat", "carbs", mode="before")
    @classmethod
    def _round_macro(cls, value: object) -> int:
        return round_half_up(coerce_float(value))

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: object) -> float:
        return coerce_float(value)


class QuickAddPayload(BaseModel):
    """Food logged by name and weight only."""

    name: str = Field(min_length=1)
    grams: float = Field(gt=0)
    state: FoodState | None = FoodState.COOKED
