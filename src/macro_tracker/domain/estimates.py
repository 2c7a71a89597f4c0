"""Models for externally estimated food macros."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from macro_tracker.numbers import coerce_float


class FoodEstimate(BaseModel):
    """Structured macro estimate returned by the voice assistant."""

    model_config = ConfigDict(populate_by_name=True)

    food_name: str = Field(default="Unknown food", alias="foodName")
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0

    @field_validator("calories", "protein", "fat", "carbs", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> float:
        return coerce_float(value)

    @field_validator("food_name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str:
        text = str(value).strip() if value is not None else ""
        return text or "Unknown food"
