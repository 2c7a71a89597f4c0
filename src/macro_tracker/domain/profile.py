"""Domain models for the user's body profile."""

from dataclasses import dataclass
from enum import StrEnum


class Gender(StrEnum):
    """Gender used by the metabolic rate formula."""

    MALE = "Male"
    FEMALE = "Female"


class Goal(StrEnum):
    """Dietary intent applied as a calorie offset."""

    CUT = "Cut"
    MAINTAIN = "Maintain"
    BULK = "Bulk"


ACTIVITY_LABELS = ("Sedentary", "Light", "Moderate", "Active", "Athlete")


@dataclass(frozen=True)
class UserProfile:
    """Body profile that daily targets are derived from.

    Weight is in pounds. Height is split into feet and inches; inches are
    expected in 0-11 but are not clamped.
    """

    gender: Gender
    goal: Goal
    age: int
    weight: float
    height_ft: int
    height_in: int
    activity_level: int


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile change; fields left as None keep their value."""

    gender: Gender | None = None
    goal: Goal | None = None
    age: int | None = None
    weight: float | None = None
    height_ft: int | None = None
    height_in: int | None = None
    activity_level: int | None = None


DEFAULT_PROFILE = UserProfile(
    gender=Gender.MALE,
    goal=Goal.CUT,
    age=28,
    weight=175,
    height_ft=5,
    height_in=10,
    activity_level=3,
)
