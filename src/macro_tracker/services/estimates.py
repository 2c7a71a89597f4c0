"""Conversion of voice-assistant estimates into loggable drafts."""

from datetime import datetime

from macro_tracker.domain.estimates import FoodEstimate
from macro_tracker.domain.meals import FoodDraft
from macro_tracker.domain.nutrition import Macros
from macro_tracker.numbers import round_half_up
from macro_tracker.services.meals import current_timestamp, infer_meal_type


def draft_from_estimate(
    estimate: FoodEstimate, now: datetime | None = None
) -> FoodDraft:
    """Round the estimate's macros and file it under the meal for `now`.

    Estimates carry no portion weight, so the draft's weight is 0.
    """
    moment = now or datetime.now()  # noqa: DTZ005
    return FoodDraft(
        name=estimate.food_name,
        weight=0,
        macros=Macros(
            calories=round_half_up(estimate.calories),
            protein=round_half_up(estimate.protein),
            fat=round_half_up(estimate.fat),
            carbs=round_half_up(estimate.carbs),
        ),
        meal_type=infer_meal_type(moment.hour),
        timestamp=current_timestamp(moment),
    )
