"""Daily summary of the food log against targets."""

from macro_tracker.domain.nutrition import Macros
from macro_tracker.domain.stats import DailySummary, MacroProgress
from macro_tracker.services.meals import FoodLog, progress_percent


def build_daily_summary(log: FoodLog, targets: Macros) -> DailySummary:
    """Return today's totals, remaining calories and per-meal breakdown."""
    totals = log.totals()
    return DailySummary(
        totals=totals,
        targets=targets,
        calories_remaining=log.remaining_vs_target(targets),
        progress=_progress(totals, targets),
        meals=log.group_by_meal(),
        meal_calories=log.meal_calories(),
    )


def _progress(totals: Macros, targets: Macros) -> MacroProgress:
    return MacroProgress(
        calories=progress_percent(totals.calories, targets.calories),
        protein=progress_percent(totals.protein, targets.protein),
        fat=progress_percent(totals.fat, targets.fat),
        carbs=progress_percent(totals.carbs, targets.carbs),
    )
