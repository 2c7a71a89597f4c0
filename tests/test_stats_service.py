"""Tests for the daily summary."""

import pytest

from macro_tracker.domain.meals import MealType
from macro_tracker.domain.nutrition import Macros
from macro_tracker.services.meals import FoodLog
from macro_tracker.services.sessions import SEED_LOG
from macro_tracker.services.stats import build_daily_summary


def test_summary_over_seed_log() -> None:
    targets = Macros(calories=2244, protein=175, fat=61, carbs=249)

    summary = build_daily_summary(FoodLog(list(SEED_LOG)), targets)

    assert summary.totals == Macros(calories=610, protein=70, fat=10, carbs=45)
    assert summary.targets == targets
    assert summary.calories_remaining == 1634
    assert summary.progress.protein == pytest.approx(40.0)
    assert summary.meal_calories[MealType.LUNCH] == 330
    assert [item.name for item in summary.meals[MealType.BREAKFAST]] == [
        "Oatmeal & Berries"
    ]


def test_summary_with_zero_targets_reports_zero_progress() -> None:
    summary = build_daily_summary(FoodLog(list(SEED_LOG)), Macros(0, 0, 0, 0))

    assert summary.progress.calories == 0.0
    assert summary.progress.carbs == 0.0
    assert summary.calories_remaining == -610


def test_summary_over_empty_log() -> None:
    summary = build_daily_summary(FoodLog(), Macros(2000, 150, 60, 200))

    assert summary.totals == Macros(0, 0, 0, 0)
    assert summary.calories_remaining == 2000
    assert summary.progress.calories == 0.0
    assert all(items == [] for items in summary.meals.values())
