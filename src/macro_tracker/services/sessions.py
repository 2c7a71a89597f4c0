"""Tracker session owning the profile, targets and today's log."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Protocol

from macro_tracker.domain.estimates import FoodEstimate
from macro_tracker.domain.meals import FoodDraft, FoodItem, FoodState, MealType
from macro_tracker.domain.nutrition import Macros, TargetBreakdown
from macro_tracker.domain.profile import DEFAULT_PROFILE, ProfileUpdate, UserProfile
from macro_tracker.domain.stats import DailySummary
from macro_tracker.numbers import coerce_float, coerce_int
from macro_tracker.services.estimates import draft_from_estimate
from macro_tracker.services.meals import (
    FoodLog,
    build_quick_add_draft,
    generate_item_id,
)
from macro_tracker.services.stats import build_daily_summary
from macro_tracker.services.targets import calculate_breakdown, calculate_targets

_logger = logging.getLogger(__name__)

SEED_LOG = (
    FoodItem(
        id="1",
        name="Oatmeal & Berries",
        weight=350,
        macros=Macros(calories=280, protein=8, fat=4, carbs=45),
        meal_type=MealType.BREAKFAST,
        timestamp="08:00",
        state=FoodState.COOKED,
    ),
    FoodItem(
        id="2",
        name="Grilled Chicken Breast",
        weight=200,
        macros=Macros(calories=330, protein=62, fat=6, carbs=0),
        meal_type=MealType.LUNCH,
        timestamp="12:30",
        state=FoodState.COOKED,
    ),
)


class StateRepository(Protocol):
    """Persistence interface for the tracker's session state.

    Loads return None when nothing usable is stored.
    """

    def load_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: UserProfile) -> None:
        """Persist the profile."""

    def load_targets(self) -> Macros | None:
        """Return the stored daily targets, if any."""

    def save_targets(self, targets: Macros) -> None:
        """Persist the daily targets."""

    def load_log(self) -> list[FoodItem] | None:
        """Return the stored food log, if any."""

    def save_log(self, items: list[FoodItem]) -> None:
        """Persist the food log."""


@dataclass
class TrackerSession:
    """Process-wide tracker state, synced to the repository on every change.

    Profile changes recompute targets in the same call. Logged items keep
    the macros they were logged with.
    """

    repository: StateRepository
    seed_log: bool = False
    id_factory: Callable[[], str] = generate_item_id
    _profile: UserProfile = field(init=False, repr=False)
    _targets: Macros = field(init=False, repr=False)
    _log: FoodLog = field(init=False, repr=False)
    _lock: threading.Lock = field(
        init=False, repr=False, default_factory=threading.Lock
    )

    def __post_init__(self) -> None:
        self._profile = self.repository.load_profile() or DEFAULT_PROFILE
        self._targets = self.repository.load_targets() or calculate_targets(
            self._profile
        )
        items = self.repository.load_log()
        if items is None:
            items = list(SEED_LOG) if self.seed_log else []
        self._log = FoodLog(items, id_factory=self.id_factory)
        self._save_all()
        _logger.info(
            "Session loaded: %s entries, target %s kcal",
            len(self._log.items),
            self._targets.calories,
        )

    @property
    def profile(self) -> UserProfile:
        return self._profile

    @property
    def targets(self) -> Macros:
        return self._targets

    @property
    def log(self) -> tuple[FoodItem, ...]:
        return tuple(self._log.items)

    def set_profile(self, profile: UserProfile) -> Macros:
        """Replace the profile and recompute targets."""
        with self._lock:
            targets = self._store_profile(profile)
        _logger.info("Profile updated, target %s kcal", targets.calories)
        return targets

    def update_profile(self, update: ProfileUpdate) -> Macros:
        """Apply a partial profile change and recompute targets."""
        with self._lock:
            targets = self._store_profile(apply_profile_update(self._profile, update))
        _logger.info("Profile updated, target %s kcal", targets.calories)
        return targets

    def target_breakdown(self) -> TargetBreakdown:
        return calculate_breakdown(self._profile)

    def add_food(self, draft: FoodDraft) -> FoodItem:
        """Log a food item and persist the log.

        The in-memory log is left unchanged if the save fails.
        """
        with self._lock:
            previous = self._log.items
            item = self._log.add(draft)
            self._save_log_or_restore(previous)
        _logger.info(
            "Logged %s (%s kcal) under %s at %s",
            item.name,
            item.macros.calories,
            item.meal_type,
            item.timestamp,
        )
        return item

    def remove_food(self, item_id: str) -> None:
        """Remove a logged item. Unknown ids leave the log untouched."""
        with self._lock:
            previous = self._log.items
            removed = self._log.remove(item_id)
            self._save_log_or_restore(previous)
        if not removed:
            _logger.info("Remove ignored, no log entry %s", item_id)

    def log_estimate(
        self, estimate: FoodEstimate, now: datetime | None = None
    ) -> FoodItem:
        """Log a voice-assistant estimate under the meal for the current hour."""
        return self.add_food(draft_from_estimate(estimate, now))

    def quick_add(
        self,
        name: str,
        grams: float,
        state: FoodState | None = FoodState.COOKED,
        now: datetime | None = None,
    ) -> FoodItem:
        """Log a snack from its name and weight using generic macros."""
        return self.add_food(build_quick_add_draft(name, grams, state, now))

    def summary(self) -> DailySummary:
        return build_daily_summary(self._log, self._targets)

    def _store_profile(self, profile: UserProfile) -> Macros:
        targets = calculate_targets(profile)
        self.repository.save_profile(profile)
        self.repository.save_targets(targets)
        self._profile = profile
        self._targets = targets
        return targets

    def _save_log_or_restore(self, previous: list[FoodItem]) -> None:
        try:
            self.repository.save_log(self._log.items)
        except Exception:
            self._log.items = previous
            raise

    def _save_all(self) -> None:
        self.repository.save_profile(self._profile)
        self.repository.save_targets(self._targets)
        self.repository.save_log(self._log.items)


def apply_profile_update(profile: UserProfile, update: ProfileUpdate) -> UserProfile:
    """Return the profile with the update's non-None fields applied.

    Numeric fields are coerced, so stray text becomes 0 rather than an error.
    """
    changes: dict[str, object] = {}
    if update.gender is not None:
        changes["gender"] = update.gender
    if update.goal is not None:
        changes["goal"] = update.goal
    if update.age is not None:
        changes["age"] = coerce_int(update.age)
    if update.weight is not None:
        changes["weight"] = coerce_float(update.weight)
    if update.height_ft is not None:
        changes["height_ft"] = coerce_int(update.height_ft)
    if update.height_in is not None:
        changes["height_in"] = coerce_int(update.height_in)
    if update.activity_level is not None:
        changes["activity_level"] = coerce_int(update.activity_level)
    return replace(profile, **changes)
