"""Food log for the current day."""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from macro_tracker.domain.meals import FoodDraft, FoodItem, FoodState, MealType
from macro_tracker.domain.nutrition import ZERO_MACROS, Macros
from macro_tracker.numbers import round_half_up

MEAL_ORDER = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER, MealType.SNACK)

# Generic reference values used when quick-adding by weight alone.
QUICK_ADD_PER_100G = Macros(calories=150, protein=20, fat=5, carbs=10)

_UNPADDED_TIME = re.compile(r"^(\d):([0-5]\d)$")
_PADDED_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

_logger = logging.getLogger(__name__)


def generate_item_id() -> str:
    """Return a fresh opaque identifier for a log entry."""
    return uuid4().hex


@dataclass
class FoodLog:
    """Ordered food entries, kept sorted by "HH:MM" timestamp.

    Totals and groupings are derived from the entries on every call.
    """

    items: list[FoodItem] = field(default_factory=list)
    id_factory: Callable[[], str] = generate_item_id

    def __post_init__(self) -> None:
        self.items = _sort_by_timestamp(self.items)

    def add(self, draft: FoodDraft) -> FoodItem:
        """Assign an id to the draft, insert it and restore timestamp order."""
        item = FoodItem(
            id=self.id_factory(),
            name=draft.name,
            weight=draft.weight,
            macros=draft.macros,
            meal_type=draft.meal_type,
            timestamp=normalize_timestamp(draft.timestamp),
            state=draft.state,
        )
        self.items = _sort_by_timestamp([*self.items, item])
        return item

    def remove(self, item_id: str) -> bool:
        """Remove an entry by id. Unknown ids are ignored."""
        remaining = [item for item in self.items if item.id != item_id]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def totals(self) -> Macros:
        return sum_macros(self.items)

    def group_by_meal(self) -> dict[MealType, list[FoodItem]]:
        """Split entries into meal buckets, keeping timestamp order in each."""
        groups: dict[MealType, list[FoodItem]] = {meal: [] for meal in MEAL_ORDER}
        for item in self.items:
            groups.setdefault(item.meal_type, []).append(item)
        return groups

    def meal_calories(self) -> dict[MealType, int]:
        """Return the calorie subtotal of each meal bucket."""
        return {
            meal: sum_macros(items).calories
            for meal, items in self.group_by_meal().items()
        }

    def remaining_vs_target(self, target: Macros) -> int:
        """Calories left for the day; negative when over target."""
        return target.calories - self.totals().calories


def sum_macros(items: Iterable[FoodItem]) -> Macros:
    total = ZERO_MACROS
    for item in items:
        total = Macros(
            calories=total.calories + item.macros.calories,
            protein=total.protein + item.macros.protein,
            fat=total.fat + item.macros.fat,
            carbs=total.carbs + item.macros.carbs,
        )
    return total


def progress_percent(current: float, target: float) -> float:
    """Return current/target as a 0-100 percentage.

    A non-positive target has no meaningful ratio and reports 0.
    """
    if target <= 0:
        return 0.0
    return min(1.0, max(0.0, current / target)) * 100


def infer_meal_type(hour: int) -> MealType:
    """Pick a meal bucket from the local hour an entry was logged at."""
    if 5 <= hour < 12:  # noqa: PLR2004
        return MealType.BREAKFAST
    if 12 <= hour < 17:  # noqa: PLR2004
        return MealType.LUNCH
    if 17 <= hour < 23:  # noqa: PLR2004
        return MealType.DINNER
    return MealType.SNACK


def current_timestamp(now: datetime | None = None) -> str:
    """Format the local wall-clock time as zero-padded 24-hour "HH:MM"."""
    moment = now or datetime.now()  # noqa: DTZ005
    return moment.strftime("%H:%M")


def normalize_timestamp(value: str) -> str:
    """Zero-pad "H:MM" timestamps so string order matches clock order.

    Anything that is not a 24-hour time is kept as given and will sort by
    plain string comparison.
    """
    match = _UNPADDED_TIME.match(value)
    if match:
        return f"0{match.group(1)}:{match.group(2)}"
    if not _PADDED_TIME.match(value):
        _logger.warning("Unrecognized timestamp format: %r", value)
    return value


def scale_per_100g(per_100g: Macros, grams: float) -> Macros:
    """Scale per-100 g reference macros to a portion, rounded to whole units."""
    if grams <= 0:
        return ZERO_MACROS
    factor = grams / 100.0
    return Macros(
        calories=round_half_up(per_100g.calories * factor),
        protein=round_half_up(per_100g.protein * factor),
        fat=round_half_up(per_100g.fat * factor),
        carbs=round_half_up(per_100g.carbs * factor),
    )


def build_quick_add_draft(
    name: str,
    grams: float,
    state: FoodState | None = FoodState.COOKED,
    now: datetime | None = None,
    per_100g: Macros = QUICK_ADD_PER_100G,
) -> FoodDraft:
    """Build a snack entry for a food logged by name and weight.

    The weight is truncated to whole grams before scaling.
    """
    whole_grams = int(grams)
    return FoodDraft(
        name=name,
        weight=whole_grams,
        macros=scale_per_100g(per_100g, whole_grams),
        meal_type=MealType.SNACK,
        timestamp=current_timestamp(now),
        state=state,
    )


def _sort_by_timestamp(items: list[FoodItem]) -> list[FoodItem]:
    return sorted(items, key=lambda item: item.timestamp)
