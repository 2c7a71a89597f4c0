"""JSON-file key-value repository for tracker state."""

import json
import logging
import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from macro_tracker.domain.meals import FoodItem, FoodState, MealType
from macro_tracker.domain.nutrition import Macros
from macro_tracker.domain.profile import Gender, Goal, UserProfile
from macro_tracker.numbers import coerce_float, coerce_int
from macro_tracker.services.sessions import StateRepository

PROFILE_KEY = "mc_profile"
TARGETS_KEY = "mc_targets"
LOG_KEY = "mc_log"

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class StateStoreError(RuntimeError):
    """Raised when state cannot be written to disk."""


@dataclass
class JsonFileStateRepository(StateRepository):
    """Stores each state record as `<key>.json` under a data directory."""

    data_dir: Path

    def load_profile(self) -> UserProfile | None:
        """Return the stored profile, or None if missing or malformed."""
        return self._load(PROFILE_KEY, profile_from_record)

    def save_profile(self, profile: UserProfile) -> None:
        self._write(PROFILE_KEY, profile_to_record(profile))

    def load_targets(self) -> Macros | None:
        """Return the stored targets, or None if missing or malformed."""
        return self._load(TARGETS_KEY, macros_from_record)

    def save_targets(self, targets: Macros) -> None:
        self._write(TARGETS_KEY, macros_to_record(targets))

    def load_log(self) -> list[FoodItem] | None:
        """Return the stored log, or None if missing or malformed."""
        return self._load(LOG_KEY, log_from_record)

    def save_log(self, items: list[FoodItem]) -> None:
        self._write(LOG_KEY, [food_item_to_record(item) for item in items])

    def _load(self, key: str, parse: Callable[[object], T]) -> T | None:
        raw = self._read(key)
        if raw is None:
            return None
        try:
            return parse(raw)
        except (KeyError, TypeError, ValueError) as exc:
            _logger.warning("Ignoring malformed %s record: %s", key, exc)
            return None

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> object | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            _logger.warning("Failed to read %s: %s", path, exc)
            return None

    def _write(self, key: str, payload: object) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle)
            os.replace(tmp_name, path)
        except OSError as exc:
            raise StateStoreError(f"Failed to write {path}") from exc


def profile_to_record(profile: UserProfile) -> dict[str, object]:
    return {
        "gender": str(profile.gender),
        "goal": str(profile.goal),
        "age": profile.age,
        "weight": profile.weight,
        "heightFt": profile.height_ft,
        "heightIn": profile.height_in,
        "activityLevel": profile.activity_level,
    }


def profile_from_record(record: object) -> UserProfile:
    """Parse a stored profile; unknown enum values raise ValueError."""
    row = _require_dict(record)
    return UserProfile(
        gender=Gender(row["gender"]),
        goal=Goal(row["goal"]),
        age=coerce_int(row.get("age")),
        weight=coerce_float(row.get("weight")),
        height_ft=coerce_int(row.get("heightFt")),
        height_in=coerce_int(row.get("heightIn")),
        activity_level=coerce_int(row.get("activityLevel")),
    )


def macros_to_record(macros: Macros) -> dict[str, int]:
    return {
        "calories": macros.calories,
        "protein": macros.protein,
        "fat": macros.fat,
        "carbs": macros.carbs,
    }


def macros_from_record(record: object) -> Macros:
    row = _require_dict(record)
    return Macros(
        calories=coerce_int(row.get("calories")),
        protein=coerce_int(row.get("protein")),
        fat=coerce_int(row.get("fat")),
        carbs=coerce_int(row.get("carbs")),
    )


def food_item_to_record(item: FoodItem) -> dict[str, object]:
    record: dict[str, object] = {
        "id": item.id,
        "name": item.name,
        "weight": item.weight,
        **macros_to_record(item.macros),
        "mealType": str(item.meal_type),
        "timestamp": item.timestamp,
    }
    if item.state is not None:
        record["state"] = str(item.state)
    return record


def food_item_from_record(record: object) -> FoodItem:
    row = _require_dict(record)
    state = row.get("state")
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        weight=coerce_float(row.get("weight")),
        macros=macros_from_record(row),
        meal_type=MealType(row["mealType"]),
        timestamp=str(row["timestamp"]),
        state=FoodState(state) if state else None,
    )


def log_from_record(record: object) -> list[FoodItem]:
    """Parse a stored log, skipping malformed entries."""
    if not isinstance(record, list):
        raise TypeError(f"expected a list, got {type(record).__name__}")
    items: list[FoodItem] = []
    for index, row in enumerate(record):
        try:
            items.append(food_item_from_record(row))
        except (KeyError, TypeError, ValueError) as exc:
            _logger.warning("Skipping malformed %s entry %s: %s", LOG_KEY, index, exc)
    return items


def _require_dict(record: object) -> dict[str, object]:
    if not isinstance(record, dict):
        raise TypeError(f"expected an object, got {type(record).__name__}")
    return record
