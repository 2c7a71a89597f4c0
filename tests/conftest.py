"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from macro_tracker.adapters.json_state_repository import (
    JsonFileStateRepository,
    StateStoreError,
)
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.meals import FoodDraft, FoodItem, FoodState, MealType
from macro_tracker.domain.nutrition import Macros
from macro_tracker.domain.profile import UserProfile
from macro_tracker.services.sessions import StateRepository, TrackerSession


@dataclass
class InMemoryStateRepository(StateRepository):
    """In-memory state repository for tests."""

    profile: UserProfile | None = None
    targets: Macros | None = None
    items: list[FoodItem] | None = None
    saves: list[str] = field(default_factory=list)
    fail_writes: bool = False

    def load_profile(self) -> UserProfile | None:
        return self.profile

    def save_profile(self, profile: UserProfile) -> None:
        self._check_writable()
        self.profile = profile
        self.saves.append("profile")

    def load_targets(self) -> Macros | None:
        return self.targets

    def save_targets(self, targets: Macros) -> None:
        self._check_writable()
        self.targets = targets
        self.saves.append("targets")

    def load_log(self) -> list[FoodItem] | None:
        return None if self.items is None else list(self.items)

    def save_log(self, items: list[FoodItem]) -> None:
        self._check_writable()
        self.items = list(items)
        self.saves.append("log")

    def _check_writable(self) -> None:
        if self.fail_writes:
            raise StateStoreError("store is read-only")


@dataclass
class SequentialIds:
    """Id factory producing "id-1", "id-2", ..."""

    issued: int = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"id-{self.issued}"


def make_draft(  # noqa: PLR0913
    name: str = "Greek yogurt",
    timestamp: str = "10:00",
    calories: int = 100,
    protein: int = 10,
    fat: int = 2,
    carbs: int = 8,
    meal_type: MealType = MealType.SNACK,
    weight: float = 150,
    state: FoodState | None = None,
) -> FoodDraft:
    return FoodDraft(
        name=name,
        weight=weight,
        macros=Macros(calories=calories, protein=protein, fat=fat, carbs=carbs),
        meal_type=meal_type,
        timestamp=timestamp,
        state=state,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "state", seed_log=False)


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def session(state_repository: InMemoryStateRepository) -> TrackerSession:
    return TrackerSession(repository=state_repository, id_factory=SequentialIds())


@pytest.fixture
def json_repository(tmp_path: Path) -> JsonFileStateRepository:
    return JsonFileStateRepository(tmp_path / "state")


@pytest.fixture
def container(
    settings: Settings,
    state_repository: InMemoryStateRepository,
    session: TrackerSession,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        state_repository=state_repository,
        session=session,
    )
