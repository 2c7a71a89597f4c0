"""Tests for the JSON file state repository."""

import json
from pathlib import Path

import pytest

from macro_tracker.adapters.json_state_repository import (
    JsonFileStateRepository,
    StateStoreError,
)
from macro_tracker.domain.nutrition import Macros
from macro_tracker.domain.profile import DEFAULT_PROFILE
from macro_tracker.services.sessions import SEED_LOG, TrackerSession


def test_missing_files_load_as_none(json_repository: JsonFileStateRepository) -> None:
    assert json_repository.load_profile() is None
    assert json_repository.load_targets() is None
    assert json_repository.load_log() is None


def test_saved_state_loads_back(json_repository: JsonFileStateRepository) -> None:
    json_repository.save_profile(DEFAULT_PROFILE)
    json_repository.save_targets(Macros(2244, 175, 61, 249))
    json_repository.save_log(list(SEED_LOG))

    assert json_repository.load_profile() == DEFAULT_PROFILE
    assert json_repository.load_targets() == Macros(2244, 175, 61, 249)
    assert json_repository.load_log() == list(SEED_LOG)


def test_records_use_storage_key_names(
    json_repository: JsonFileStateRepository,
) -> None:
    json_repository.save_profile(DEFAULT_PROFILE)
    json_repository.save_log(list(SEED_LOG))

    profile = json.loads((json_repository.data_dir / "mc_profile.json").read_text())
    log = json.loads((json_repository.data_dir / "mc_log.json").read_text())

    assert profile["heightFt"] == 5
    assert profile["activityLevel"] == 3
    assert log[0]["mealType"] == "Breakfast"
    assert log[0]["calories"] == 280


def test_malformed_records_load_as_none(
    json_repository: JsonFileStateRepository,
) -> None:
    data_dir = json_repository.data_dir
    data_dir.mkdir(parents=True)
    (data_dir / "mc_profile.json").write_text('{"gender": "Robot"}')
    (data_dir / "mc_targets.json").write_text("not json")
    (data_dir / "mc_log.json").write_text('{"id": "1"}')

    assert json_repository.load_profile() is None
    assert json_repository.load_targets() is None
    assert json_repository.load_log() is None


def test_session_falls_back_to_defaults_on_corrupt_state(
    json_repository: JsonFileStateRepository,
) -> None:
    data_dir = json_repository.data_dir
    data_dir.mkdir(parents=True)
    (data_dir / "mc_profile.json").write_text("[1, 2, 3]")

    session = TrackerSession(repository=json_repository)

    assert session.profile == DEFAULT_PROFILE
    assert json_repository.load_profile() == DEFAULT_PROFILE


def test_non_numeric_fields_are_coerced(
    json_repository: JsonFileStateRepository,
) -> None:
    data_dir = json_repository.data_dir
    data_dir.mkdir(parents=True)
    (data_dir / "mc_profile.json").write_text(
        json.dumps(
            {
                "gender": "Female",
                "goal": "Maintain",
                "age": "",
                "weight": "150",
                "heightFt": 5,
                "heightIn": None,
                "activityLevel": 2,
            }
        )
    )

    profile = json_repository.load_profile()

    assert profile is not None
    assert profile.age == 0
    assert profile.weight == 150.0
    assert profile.height_in == 0


def test_write_failure_raises_store_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    repository = JsonFileStateRepository(blocker / "state")

    with pytest.raises(StateStoreError):
        repository.save_targets(Macros(1, 1, 1, 1))


def test_malformed_log_entries_are_skipped_and_valid_ones_kept(
    json_repository: JsonFileStateRepository,
) -> None:
    data_dir = json_repository.data_dir
    data_dir.mkdir(parents=True)
    eggs = {
        "id": "a1",
        "name": "Eggs",
        "weight": 100,
        "calories": 155,
        "protein": 13,
        "fat": 11,
        "carbs": 1,
        "mealType": "Breakfast",
        "timestamp": "07:30",
    }
    brunch = {**eggs, "id": "a2", "mealType": "Brunch"}
    untimed = {key: value for key, value in eggs.items() if key != "timestamp"}
    (data_dir / "mc_log.json").write_text(json.dumps([eggs, brunch, untimed]))

    session = TrackerSession(repository=json_repository)

    assert [item.id for item in session.log] == ["a1"]
    stored = json.loads((data_dir / "mc_log.json").read_text())
    assert [row["name"] for row in stored] == ["Eggs"]
