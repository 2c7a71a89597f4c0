"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macro_tracker.adapters.json_state_repository import JsonFileStateRepository
from macro_tracker.config import Settings
from macro_tracker.services.sessions import StateRepository, TrackerSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state_repository: StateRepository
    session: TrackerSession


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    state_repository = JsonFileStateRepository(resolved_settings.data_dir)
    session = TrackerSession(
        repository=state_repository,
        seed_log=resolved_settings.seed_log,
    )
    return AppContainer(
        settings=resolved_settings,
        state_repository=state_repository,
        session=session,
    )
