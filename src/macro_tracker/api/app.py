"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status

from macro_tracker.api.models import (
    FoodDraftPayload,
    ProfilePatchPayload,
    ProfilePayload,
    QuickAddPayload,
)
from macro_tracker.app_logging import configure_logging
from macro_tracker.config import parse_log_level
from macro_tracker.containers import AppContainer
from macro_tracker.domain.estimates import FoodEstimate
from macro_tracker.domain.meals import FoodDraft, FoodItem
from macro_tracker.domain.nutrition import Macros
from macro_tracker.domain.profile import ProfileUpdate, UserProfile
from macro_tracker.domain.stats import DailySummary
from macro_tracker.services.meals import current_timestamp
from macro_tracker.services.sessions import TrackerSession
from macro_tracker.services.targets import activity_label
from macro_tracker.services.units import (
    display_cm,
    display_kg,
    feet_inches_from_cm,
    pounds_from_kg,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Tracker")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the current profile."""
        session = _session(request)
        return {"profile": _profile_payload(session.profile)}

    @app.put("/profile")
    async def put_profile(
        payload: ProfilePayload, request: Request
    ) -> dict[str, object]:
        """Replace the profile and return the recomputed targets."""
        session = _session(request)
        targets = session.set_profile(UserProfile(**payload.model_dump()))
        return {"profile": _profile_payload(session.profile), "targets": targets}

    @app.patch("/profile")
    async def patch_profile(
        payload: ProfilePatchPayload, request: Request
    ) -> dict[str, object]:
        """Apply a partial profile change and return the recomputed targets."""
        session = _session(request)
        targets = session.update_profile(_profile_update(payload))
        return {"profile": _profile_payload(session.profile), "targets": targets}

    @app.get("/targets")
    async def get_targets(request: Request) -> dict[str, object]:
        """Return the current daily targets."""
        return {"targets": _session(request).targets}

    @app.get("/targets/breakdown")
    async def get_target_breakdown(request: Request) -> dict[str, object]:
        """Return BMR, activity multiplier and maintenance calories."""
        return {"breakdown": _session(request).target_breakdown()}

    @app.get("/log")
    async def get_log(request: Request) -> dict[str, object]:
        """Return today's log in timestamp order."""
        return {"items": [_item_payload(item) for item in _session(request).log]}

    @app.post("/log", status_code=status.HTTP_201_CREATED)
    async def add_food(
        payload: FoodDraftPayload, request: Request
    ) -> dict[str, object]:
        """Log a manually entered food item."""
        draft = FoodDraft(
            name=payload.name,
            weight=payload.weight,
            macros=Macros(
                calories=payload.calories,
                protein=payload.protein,
                fat=payload.fat,
                carbs=payload.carbs,
            ),
            meal_type=payload.meal_type,
            timestamp=payload.timestamp or current_timestamp(),
            state=payload.state,
        )
        item = _session(request).add_food(draft)
        return {"item": _item_payload(item)}

    @app.post("/log/quick-add", status_code=status.HTTP_201_CREATED)
    async def quick_add(
        payload: QuickAddPayload, request: Request
    ) -> dict[str, object]:
        """Log a snack from its name and weight."""
        item = _session(request).quick_add(payload.name, payload.grams, payload.state)
        return {"item": _item_payload(item)}

    @app.post("/log/estimate", status_code=status.HTTP_201_CREATED)
    async def log_estimate(
        estimate: FoodEstimate, request: Request
    ) -> dict[str, object]:
        """Log a confirmed voice-assistant estimate."""
        item = _session(request).log_estimate(estimate)
        logger.info("Logged voice estimate %s", item.name)
        return {"item": _item_payload(item)}

    @app.delete("/log/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def remove_food(item_id: str, request: Request) -> None:
        """Remove a logged item; unknown ids succeed without changes."""
        _session(request).remove_food(item_id)

    @app.get("/summary")
    async def get_summary(request: Request) -> dict[str, object]:
        """Return today's totals, remaining calories and meal breakdown."""
        return _summary_payload(_session(request).summary())

    return app


def _session(request: Request) -> TrackerSession:
    container: AppContainer = request.app.state.container
    return container.session


def _profile_update(payload: ProfilePatchPayload) -> ProfileUpdate:
    fields = payload.model_dump(exclude={"weight_kg", "height_cm"})
    if payload.weight_kg is not None:
        fields["weight"] = pounds_from_kg(payload.weight_kg)
    if payload.height_cm is not None:
        fields["height_ft"], fields["height_in"] = feet_inches_from_cm(
            payload.height_cm
        )
    return ProfileUpdate(**fields)


def _profile_payload(profile: UserProfile) -> dict[str, object]:
    return {
        "gender": profile.gender,
        "goal": profile.goal,
        "age": profile.age,
        "weight": profile.weight,
        "height_ft": profile.height_ft,
        "height_in": profile.height_in,
        "activity_level": profile.activity_level,
        "activity_label": activity_label(profile.activity_level),
        "weight_kg": display_kg(profile.weight),
        "height_cm": display_cm(profile.height_ft, profile.height_in),
    }


def _item_payload(item: FoodItem) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "weight": item.weight,
        "calories": item.macros.calories,
        "protein": item.macros.protein,
        "fat": item.macros.fat,
        "carbs": item.macros.carbs,
        "meal_type": str(item.meal_type),
        "timestamp": item.timestamp,
        "state": str(item.state) if item.state else None,
    }


def _summary_payload(summary: DailySummary) -> dict[str, object]:
    return {
        "totals": summary.totals,
        "targets": summary.targets,
        "calories_remaining": summary.calories_remaining,
        "progress": summary.progress,
        "meals": {
            str(meal): {
                "calories": summary.meal_calories.get(meal, 0),
                "items": [_item_payload(item) for item in items],
            }
            for meal, items in summary.meals.items()
        },
    }
