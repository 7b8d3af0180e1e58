"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import Body, Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from health_tracker.api.models import (
    ComplianceUpdate,
    DarkModeUpdate,
    FoodCreate,
    MealTimeUpdate,
    MealUpdate,
    ObservationsUpdate,
    ProfileUpdate,
    SleepUpdate,
    WaterUpdate,
    WorkoutUpdate,
)
from health_tracker.app_logging import configure_logging
from health_tracker.containers import AppContainer
from health_tracker.dates import parse_date, today
from health_tracker.domain.entries import DayEntry
from health_tracker.services.transfer import export_filename


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def resolve_profile(
    request: Request, profile: str | None = None
) -> str | None:
    """Use the profile query parameter, else the remembered profile."""
    if profile:
        return profile
    return get_container(request).preferences_service.get_selected_profile()


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_on_startup:
            try:
                state_container.seed_service.seed_historical_data()
            except Exception:
                logger.exception("Failed to seed historical data")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(IndexError)
    async def index_error_handler(_: Request, exc: IndexError) -> JSONResponse:
        return JSONResponse(
            status_code=HTTPStatus.NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/days")
    async def list_days(
        request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Return the dates that have stored records."""
        return {"dates": get_container(request).day_store.list_dates(profile)}

    @app.get("/days/today")
    async def get_today(
        request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Return today's record."""
        state_container = get_container(request)
        date = today(state_container.settings.timezone)
        return state_container.day_store.get_day_entry(date, profile).to_dict()

    @app.get("/days/{date}")
    async def get_day(
        date: str, request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Return the record for a date, blank when nothing is stored."""
        day_store = get_container(request).day_store
        return day_store.get_day_entry(date, profile).to_dict()

    @app.put("/days/{date}")
    async def put_day(
        date: str,
        request: Request,
        payload: dict[str, object] = Body(...),
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Replace the whole record for a date."""
        day_store = get_container(request).day_store
        entry = DayEntry.from_dict(
            payload, date=date, weight_people=day_store.weight_people
        )
        day_store.save_day_entry(entry, profile)
        return entry.to_dict()

    @app.patch("/days/{date}/meals/{slot}")
    async def patch_meal(
        date: str,
        slot: str,
        update: MealUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Merge changes into one meal slot."""
        day_store = get_container(request).day_store
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        return day_store.update_meal(date, slot, changes, profile).to_dict()

    @app.put("/days/{date}/meals/{slot}/time")
    async def put_meal_time(
        date: str,
        slot: str,
        update: MealTimeUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Set the time of day for a meal slot."""
        day_store = get_container(request).day_store
        return day_store.update_meal_time(date, slot, update.time, profile).to_dict()

    @app.post("/days/{date}/meals/{slot}/foods")
    async def add_food(
        date: str,
        slot: str,
        payload: FoodCreate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Append a food item to a meal."""
        day_store = get_container(request).day_store
        return day_store.add_food(date, slot, payload.food, profile).to_dict()

    @app.delete("/days/{date}/meals/{slot}/foods/{index}")
    async def remove_food(
        date: str,
        slot: str,
        index: int,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Remove a food item by index."""
        day_store = get_container(request).day_store
        return day_store.remove_food(date, slot, index, profile).to_dict()

    @app.patch("/days/{date}/workout")
    async def patch_workout(
        date: str,
        update: WorkoutUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Merge changes into the workout record."""
        day_store = get_container(request).day_store
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        return day_store.update_workout(date, changes, profile).to_dict()

    @app.patch("/days/{date}/sleep")
    async def patch_sleep(
        date: str,
        update: SleepUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Merge changes into the sleep record."""
        day_store = get_container(request).day_store
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        return day_store.update_sleep(date, changes, profile).to_dict()

    @app.patch("/days/{date}/water")
    async def patch_water(
        date: str,
        update: WaterUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Merge changes into the water record."""
        day_store = get_container(request).day_store
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        return day_store.update_water(date, changes, profile).to_dict()

    @app.post("/days/{date}/water/glasses")
    async def add_glass(
        date: str, request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Log one glass of water."""
        return get_container(request).day_store.add_glass(date, profile).to_dict()

    @app.delete("/days/{date}/water/glasses")
    async def remove_glass(
        date: str, request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Remove the most recent glass of water."""
        return get_container(request).day_store.remove_glass(date, profile).to_dict()

    @app.patch("/days/{date}/weight")
    async def patch_weight(
        date: str,
        request: Request,
        readings: dict[str, str] = Body(...),
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Merge weight readings keyed by person."""
        day_store = get_container(request).day_store
        return day_store.update_weight(date, dict(readings), profile).to_dict()

    @app.put("/days/{date}/compliance")
    async def put_compliance(
        date: str,
        update: ComplianceUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Set the whole-day compliance flag."""
        day_store = get_container(request).day_store
        return day_store.set_compliance(date, update.is_compliant, profile).to_dict()

    @app.post("/days/{date}/compliance/toggle")
    async def toggle_compliance(
        date: str, request: Request, profile: str | None = Depends(resolve_profile)
    ) -> dict[str, object]:
        """Flip the whole-day compliance flag."""
        day_store = get_container(request).day_store
        return day_store.toggle_compliance(date, profile).to_dict()

    @app.put("/days/{date}/observations")
    async def put_observations(
        date: str,
        update: ObservationsUpdate,
        request: Request,
        profile: str | None = Depends(resolve_profile),
    ) -> dict[str, object]:
        """Replace the day's observations."""
        day_store = get_container(request).day_store
        return day_store.set_observations(
            date, update.observations, profile
        ).to_dict()

    @app.get("/export/json")
    async def export_json(request: Request) -> Response:
        """Download the whole store as JSON."""
        state_container = get_container(request)
        return _download(
            state_container.transfer_service.export_json(),
            media_type="application/json",
            filename=_export_name(state_container, "json"),
        )

    @app.get("/export/csv")
    async def export_csv(request: Request) -> Response:
        """Download the whole store as CSV."""
        state_container = get_container(request)
        return _download(
            state_container.transfer_service.export_csv(),
            media_type="text/csv",
            filename=_export_name(state_container, "csv"),
        )

    @app.post("/import")
    async def import_json(request: Request) -> dict[str, str]:
        """Replace the whole store with an uploaded JSON export."""
        body = await request.body()
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            text = ""
        if not get_container(request).transfer_service.import_json(text):
            raise HTTPException(
                status_code=HTTPStatus.BAD_REQUEST,
                detail="Failed to import data",
            )
        return {"status": "ok"}

    @app.post("/seed")
    async def seed(request: Request) -> dict[str, bool]:
        """Seed historical data if this is the first run."""
        seeded = get_container(request).seed_service.seed_historical_data()
        return {"seeded": seeded}

    @app.post("/seed/reseed")
    async def reseed(request: Request) -> dict[str, bool]:
        """Re-insert historical data unconditionally."""
        return {"seeded": get_container(request).seed_service.reseed()}

    @app.delete("/data")
    async def clear_data(request: Request) -> dict[str, str]:
        """Wipe every stored day record."""
        get_container(request).day_store.clear_all()
        logger.info("Cleared all day records")
        return {"status": "ok"}

    @app.get("/preferences")
    async def get_preferences(request: Request) -> dict[str, object]:
        """Return the remembered profile and display preferences."""
        preferences = get_container(request).preferences_service
        return {
            "profile": preferences.get_selected_profile(),
            "darkMode": preferences.is_dark_mode(),
            "firstVisit": preferences.is_first_visit(),
        }

    @app.put("/preferences/profile")
    async def put_profile(update: ProfileUpdate, request: Request) -> dict[str, str]:
        """Remember a profile name."""
        get_container(request).preferences_service.set_selected_profile(update.name)
        return {"status": "ok"}

    @app.delete("/preferences/profile")
    async def delete_profile(request: Request) -> dict[str, str]:
        """Forget the remembered profile."""
        get_container(request).preferences_service.clear_selected_profile()
        return {"status": "ok"}

    @app.put("/preferences/dark-mode")
    async def put_dark_mode(
        update: DarkModeUpdate, request: Request
    ) -> dict[str, bool]:
        """Persist the dark-mode preference."""
        get_container(request).preferences_service.set_dark_mode(update.enabled)
        return {"darkMode": update.enabled}

    return app


def _export_name(state_container: AppContainer, extension: str) -> str:
    return export_filename(
        extension, parse_date(today(state_container.settings.timezone))
    )


def _download(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
