"""Daily log endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from diet_tracker.api.auth import require_user
from diet_tracker.api.schemas import (
    ActivityRequest,
    EntryUpdateRequest,
    FoodEntryRequest,
    StepsRequest,
    WaterRequest,
    WeightRequest,
    parse_entry_update,
)
from diet_tracker.api.serializers import serialize_day, serialize_weight_history
from diet_tracker.domain.entries import ActivityData, FoodData
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/logs", tags=["logs"])


def _today() -> date:
    return datetime.now().astimezone().date()


@router.get("/today")
async def get_today(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return today's log, creating it when missing."""
    container: AppContainer = request.app.state.container
    return serialize_day(container.daily_log_service.get_day(user.id, _today()))


@router.get("/date/{log_date}")
async def get_by_date(
    log_date: date, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the log for a calendar date."""
    container: AppContainer = request.app.state.container
    return serialize_day(container.daily_log_service.get_day(user.id, log_date))


@router.post("/food")
async def add_food(
    body: FoodEntryRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log a food entry."""
    container: AppContainer = request.app.state.container
    food = FoodData(
        name=body.name,
        calories=body.calories,
        protein=body.protein,
        carbs=body.carbs,
        fat=body.fat,
        fiber=body.fiber,
        portion=body.portion,
        unit=body.unit,
        meal_type=body.meal_type,
        product_id=body.product_id,
    )
    day_log = container.daily_log_service.add_food(
        user.id,
        body.day or _today(),
        food,
        ai_insight=body.ai_insight,
        image_path=body.image_path,
    )
    return serialize_day(day_log)


@router.post("/water")
async def add_water(
    body: WaterRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log water intake."""
    container: AppContainer = request.app.state.container
    day_log = container.daily_log_service.add_water(
        user.id, body.day or _today(), body.amount
    )
    return serialize_day(day_log)


@router.post("/water/remove")
async def remove_water(
    body: WaterRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log a water removal."""
    container: AppContainer = request.app.state.container
    day_log = container.daily_log_service.remove_water(
        user.id, body.day or _today(), body.amount
    )
    return serialize_day(day_log)


@router.post("/steps")
async def set_steps(
    body: StepsRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Replace the day's step count."""
    container: AppContainer = request.app.state.container
    day_log = container.daily_log_service.set_steps(
        user.id, body.day or _today(), body.steps
    )
    return serialize_day(day_log)


@router.post("/weight")
async def set_weight(
    body: WeightRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Replace the day's weight."""
    container: AppContainer = request.app.state.container
    day_log = container.daily_log_service.set_weight(
        user.id, body.day or _today(), body.weight, body.weight_unit
    )
    return serialize_day(day_log)


@router.post("/activity")
async def add_activity(
    body: ActivityRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Log an exercise session."""
    container: AppContainer = request.app.state.container
    activity = ActivityData(
        activity_type=body.activity_type,
        duration_minutes=body.duration,
        calories_burned=body.calories_burned,
    )
    day_log = container.daily_log_service.add_activity(
        user.id, body.day or _today(), activity
    )
    return serialize_day(day_log)


@router.get("/weight/history")
async def weight_history(
    request: Request,
    days: int = Query(default=7, ge=1, le=366),
    user: UserRecord = Depends(require_user),
) -> list[dict[str, object]]:
    """Return one weight point per day, oldest first."""
    container: AppContainer = request.app.state.container
    points = container.daily_log_service.weight_history(user.id, _today(), days)
    return serialize_weight_history(points)


@router.put("/entry/{entry_id}")
async def update_entry(
    entry_id: UUID,
    body: EntryUpdateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Update the supplied fields of an entry."""
    container: AppContainer = request.app.state.container
    service = container.daily_log_service
    entry = service.get_entry(user.id, entry_id)
    changes = parse_entry_update(entry.kind, body.data)
    day_log = service.update_entry(user.id, entry_id, changes)
    return serialize_day(day_log)


@router.delete("/entry/{entry_id}")
async def delete_entry(
    entry_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    return serialize_day(container.daily_log_service.delete_entry(user.id, entry_id))
