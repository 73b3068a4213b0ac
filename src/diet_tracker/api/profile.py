"""Profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from diet_tracker.api.auth import require_user
from diet_tracker.api.schemas import ProfileUpdateRequest
from diet_tracker.api.serializers import serialize_profile
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("")
async def get_profile(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile, creating defaults on first access."""
    container: AppContainer = request.app.state.container
    return serialize_profile(container.profile_service.get_profile(user.id))


@router.put("")
async def update_profile(
    body: ProfileUpdateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Update profile fields and recompute the calorie goal."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.update_profile(
        user.id, body.model_dump(exclude_none=True)
    )
    return serialize_profile(profile)


@router.get("/calculations")
async def get_calculations(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return BMR and TDEE for the caller's profile."""
    container: AppContainer = request.app.state.container
    profile, bmr, tdee = container.profile_service.get_calculations(user.id)
    return {
        "bmr": round(bmr),
        "tdee": tdee,
        "dailyCalorieGoal": profile.daily_calorie_goal,
        "profile": serialize_profile(profile),
    }
