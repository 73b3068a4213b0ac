"""Dashboard endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from diet_tracker.api.auth import require_user
from diet_tracker.api.serializers import serialize_dashboard, serialize_weekly
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
async def get_dashboard(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return today's progress against the caller's goals."""
    container: AppContainer = request.app.state.container
    now = datetime.now().astimezone()
    return serialize_dashboard(container.dashboard_service.get_today(user.id, now))


@router.get("/weekly")
async def get_weekly(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the last week of daily summaries with averages."""
    container: AppContainer = request.app.state.container
    today = datetime.now().astimezone().date()
    return serialize_weekly(container.dashboard_service.get_weekly(user.id, today))
