"""AI food analysis endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, File, Request, UploadFile

from diet_tracker.api.auth import require_user
from diet_tracker.api.schemas import TextAnalysisRequest
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/ai", tags=["ai"])

_logger = logging.getLogger(__name__)


@router.post("/analyze-food")
async def analyze_food(
    request: Request,
    image: UploadFile = File(...),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Estimate nutrients for an uploaded food photo."""
    container: AppContainer = request.app.state.container
    content = await image.read()
    container.image_service.validate(content, image.content_type)
    result = await container.analysis_service.analyze_image(
        content, image.content_type
    )
    if result.success:
        image_path = container.image_service.save_analyzed_image(
            user.id, content, image.content_type
        )
        result = result.model_copy(update={"image_path": image_path})
    _logger.info(
        "Analyzed food image: user_id=%s items=%s", user.id, len(result.items)
    )
    return result.model_dump(by_alias=True)


@router.post("/analyze-text", dependencies=[Depends(require_user)])
async def analyze_text(
    body: TextAnalysisRequest, request: Request
) -> dict[str, object]:
    """Estimate product values for a free-text description."""
    container: AppContainer = request.app.state.container
    result = await container.analysis_service.analyze_text(body.description)
    return result.model_dump(by_alias=True)
