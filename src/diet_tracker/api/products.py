"""Product catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from diet_tracker.api.auth import require_user
from diet_tracker.api.schemas import ProductRequest, ReorderRequest
from diet_tracker.api.serializers import serialize_product
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    request: Request,
    search: str | None = Query(default=None),
    category: str | None = Query(default=None),
    user: UserRecord = Depends(require_user),
) -> list[dict[str, object]]:
    """List the caller's and global products."""
    container: AppContainer = request.app.state.container
    products = container.product_service.list_products(user.id, search, category)
    return [serialize_product(product) for product in products]


@router.get("/most-used")
async def most_used(
    request: Request,
    limit: int = Query(default=10, ge=1, le=100),
    user: UserRecord = Depends(require_user),
) -> list[dict[str, object]]:
    """List the most used products."""
    container: AppContainer = request.app.state.container
    products = container.product_service.most_used(user.id, limit)
    return [serialize_product(product) for product in products]


@router.post("/reorder")
async def reorder(
    body: ReorderRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Persist a new display order."""
    container: AppContainer = request.app.state.container
    container.product_service.reorder(user.id, body.product_ids)
    return {"message": "Products reordered"}


@router.get("/{product_id}")
async def get_product(
    product_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return a single visible product."""
    container: AppContainer = request.app.state.container
    return serialize_product(container.product_service.get_product(user.id, product_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductRequest, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Create a product owned by the caller."""
    container: AppContainer = request.app.state.container
    product = container.product_service.create_product(
        user.id, body.model_dump(exclude_none=True)
    )
    return serialize_product(product)


@router.put("/{product_id}")
async def update_product(
    product_id: UUID,
    body: ProductRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Update a product the caller owns."""
    container: AppContainer = request.app.state.container
    product = container.product_service.update_product(
        user.id, product_id, body.model_dump(exclude_none=True)
    )
    return serialize_product(product)


@router.delete("/{product_id}")
async def delete_product(
    product_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, str]:
    """Delete a product the caller owns."""
    container: AppContainer = request.app.state.container
    container.product_service.delete_product(user.id, product_id)
    return {"message": "Product deleted"}


@router.post("/{product_id}/use")
async def record_use(
    product_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Count a use of a product."""
    container: AppContainer = request.app.state.container
    return serialize_product(container.product_service.record_use(user.id, product_id))
