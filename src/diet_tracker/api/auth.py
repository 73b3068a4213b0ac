"""Authentication endpoints and bearer-token dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from diet_tracker.api.schemas import CredentialsRequest
from diet_tracker.api.serializers import serialize_user
from diet_tracker.domain.models import UserRecord

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord:
    """Resolve the bearer token to the calling user."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    container: AppContainer = request.app.state.container
    return container.user_service.verify_token(token.strip())


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: CredentialsRequest, request: Request) -> dict[str, object]:
    """Create an account and return a token for it."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(body.username, body.password)
    return {
        "message": "User registered successfully",
        "token": container.user_service.issue_token(user),
        "user": serialize_user(user),
    }


@router.post("/login")
async def login(body: CredentialsRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a token."""
    container: AppContainer = request.app.state.container
    user = container.user_service.login(body.username, body.password)
    return {
        "message": "Login successful",
        "token": container.user_service.issue_token(user),
        "user": serialize_user(user),
    }


@router.get("/me")
async def me(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the calling user."""
    return serialize_user(user)
