"""User registration and bearer-token authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from diet_tracker.domain.errors import AuthenticationError, ValidationError
from diet_tracker.domain.models import UserRecord

JWT_ALGORITHM = "HS256"
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 30
MIN_PASSWORD_LENGTH = 6

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user accounts and tokens."""

    repository: UserRepository
    jwt_secret: str
    token_ttl_days: int = 7

    def register(self, username: str, password: str) -> UserRecord:
        """Create an account after validating the credentials."""
        normalized = normalize_username(username)
        if not normalized or not password:
            raise ValidationError("Username and password are required")
        if len(normalized) < MIN_USERNAME_LENGTH:
            raise ValidationError("Username must be at least 3 characters")
        if len(normalized) > MAX_USERNAME_LENGTH:
            raise ValidationError("Username must be at most 30 characters")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("Password must be at least 6 characters")
        if self.repository.get_by_username(normalized):
            raise ValidationError("Username already taken")
        user = self.repository.create_user(
            normalized, generate_password_hash(password)
        )
        _logger.info("Registered user: user_id=%s", user.id)
        return user

    def login(self, username: str, password: str) -> UserRecord:
        """Return the user when the password matches."""
        if not username or not password:
            raise ValidationError("Username and password are required")
        user = self.repository.get_by_username(normalize_username(username))
        if user is None or not check_password_hash(user.password_hash, password):
            raise AuthenticationError("Invalid username or password")
        return user

    def issue_token(self, user: UserRecord, now: datetime | None = None) -> str:
        """Return a signed bearer token for the user."""
        issued_at = now or datetime.now(tz=UTC)
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.token_ttl_days),
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: str) -> UserRecord:
        """Resolve a bearer token to its user."""
        try:
            payload = jwt.decode(token, self.jwt_secret, algorithms=[JWT_ALGORITHM])
            user_id = UUID(str(payload["sub"]))
        except (jwt.InvalidTokenError, KeyError, ValueError) as exc:
            raise AuthenticationError("Token is not valid") from exc
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise AuthenticationError("Token is not valid")
        return user


def normalize_username(username: str | None) -> str:
    """Lowercase and trim a username."""
    return (username or "").strip().lower()
