"""User profile service."""

from dataclasses import dataclass, fields, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.domain.profile import ACTIVITY_LEVELS, GENDERS, UserProfile
from diet_tracker.services.energy import calculate_bmr, calculate_tdee

_EDITABLE_FIELDS = {
    item.name for item in fields(UserProfile) if item.name != "user_id"
}


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if present."""

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or update a profile and return it."""


@dataclass
class ProfileService:
    """Application service for profile reads and updates."""

    repository: ProfileRepository

    def find_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile without creating one."""
        return self.repository.get_profile(user_id)

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile, creating defaults when missing."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            profile = self.repository.save_profile(UserProfile(user_id=user_id))
        return profile

    def update_profile(
        self, user_id: UUID, changes: dict[str, object], year: int | None = None
    ) -> UserProfile:
        """Apply changes and refresh the calorie goal from TDEE."""
        current = self.get_profile(user_id)
        updates = {
            key: value for key, value in changes.items() if key in _EDITABLE_FIELDS
        }
        _validate(updates)
        updated = replace(current, **updates)
        updated = replace(
            updated,
            daily_calorie_goal=calculate_tdee(updated, year or _current_year()),
        )
        return self.repository.save_profile(updated)

    def get_calculations(
        self, user_id: UUID, year: int | None = None
    ) -> tuple[UserProfile, float, int]:
        """Return the profile with its BMR and TDEE."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        resolved_year = year or _current_year()
        return (
            profile,
            calculate_bmr(profile, resolved_year),
            calculate_tdee(profile, resolved_year),
        )

    def record_weight(self, user_id: UUID, weight: float, unit: str) -> UserProfile:
        """Copy a logged weight onto the profile."""
        current = self.get_profile(user_id)
        return self.repository.save_profile(
            replace(current, weight_value=weight, weight_unit=unit)
        )


def _validate(updates: dict[str, object]) -> None:
    gender = updates.get("gender")
    if gender is not None and gender not in GENDERS:
        raise ValidationError(f"Unsupported gender: {gender}")
    level = updates.get("activity_level")
    if level is not None and level not in ACTIVITY_LEVELS:
        raise ValidationError(f"Unsupported activity level: {level}")
    if updates.get("height_unit") not in {None, "cm", "ft"}:
        raise ValidationError("Height unit must be cm or ft")
    if updates.get("weight_unit") not in {None, "kg", "lb"}:
        raise ValidationError("Weight unit must be kg or lb")


def _current_year() -> int:
    return datetime.now(tz=UTC).year
