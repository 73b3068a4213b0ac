"""Supabase repository for user profiles."""

from dataclasses import asdict, dataclass, fields
from uuid import UUID

from supabase import Client

from diet_tracker.domain.profile import UserProfile
from diet_tracker.services.profile import ProfileRepository

_FIELD_NAMES = [item.name for item in fields(UserProfile)]


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles, one row per user."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_profiles")
            .select(", ".join(_FIELD_NAMES))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Upsert the profile row keyed by user id."""
        payload = asdict(profile)
        payload["user_id"] = str(profile.user_id)
        response = (
            self.client.table("user_profiles")
            .upsert(payload, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    defaults = UserProfile(user_id=UUID(str(row["user_id"])))
    values = {
        name: row[name]
        for name in _FIELD_NAMES
        if name != "user_id" and row.get(name) is not None
    }
    return UserProfile(**{**asdict(defaults), **values})
