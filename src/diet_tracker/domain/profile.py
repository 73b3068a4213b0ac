"""Domain models for user profiles."""

from dataclasses import dataclass
from uuid import UUID

GENDERS = ("male", "female", "other")
ACTIVITY_LEVELS = ("sedentary", "lightly_active", "active", "very_active")


@dataclass(frozen=True)
class UserProfile:
    """Biometrics and daily goals for a user."""

    user_id: UUID
    name: str = "User"
    gender: str = "male"
    birth_year: int = 1990
    height_value: float = 170.0
    height_unit: str = "cm"
    weight_value: float = 70.0
    weight_unit: str = "kg"
    activity_level: str = "lightly_active"
    stride_length_cm: float | None = None
    profile_image: str | None = None
    daily_calorie_goal: int = 2000
    daily_water_goal: int = 2000
    daily_steps_goal: int = 10000
    daily_protein_goal: int = 50
    daily_carbs_goal: int = 250
    daily_fat_goal: int = 65
    daily_fiber_goal: int = 25
