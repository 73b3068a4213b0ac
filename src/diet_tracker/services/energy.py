"""Energy expenditure estimates derived from a profile."""

from diet_tracker.domain.profile import UserProfile

LB_TO_KG = 0.453592
FT_TO_CM = 30.48
DEFAULT_STRIDE_CM = 70.0
STEP_CALORIES = 0.04
REFERENCE_WEIGHT_KG = 70.0

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.35,
    "active": 1.5,
    "very_active": 1.7,
}


def weight_in_kg(value: float, unit: str) -> float:
    """Convert a weight to kilograms."""
    return value if unit == "kg" else value * LB_TO_KG


def height_in_cm(value: float, unit: str) -> float:
    """Convert a height to centimetres."""
    return value if unit == "cm" else value * FT_TO_CM


def calculate_bmr(profile: UserProfile, year: int) -> float:
    """Basal metabolic rate using the Mifflin-St Jeor equation."""
    weight_kg = weight_in_kg(profile.weight_value or 70, profile.weight_unit)
    height_cm = height_in_cm(profile.height_value or 170, profile.height_unit)
    age = year - (profile.birth_year or 1990)
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if profile.gender == "male":
        return base + 5
    return base - 161


def calculate_tdee(profile: UserProfile, year: int) -> int:
    """Total daily energy expenditure rounded to whole kcal."""
    multiplier = ACTIVITY_MULTIPLIERS.get(profile.activity_level, 1.2)
    return round(calculate_bmr(profile, year) * multiplier)


def estimate_steps_calories(steps: int, weight_kg: float | None = None) -> int:
    """Estimate kcal burned by walking, scaled by body weight when known."""
    if weight_kg is None:
        return round(steps * STEP_CALORIES)
    return round(steps * STEP_CALORIES * (weight_kg / REFERENCE_WEIGHT_KG))


def estimate_distance_km(steps: int, stride_cm: float | None = None) -> float:
    """Estimate walked distance in km from stride length."""
    stride = stride_cm or DEFAULT_STRIDE_CM
    return round(steps * stride / 100 / 1000, 2)
