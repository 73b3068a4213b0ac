"""Pydantic models for API request bodies."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from diet_tracker.domain.errors import ValidationError


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CredentialsRequest(BaseModel):
    """Username and password payload."""

    username: str = ""
    password: str = ""


class FoodEntryRequest(_CamelModel):
    """Food entry payload."""

    product_id: UUID | None = Field(default=None, alias="productId")
    name: str
    calories: int = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)
    portion: float = Field(default=0, ge=0)
    unit: str | None = None
    meal_type: str = Field(default="other", alias="mealType")
    ai_insight: str | None = Field(default=None, alias="aiInsight")
    image_path: str | None = Field(default=None, alias="imagePath")
    day: date | None = Field(default=None, alias="date")


class WaterRequest(_CamelModel):
    """Water intake or removal payload in ml."""

    amount: int = Field(gt=0)
    day: date | None = Field(default=None, alias="date")


class StepsRequest(_CamelModel):
    """Daily step count payload."""

    steps: int = Field(ge=0)
    day: date | None = Field(default=None, alias="date")


class WeightRequest(_CamelModel):
    """Body weight payload."""

    weight: float = Field(gt=0)
    weight_unit: str = Field(default="kg", alias="weightUnit")
    day: date | None = Field(default=None, alias="date")


class ActivityRequest(_CamelModel):
    """Exercise session payload."""

    activity_type: str = Field(alias="activityType")
    duration: int = Field(default=0, ge=0)
    calories_burned: int = Field(default=0, ge=0, alias="caloriesBurned")
    day: date | None = Field(default=None, alias="date")


class EntryUpdateRequest(BaseModel):
    """Partial entry update; checked against the entry's kind on arrival."""

    data: dict[str, object] = Field(default_factory=dict)


class FoodEntryUpdate(_CamelModel):
    """Editable food entry fields."""

    product_id: UUID | None = Field(default=None, alias="productId")
    name: str | None = None
    calories: int | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    portion: float | None = Field(default=None, ge=0)
    unit: str | None = None
    meal_type: str | None = Field(default=None, alias="mealType")


class WaterEntryUpdate(_CamelModel):
    amount: int | None = None


class StepsEntryUpdate(_CamelModel):
    steps: int | None = Field(default=None, ge=0)
    distance_km: float | None = Field(default=None, ge=0, alias="distance")
    calories_burned: int | None = Field(default=None, ge=0, alias="caloriesBurned")


class WeightEntryUpdate(_CamelModel):
    weight: float | None = Field(default=None, gt=0)
    weight_unit: str | None = Field(default=None, alias="weightUnit")


class ActivityEntryUpdate(_CamelModel):
    activity_type: str | None = Field(default=None, alias="activityType")
    duration_minutes: int | None = Field(default=None, ge=0, alias="duration")
    calories_burned: int | None = Field(default=None, ge=0, alias="caloriesBurned")


ENTRY_UPDATE_MODELS: dict[str, type[_CamelModel]] = {
    "food": FoodEntryUpdate,
    "water": WaterEntryUpdate,
    "steps": StepsEntryUpdate,
    "weight": WeightEntryUpdate,
    "activity": ActivityEntryUpdate,
}


def parse_entry_update(kind: str, data: dict[str, object]) -> dict[str, object]:
    """Validate client entry fields and return them under payload names.

    Only fields the client sent are returned; fields of other kinds are
    dropped.
    """
    try:
        update = ENTRY_UPDATE_MODELS[kind].model_validate(data)
    except PydanticValidationError as exc:
        field_names = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ValidationError(f"Invalid {kind} entry fields: {field_names}") from exc
    return update.model_dump(exclude_unset=True)


class ProfileUpdateRequest(_CamelModel):
    """Profile fields a user may change."""

    name: str | None = None
    gender: str | None = None
    birth_year: int | None = Field(default=None, alias="birthYear", ge=1900)
    height_value: float | None = Field(default=None, alias="heightValue", gt=0)
    height_unit: str | None = Field(default=None, alias="heightUnit")
    weight_value: float | None = Field(default=None, alias="weightValue", gt=0)
    weight_unit: str | None = Field(default=None, alias="weightUnit")
    activity_level: str | None = Field(default=None, alias="activityLevel")
    stride_length_cm: float | None = Field(
        default=None, alias="strideLength", gt=0
    )
    daily_water_goal: int | None = Field(default=None, alias="dailyWaterGoal")
    daily_steps_goal: int | None = Field(default=None, alias="dailyStepsGoal")
    daily_protein_goal: int | None = Field(default=None, alias="dailyProteinGoal")
    daily_carbs_goal: int | None = Field(default=None, alias="dailyCarbsGoal")
    daily_fat_goal: int | None = Field(default=None, alias="dailyFatGoal")
    daily_fiber_goal: int | None = Field(default=None, alias="dailyFiberGoal")


class VariantPayload(BaseModel):
    """Portion variant of a product."""

    name: str
    multiplier: float = 1.0


class ProductRequest(_CamelModel):
    """Product create/update payload."""

    name: str | None = None
    emoji: str | None = None
    category: str | None = None
    serving_size: float | None = Field(default=None, alias="servingSize", gt=0)
    serving_unit: str | None = Field(default=None, alias="servingUnit")
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    variants: list[VariantPayload] | None = None


class ReorderRequest(_CamelModel):
    """New display order of products."""

    product_ids: list[UUID] = Field(alias="productIds")


class TextAnalysisRequest(BaseModel):
    """Free-text food description."""

    description: str = ""
