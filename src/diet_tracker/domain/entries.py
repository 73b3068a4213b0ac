"""Domain models for logged entries.

Each entry carries exactly one payload variant. The variant decides the
entry kind, so fields of other kinds can never be populated.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack", "other")
WEIGHT_UNITS = ("kg", "lb")


@dataclass(frozen=True)
class FoodData:
    """Food eaten, with macros for the logged portion."""

    kind: ClassVar[str] = "food"

    name: str
    calories: int = 0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    portion: float = 0.0
    unit: str | None = None
    meal_type: str = "other"
    product_id: UUID | None = None


@dataclass(frozen=True)
class WaterData:
    """Water intake in ml; negative amounts remove water."""

    kind: ClassVar[str] = "water"

    amount: int


@dataclass(frozen=True)
class StepsData:
    """Step count with derived distance and burn."""

    kind: ClassVar[str] = "steps"

    steps: int
    distance_km: float = 0.0
    calories_burned: int = 0


@dataclass(frozen=True)
class WeightData:
    """Body weight measurement."""

    kind: ClassVar[str] = "weight"

    weight: float
    weight_unit: str = "kg"


@dataclass(frozen=True)
class ActivityData:
    """Exercise session."""

    kind: ClassVar[str] = "activity"

    activity_type: str
    duration_minutes: int = 0
    calories_burned: int = 0


EntryData = FoodData | WaterData | StepsData | WeightData | ActivityData

ENTRY_TYPES: dict[str, type[EntryData]] = {
    FoodData.kind: FoodData,
    WaterData.kind: WaterData,
    StepsData.kind: StepsData,
    WeightData.kind: WeightData,
    ActivityData.kind: ActivityData,
}


@dataclass(frozen=True)
class Entry:
    """A logged event owned by one day record."""

    id: UUID
    day_id: UUID
    time: datetime
    data: EntryData
    ai_insight: str | None = None
    image_path: str | None = None

    @property
    def kind(self) -> str:
        """Return the entry kind tag."""
        return self.data.kind
