"""Domain models for the product catalog."""

from dataclasses import dataclass, field
from uuid import UUID

CATEGORIES = ("Meal", "Fruit", "Coffee", "Snack", "Custom")
SERVING_UNITS = ("g", "ml", "pc")


@dataclass(frozen=True)
class ProductVariant:
    """Named portion variant scaling the base serving."""

    name: str
    multiplier: float = 1.0


@dataclass(frozen=True)
class Product:
    """Reusable nutrition template per serving.

    Products without an owner are global and visible to every user.
    """

    id: UUID
    owner_id: UUID | None
    name: str
    emoji: str = "🍽️"
    category: str = "Custom"
    serving_size: float = 100.0
    serving_unit: str = "g"
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    usage_count: int = 0
    sort_order: int = 0
    variants: list[ProductVariant] = field(default_factory=list)
