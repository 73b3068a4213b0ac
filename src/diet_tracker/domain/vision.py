"""Models for AI food analysis results."""

from pydantic import BaseModel, Field


class AnalyzedItem(BaseModel):
    """Single food item detected in a photo."""

    id: int | None = None
    name: str
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    portion: float = 0
    unit: str = "g"
    confidence: str | None = None


class FoodImageAnalysis(BaseModel):
    """Structured result of a food photo analysis."""

    success: bool = True
    total_calories: float = Field(default=0, alias="totalCalories")
    total_protein: float = Field(default=0, alias="totalProtein")
    total_carbs: float = Field(default=0, alias="totalCarbs")
    total_fat: float = Field(default=0, alias="totalFat")
    items: list[AnalyzedItem] = Field(default_factory=list)
    health_tip: str | None = Field(default=None, alias="healthTip")
    error: str | None = None
    image_path: str | None = Field(default=None, alias="imagePath")

    model_config = {"populate_by_name": True}


class SuggestedProduct(BaseModel):
    """Product values estimated from a text description."""

    name: str
    emoji: str | None = None
    category: str = "Custom"
    portion: float = 0
    unit: str = "g"
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class ProductSuggestion(BaseModel):
    """Structured result of a text description analysis."""

    success: bool = True
    product: SuggestedProduct | None = None
    error: str | None = None
