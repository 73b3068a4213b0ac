"""Domain models for dashboard views."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyGoals:
    """Goals used by the dashboard."""

    calories: int
    water: int
    steps: int


@dataclass(frozen=True)
class DashboardSummary:
    """Today's progress against goals."""

    day: date
    goals: DailyGoals
    calories_eaten: int
    calories_burned: int
    calories_remaining: int
    water_intake: int
    steps: int
    protein: float
    carbs: float
    fat: float
    fiber: float
    weight: float | None
    insight: str
    name: str
    gender: str | None
    profile_image: str | None


@dataclass(frozen=True)
class DailyPoint:
    """One stored day in the weekly view."""

    day: date
    calories: int
    burned: int
    water: int
    steps: int
    weight: float | None


@dataclass(frozen=True)
class WeeklySummary:
    """Stored days of the last week with rounded averages."""

    daily: list[DailyPoint]
    avg_calories: int
    avg_water: int
    avg_steps: int
    calorie_goal: int
