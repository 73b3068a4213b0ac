"""Domain models for daily logs."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from diet_tracker.domain.entries import Entry


@dataclass(frozen=True)
class DaySummary:
    """Denormalized totals for one user's day."""

    calories_eaten: int = 0
    calories_burned: int = 0
    water_intake: int = 0
    steps: int = 0
    weight: float | None = None
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class DayRecord:
    """One row per (user, date) holding the cached summary."""

    id: UUID
    user_id: UUID
    day: date
    summary: DaySummary = field(default_factory=DaySummary)


@dataclass(frozen=True)
class DayLog:
    """A day record together with its entries ordered by time."""

    record: DayRecord
    entries: list[Entry]


@dataclass(frozen=True)
class WeightPoint:
    """Weight for a calendar day, if one was logged."""

    day: date
    weight: float | None
