"""Daily summary recomputation from logged entries."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.days import DaySummary
from diet_tracker.domain.entries import (
    ActivityData,
    Entry,
    FoodData,
    StepsData,
    WaterData,
    WeightData,
)
from diet_tracker.domain.errors import NotFoundError
from diet_tracker.services.days import DayRepository

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for day entries."""

    def list_entries(self, day_id: UUID) -> list[Entry]:
        """Return every entry attached to a day."""


@dataclass
class DailyAggregator:
    """Rebuilds a day's summary by folding all of its entries."""

    days: DayRepository
    entries: EntryRepository

    def recompute(self, day_id: UUID) -> DaySummary:
        """Fold the day's entries and persist the resulting summary."""
        day = self.days.get_day(day_id)
        if day is None:
            raise NotFoundError(f"Daily log {day_id} not found")
        summary = fold_entries(self.entries.list_entries(day_id))
        self.days.save_summary(day_id, summary)
        _logger.info(
            "Recomputed daily summary: day_id=%s calories=%s",
            day_id,
            summary.calories_eaten,
        )
        return summary


def fold_entries(entries: list[Entry]) -> DaySummary:
    """Fold entries into a summary.

    Entries are folded in (time, id) order so that steps and weight take the
    chronologically latest value.
    """
    calories_eaten = 0
    calories_burned = 0
    water_intake = 0
    steps = 0
    weight: float | None = None
    protein = carbs = fat = fiber = 0.0

    for entry in sorted(entries, key=lambda item: (item.time, str(item.id))):
        data = entry.data
        if isinstance(data, FoodData):
            calories_eaten += _to_int(data.calories)
            protein += _to_float(data.protein)
            carbs += _to_float(data.carbs)
            fat += _to_float(data.fat)
            fiber += _to_float(data.fiber)
        elif isinstance(data, WaterData):
            water_intake += _to_int(data.amount)
        elif isinstance(data, StepsData):
            steps = _to_int(data.steps)
            calories_burned += _to_int(data.calories_burned)
        elif isinstance(data, WeightData):
            value = _to_optional_float(data.weight)
            if value is not None:
                weight = value
        elif isinstance(data, ActivityData):
            calories_burned += _to_int(data.calories_burned)

    return DaySummary(
        calories_eaten=calories_eaten,
        calories_burned=calories_burned,
        water_intake=max(0, water_intake),
        steps=steps,
        weight=weight,
        protein=round(protein, 2),
        carbs=round(carbs, 2),
        fat=round(fat, 2),
        fiber=round(fiber, 2),
    )


def _to_optional_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _to_float(value: object) -> float:
    return _to_optional_float(value) or 0.0


def _to_int(value: object) -> int:
    return round(_to_float(value))
