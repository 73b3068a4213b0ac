"""Daily log service: entry mutations followed by summary recomputation."""

import logging
from dataclasses import dataclass, fields, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.days import DayLog, DayRecord, WeightPoint
from diet_tracker.domain.entries import (
    MEAL_TYPES,
    WEIGHT_UNITS,
    ActivityData,
    Entry,
    EntryData,
    FoodData,
    StepsData,
    WaterData,
    WeightData,
)
from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.services.aggregation import DailyAggregator, EntryRepository
from diet_tracker.services.days import DayRepository, DayResolver, normalize_day
from diet_tracker.services.energy import (
    estimate_distance_km,
    estimate_steps_calories,
    weight_in_kg,
)
from diet_tracker.services.products import ProductService
from diet_tracker.services.profile import ProfileService

_logger = logging.getLogger(__name__)


class EntryStore(EntryRepository, Protocol):
    """Full persistence interface for day entries."""

    def get_entry(self, entry_id: UUID) -> Entry | None:
        """Return an entry by id, if present."""

    def create_entry(  # noqa: PLR0913
        self,
        day_id: UUID,
        time: datetime,
        data: EntryData,
        ai_insight: str | None,
        image_path: str | None,
    ) -> Entry:
        """Insert an entry and return it."""

    def update_entry(self, entry_id: UUID, data: EntryData) -> Entry:
        """Replace the payload of an entry."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""

    def delete_entries_of_kind(self, day_id: UUID, kind: str) -> None:
        """Delete all entries of one kind from a day."""


@dataclass
class DailyLogService:
    """Logs events against a user's day and keeps its summary current."""

    days: DayRepository
    entries: EntryStore
    profile_service: ProfileService
    product_service: ProductService

    @property
    def resolver(self) -> DayResolver:
        """Return the get-or-create resolver over the day repository."""
        return DayResolver(self.days)

    @property
    def aggregator(self) -> DailyAggregator:
        """Return the aggregator over the configured repositories."""
        return DailyAggregator(days=self.days, entries=self.entries)

    def get_day(self, user_id: UUID, day: date | datetime) -> DayLog:
        """Return the day with its entries, creating an empty day if needed."""
        record = self.resolver.get_or_create(user_id, day)
        return self._day_log(record)

    def add_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date | datetime,
        food: FoodData,
        ai_insight: str | None = None,
        image_path: str | None = None,
        time: datetime | None = None,
    ) -> DayLog:
        """Log a food entry and count a use of its catalog product."""
        check_entry_data(food)
        if food.product_id:
            self.product_service.get_product(user_id, food.product_id)
        record = self.resolver.get_or_create(user_id, day)
        self.entries.create_entry(
            record.id, time or _now(), food, ai_insight, image_path
        )
        if food.product_id:
            self.product_service.repository.increment_usage(food.product_id)
        return self._refresh(record.id)

    def add_water(
        self,
        user_id: UUID,
        day: date | datetime,
        amount: int,
        time: datetime | None = None,
    ) -> DayLog:
        """Log water intake in ml."""
        record = self.resolver.get_or_create(user_id, day)
        self.entries.create_entry(
            record.id, time or _now(), WaterData(amount=amount), None, None
        )
        return self._refresh(record.id)

    def remove_water(
        self,
        user_id: UUID,
        day: date | datetime,
        amount: int,
        time: datetime | None = None,
    ) -> DayLog:
        """Log a water correction; the day's total never drops below zero."""
        record = self.resolver.find(user_id, day)
        if record is None:
            raise NotFoundError("No log found for this date")
        self.entries.create_entry(
            record.id, time or _now(), WaterData(amount=-abs(amount)), None, None
        )
        return self._refresh(record.id)

    def set_steps(
        self,
        user_id: UUID,
        day: date | datetime,
        steps: int,
        time: datetime | None = None,
    ) -> DayLog:
        """Replace the day's step count, deriving distance and burn."""
        data = self._steps_data(user_id, steps)
        check_entry_data(data)
        record = self.resolver.get_or_create(user_id, day)
        self.entries.delete_entries_of_kind(record.id, StepsData.kind)
        self.entries.create_entry(record.id, time or _now(), data, None, None)
        return self._refresh(record.id)

    def set_weight(
        self,
        user_id: UUID,
        day: date | datetime,
        weight: float,
        weight_unit: str = "kg",
        time: datetime | None = None,
    ) -> DayLog:
        """Replace the day's weight and copy it onto the profile."""
        data = WeightData(weight=weight, weight_unit=weight_unit)
        check_entry_data(data)
        record = self.resolver.get_or_create(user_id, day)
        self.entries.delete_entries_of_kind(record.id, WeightData.kind)
        self.entries.create_entry(record.id, time or _now(), data, None, None)
        day_log = self._refresh(record.id)
        self.profile_service.record_weight(user_id, weight, weight_unit)
        return day_log

    def add_activity(
        self,
        user_id: UUID,
        day: date | datetime,
        activity: ActivityData,
        time: datetime | None = None,
    ) -> DayLog:
        """Log an exercise session."""
        check_entry_data(activity)
        record = self.resolver.get_or_create(user_id, day)
        self.entries.create_entry(record.id, time or _now(), activity, None, None)
        return self._refresh(record.id)

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DayLog:
        """Apply the supplied fields that belong to the entry's kind.

        The merged payload must pass the same checks as a newly logged
        entry of that kind. A changed weight is copied onto the profile.
        """
        entry, record = self._owned_entry(user_id, entry_id)
        allowed = {item.name for item in fields(entry.data)}
        updates = {key: value for key, value in changes.items() if key in allowed}
        if not updates:
            return self._day_log(record)
        data = replace(entry.data, **updates)
        check_entry_data(data)
        if isinstance(data, FoodData) and data.product_id and "product_id" in updates:
            self.product_service.get_product(user_id, data.product_id)
        if isinstance(data, StepsData) and "steps" in updates:
            derived = self._steps_data(user_id, data.steps)
            data = replace(
                data,
                distance_km=updates.get("distance_km", derived.distance_km),
                calories_burned=updates.get(
                    "calories_burned", derived.calories_burned
                ),
            )
        self.entries.update_entry(entry_id, data)
        day_log = self._refresh(record.id)
        if isinstance(data, WeightData) and data != entry.data:
            self.profile_service.record_weight(user_id, data.weight, data.weight_unit)
        return day_log

    def get_entry(self, user_id: UUID, entry_id: UUID) -> Entry:
        """Return an entry owned by the user or raise NotFoundError."""
        entry, _ = self._owned_entry(user_id, entry_id)
        return entry

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> DayLog:
        """Delete an entry and refold its day."""
        _, record = self._owned_entry(user_id, entry_id)
        self.entries.delete_entry(entry_id)
        _logger.info("Deleted entry: entry_id=%s day_id=%s", entry_id, record.id)
        return self._refresh(record.id)

    def weight_history(
        self, user_id: UUID, today: date | datetime, days: int = 7
    ) -> list[WeightPoint]:
        """Return one weight point per day, oldest first."""
        end = normalize_day(today)
        start = end - timedelta(days=max(days, 1) - 1)
        by_day = {
            record.day: record.summary.weight
            for record in self.days.list_days(user_id, start, end)
        }
        return [
            WeightPoint(day=current, weight=by_day.get(current))
            for current in (start + timedelta(days=offset) for offset in range(days))
        ]

    def _steps_data(self, user_id: UUID, steps: int) -> StepsData:
        profile = self.profile_service.find_profile(user_id)
        weight_kg = None
        stride_cm = None
        if profile:
            weight_kg = weight_in_kg(profile.weight_value, profile.weight_unit)
            stride_cm = profile.stride_length_cm
        return StepsData(
            steps=steps,
            distance_km=estimate_distance_km(steps, stride_cm),
            calories_burned=estimate_steps_calories(steps, weight_kg),
        )

    def _owned_entry(self, user_id: UUID, entry_id: UUID) -> tuple[Entry, DayRecord]:
        entry = self.entries.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Entry not found")
        record = self.days.get_day(entry.day_id)
        if record is None or record.user_id != user_id:
            raise NotFoundError("Entry not found")
        return entry, record

    def _refresh(self, day_id: UUID) -> DayLog:
        self.aggregator.recompute(day_id)
        record = self.days.get_day(day_id)
        if record is None:
            raise NotFoundError(f"Daily log {day_id} not found")
        return self._day_log(record)

    def _day_log(self, record: DayRecord) -> DayLog:
        entries = sorted(
            self.entries.list_entries(record.id),
            key=lambda item: (item.time, str(item.id)),
        )
        return DayLog(record=record, entries=entries)


def check_entry_data(data: EntryData) -> None:
    """Raise ValidationError when a payload breaks the rules of its kind."""
    if isinstance(data, FoodData):
        if not isinstance(data.name, str) or not data.name.strip():
            raise ValidationError("Food name is required")
        if data.meal_type not in MEAL_TYPES:
            raise ValidationError(f"Unsupported meal type: {data.meal_type}")
        if data.product_id is not None and not isinstance(data.product_id, UUID):
            raise ValidationError("Product id must be a UUID")
        _require_counts(data, "calories")
        _require_amounts(data, "protein", "carbs", "fat", "fiber", "portion")
    elif isinstance(data, WaterData):
        _require_int(data.amount, "amount")
    elif isinstance(data, StepsData):
        if _is_number(data.steps) and data.steps < 0:
            raise ValidationError("Steps must not be negative")
        _require_counts(data, "steps", "calories_burned")
        _require_amounts(data, "distance_km")
    elif isinstance(data, WeightData):
        if data.weight_unit not in WEIGHT_UNITS:
            raise ValidationError("Weight unit must be kg or lb")
        if not _is_number(data.weight) or data.weight <= 0:
            raise ValidationError("Weight must be positive")
    elif isinstance(data, ActivityData):
        if not isinstance(data.activity_type, str) or not data.activity_type.strip():
            raise ValidationError("Activity type is required")
        _require_counts(data, "duration_minutes", "calories_burned")


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _require_int(value: object, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer")


def _require_counts(data: EntryData, *names: str) -> None:
    for name in names:
        value = getattr(data, name)
        _require_int(value, name)
        if value < 0:
            raise ValidationError(f"{name} must not be negative")


def _require_amounts(data: EntryData, *names: str) -> None:
    for name in names:
        value = getattr(data, name)
        if not _is_number(value) or value < 0:
            raise ValidationError(f"{name} must be a non-negative number")


def _now() -> datetime:
    return datetime.now(tz=UTC)
