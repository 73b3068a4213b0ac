"""Resolution of (user, date) pairs to day records."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.days import DayRecord, DaySummary
from diet_tracker.domain.errors import ConflictError, ValidationError

_logger = logging.getLogger(__name__)


class DayRepository(Protocol):
    """Persistence interface for day records."""

    def get_day(self, day_id: UUID) -> DayRecord | None:
        """Return a day record by id."""

    def find_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the day record for a user and date, if present."""

    def create_day(self, user_id: UUID, day: date) -> DayRecord:
        """Insert a zero-valued day record.

        Raises ConflictError when a record for the pair already exists.
        """

    def save_summary(self, day_id: UUID, summary: DaySummary) -> DayRecord:
        """Overwrite the stored summary of a day."""

    def list_days(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        """Return the user's day records in [start, end], oldest first."""


@dataclass
class DayResolver:
    """Get-or-create access to day records."""

    repository: DayRepository

    def get_or_create(self, user_id: UUID | None, day: date | datetime) -> DayRecord:
        """Return the user's record for the day, creating it when missing."""
        if user_id is None:
            raise ValidationError("User id is required")
        calendar_day = normalize_day(day)
        existing = self.repository.find_day(user_id, calendar_day)
        if existing:
            return existing
        try:
            return self.repository.create_day(user_id, calendar_day)
        except ConflictError:
            _logger.info(
                "Day record created concurrently: user_id=%s day=%s",
                user_id,
                calendar_day,
            )
            winner = self.repository.find_day(user_id, calendar_day)
            if winner is None:
                raise
            return winner

    def find(self, user_id: UUID, day: date | datetime) -> DayRecord | None:
        """Return the user's record for the day without creating it."""
        return self.repository.find_day(user_id, normalize_day(day))


def normalize_day(value: date | datetime) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value
