"""Supabase repository for day records and their entries."""

from dataclasses import MISSING, asdict, dataclass, fields
from datetime import date, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from diet_tracker.domain.days import DayRecord, DaySummary
from diet_tracker.domain.entries import ENTRY_TYPES, Entry, EntryData
from diet_tracker.domain.errors import ConflictError
from diet_tracker.services.days import DayRepository
from diet_tracker.services.logs import EntryStore

UNIQUE_VIOLATION = "23505"

_DAY_COLUMNS = (
    "id, user_id, log_date, calories_eaten, calories_burned, water_intake, "
    "steps, weight, protein, carbs, fat, fiber"
)
_ENTRY_COLUMNS = "id, daily_log_id, entry_type, time, data, ai_insight, image_path"
_REQUIRED_DEFAULTS: dict[object, object] = {str: "", int: 0, float: 0.0}


@dataclass
class SupabaseDailyLogRepository(DayRepository, EntryStore):
    """Supabase implementation for daily logs.

    Entry payloads live in a JSON ``data`` column keyed by ``entry_type``.
    """

    client: Client

    def get_day(self, day_id: UUID) -> DayRecord | None:
        """Return a day record by id."""
        response = (
            self.client.table("daily_logs")
            .select(_DAY_COLUMNS)
            .eq("id", str(day_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_day(response.data[0])

    def find_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the day record for a user and date."""
        response = (
            self.client.table("daily_logs")
            .select(_DAY_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_day(response.data[0])

    def create_day(self, user_id: UUID, day: date) -> DayRecord:
        """Insert a zero-valued day; the (user_id, log_date) pair is unique."""
        try:
            response = (
                self.client.table("daily_logs")
                .insert(
                    {
                        "user_id": str(user_id),
                        "log_date": day.isoformat(),
                        **_summary_payload(DaySummary()),
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise ConflictError("Daily log already exists") from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create daily log")
        return _parse_day(response.data[0])

    def save_summary(self, day_id: UUID, summary: DaySummary) -> DayRecord:
        """Overwrite the summary columns of a day."""
        response = (
            self.client.table("daily_logs")
            .update(_summary_payload(summary))
            .eq("id", str(day_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update daily log summary")
        return _parse_day(response.data[0])

    def list_days(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        """Return day records in the inclusive date range."""
        response = (
            self.client.table("daily_logs")
            .select(_DAY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_day(row) for row in response.data or []]

    def list_entries(self, day_id: UUID) -> list[Entry]:
        """Return all entries of a day."""
        response = (
            self.client.table("daily_log_entries")
            .select(_ENTRY_COLUMNS)
            .eq("daily_log_id", str(day_id))
            .order("time", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, entry_id: UUID) -> Entry | None:
        """Return an entry by id."""
        response = (
            self.client.table("daily_log_entries")
            .select(_ENTRY_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(  # noqa: PLR0913
        self,
        day_id: UUID,
        time: datetime,
        data: EntryData,
        ai_insight: str | None,
        image_path: str | None,
    ) -> Entry:
        """Insert an entry row."""
        response = (
            self.client.table("daily_log_entries")
            .insert(
                {
                    "daily_log_id": str(day_id),
                    "entry_type": data.kind,
                    "time": time.isoformat(),
                    "data": _data_payload(data),
                    "ai_insight": ai_insight,
                    "image_path": image_path,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create log entry")
        return _parse_entry(response.data[0])

    def update_entry(self, entry_id: UUID, data: EntryData) -> Entry:
        """Replace an entry's payload."""
        response = (
            self.client.table("daily_log_entries")
            .update({"data": _data_payload(data)})
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update log entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("daily_log_entries").delete().eq(
            "id", str(entry_id)
        ).execute()

    def delete_entries_of_kind(self, day_id: UUID, kind: str) -> None:
        """Delete all entries of one kind from a day."""
        self.client.table("daily_log_entries").delete().eq(
            "daily_log_id", str(day_id)
        ).eq("entry_type", kind).execute()


def _summary_payload(summary: DaySummary) -> dict[str, object]:
    return asdict(summary)


def _data_payload(data: EntryData) -> dict[str, object]:
    payload = asdict(data)
    if payload.get("product_id") is not None:
        payload["product_id"] = str(payload["product_id"])
    return payload


def _parse_day(row: dict[str, object]) -> DayRecord:
    weight = row.get("weight")
    return DayRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["log_date"])[:10]),
        summary=DaySummary(
            calories_eaten=int(row.get("calories_eaten") or 0),
            calories_burned=int(row.get("calories_burned") or 0),
            water_intake=int(row.get("water_intake") or 0),
            steps=int(row.get("steps") or 0),
            weight=float(weight) if weight is not None else None,
            protein=float(row.get("protein") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fat=float(row.get("fat") or 0.0),
            fiber=float(row.get("fiber") or 0.0),
        ),
    )


def _parse_entry(row: dict[str, object]) -> Entry:
    kind = str(row.get("entry_type"))
    data_type = ENTRY_TYPES.get(kind)
    if data_type is None:
        raise RuntimeError(f"Unknown entry type: {kind}")
    raw = row.get("data") or {}
    if not isinstance(raw, dict):
        raw = {}
    kwargs: dict[str, object] = {}
    for item in fields(data_type):
        if item.name in raw:
            kwargs[item.name] = raw[item.name]
        elif item.default is MISSING:
            kwargs[item.name] = _REQUIRED_DEFAULTS.get(item.type, 0)
    if kwargs.get("product_id"):
        kwargs["product_id"] = UUID(str(kwargs["product_id"]))
    return Entry(
        id=UUID(str(row["id"])),
        day_id=UUID(str(row["daily_log_id"])),
        time=datetime.fromisoformat(str(row["time"])),
        data=data_type(**kwargs),
        ai_insight=row.get("ai_insight"),
        image_path=row.get("image_path"),
    )
