"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest

from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.days import DayRecord, DaySummary
from diet_tracker.domain.entries import Entry, EntryData
from diet_tracker.domain.errors import ConflictError
from diet_tracker.domain.models import UserRecord
from diet_tracker.domain.products import Product, ProductVariant
from diet_tracker.domain.profile import UserProfile
from diet_tracker.services.analysis import ChatCompletionClient, FoodAnalysisService
from diet_tracker.services.dashboard import DashboardService
from diet_tracker.services.days import DayRepository
from diet_tracker.services.images import ImageService, ImageStore
from diet_tracker.services.logs import DailyLogService, EntryStore
from diet_tracker.services.products import ProductRepository, ProductService
from diet_tracker.services.profile import ProfileRepository, ProfileService
from diet_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryDayLogRepository(DayRepository, EntryStore):
    """In-memory day and entry repository for tests."""

    days: dict[UUID, DayRecord] = field(default_factory=dict)
    entries: dict[UUID, Entry] = field(default_factory=dict)
    lose_create_race: bool = False
    create_calls: int = 0

    def get_day(self, day_id: UUID) -> DayRecord | None:
        return self.days.get(day_id)

    def find_day(self, user_id: UUID, day: date) -> DayRecord | None:
        for record in self.days.values():
            if record.user_id == user_id and record.day == day:
                return record
        return None

    def create_day(self, user_id: UUID, day: date) -> DayRecord:
        self.create_calls += 1
        if self.lose_create_race:
            # Another request inserts the row first.
            self.lose_create_race = False
            self._insert_day(user_id, day)
            raise ConflictError("Daily log already exists")
        if self.find_day(user_id, day):
            raise ConflictError("Daily log already exists")
        return self._insert_day(user_id, day)

    def save_summary(self, day_id: UUID, summary: DaySummary) -> DayRecord:
        record = replace(self.days[day_id], summary=summary)
        self.days[day_id] = record
        return record

    def list_days(self, user_id: UUID, start: date, end: date) -> list[DayRecord]:
        return sorted(
            (
                record
                for record in self.days.values()
                if record.user_id == user_id and start <= record.day <= end
            ),
            key=lambda record: record.day,
        )

    def list_entries(self, day_id: UUID) -> list[Entry]:
        return [entry for entry in self.entries.values() if entry.day_id == day_id]

    def get_entry(self, entry_id: UUID) -> Entry | None:
        return self.entries.get(entry_id)

    def create_entry(  # noqa: PLR0913
        self,
        day_id: UUID,
        time: datetime,
        data: EntryData,
        ai_insight: str | None,
        image_path: str | None,
    ) -> Entry:
        entry = Entry(
            id=uuid4(),
            day_id=day_id,
            time=time,
            data=data,
            ai_insight=ai_insight,
            image_path=image_path,
        )
        self.entries[entry.id] = entry
        return entry

    def update_entry(self, entry_id: UUID, data: EntryData) -> Entry:
        entry = replace(self.entries[entry_id], data=data)
        self.entries[entry_id] = entry
        return entry

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def delete_entries_of_kind(self, day_id: UUID, kind: str) -> None:
        for entry in self.list_entries(day_id):
            if entry.kind == kind:
                self.entries.pop(entry.id)

    def _insert_day(self, user_id: UUID, day: date) -> DayRecord:
        record = DayRecord(id=uuid4(), user_id=user_id, day=day)
        self.days[record.id] = record
        return record


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class InMemoryProductRepository(ProductRepository):
    """In-memory product repository for tests."""

    products: dict[UUID, Product] = field(default_factory=dict)

    def list_visible(self, user_id: UUID) -> list[Product]:
        return [
            product
            for product in self.products.values()
            if product.owner_id in {None, user_id}
        ]

    def list_global(self) -> list[Product]:
        return [
            product for product in self.products.values() if product.owner_id is None
        ]

    def get_product(self, product_id: UUID) -> Product | None:
        return self.products.get(product_id)

    def create_product(
        self, owner_id: UUID | None, payload: dict[str, object]
    ) -> Product:
        product = replace(
            Product(id=uuid4(), owner_id=owner_id, name=""),
            **_product_fields(payload),
        )
        self.products[product.id] = product
        return product

    def update_product(self, product_id: UUID, payload: dict[str, object]) -> Product:
        product = replace(self.products[product_id], **_product_fields(payload))
        self.products[product_id] = product
        return product

    def delete_product(self, product_id: UUID) -> None:
        self.products.pop(product_id, None)

    def increment_usage(self, product_id: UUID) -> Product:
        current = self.products[product_id]
        product = replace(current, usage_count=current.usage_count + 1)
        self.products[product_id] = product
        return product

    def set_sort_order(self, product_id: UUID, sort_order: int) -> None:
        self.products[product_id] = replace(
            self.products[product_id], sort_order=sort_order
        )


def _product_fields(payload: dict[str, object]) -> dict[str, object]:
    values = {key: value for key, value in payload.items() if key != "variants"}
    variants = payload.get("variants")
    if isinstance(variants, list):
        values["variants"] = [
            item if isinstance(item, ProductVariant) else ProductVariant(**item)
            for item in variants
        ]
    return values


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username, password_hash=password_hash)
        self.users[user.id] = user
        return user


@dataclass
class FakeChatClient(ChatCompletionClient):
    """Fake chat-completion client returning queued replies."""

    replies: list[str] = field(default_factory=list)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self, *, model: str, messages: list[dict[str, object]], max_tokens: int
    ) -> str:
        self.calls.append(
            {"model": model, "messages": messages, "max_tokens": max_tokens}
        )
        return self.replies.pop(0)


@dataclass
class FakeImageStore(ImageStore):
    """Fake image store that records saved files."""

    saved: list[tuple[UUID, bytes, str]] = field(default_factory=list)

    def save(self, user_id: UUID, content: bytes, extension: str) -> str:
        self.saved.append((user_id, content, extension))
        return f"/uploads/analyzed_images/{user_id}{extension}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        jwt_secret="test-secret-with-enough-length-for-hs256",
        openrouter_api_key="openrouter-key",
    )


@pytest.fixture
def day_repository() -> InMemoryDayLogRepository:
    return InMemoryDayLogRepository()


@pytest.fixture
def profile_service() -> ProfileService:
    return ProfileService(InMemoryProfileRepository())


@pytest.fixture
def product_service() -> ProductService:
    return ProductService(InMemoryProductRepository())


@pytest.fixture
def user_service(settings: Settings) -> UserService:
    return UserService(
        repository=InMemoryUserRepository(), jwt_secret=settings.jwt_secret
    )


@pytest.fixture
def daily_log_service(
    day_repository: InMemoryDayLogRepository,
    profile_service: ProfileService,
    product_service: ProductService,
) -> DailyLogService:
    return DailyLogService(
        days=day_repository,
        entries=day_repository,
        profile_service=profile_service,
        product_service=product_service,
    )


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def image_store() -> FakeImageStore:
    return FakeImageStore()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_service: UserService,
    profile_service: ProfileService,
    product_service: ProductService,
    day_repository: InMemoryDayLogRepository,
    daily_log_service: DailyLogService,
    chat_client: FakeChatClient,
    image_store: FakeImageStore,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        profile_service=profile_service,
        product_service=product_service,
        daily_log_service=daily_log_service,
        dashboard_service=DashboardService(
            days=day_repository, profile_service=profile_service
        ),
        analysis_service=FoodAnalysisService(
            client=chat_client, model=settings.ai_model
        ),
        image_service=ImageService(image_store),
        close_resources=close_resources,
    )
