"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from diet_tracker.adapters.local_image_store import LocalImageStore
from diet_tracker.adapters.openrouter_client import OpenRouterClient
from diet_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from diet_tracker.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from diet_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from diet_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from diet_tracker.config import Settings
from diet_tracker.services.analysis import FoodAnalysisService
from diet_tracker.services.dashboard import DashboardService
from diet_tracker.services.images import ImageService
from diet_tracker.services.logs import DailyLogService
from diet_tracker.services.products import ProductService
from diet_tracker.services.profile import ProfileService
from diet_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    profile_service: ProfileService
    product_service: ProductService
    daily_log_service: DailyLogService
    dashboard_service: DashboardService
    analysis_service: FoodAnalysisService
    image_service: ImageService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    daily_log_repository = SupabaseDailyLogRepository(supabase_client)
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        jwt_secret=resolved_settings.jwt_secret,
        token_ttl_days=resolved_settings.jwt_expires_days,
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    product_service = ProductService(SupabaseProductRepository(supabase_client))
    daily_log_service = DailyLogService(
        days=daily_log_repository,
        entries=daily_log_repository,
        profile_service=profile_service,
        product_service=product_service,
    )
    dashboard_service = DashboardService(
        days=daily_log_repository,
        profile_service=profile_service,
    )
    ai_client = OpenRouterClient.create(
        api_key=resolved_settings.openrouter_api_key,
        base_url=resolved_settings.ai_base_url,
        timeout_seconds=resolved_settings.ai_timeout_seconds,
        app_title=resolved_settings.ai_app_title,
        referer=resolved_settings.ai_referer,
    )
    analysis_service = FoodAnalysisService(
        client=ai_client,
        model=resolved_settings.ai_model,
        image_max_tokens=resolved_settings.ai_max_tokens,
    )
    image_service = ImageService(
        LocalImageStore(
            root=Path(resolved_settings.upload_dir),
            url_prefix=resolved_settings.upload_url_prefix,
        )
    )

    async def close_resources() -> None:
        await ai_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        profile_service=profile_service,
        product_service=product_service,
        daily_log_service=daily_log_service,
        dashboard_service=dashboard_service,
        analysis_service=analysis_service,
        image_service=image_service,
        close_resources=close_resources,
    )
