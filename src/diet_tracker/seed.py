"""Command that fills the shared product catalog."""

import asyncio

from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import build_container
from diet_tracker.domain.default_products import DEFAULT_PRODUCTS


def main() -> None:
    """Create missing shared products using the configured Supabase project."""
    configure_logging()
    container = build_container()
    try:
        container.product_service.seed_defaults(DEFAULT_PRODUCTS)
    finally:
        asyncio.run(container.close_resources())


if __name__ == "__main__":
    main()
