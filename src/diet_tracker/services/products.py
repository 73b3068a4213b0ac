"""Services for the product catalog."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.domain.products import CATEGORIES, SERVING_UNITS, Product

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for catalog products."""

    def list_visible(self, user_id: UUID) -> list[Product]:
        """Return products owned by the user plus global products."""

    def list_global(self) -> list[Product]:
        """Return products without an owner."""

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""

    def create_product(
        self, owner_id: UUID | None, payload: dict[str, object]
    ) -> Product:
        """Create a product and return it."""

    def update_product(self, product_id: UUID, payload: dict[str, object]) -> Product:
        """Update a product and return it."""

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product."""

    def increment_usage(self, product_id: UUID) -> Product:
        """Increment the usage counter of a product."""

    def set_sort_order(self, product_id: UUID, sort_order: int) -> None:
        """Update the display position of a product."""


@dataclass
class ProductService:
    """Application service for catalog operations."""

    repository: ProductRepository

    def list_products(
        self, user_id: UUID, search: str | None = None, category: str | None = None
    ) -> list[Product]:
        """Return visible products filtered by name and category."""
        products = self.repository.list_visible(user_id)
        if search:
            needle = search.strip().lower()
            products = [
                product
                for product in products
                if needle in product.name.lower() or needle in product.category.lower()
            ]
        if category and category != "All":
            products = [product for product in products if product.category == category]
        return _rank(products)

    def most_used(self, user_id: UUID, limit: int = 10) -> list[Product]:
        """Return the most used visible products."""
        return _rank(self.repository.list_visible(user_id))[:limit]

    def get_product(self, user_id: UUID, product_id: UUID) -> Product:
        """Return a visible product or raise NotFoundError."""
        product = self.repository.get_product(product_id)
        if product is None or product.owner_id not in {None, user_id}:
            raise NotFoundError("Product not found")
        return product

    def create_product(self, user_id: UUID, payload: dict[str, object]) -> Product:
        """Create a product owned by the user."""
        if not str(payload.get("name") or "").strip():
            raise ValidationError("Product name is required")
        _validate(payload)
        return self.repository.create_product(user_id, payload)

    def update_product(
        self, user_id: UUID, product_id: UUID, payload: dict[str, object]
    ) -> Product:
        """Update a product the user owns."""
        self._owned(user_id, product_id)
        _validate(payload)
        return self.repository.update_product(product_id, payload)

    def delete_product(self, user_id: UUID, product_id: UUID) -> None:
        """Delete a product the user owns."""
        self._owned(user_id, product_id)
        self.repository.delete_product(product_id)

    def record_use(self, user_id: UUID, product_id: UUID) -> Product:
        """Increment the usage counter of a visible product."""
        self.get_product(user_id, product_id)
        return self.repository.increment_usage(product_id)

    def reorder(self, user_id: UUID, product_ids: list[UUID]) -> None:
        """Store the given order as the products' sort positions."""
        for position, product_id in enumerate(product_ids):
            self._owned(user_id, product_id)
            self.repository.set_sort_order(product_id, position)

    def seed_defaults(self, products: Iterable[dict[str, object]]) -> list[Product]:
        """Create shared products whose names are not in the catalog yet."""
        existing = {product.name for product in self.repository.list_global()}
        created = []
        for payload in products:
            if payload["name"] in existing:
                continue
            _validate(payload)
            created.append(self.repository.create_product(None, payload))
            existing.add(str(payload["name"]))
        _logger.info(
            "Seeded shared products: created=%s total=%s",
            len(created),
            len(existing),
        )
        return created

    def _owned(self, user_id: UUID, product_id: UUID) -> Product:
        product = self.repository.get_product(product_id)
        if product is None or product.owner_id != user_id:
            raise NotFoundError("Product not found")
        return product


def _validate(payload: dict[str, object]) -> None:
    category = payload.get("category")
    if category is not None and category not in CATEGORIES:
        raise ValidationError(f"Unsupported category: {category}")
    unit = payload.get("serving_unit")
    if unit is not None and unit not in SERVING_UNITS:
        raise ValidationError(f"Unsupported serving unit: {unit}")


def _rank(products: list[Product]) -> list[Product]:
    """Order by usage (most first) then manual sort position."""
    return sorted(products, key=lambda item: (-item.usage_count, item.sort_order))
