"""Supabase implementation for the product catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.products import Product, ProductVariant
from diet_tracker.services.products import ProductRepository

_WRITABLE_COLUMNS = {
    "name",
    "emoji",
    "category",
    "serving_size",
    "serving_unit",
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sort_order",
    "variants",
}


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository for products."""

    client: Client

    def list_visible(self, user_id: UUID) -> list[Product]:
        """Return products owned by the user and global products."""
        response = (
            self.client.table("products")
            .select("*")
            .or_(f"owner_id.eq.{user_id},owner_id.is.null")
            .order("usage_count", desc=True)
            .order("sort_order", desc=False)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def list_global(self) -> list[Product]:
        """Return products without an owner."""
        response = (
            self.client.table("products")
            .select("*")
            .is_("owner_id", "null")
            .order("sort_order", desc=False)
            .execute()
        )
        return [_parse_product(row) for row in response.data or []]

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""
        response = (
            self.client.table("products")
            .select("*")
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def create_product(
        self, owner_id: UUID | None, payload: dict[str, object]
    ) -> Product:
        """Create a product and return it."""
        response = (
            self.client.table("products")
            .insert(
                {
                    "owner_id": str(owner_id) if owner_id else None,
                    **_clean_payload(payload),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create product")
        return _parse_product(response.data[0])

    def update_product(self, product_id: UUID, payload: dict[str, object]) -> Product:
        """Update a product and return it."""
        response = (
            self.client.table("products")
            .update(_clean_payload(payload))
            .eq("id", str(product_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update product")
        return _parse_product(response.data[0])

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product."""
        self.client.table("products").delete().eq("id", str(product_id)).execute()

    def increment_usage(self, product_id: UUID) -> Product:
        """Increment the usage counter of a product."""
        response = (
            self.client.table("products")
            .select("usage_count")
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        current = 0
        if response.data:
            current = int(response.data[0].get("usage_count") or 0)
        updated = (
            self.client.table("products")
            .update({"usage_count": current + 1})
            .eq("id", str(product_id))
            .execute()
        )
        if not updated.data:
            raise RuntimeError("Failed to update product usage")
        return _parse_product(updated.data[0])

    def set_sort_order(self, product_id: UUID, sort_order: int) -> None:
        """Update the display position of a product."""
        self.client.table("products").update({"sort_order": sort_order}).eq(
            "id", str(product_id)
        ).execute()


def _clean_payload(payload: dict[str, object]) -> dict[str, object]:
    cleaned = {
        key: value for key, value in payload.items() if key in _WRITABLE_COLUMNS
    }
    variants = cleaned.get("variants")
    if isinstance(variants, list):
        cleaned["variants"] = [
            {"name": item.name, "multiplier": item.multiplier}
            if isinstance(item, ProductVariant)
            else item
            for item in variants
        ]
    return cleaned


def _parse_product(row: dict[str, object]) -> Product:
    owner_raw = row.get("owner_id")
    variants_raw = row.get("variants") or []
    return Product(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(owner_raw)) if owner_raw else None,
        name=str(row.get("name", "")),
        emoji=str(row.get("emoji") or "🍽️"),
        category=str(row.get("category") or "Custom"),
        serving_size=float(row.get("serving_size") or 100.0),
        serving_unit=str(row.get("serving_unit") or "g"),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        fiber=float(row.get("fiber") or 0.0),
        sugar=float(row.get("sugar") or 0.0),
        usage_count=int(row.get("usage_count") or 0),
        sort_order=int(row.get("sort_order") or 0),
        variants=[
            ProductVariant(
                name=str(item.get("name", "")),
                multiplier=float(item.get("multiplier") or 1.0),
            )
            for item in variants_raw
            if isinstance(item, dict)
        ],
    )
