"""Tests for the product catalog service."""

from uuid import uuid4

import pytest

from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.domain.default_products import DEFAULT_PRODUCTS
from diet_tracker.domain.products import CATEGORIES, Product
from diet_tracker.services.products import ProductService
from tests.conftest import InMemoryProductRepository


def _service_with_global_product() -> tuple[ProductService, Product]:
    repository = InMemoryProductRepository()
    product = Product(id=uuid4(), owner_id=None, name="Apple", category="Fruit")
    repository.products[product.id] = product
    return ProductService(repository), product


def test_list_products_includes_global_and_own() -> None:
    service, global_product = _service_with_global_product()
    user_id = uuid4()
    own = service.create_product(user_id, {"name": "Latte", "category": "Coffee"})
    service.create_product(uuid4(), {"name": "Someone else's"})

    names = {product.name for product in service.list_products(user_id)}

    assert names == {global_product.name, own.name}


def test_list_products_filters_by_search_and_category() -> None:
    service, _ = _service_with_global_product()
    user_id = uuid4()
    service.create_product(user_id, {"name": "Flat White", "category": "Coffee"})

    assert [p.name for p in service.list_products(user_id, search="white")] == [
        "Flat White"
    ]
    assert [p.name for p in service.list_products(user_id, category="Fruit")] == [
        "Apple"
    ]
    assert len(service.list_products(user_id, category="All")) == 2


def test_most_used_orders_by_usage() -> None:
    service, apple = _service_with_global_product()
    user_id = uuid4()
    latte = service.create_product(user_id, {"name": "Latte"})
    service.record_use(user_id, latte.id)
    service.record_use(user_id, latte.id)
    service.record_use(user_id, apple.id)

    ranked = service.most_used(user_id, limit=1)

    assert [product.id for product in ranked] == [latte.id]


def test_create_product_requires_name() -> None:
    service, _ = _service_with_global_product()

    with pytest.raises(ValidationError):
        service.create_product(uuid4(), {"name": "  "})


def test_create_product_rejects_unknown_category() -> None:
    service, _ = _service_with_global_product()

    with pytest.raises(ValidationError):
        service.create_product(uuid4(), {"name": "Tea", "category": "Drink"})


def test_global_products_cannot_be_changed() -> None:
    service, apple = _service_with_global_product()

    with pytest.raises(NotFoundError):
        service.update_product(uuid4(), apple.id, {"calories": 10})
    with pytest.raises(NotFoundError):
        service.delete_product(uuid4(), apple.id)


def test_owner_can_update_and_delete() -> None:
    service, _ = _service_with_global_product()
    user_id = uuid4()
    product = service.create_product(user_id, {"name": "Toast", "calories": 80})

    updated = service.update_product(user_id, product.id, {"calories": 95})
    service.delete_product(user_id, product.id)

    assert updated.calories == 95
    with pytest.raises(NotFoundError):
        service.get_product(user_id, product.id)


def test_reorder_sets_sort_positions() -> None:
    service, _ = _service_with_global_product()
    user_id = uuid4()
    first = service.create_product(user_id, {"name": "A"})
    second = service.create_product(user_id, {"name": "B"})

    service.reorder(user_id, [second.id, first.id])

    assert service.get_product(user_id, second.id).sort_order == 0
    assert service.get_product(user_id, first.id).sort_order == 1


def test_seed_defaults_adds_missing_shared_products() -> None:
    service, _ = _service_with_global_product()
    user_id = uuid4()

    created = service.seed_defaults(DEFAULT_PRODUCTS)
    again = service.seed_defaults(DEFAULT_PRODUCTS)

    visible = service.list_products(user_id)
    assert len(created) == len(DEFAULT_PRODUCTS) - 1
    assert again == []
    assert len(visible) == len(DEFAULT_PRODUCTS)
    assert all(product.owner_id is None for product in visible)
    assert {product.category for product in visible} == set(CATEGORIES)


def test_seed_defaults_rejects_unknown_category() -> None:
    service = ProductService(InMemoryProductRepository())

    with pytest.raises(ValidationError):
        service.seed_defaults([{"name": "Mystery", "category": "Space food"}])
