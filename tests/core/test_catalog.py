"""Catalog Repository: tests for create/update/delete and listing.

Tests cover:
    - create() defaults, prepend order, unique ids (even on id collisions)
    - update() wholesale replace, position kept, no-op on missing id
    - delete() removal, no-op on missing id, no cascade to cart
    - list_published() and get()
"""

from storefront.core.cart import CartRepository
from storefront.core.catalog import CatalogRepository
from storefront.core.domain_types import ShippingStatus
from storefront.core.seed_data import seed_products
from storefront.infrastructure.memory_storage import InMemoryStorage


def _ids(products):
    return [p.id for p in products]


def test_create_returns_default_unpublished_product(storage):
    catalog = CatalogRepository(storage)
    product = catalog.create()
    assert product.published is False
    assert product.shipping_status == ShippingStatus.NOT_SHIPPED
    assert product.sku == ""
    assert product.description == ""
    assert product.images == []


def test_create_prepends(storage):
    catalog = CatalogRepository(storage)
    first = catalog.create()
    second = catalog.create()
    assert _ids(catalog.list()) == [second.id, first.id]


def test_create_never_reuses_present_id(storage):
    ids = iter(["dup", "dup", "dup", "fresh"])
    catalog = CatalogRepository(storage, id_factory=lambda: next(ids))
    first = catalog.create()
    second = catalog.create()
    assert first.id == "dup"
    assert second.id == "fresh"


def test_create_ids_unique_across_many(storage):
    catalog = CatalogRepository(storage)
    created = [catalog.create().id for _ in range(50)]
    assert len(set(created)) == 50


def test_create_persists_to_slot(storage):
    product = CatalogRepository(storage).create()
    assert _ids(CatalogRepository(storage).list()) == [product.id]


def test_update_replaces_whole_record_in_place(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    original = catalog.get("blade-002")
    edited = original.model_copy(update={"name": "Ridge Folder II", "price": 139.0})

    assert catalog.update(edited) is True

    assert _ids(catalog.list()) == ["blade-001", "blade-002", "blade-003"]
    assert catalog.get("blade-002") == edited


def test_update_missing_id_is_noop(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    before = list(catalog.list())
    ghost = before[0].model_copy(update={"id": "ghost"})

    assert catalog.update(ghost) is False
    assert catalog.list() == before
    assert storage.writes == 0


def test_delete_removes_product(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    assert catalog.delete("blade-001") is True
    assert "blade-001" not in _ids(catalog.list())
    assert "blade-001" not in _ids(CatalogRepository(storage).list())


def test_delete_missing_id_leaves_list_unchanged(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    before = list(catalog.list())
    assert catalog.delete("nope") is False
    assert catalog.list() == before


def test_delete_does_not_cascade_to_cart(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    cart = CartRepository(storage)
    cart.add(catalog.get("blade-001"))

    catalog.delete("blade-001")

    assert _ids(cart.list()) == ["blade-001"]


def test_list_published_filters_and_keeps_order(storage):
    catalog = CatalogRepository(storage, default=seed_products)
    assert _ids(catalog.list_published()) == ["blade-001", "blade-002"]


def test_get_returns_none_for_missing(storage):
    assert CatalogRepository(storage).get("blade-001") is None


def test_seed_default_not_written_until_change():
    storage = InMemoryStorage()
    CatalogRepository(storage, default=seed_products)
    assert "products" not in storage.slots
