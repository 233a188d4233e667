"""Catalog Repository: CRUD over Products in the `products` slot.

Invariants:
    - Product ids are unique within the collection; create() never reuses a present id
    - create() prepends (most recent first); update() keeps position
    - update() replaces the whole record; there is no partial patch
    - update()/delete() on a missing id are no-ops and return False
    - delete() does not touch cart snapshots of the product

Design Decisions:
    - Methods return new lists and store them via PersistentStore.set(): every
      change is one write
    - id_factory injectable so tests can force collisions
"""

import logging
from typing import Callable

from pydantic import TypeAdapter

from storefront.core.domain_types import SlotKey
from storefront.core.entities import Product, generate_product_id, new_product
from storefront.core.persistent_store import PersistentStore
from storefront.core.storage_protocols import StoragePort

logger = logging.getLogger(__name__)

_PRODUCTS = TypeAdapter(list[Product])


class CatalogRepository:
    """Ordered Product collection bound to the products slot."""

    def __init__(
        self,
        storage: StoragePort,
        default: Callable[[], list[Product]] = list,
        id_factory: Callable[[], str] = generate_product_id,
    ):
        self._store = PersistentStore(storage, SlotKey.PRODUCTS.value, _PRODUCTS, default)
        self._id_factory = id_factory

    def list_published(self) -> list[Product]:
        """Products visible on the public listing, order preserved."""
        return [p for p in self._store.value if p.published]

    def get(self, product_id: str) -> Product | None:
        for product in self._store.value:
            if product.id == product_id:
                return product
        return None

    def create(self) -> Product:
        """Allocate a default product with a fresh id and prepend it."""
        existing = {p.id for p in self._store.value}
        product_id = self._id_factory()
        while product_id in existing:
            product_id = self._id_factory()
        product = new_product(product_id)
        self._store.set([product, *self._store.value])
        logger.info("Product created", extra={"product_id": product.id})
        return product

    def update(self, product: Product) -> bool:
        """Replace the record with the same id. Returns False if absent."""
        products = self._store.value
        for index, current in enumerate(products):
            if current.id == product.id:
                self._store.set([*products[:index], product, *products[index + 1:]])
                logger.info("Product updated", extra={"product_id": product.id})
                return True
        logger.warning("Update skipped: product not found", extra={"product_id": product.id})
        return False

    def delete(self, product_id: str) -> bool:
        """Remove the product irreversibly. Callers gate this behind confirmation."""
        products = self._store.value
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            logger.warning("Delete skipped: product not found", extra={"product_id": product_id})
            return False
        self._store.set(remaining)
        logger.info("Product deleted", extra={"product_id": product_id})
        return True

    # Kept last: binding `list` earlier would shadow the builtin in later annotations.
    def list(self) -> list[Product]:
        return self._store.value
