"""Cart Repository: persisted list of product snapshots in the `cart` slot.

Invariants:
    - Items are snapshots: later catalog edits or deletes never change them
    - add() prepends one item with qty 1; there is no quantity adjustment
    - remove() on an id not in the cart is a no-op
"""

import logging
from typing import Callable

from pydantic import TypeAdapter

from storefront.core.domain_types import SlotKey
from storefront.core.entities import CartItem, Product, snapshot_for_cart
from storefront.core.persistent_store import PersistentStore
from storefront.core.storage_protocols import StoragePort

logger = logging.getLogger(__name__)

_CART = TypeAdapter(list[CartItem])


class CartRepository:
    """Ordered CartItem collection bound to the cart slot."""

    def __init__(
        self,
        storage: StoragePort,
        default: Callable[[], list[CartItem]] = list,
    ):
        self._store = PersistentStore(storage, SlotKey.CART.value, _CART, default)

    def add(self, product: Product) -> CartItem:
        item = snapshot_for_cart(product)
        self._store.set([item, *self._store.value])
        logger.info("Added to cart", extra={"product_id": product.id})
        return item

    def remove(self, product_id: str) -> bool:
        items = self._store.value
        remaining = [item for item in items if item.id != product_id]
        if len(remaining) == len(items):
            return False
        self._store.set(remaining)
        return True

    def clear(self) -> None:
        self._store.set([])

    def count(self) -> int:
        return sum(item.qty for item in self._store.value)

    def total(self) -> float:
        return sum(item.price * item.qty for item in self._store.value)

    # Kept last: binding `list` earlier would shadow the builtin in later annotations.
    def list(self) -> list[CartItem]:
        return self._store.value
