"""Entities: the four durable record shapes (Product, Review, BrandConfig, CartItem).

Invariants:
    - Durable JSON uses camelCase keys (shippingStatus, logoLines); attributes are snake_case
    - shipping_status is always one of the five ShippingStatus values
    - CartItem is a full Product snapshot plus qty >= 1, never a reference
    - price carries no bound here; bounds are enforced at the HTTP boundary only

Design Decisions:
    - Pydantic models over dataclasses: the same model validates slot JSON on load
      and serializes it on write through a TypeAdapter
    - populate_by_name: core code constructs with snake_case, storage speaks camelCase
"""

import uuid
import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.core.domain_types import (
    ANONYMOUS_AUTHOR,
    ColorSlot,
    ProductId,
    ReviewId,
    ShippingStatus,
)


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(_Record):
    """Catalog entry. Replaced wholesale on update, keyed on id."""
    id: str
    name: str
    price: float = 0.0
    description: str = ""
    images: list[str] = Field(default_factory=list)
    sku: str = ""
    shipping_status: ShippingStatus = ShippingStatus.NOT_SHIPPED
    published: bool = False


class Review(_Record):
    """Customer review. Date is assigned on creation and never edited."""
    id: str
    author: str = ANONYMOUS_AUTHOR
    body: str = ""
    date: datetime.date


class BrandConfig(_Record):
    """Single brand record. logo_lines may name slots missing from colors."""
    name: str
    colors: dict[ColorSlot, str] = Field(default_factory=dict)
    logo_lines: list[str] = Field(default_factory=list)


class CartItem(Product):
    """Product snapshot taken when added to the cart."""
    qty: int = Field(default=1, ge=1)


# ─── Factories ───────────────────────────────────────────────────

def generate_product_id() -> ProductId:
    return ProductId(f"prod-{uuid.uuid4().hex[:12]}")


def generate_review_id() -> ReviewId:
    return ReviewId(f"rev-{uuid.uuid4().hex[:12]}")


def new_product(product_id: str) -> Product:
    """Fresh unpublished product with default field values."""
    return Product(
        id=product_id,
        name="New product",
        price=0.0,
        description="",
        images=[],
        sku="",
        shipping_status=ShippingStatus.NOT_SHIPPED,
        published=False,
    )


def snapshot_for_cart(product: Product, qty: int = 1) -> CartItem:
    """Copy every Product field into a CartItem."""
    return CartItem(**product.model_dump(), qty=qty)
