"""Seed Data: default brand record and the demo catalog.

Invariants:
    - Factories return fresh objects on every call (stores never share defaults)
    - Seed products carry stable ids so product/<id> links survive restarts
"""

from storefront.core.domain_types import ColorSlot, ShippingStatus
from storefront.core.entities import BrandConfig, Product


def default_brand() -> BrandConfig:
    return BrandConfig(
        name="Ridgeline Blades",
        colors={
            ColorSlot.BLACK: "#111111",
            ColorSlot.OD_GREEN: "#4B5320",
            ColorSlot.WHITE: "#FFFFFF",
        },
        logo_lines=[ColorSlot.BLACK.value, ColorSlot.OD_GREEN.value],
    )


def seed_products() -> list[Product]:
    return [
        Product(
            id="blade-001",
            name="Field Fixed Blade",
            price=189.0,
            description="Full-tang drop point with micarta scales.",
            images=[],
            sku="FFB-001",
            shipping_status=ShippingStatus.NOT_SHIPPED,
            published=True,
        ),
        Product(
            id="blade-002",
            name="Ridge Folder",
            price=129.0,
            description="Liner-lock folder, 3.2in blade.",
            images=[],
            sku="RF-002",
            shipping_status=ShippingStatus.PRE_ORDER,
            published=True,
        ),
        Product(
            id="blade-003",
            name="Camp Cleaver",
            price=224.0,
            description="Prototype run, not yet listed.",
            images=[],
            sku="CC-003",
            shipping_status=ShippingStatus.PROCESSING,
            published=False,
        ),
    ]
