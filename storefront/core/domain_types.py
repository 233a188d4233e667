"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId and ReviewId wrap str; ids are opaque and generated once
    - All valid states encoded as Enums: no raw string matching
    - Slot keys are the four durable slot names and nothing else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)
ReviewId = NewType("ReviewId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ShippingStatus(str, Enum):
    """The five shipping states a Product may carry."""
    NOT_SHIPPED = "NotShipped"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    PRE_ORDER = "PreOrder"


class ColorSlot(str, Enum):
    """Named color slots of the brand palette."""
    BLACK = "black"
    OD_GREEN = "odGreen"
    WHITE = "white"


class SlotKey(str, Enum):
    """Durable storage slots, one per entity collection or record."""
    PRODUCTS = "products"
    REVIEWS = "reviews"
    BRAND = "brand"
    CART = "cart"


class View(str, Enum):
    """Router view states."""
    HOME = "home"
    PRODUCT_DETAIL = "product_detail"
    ADMIN = "admin"
    ADMIN_LOGIN_PROMPT = "admin_login_prompt"


# ─── Constants ───────────────────────────────────────────────────

ANONYMOUS_AUTHOR = "Anonymous"
PRODUCT_ROUTE_PREFIX = "product/"
ADMIN_ROUTE = "admin"
HOME_ROUTE = ""
