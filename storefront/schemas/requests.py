"""Request Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProductUpdate carries the full record: PUT replaces, it never patches
    - price >= 0 is enforced here, not on stored products
    - BrandUpdate.logo_lines accepts a list or a comma-separated string; slot names
      are not checked against the palette
    - Request bodies accept camelCase (wire) or snake_case field names

Design Decisions:
    - field_validator for side-effect-free transforms (strip, split): models stay pure
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.core.brand import parse_logo_lines
from storefront.core.domain_types import ColorSlot, ShippingStatus
from storefront.core.entities import Product


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductUpdate(_Body):
    """Full product record for wholesale replace (id comes from the path)."""
    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    description: str = ""
    images: list[str] = Field(default_factory=list)
    sku: str = ""
    shipping_status: ShippingStatus = ShippingStatus.NOT_SHIPPED
    published: bool = False

    def to_product(self, product_id: str) -> Product:
        return Product(id=product_id, **self.model_dump())


class ReviewCreate(_Body):
    author: str | None = Field(None, max_length=200)
    body: str = Field(min_length=1, max_length=5000)

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("body cannot be empty or whitespace")
        return v


class ReviewImport(_Body):
    """Newline-separated `author | body` records."""
    text: str = Field(max_length=200_000)


class BrandUpdate(_Body):
    name: str | None = Field(None, min_length=1, max_length=200)
    colors: dict[ColorSlot, str] | None = None
    logo_lines: list[str] | None = None

    @field_validator("logo_lines", mode="before")
    @classmethod
    def split_logo_lines(cls, v):
        if isinstance(v, str):
            return parse_logo_lines(v)
        return v


class LoginRequest(_Body):
    passcode: str = Field(max_length=256)


class NavigationRequest(_Body):
    token: str = Field("", max_length=512)


class CartAdd(_Body):
    product_id: str = Field(min_length=1)
