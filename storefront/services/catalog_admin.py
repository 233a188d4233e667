"""Catalog Admin: admin-gated operations over the repositories, plus lookups with not-found mapping.

Invariants:
    - Every mutation runs the enforce_admin guards first; a failing guard raises
      the matching typed error and touches no slot
    - create_product navigates to the new product's detail view
    - Missing ids on update/delete/view raise ResourceNotFoundError; the core
      repositories themselves stay no-op on missing ids

Design Decisions:
    - Guards return dicts (pure core); this shell layer turns them into exceptions
      so the FastAPI handler renders one error envelope
"""

import logging

from storefront.core.entities import BrandConfig, Product, Review
from storefront.core.enforce_admin import check_admin_session, validate_admin_delete
from storefront.core.errors import (
    AdminRequiredError,
    ConfirmationRequiredError,
    ErrorContext,
    ResourceNotFoundError,
)
from storefront.core.router import product_token
from storefront.services.app_context import AppContext

logger = logging.getLogger(__name__)

_GUARD_ERRORS = {
    "ADMIN_REQUIRED": AdminRequiredError,
    "CONFIRMATION_REQUIRED": ConfirmationRequiredError,
}


def _raise_on_guard(error: dict | None) -> None:
    if error is None:
        return
    raise _GUARD_ERRORS[error["error_code"]](
        error["operation"], ErrorContext(user_message=error["message"]),
    )


class CatalogAdmin:
    """Admin handlers bound to one AppContext."""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    def create_product(self) -> Product:
        _raise_on_guard(check_admin_session(self.ctx.session, "create products"))
        product = self.ctx.catalog.create()
        self.ctx.router.navigate(product_token(product.id))
        return product

    def update_product(self, product: Product) -> Product:
        _raise_on_guard(check_admin_session(self.ctx.session, "edit products"))
        if not self.ctx.catalog.update(product):
            raise ResourceNotFoundError("Product", product.id)
        return product

    def delete_product(self, product_id: str, confirmed: bool) -> None:
        _raise_on_guard(
            validate_admin_delete(self.ctx.session, confirmed, "delete this product"),
        )
        if not self.ctx.catalog.delete(product_id):
            raise ResourceNotFoundError("Product", product_id)

    def import_reviews(self, text: str) -> list[Review]:
        _raise_on_guard(check_admin_session(self.ctx.session, "import reviews"))
        return self.ctx.reviews.bulk_ingest(text)

    def update_brand(
        self,
        name: str | None = None,
        colors: dict[str, str] | None = None,
        logo_lines: list[str] | None = None,
    ) -> BrandConfig:
        _raise_on_guard(check_admin_session(self.ctx.session, "edit the brand"))
        return self.ctx.brand.set(name=name, colors=colors, logo_lines=logo_lines)


def get_product_or_404(ctx: AppContext, product_id: str) -> Product:
    """Detail view lookup. The error carries a path back home."""
    product = ctx.catalog.get(product_id)
    if product is None:
        raise ResourceNotFoundError(
            "Product", product_id,
            ErrorContext(
                view=ctx.router.state.view.value,
                user_message="Product not found.",
                redirect_to="#/",
            ),
        )
    return product
