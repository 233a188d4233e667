"""Product Routes: public listing and detail, admin create/replace/delete.

Invariants:
    - Public listing shows published products only; an admin session sees all
    - Detail of a missing id -> 404 carrying redirect_to home
    - POST/PUT/DELETE require an admin session (403 otherwise)
    - DELETE without confirm=true -> 428, nothing removed
"""

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.dependencies import get_admin, get_context
from storefront.core.entities import Product
from storefront.schemas.requests import ProductUpdate
from storefront.services.app_context import AppContext
from storefront.services.catalog_admin import CatalogAdmin, get_product_or_404

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("")
async def list_products(ctx: AppContext = Depends(get_context)) -> list[Product]:
    if ctx.gate.authorized:
        return ctx.catalog.list()
    return ctx.catalog.list_published()


@router.get("/{product_id}")
async def get_product(product_id: str, ctx: AppContext = Depends(get_context)) -> Product:
    return get_product_or_404(ctx, product_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(admin: CatalogAdmin = Depends(get_admin)) -> Product:
    return admin.create_product()


@router.put("/{product_id}")
async def replace_product(
    product_id: str, body: ProductUpdate, admin: CatalogAdmin = Depends(get_admin),
) -> Product:
    return admin.update_product(body.to_product(product_id))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    confirm: bool = Query(False),
    admin: CatalogAdmin = Depends(get_admin),
):
    admin.delete_product(product_id, confirmed=confirm)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
