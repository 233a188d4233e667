"""Cart Routes: list, add by product id, remove, clear.

Invariants:
    - Adding a product id not in the catalog -> 404
    - Cart items are snapshots: they survive the product's deletion
"""

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import get_context
from storefront.schemas.requests import CartAdd
from storefront.services.app_context import AppContext
from storefront.services.catalog_admin import get_product_or_404

router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


def _cart(ctx: AppContext) -> dict:
    return {
        "items": [item.model_dump(mode="json", by_alias=True) for item in ctx.cart.list()],
        "count": ctx.cart.count(),
        "total": ctx.cart.total(),
    }


@router.get("")
async def get_cart(ctx: AppContext = Depends(get_context)):
    return _cart(ctx)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_to_cart(body: CartAdd, ctx: AppContext = Depends(get_context)):
    ctx.cart.add(get_product_or_404(ctx, body.product_id))
    return _cart(ctx)


@router.delete("/{product_id}")
async def remove_from_cart(product_id: str, ctx: AppContext = Depends(get_context)):
    ctx.cart.remove(product_id)
    return _cart(ctx)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(ctx: AppContext = Depends(get_context)):
    ctx.cart.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
