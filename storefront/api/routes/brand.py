"""Brand Routes: read the brand record, admin partial update.

Invariants:
    - PATCH merges; omitted fields keep their values
    - GET includes the resolved logo lines (unknown slot names skipped)
"""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_admin, get_context
from storefront.core.brand import resolve_logo_lines
from storefront.core.entities import BrandConfig
from storefront.schemas.requests import BrandUpdate
from storefront.services.app_context import AppContext
from storefront.services.catalog_admin import CatalogAdmin

router = APIRouter(prefix="/api/v1/brand", tags=["brand"])


def _brand(config: BrandConfig) -> dict:
    return {
        **config.model_dump(mode="json", by_alias=True),
        "logo": [{"slot": slot, "color": color} for slot, color in resolve_logo_lines(config)],
    }


@router.get("")
async def get_brand(ctx: AppContext = Depends(get_context)):
    return _brand(ctx.brand.get())


@router.patch("")
async def update_brand(body: BrandUpdate, admin: CatalogAdmin = Depends(get_admin)):
    return _brand(admin.update_brand(
        name=body.name, colors=body.colors, logo_lines=body.logo_lines,
    ))
