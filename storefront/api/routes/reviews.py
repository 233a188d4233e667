"""Review Routes: listing, single review submission, admin bulk import."""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_admin, get_context
from storefront.core.entities import Review
from storefront.schemas.requests import ReviewCreate, ReviewImport
from storefront.services.app_context import AppContext
from storefront.services.catalog_admin import CatalogAdmin

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.get("")
async def list_reviews(ctx: AppContext = Depends(get_context)) -> list[Review]:
    return ctx.reviews.list()


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_review(body: ReviewCreate, ctx: AppContext = Depends(get_context)) -> Review:
    return ctx.reviews.add(body.body, author=body.author)


@router.post("/bulk", status_code=status.HTTP_201_CREATED)
async def import_reviews(body: ReviewImport, admin: CatalogAdmin = Depends(get_admin)):
    imported = admin.import_reviews(body.text)
    return {"imported": len(imported), "reviews": imported}
