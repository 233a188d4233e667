"""Navigation Routes: read and drive the Router from the UI's location changes.

Invariants:
    - POST pushes the token to the navigation source; the Router reacts synchronously
    - Responses always carry the resolved view, never the raw token alone
"""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_context
from storefront.schemas.requests import NavigationRequest
from storefront.services.app_context import AppContext

router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


def _view(ctx: AppContext) -> dict:
    return {"token": ctx.router.token, **ctx.router.state.to_dict()}


@router.get("")
async def current_view(ctx: AppContext = Depends(get_context)):
    return _view(ctx)


@router.post("")
async def navigate(body: NavigationRequest, ctx: AppContext = Depends(get_context)):
    """Location change event from the UI."""
    ctx.router.navigate(body.token)
    return _view(ctx)
