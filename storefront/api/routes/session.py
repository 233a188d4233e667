"""Session Routes: passcode login, logout and the current session flag.

Invariants:
    - Wrong passcode -> 401 with a user-visible message; session flag unchanged
    - Login and logout respond with the view the Router moved to
"""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_context
from storefront.core.errors import AuthenticationError, ErrorContext
from storefront.schemas.requests import LoginRequest
from storefront.services.app_context import AppContext

router = APIRouter(prefix="/api/v1/session", tags=["session"])


def _session(ctx: AppContext) -> dict:
    return {"authorized": ctx.gate.authorized, **ctx.router.state.to_dict()}


@router.get("")
async def get_session(ctx: AppContext = Depends(get_context)):
    return _session(ctx)


@router.post("/login")
async def login(body: LoginRequest, ctx: AppContext = Depends(get_context)):
    error = ctx.gate.attempt_login(body.passcode)
    if error:
        raise AuthenticationError(
            error["message"],
            ErrorContext(view=ctx.router.state.view.value),
        )
    return _session(ctx)


@router.post("/logout")
async def logout(ctx: AppContext = Depends(get_context)):
    ctx.gate.logout()
    return _session(ctx)
