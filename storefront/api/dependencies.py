"""API Dependencies: resolve the AppContext and admin handlers per request.

Invariants:
    - The AppContext lives on app.state, set by the lifespan; never a module global
    - Tests override get_context via app.dependency_overrides
"""

from fastapi import Depends, Request

from storefront.services.app_context import AppContext
from storefront.services.catalog_admin import CatalogAdmin


def get_context(request: Request) -> AppContext:
    """FastAPI dependency for the process AppContext."""
    ctx = getattr(request.app.state, "context", None)
    if ctx is None:
        raise RuntimeError("Application context not initialized")
    return ctx


def get_admin(ctx: AppContext = Depends(get_context)) -> CatalogAdmin:
    return CatalogAdmin(ctx)
