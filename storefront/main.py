"""Storefront API: FastAPI host for the local admin UI.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - AppContext built once in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
    - One process, one session flag: the HTTP host serves a single local operator
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import brand, cart, health, navigation, products, reviews, session
from storefront.config import get_settings
from storefront.infrastructure.navigation import InMemoryNavigation
from storefront.infrastructure.observability import setup_logging
from storefront.infrastructure.sql_storage import SqlSlotStorage
from storefront.services.app_context import build_context

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    storage = SqlSlotStorage(settings.storage_url)
    app.state.context = build_context(
        storage,
        InMemoryNavigation(),
        admin_passcode=settings.admin_passcode,
        seed_catalog=settings.seed_catalog,
    )
    logger.info("Storefront API started")
    yield
    app.state.context.router.close()
    storage.dispose()
    logger.info("Storefront API shutting down")


app = FastAPI(title="Storefront Admin API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(navigation.router)
app.include_router(session.router)
app.include_router(products.router)
app.include_router(reviews.router)
app.include_router(brand.router)
app.include_router(cart.router)

register_error_handlers(app)
