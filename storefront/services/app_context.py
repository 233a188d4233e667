"""Application Context: explicit wiring of repositories, router and session gate.

Invariants:
    - One AppContext per process; passed to every consumer, never imported as a global
    - All four repositories share one StoragePort; each owns its own slot
    - SessionState is shared by reference between Router, SessionGate and the guards

Design Decisions:
    - build_context takes its ports as arguments: tests pass InMemoryStorage and
      InMemoryNavigation, main.py passes SqlSlotStorage
"""

import logging
from dataclasses import dataclass

from storefront.core.brand import BrandConfigStore
from storefront.core.cart import CartRepository
from storefront.core.catalog import CatalogRepository
from storefront.core.reviews import ReviewRepository
from storefront.core.router import Router
from storefront.core.seed_data import seed_products
from storefront.core.session_gate import SessionGate
from storefront.core.session_state import SessionState
from storefront.core.storage_protocols import NavigationSource, StoragePort

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    storage: StoragePort
    navigation: NavigationSource
    session: SessionState
    router: Router
    gate: SessionGate
    catalog: CatalogRepository
    reviews: ReviewRepository
    brand: BrandConfigStore
    cart: CartRepository


def build_context(
    storage: StoragePort,
    navigation: NavigationSource,
    admin_passcode: str,
    seed_catalog: bool = False,
) -> AppContext:
    """Wire the core against the given ports."""
    session = SessionState()
    router = Router(navigation, session)
    gate = SessionGate(session, router, admin_passcode)
    catalog = CatalogRepository(
        storage, default=seed_products if seed_catalog else list,
    )
    logger.info(
        f"Context ready: {len(catalog.list())} products",
        extra={"view": router.state.view.value},
    )
    return AppContext(
        storage=storage,
        navigation=navigation,
        session=session,
        router=router,
        gate=gate,
        catalog=catalog,
        reviews=ReviewRepository(storage),
        brand=BrandConfigStore(storage),
        cart=CartRepository(storage),
    )
