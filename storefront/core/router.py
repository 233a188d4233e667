"""Router: maps navigation tokens to view states and reacts to navigation events.

Invariants:
    - ""              -> HOME
    - "product/<id>"  -> PRODUCT_DETAIL(<id>), id is the rest of the token verbatim
    - "admin"         -> ADMIN if authorized, else ADMIN_LOGIN_PROMPT
    - anything else   -> HOME (unrecognized route fallback)
    - State is recomputed synchronously on every navigation event
    - The router navigates on its own only when asked to by an operation
      (create product, login, logout)

Design Decisions:
    - resolve_route is pure; Router is the thin reactive shell around it
    - Tokens are normalized by stripping a leading "#" and "/" so hash-style
      sources ("#/admin") and bare paths resolve identically
"""

import logging
from dataclasses import dataclass

from storefront.core.domain_types import (
    ADMIN_ROUTE,
    HOME_ROUTE,
    PRODUCT_ROUTE_PREFIX,
    View,
)
from storefront.core.session_state import SessionState
from storefront.core.storage_protocols import NavigationSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteState:
    """Resolved view. product_id is set only for PRODUCT_DETAIL."""
    view: View
    product_id: str | None = None

    def to_dict(self) -> dict:
        return {"view": self.view.value, "product_id": self.product_id}


HOME = RouteState(View.HOME)


def normalize_token(token: str) -> str:
    return token.lstrip("#").lstrip("/")


def resolve_route(token: str, authorized: bool) -> RouteState:
    """Transition function: token plus session flag -> view state. Pure."""
    token = normalize_token(token)
    if token == HOME_ROUTE:
        return HOME
    if token.startswith(PRODUCT_ROUTE_PREFIX):
        return RouteState(View.PRODUCT_DETAIL, token[len(PRODUCT_ROUTE_PREFIX):])
    if token == ADMIN_ROUTE:
        return RouteState(View.ADMIN if authorized else View.ADMIN_LOGIN_PROMPT)
    return HOME


def product_token(product_id: str) -> str:
    return f"{PRODUCT_ROUTE_PREFIX}{product_id}"


class Router:
    """Reactive view state driven by a NavigationSource."""

    def __init__(self, source: NavigationSource, session: SessionState):
        self._source = source
        self._session = session
        self._token = source.current_token()
        self._state = resolve_route(self._token, session.authorized)
        self._unsubscribe = source.subscribe(self.handle_navigation)

    @property
    def state(self) -> RouteState:
        return self._state

    @property
    def token(self) -> str:
        return self._token

    def handle_navigation(self, token: str) -> RouteState:
        """Navigation event: remember the token and recompute the view."""
        self._token = token
        return self.refresh()

    def refresh(self) -> RouteState:
        """Recompute from the current token (after a session change)."""
        previous = self._state
        self._state = resolve_route(self._token, self._session.authorized)
        if self._state != previous:
            logger.info(
                f"View changed: {previous.view.value} -> {self._state.view.value}",
                extra={"view": self._state.view.value},
            )
        return self._state

    def navigate(self, token: str) -> RouteState:
        """Push a token to the source; the source event drives the transition."""
        self._source.push(token)
        return self._state

    def close(self) -> None:
        self._unsubscribe()
