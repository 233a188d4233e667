"""In-Memory Navigation: NavigationSource that emits tokens synchronously.

Invariants:
    - push() updates the current token, then notifies every subscriber in order
    - Pushing the current token again still emits (listeners decide what changed)
    - Unsubscribe callables are idempotent
"""

from storefront.core.storage_protocols import NavigationListener, Unsubscribe


class InMemoryNavigation:
    """Token source standing in for a browser location hash."""

    def __init__(self, initial_token: str = ""):
        self._token = initial_token
        self._listeners: list[NavigationListener] = []

    def current_token(self) -> str:
        return self._token

    def push(self, token: str) -> None:
        self._token = token
        for listener in list(self._listeners):
            listener(token)

    def subscribe(self, listener: NavigationListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
