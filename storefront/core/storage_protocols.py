"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Durable storage and navigation are reached only through these Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - StoragePort speaks str: serialization belongs to PersistentStore, not the backend
    - Synchronous methods: every mutation completes within one event, nothing is awaited
"""

from typing import Callable, Protocol

NavigationListener = Callable[[str], None]
Unsubscribe = Callable[[], None]


class StoragePort(Protocol):
    """Durable key-value slots. Implementations raise StorageError on backend failure."""
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class NavigationSource(Protocol):
    """Emits navigation tokens (route paths) to subscribers."""
    def current_token(self) -> str: ...
    def push(self, token: str) -> None: ...
    def subscribe(self, listener: NavigationListener) -> Unsubscribe: ...
