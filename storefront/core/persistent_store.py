"""Persistent Store: binds one typed in-memory value to one durable slot.

Invariants:
    - Construction never raises: absent, corrupt or unreadable slots yield the default
    - Every set() writes through to the slot
    - A failed write is logged and dropped; the in-memory value stays authoritative
    - No cross-instance or cross-process synchronization: concurrent writers to the
      same slot overwrite each other (last write wins, undetected)

Design Decisions:
    - pydantic TypeAdapter validates on load and serializes on write: one type, both directions
    - default is a zero-arg factory so mutable defaults are never shared between stores
"""

import logging
from typing import Callable, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from storefront.core.errors import StorageError
from storefront.core.storage_protocols import StoragePort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistentStore(Generic[T]):
    """Typed value mirrored to a named slot of a StoragePort."""

    def __init__(
        self,
        storage: StoragePort,
        key: str,
        adapter: TypeAdapter[T],
        default: Callable[[], T],
    ):
        self._storage = storage
        self._key = key
        self._adapter = adapter
        self._value = self._load(default)

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and write it to the slot (best effort)."""
        self._value = value
        self._flush()

    def update(self, fn: Callable[[T], T]) -> T:
        """Apply fn to the current value, store and return the result."""
        self.set(fn(self._value))
        return self._value

    def _load(self, default: Callable[[], T]) -> T:
        try:
            raw = self._storage.get(self._key)
        except StorageError as e:
            logger.warning(
                f"Slot unreadable, using default: {e.message}",
                extra={"slot": self._key, "error_code": e.code},
            )
            return default()
        if raw is None:
            return default()
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Slot content invalid, using default ({e.error_count()} errors)",
                extra={"slot": self._key},
            )
            return default()

    def _flush(self) -> None:
        payload = self._adapter.dump_json(self._value, by_alias=True).decode("utf-8")
        try:
            self._storage.set(self._key, payload)
        except StorageError as e:
            logger.warning(
                f"Slot write dropped, keeping in-memory value: {e.message}",
                extra={"slot": self._key, "error_code": e.code},
            )
