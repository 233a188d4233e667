"""In-Memory Storage: dict-backed StoragePort for tests and ephemeral runs.

Invariants:
    - available=False makes every get/set raise StorageError (simulated outage)
    - Values are stored as the exact strings written
"""

from storefront.core.errors import StorageError


class InMemoryStorage:
    """StoragePort over a plain dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(initial or {})
        self.available = True
        self.writes = 0

    def get(self, key: str) -> str | None:
        if not self.available:
            raise StorageError("backend unavailable", "read")
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise StorageError("backend unavailable", "write")
        self.slots[key] = value
        self.writes += 1

    def health_check(self) -> bool:
        return self.available
