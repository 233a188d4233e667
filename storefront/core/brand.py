"""Brand Config Store: the single mutable brand record in the `brand` slot.

Invariants:
    - Exactly one record; no ids, no list operations
    - set() merges: fields not given keep their prior values; colors merge per slot
    - logo_lines is stored as given, including slot names absent from colors
    - Unknown slot names are dropped only when resolving for render
"""

import logging
from typing import Callable

from pydantic import TypeAdapter

from storefront.core.domain_types import ColorSlot, SlotKey
from storefront.core.entities import BrandConfig
from storefront.core.persistent_store import PersistentStore
from storefront.core.seed_data import default_brand
from storefront.core.storage_protocols import StoragePort

logger = logging.getLogger(__name__)

_BRAND = TypeAdapter(BrandConfig)


def parse_logo_lines(text: str) -> list[str]:
    """UI helper: comma-separated slot names, trimmed, empties dropped."""
    return [part.strip() for part in text.split(",") if part.strip()]


def resolve_logo_lines(config: BrandConfig) -> list[tuple[str, str]]:
    """(slot, color) pairs in render order, skipping unknown slot names."""
    palette = {slot.value: color for slot, color in config.colors.items()}
    return [(line, palette[line]) for line in config.logo_lines if line in palette]


class BrandConfigStore:
    """Brand name, palette and logo line order."""

    def __init__(
        self,
        storage: StoragePort,
        default: Callable[[], BrandConfig] = default_brand,
    ):
        self._store = PersistentStore(storage, SlotKey.BRAND.value, _BRAND, default)

    def get(self) -> BrandConfig:
        return self._store.value

    def set(
        self,
        name: str | None = None,
        colors: dict[str, str] | None = None,
        logo_lines: list[str] | None = None,
    ) -> BrandConfig:
        """Merge the given fields into the current record."""
        current = self._store.value
        changes: dict = {}
        if name is not None:
            changes["name"] = name
        if colors is not None:
            changes["colors"] = {
                **current.colors, **{ColorSlot(k): v for k, v in colors.items()},
            }
        if logo_lines is not None:
            changes["logo_lines"] = list(logo_lines)
        if not changes:
            return current
        updated = current.model_copy(update=changes)
        self._store.set(updated)
        logger.info(f"Brand updated: {sorted(changes)}")
        return updated
