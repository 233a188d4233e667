"""Review Repository: single add and bulk text ingest over the `reviews` slot.

Invariants:
    - Every stored review gets a fresh id and today's date at creation
    - An empty author becomes "Anonymous"
    - Bulk ingest never rejects a line: each non-empty line becomes exactly one review
    - New reviews are prepended; a bulk batch keeps its own line order ahead of old reviews

Design Decisions:
    - Parsing is pure (parse_review_line / parse_review_text) and tested without storage
    - Lines split on the FIRST pipe only: extra pipes stay in the body text
    - today and id_factory injectable so dates and ids are deterministic in tests
"""

import datetime
import logging
import re
from typing import Callable

from pydantic import TypeAdapter

from storefront.core.domain_types import ANONYMOUS_AUTHOR, SlotKey
from storefront.core.entities import Review, generate_review_id
from storefront.core.persistent_store import PersistentStore
from storefront.core.storage_protocols import StoragePort

logger = logging.getLogger(__name__)

_REVIEWS = TypeAdapter(list[Review])
_LINE_BREAKS = re.compile(r"(?:\r?\n)+")
_FIELD_DELIMITER = "|"


def split_review_lines(text: str) -> list[str]:
    """Split on runs of newlines, trim, drop empty lines."""
    lines = (line.strip() for line in _LINE_BREAKS.split(text))
    return [line for line in lines if line]


def parse_review_line(line: str) -> tuple[str, str]:
    """Return (author, body) for one `author | body` record.

    No delimiter: the whole line is both author and body.
    Empty author: "Anonymous".
    """
    fields = [part.strip() for part in line.split(_FIELD_DELIMITER, 1)]
    author = fields[0]
    body = fields[1] if len(fields) > 1 else fields[0]
    return author or ANONYMOUS_AUTHOR, body


def parse_review_text(text: str) -> list[tuple[str, str]]:
    """Parse a bulk import block into (author, body) pairs, in line order."""
    return [parse_review_line(line) for line in split_review_lines(text)]


class ReviewRepository:
    """Ordered Review collection bound to the reviews slot."""

    def __init__(
        self,
        storage: StoragePort,
        default: Callable[[], list[Review]] = list,
        today: Callable[[], datetime.date] = datetime.date.today,
        id_factory: Callable[[], str] = generate_review_id,
    ):
        self._store = PersistentStore(storage, SlotKey.REVIEWS.value, _REVIEWS, default)
        self._today = today
        self._id_factory = id_factory

    def add(self, body: str, author: str | None = None) -> Review:
        """Stamp id and date on a new review and prepend it."""
        review = self._new_review(author, body)
        self._store.set([review, *self._store.value])
        logger.info("Review added", extra={"review_id": review.id})
        return review

    def bulk_ingest(self, text: str) -> list[Review]:
        """Parse `author | body` lines and prepend them as one batch."""
        batch = [self._new_review(author, body) for author, body in parse_review_text(text)]
        if not batch:
            return []
        self._store.set([*batch, *self._store.value])
        logger.info(f"Bulk review import: {len(batch)} reviews")
        return batch

    def _new_review(self, author: str | None, body: str) -> Review:
        author = (author or "").strip()
        return Review(
            id=self._id_factory(),
            author=author or ANONYMOUS_AUTHOR,
            body=body,
            date=self._today(),
        )

    # Kept last: binding `list` earlier would shadow the builtin in later annotations.
    def list(self) -> list[Review]:
        return self._store.value
