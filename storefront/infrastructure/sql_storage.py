"""SQL Slot Storage: StoragePort on a synchronous SQLAlchemy engine.

Invariants:
    - Every set() commits before returning (durable once the call completes)
    - Every session rolls back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - The slots table is created on construction if missing

Design Decisions:
    - Synchronous engine: the core never awaits, writes happen inside one event
    - session.merge() for upsert: portable across SQLite and PostgreSQL
    - pool_pre_ping for stale connection detection
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.core.errors import StorageError
from storefront.db.base import Base
from storefront.models.slot import Slot

logger = logging.getLogger(__name__)


class SqlSlotStorage:
    """Durable slots in a `slots` table."""

    def __init__(self, storage_url: str):
        self.engine = create_engine(storage_url, pool_pre_ping=True)
        self._session_factory = sessionmaker(self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            # Table creation failure surfaces later as StorageError on read/write.
            logger.error(f"Slot table setup failed: {e}")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except OperationalError as e:
            session.rollback()
            logger.error(f"Storage operational error: {e}")
            raise StorageError("Connection or operational error", "execute")
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("Storage operation failed", "unknown")
        finally:
            session.close()

    def get(self, key: str) -> str | None:
        with self.session() as db:
            slot = db.get(Slot, key)
            return slot.value if slot else None

    def set(self, key: str, value: str) -> None:
        with self.session() as db:
            db.merge(Slot(key=key, value=value))
            db.commit()

    def health_check(self) -> bool:
        """Check storage connectivity (for readiness probes)."""
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.error(f"Storage health check failed: {e.message}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
