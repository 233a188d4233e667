"""Slot ORM: one row per durable slot, holding serialized JSON text.

Invariants:
    - key is the primary key; one row per slot name
    - value is opaque JSON text; validation happens in PersistentStore on load
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class Slot(Base):
    """Named durable key-value slot."""
    __tablename__ = "slots"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
