"""ORM Models: SQLAlchemy declarative models for durable storage.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are stored as JSON text inside slots, never as their own tables
"""

from storefront.models.slot import Slot  # noqa: F401
