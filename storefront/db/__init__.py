"""Database Infrastructure: SQLAlchemy declarative Base for the durable slot table.

Invariants:
    - Synchronous engine; every slot write completes before the call returns
"""
