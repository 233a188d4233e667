"""Core Layer: entities, persistence binding, repositories and the navigation state machine.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or models/
    - Storage and navigation are reached only through the Protocols in storage_protocols.py

Design Decisions:
    - Functional core separated from imperative shell; storage is a port, not a global
"""
