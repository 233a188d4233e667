"""Services Layer: application context wiring and admin-gated catalog operations.

Invariants:
    - Every admin mutation passes the enforce_admin guards before touching a repository
"""
