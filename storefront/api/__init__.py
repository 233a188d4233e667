"""API Layer: FastAPI routes and error handlers for the local admin UI.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes are thin: they resolve the AppContext and delegate to services/
"""
