"""Pydantic Schemas: request validation for API endpoints.

Invariants:
    - Schemas validate at the HTTP boundary only; stored entities live in core/entities.py
"""
