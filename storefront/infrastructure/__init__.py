"""Infrastructure Layer: storage backends, navigation sources and logging setup.

Invariants:
    - Backend failures are mapped to core StorageError before they reach the core
"""
