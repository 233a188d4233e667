"""Session State: the process-local admin authorization flag.

Invariants:
    - authorized starts False on every process start
    - Never persisted to any slot
    - Mutated only by SessionGate; read by Router and the enforce_admin guards

Design Decisions:
    - Plain dataclass shared by reference: Router and SessionGate both hold it
      without depending on each other at construction
"""

from dataclasses import dataclass


@dataclass
class SessionState:
    """Per-process session flag. Pure dataclass, no IO."""

    authorized: bool = False
