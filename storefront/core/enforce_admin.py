"""Admin Guard Enforcement: pure checks run before every admin-only mutation.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - validate_admin_delete chains checks: first error wins

Design Decisions:
    - Return dicts (not exceptions): the same shape serves the login result and the
      service layer, which raises the typed error from core/errors.py
"""

from storefront.core.session_state import SessionState


def check_admin_session(state: SessionState, operation: str) -> dict | None:
    """Mutations on products, reviews import and brand require an admin session."""
    if not state.authorized:
        return {
            "status": "error",
            "error_code": "ADMIN_REQUIRED",
            "message": f"Sign in as admin to {operation}.",
            "operation": operation,
        }
    return None


def check_delete_confirmed(confirmed: bool, operation: str) -> dict | None:
    """Deletes are irreversible: the caller must pass an explicit confirmation."""
    if not confirmed:
        return {
            "status": "error",
            "error_code": "CONFIRMATION_REQUIRED",
            "message": f"Confirm before you {operation}. This cannot be undone.",
            "operation": operation,
        }
    return None


def validate_admin_delete(
    state: SessionState, confirmed: bool, operation: str,
) -> dict | None:
    """Chain admin and confirmation checks. Returns first error or None."""
    return (
        check_admin_session(state, operation)
        or check_delete_confirmed(confirmed, operation)
    )
