"""Admin Guard Enforcement: tests for pure admin and confirmation checks."""

from storefront.core.enforce_admin import (
    check_admin_session,
    check_delete_confirmed,
    validate_admin_delete,
)
from storefront.core.session_state import SessionState


def test_admin_check_blocks_without_session():
    error = check_admin_session(SessionState(), "create products")
    assert error is not None
    assert error["error_code"] == "ADMIN_REQUIRED"
    assert error["operation"] == "create products"


def test_admin_check_passes_with_session():
    assert check_admin_session(SessionState(authorized=True), "create products") is None


def test_confirmation_check():
    assert check_delete_confirmed(False, "delete")["error_code"] == "CONFIRMATION_REQUIRED"
    assert check_delete_confirmed(True, "delete") is None


def test_delete_chain_reports_admin_first():
    error = validate_admin_delete(SessionState(), confirmed=False, operation="delete")
    assert error["error_code"] == "ADMIN_REQUIRED"


def test_delete_chain_reports_missing_confirmation_for_admin():
    error = validate_admin_delete(SessionState(authorized=True), False, "delete")
    assert error["error_code"] == "CONFIRMATION_REQUIRED"


def test_delete_chain_passes():
    assert validate_admin_delete(SessionState(authorized=True), True, "delete") is None
