"""Session Gate: passcode login and logout over the session flag.

Invariants:
    - A correct passcode sets authorized=True and navigates to admin
    - A wrong passcode leaves state untouched and returns an error result (never raises)
    - logout() sets authorized=False and navigates home
    - The passcode check is a placeholder, not authentication

Design Decisions:
    - hmac.compare_digest for the comparison: constant time regardless of input
    - Result dict on failure, matching the enforce_admin guard shape
"""

import hmac
import logging

from storefront.core.domain_types import ADMIN_ROUTE, HOME_ROUTE
from storefront.core.router import Router
from storefront.core.session_state import SessionState

logger = logging.getLogger(__name__)

INVALID_PASSCODE_MESSAGE = "Incorrect passcode."


class SessionGate:
    """Login/logout transitions for the admin flag."""

    def __init__(self, session: SessionState, router: Router, expected_passcode: str):
        self._session = session
        self._router = router
        self._expected = expected_passcode

    @property
    def authorized(self) -> bool:
        return self._session.authorized

    def attempt_login(self, passcode: str) -> dict | None:
        """Returns None on success, an error dict on mismatch."""
        if not hmac.compare_digest(passcode.encode("utf-8"), self._expected.encode("utf-8")):
            logger.warning("Admin login rejected", extra={"error_code": "INVALID_PASSCODE"})
            return {
                "status": "error",
                "error_code": "INVALID_PASSCODE",
                "message": INVALID_PASSCODE_MESSAGE,
            }
        self._session.authorized = True
        logger.info("Admin session opened")
        self._navigate_and_refresh(ADMIN_ROUTE)
        return None

    def logout(self) -> None:
        self._session.authorized = False
        logger.info("Admin session closed")
        self._navigate_and_refresh(HOME_ROUTE)

    def _navigate_and_refresh(self, token: str) -> None:
        # A source may skip the event when the token is unchanged; refresh covers that.
        self._router.navigate(token)
        self._router.refresh()
