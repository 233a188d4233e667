"""Error Hierarchy: typed, categorized exceptions for all storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; StorageError is infrastructure (503)
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: the FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - StorageError never crosses PersistentStore: reads fall back, writes are dropped
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    slot: str | None = None
    view: str | None = None
    user_message: str | None = None
    redirect_to: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "slot": self.context.slot,
                    "view": self.context.view,
                    "redirect_to": self.context.redirect_to,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(StorefrontError):
    """Passcode did not match."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PASSCODE", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AdminRequiredError(StorefrontError):
    """Mutation attempted without an authorized admin session."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{operation}' requires an admin session.",
            "ADMIN_REQUIRED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.operation = operation


class ConfirmationRequiredError(StorefrontError):
    """Irreversible operation attempted without explicit confirmation."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{operation}' is irreversible and must be confirmed.",
            "CONFIRMATION_REQUIRED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 428,
        )
        self.operation = operation


class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(StorefrontError):
    """Durable slot could not be read or written."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
