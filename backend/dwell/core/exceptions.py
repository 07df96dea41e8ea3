"""Custom exceptions for Dwell applications."""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Structured failure kinds reported by the messaging boundary."""

    BLOCKED = "BLOCKED"
    RATE_LIMITED = "RATE_LIMITED"
    VALIDATION = "VALIDATION"
    SUSPENDED = "SUSPENDED"
    UNKNOWN = "UNKNOWN"


class DwellException(Exception):
    """Base exception for Dwell applications."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        error_code: str = "DWELL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.details.setdefault("kind", self.kind.value)
        super().__init__(self.message)


class DatabaseError(DwellException):
    """Database-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            status_code=500,
            details=details,
        )


class AuthenticationError(DwellException):
    """Authentication-related errors."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="AUTHENTICATION_ERROR",
            status_code=401,
            details=details,
        )


class AuthorizationError(DwellException):
    """Authorization-related errors."""

    def __init__(
        self, message: str = "Access denied", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="AUTHORIZATION_ERROR",
            status_code=403,
            details=details,
        )


class ValidationError(DwellException):
    """Input validation errors."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self, message: str, field: str = None, details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=422,
            details=error_details,
        )


class NotFoundError(DwellException):
    """Resource not found errors."""

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        if identifier is not None:
            message += f": {identifier}"

        error_details = details or {}
        error_details["resource"] = resource
        if identifier is not None:
            error_details["identifier"] = str(identifier)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=error_details,
        )


class MessagingBlockedError(DwellException):
    """A block relation exists between sender and recipient."""

    kind = ErrorKind.BLOCKED

    def __init__(
        self,
        message: str = "Messaging is blocked between these users",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="MESSAGING_BLOCKED",
            status_code=403,
            details=details,
        )


class RateLimitError(DwellException):
    """Rate limiting errors."""

    kind = ErrorKind.RATE_LIMITED

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="RATE_LIMIT_EXCEEDED",
            status_code=429,
            details=details,
        )


class AccountSuspendedError(DwellException):
    """The acting account is suspended or inactive."""

    kind = ErrorKind.SUSPENDED

    def __init__(
        self,
        message: str = "Your account has been suspended",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="ACCOUNT_SUSPENDED",
            status_code=403,
            details=details,
        )


class NotificationRejectedError(DwellException):
    """The notification dispatcher refused a malformed or unroutable call."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="NOTIFICATION_REJECTED",
            status_code=400,
            details=details,
        )


class ExternalServiceError(DwellException):
    """External service errors (email provider, etc.)."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        error_details["service"] = service

        super().__init__(
            message=f"{service}: {message}",
            error_code="EXTERNAL_SERVICE_ERROR",
            status_code=502,
            details=error_details,
        )
