"""Tests for core exception classes."""

from dwell.core.exceptions import (
    AccountSuspendedError,
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
    DwellException,
    ErrorKind,
    ExternalServiceError,
    MessagingBlockedError,
    NotFoundError,
    NotificationRejectedError,
    RateLimitError,
    ValidationError,
)


def test_dwell_exception_basic():
    """Test basic DwellException functionality."""
    exc = DwellException("Test message")

    assert exc.message == "Test message"
    assert exc.error_code == "DWELL_ERROR"
    assert exc.status_code == 500
    assert exc.details == {"kind": "UNKNOWN"}
    assert str(exc) == "Test message"


def test_dwell_exception_keeps_explicit_kind():
    exc = DwellException("Custom", details={"kind": "BLOCKED", "extra": 1})

    assert exc.details == {"kind": "BLOCKED", "extra": 1}


def test_messaging_blocked_error():
    exc = MessagingBlockedError()

    assert exc.status_code == 403
    assert exc.error_code == "MESSAGING_BLOCKED"
    assert exc.details["kind"] == ErrorKind.BLOCKED.value
    assert "Messaging is blocked" in exc.message


def test_rate_limit_error():
    exc = RateLimitError("Rate limit exceeded: daily message limit reached")

    assert exc.status_code == 429
    assert exc.details["kind"] == "RATE_LIMITED"


def test_account_suspended_error():
    exc = AccountSuspendedError()

    assert exc.status_code == 403
    assert exc.details["kind"] == "SUSPENDED"


def test_validation_error_with_field():
    exc = ValidationError("Invalid body", field="body")

    assert exc.status_code == 422
    assert exc.details == {"field": "body", "kind": "VALIDATION"}


def test_not_found_error():
    exc = NotFoundError("Listing", 42)

    assert exc.message == "Listing not found: 42"
    assert exc.status_code == 404
    assert exc.details["resource"] == "Listing"
    assert exc.details["identifier"] == "42"


def test_notification_rejected_error():
    exc = NotificationRejectedError("Could not send notification - owner email not found")

    assert exc.status_code == 400
    assert exc.details["kind"] == "VALIDATION"


def test_external_service_error():
    exc = ExternalServiceError("email", "timeout")

    assert exc.message == "email: timeout"
    assert exc.status_code == 502
    assert exc.details["service"] == "email"


def test_authentication_error_default_message():
    exc = AuthenticationError()

    assert exc.message == "Authentication failed"
    assert exc.status_code == 401


def test_database_error():
    error = DatabaseError("Failed to store message")

    assert error.status_code == 500
    assert error.error_code == "DATABASE_ERROR"


def test_error_hierarchy():
    assert {cls.__name__ for cls in DwellException.__subclasses__()} == {
        "DatabaseError",
        "AuthenticationError",
        "AuthorizationError",
        "ValidationError",
        "NotFoundError",
        "MessagingBlockedError",
        "RateLimitError",
        "AccountSuspendedError",
        "NotificationRejectedError",
        "ExternalServiceError",
    }
    assert issubclass(AuthorizationError, DwellException)
