"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    PRIVILEGE_REQUIRED = "PRIVILEGE_REQUIRED"
    FORBIDDEN = "FORBIDDEN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised for malformed or missing input. Carries only the first violation."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class AuthenticationRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REQUIRED,
            message="Authentication required",
        )


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid email or password",
        )


class PrivilegeRequiredError(DomainError):
    """Raised when an authenticated caller lacks the admin flag."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PRIVILEGE_REQUIRED,
            message="Admin privileges required",
        )


class BookingForbiddenError(DomainError):
    """Raised when a caller tries to cancel a booking they neither own nor administer."""

    def __init__(self, booking_id: int) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="You don't have permission to cancel this booking",
        )
        self.booking_id = booking_id


class UserNotFoundError(DomainError):
    def __init__(self, user_id: int) -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found")
        self.user_id = user_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int | str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    def __init__(self, booking_id: int | str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        self.booking_id = booking_id


class DuplicateEmailError(DomainError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EMAIL,
            message="User with this email already exists",
        )


class DuplicateBookingError(DomainError):
    """Raised when a user already holds a live booking for the event."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="You have already booked this event",
        )
        self.event_id = event_id
