"""Domain error codes for the event registry."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    SCHEDULE_ENTRY_NOT_FOUND = "SCHEDULE_ENTRY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_SCHEDULE_ENTRY_ID = "INVALID_SCHEDULE_ENTRY_ID"
    REPOSITORY_FAILURE = "REPOSITORY_FAILURE"
    UPLOAD_FAILED = "UPLOAD_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input breaks a field, document or file rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class TransitionError(DomainError):
    """Raised when a status change is not allowed for the actor."""

    def __init__(self, current, target) -> None:
        current_label = current.value if current is not None else "new"
        super().__init__(
            code=ErrorCode.INVALID_TRANSITION,
            message=f"Cannot move event from {current_label} to {target.value}",
        )
        self.current = current
        self.target = target


class PermissionDeniedError(DomainError):
    """Raised when the actor lacks the role or ownership for an operation."""

    def __init__(self, message: str = "Operation not permitted") -> None:
        super().__init__(code=ErrorCode.PERMISSION_DENIED, message=message)


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs an identity and none is present."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHENTICATED,
            message="Authentication required",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class ScheduleEntryNotFoundError(DomainError):
    """Raised when a schedule entry is not found."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(
            code=ErrorCode.SCHEDULE_ENTRY_NOT_FOUND,
            message="Schedule entry not found",
        )
        self.entry_id = entry_id


class UserNotFoundError(DomainError):
    """Raised when an account profile is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidScheduleEntryIdError(DomainError):
    """Raised when a schedule entry ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SCHEDULE_ENTRY_ID,
            message="Invalid schedule entry ID format",
        )


class RepositoryError(DomainError):
    """Raised when the backing store rejects a read or write."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.REPOSITORY_FAILURE,
            message="Storage is unavailable, try again later",
        )
        self.operation = operation


class UploadError(DomainError):
    """Raised when a file upload fails; the remaining batch is abandoned."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.UPLOAD_FAILED,
            message=f"Upload failed for {field}",
        )
        self.field = field
