from event_registry.domain.models import (
    Event,
    EventDraft,
    Identity,
    ScheduleEntry,
    ScheduleEntryDraft,
    StoredFile,
    UploadedFile,
    UserProfile,
)
from event_registry.domain.value_objects import (
    EventId,
    EventStatus,
    RequestStatus,
    Role,
    ScheduleEntryId,
    StatusBadge,
    UserId,
)

__all__ = [
    "Event",
    "EventDraft",
    "Identity",
    "ScheduleEntry",
    "ScheduleEntryDraft",
    "StoredFile",
    "UploadedFile",
    "UserProfile",
    "EventId",
    "EventStatus",
    "RequestStatus",
    "Role",
    "ScheduleEntryId",
    "StatusBadge",
    "UserId",
]
