from event_registry.services.attachment_service import AttachmentService
from event_registry.services.event_service import EventService
from event_registry.services.schedule_service import ScheduleService
from event_registry.services.session import SessionContext
from event_registry.services.user_service import UserService

__all__ = [
    "AttachmentService",
    "EventService",
    "ScheduleService",
    "SessionContext",
    "UserService",
]
