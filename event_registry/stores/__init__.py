from event_registry.stores.interfaces import (
    EventStore,
    ObjectStore,
    ScheduleStore,
    SessionProvider,
    UserStore,
)

__all__ = [
    "EventStore",
    "ObjectStore",
    "ScheduleStore",
    "SessionProvider",
    "UserStore",
]
