"""Cache keys for public reads and their invalidation.

Only data that anyone may see is cached: the public listing, approved event
details and the schedules of approved events.
"""

from datetime import date

from django.core.cache import cache
from django.utils import timezone

from event_registry.container import registry_setting


def public_list_key(day: date | None = None) -> str:
    day = day or timezone.localdate()
    return f"events:public:{day.isoformat()}"


def event_key(event_id) -> str:
    return f"events:{event_id}"


def schedule_key(event_id) -> str:
    return f"events:{event_id}:schedule"


def timeout() -> int:
    return registry_setting("CACHE_TIMEOUT")


def invalidate_event(event_id) -> None:
    cache.delete_many([public_list_key(), event_key(event_id), schedule_key(event_id)])


def invalidate_schedule(event_id) -> None:
    cache.delete(schedule_key(event_id))
