"""Dashboard counters derived from the current event and account collections.

The snapshot is recomputed on demand and never stored, so it cannot drift
from the repositories.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from event_registry.domain.models import Event, UserProfile
from event_registry.domain.value_objects import EventStatus, RequestStatus


@dataclass(frozen=True)
class Statistics:
    total_events: int = 0
    pending_events: int = 0
    approved_events: int = 0
    rejected_events: int = 0
    total_users: int = 0
    pending_users: int = 0


def compute_statistics(
    events: Iterable[Event], users: Iterable[UserProfile]
) -> Statistics:
    events = list(events)
    users = list(users)
    return Statistics(
        total_events=len(events),
        pending_events=sum(1 for e in events if e.status is EventStatus.PENDING),
        approved_events=sum(1 for e in events if e.status is EventStatus.APPROVED),
        rejected_events=sum(1 for e in events if e.status is EventStatus.REJECTED),
        total_users=len(users),
        pending_users=sum(1 for u in users if u.status_pedido is RequestStatus.PENDING),
    )


def partition_by_status(events: Iterable[Event]) -> dict[EventStatus, list[Event]]:
    """Group events by status, keeping their incoming order within each group."""
    groups: dict[EventStatus, list[Event]] = {status: [] for status in EventStatus}
    for event in events:
        groups[event.status].append(event)
    return groups
