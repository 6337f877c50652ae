"""Schedule service - timed activities within an event."""

from collections.abc import Iterable
from datetime import date

import structlog

from event_registry.domain import (
    EventId,
    Identity,
    ScheduleEntry,
    ScheduleEntryDraft,
    ScheduleEntryId,
)
from event_registry.domain.errors import (
    InvalidScheduleEntryIdError,
    ScheduleEntryNotFoundError,
    ValidationError,
)
from event_registry.domain.validation import validate_schedule_entry
from event_registry.services.event_service import EventService
from event_registry.stores.interfaces import ScheduleStore

logger = structlog.get_logger(__name__)


def parse_entry_id(entry_id: str | ScheduleEntryId) -> ScheduleEntryId:
    if isinstance(entry_id, ScheduleEntryId):
        return entry_id
    try:
        return ScheduleEntryId.from_string(str(entry_id))
    except ValueError:
        raise InvalidScheduleEntryIdError() from None


def group_by_date(entries: Iterable[ScheduleEntry]) -> dict[date, list[ScheduleEntry]]:
    """Group entries by day, days and entries in chronological order."""
    groups: dict[date, list[ScheduleEntry]] = {}
    for entry in sorted(entries, key=lambda e: e.sort_key):
        groups.setdefault(entry.data, []).append(entry)
    return groups


class ScheduleService:
    """Service for schedule entries. Only the owner of the event may write."""

    def __init__(self, store: ScheduleStore, events: EventService) -> None:
        self._store = store
        self._events = events

    def _load(self, entry_id: str | ScheduleEntryId) -> ScheduleEntry:
        parsed = parse_entry_id(entry_id)
        entry = self._store.get_entry(parsed)
        if entry is None:
            raise ScheduleEntryNotFoundError(str(parsed))
        return entry

    def _validate(
        self, entry: ScheduleEntryDraft, event_dates: tuple[date, ...]
    ) -> None:
        validate_schedule_entry(entry)
        if entry.data not in event_dates:
            raise ValidationError("data", "Date must be one of the event's dates")

    def list_entries(
        self, event_id: str | EventId, actor: Identity | None = None
    ) -> list[ScheduleEntry]:
        """Return the event's entries sorted by date and start time.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is hidden from the actor.
        """
        event = self._events.get_event(event_id, actor)
        return sorted(self._store.list_entries(event.id), key=lambda e: e.sort_key)

    def create(
        self, actor: Identity | None, event_id: str | EventId, entry: ScheduleEntryDraft
    ) -> ScheduleEntry:
        """Add an activity to the owner's event.

        Raises:
            PermissionDeniedError: If the actor does not own the event.
            ValidationError: If a mandatory field is empty or the date is not
                one of the event dates.
        """
        event = self._events.get_owned_event(actor, event_id)
        self._validate(entry, event.datas)
        created = self._store.insert_entry(event.id, entry)
        logger.info(
            "schedule_entry_created", event_id=str(event.id), entry_id=str(created.id)
        )
        return created

    def update(
        self,
        actor: Identity | None,
        entry_id: str | ScheduleEntryId,
        entry: ScheduleEntryDraft,
    ) -> ScheduleEntry:
        current = self._load(entry_id)
        event = self._events.get_owned_event(actor, current.evento_id)
        self._validate(entry, event.datas)
        updated = self._store.update_entry(current.id, entry)
        if updated is None:
            raise ScheduleEntryNotFoundError(str(current.id))
        logger.info(
            "schedule_entry_updated", event_id=str(event.id), entry_id=str(current.id)
        )
        return updated

    def delete(self, actor: Identity | None, entry_id: str | ScheduleEntryId) -> None:
        current = self._load(entry_id)
        self._events.get_owned_event(actor, current.evento_id)
        if not self._store.delete_entry(current.id):
            raise ScheduleEntryNotFoundError(str(current.id))
        logger.info(
            "schedule_entry_deleted",
            event_id=str(current.evento_id),
            entry_id=str(current.id),
        )
