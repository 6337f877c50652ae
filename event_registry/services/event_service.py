"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from dataclasses import fields, replace
from datetime import date

import structlog

from event_registry.domain import (
    Event,
    EventDraft,
    EventId,
    EventStatus,
    Identity,
    UploadedFile,
    UserId,
)
from event_registry.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    PermissionDeniedError,
    ValidationError,
)
from event_registry.domain.statistics import Statistics, compute_statistics
from event_registry.domain.validation import validate_for_approval
from event_registry.domain.workflow import DECISIONS, Actor, transition
from event_registry.services.access import (
    can_view,
    require_admin,
    require_identity,
    require_owner,
)
from event_registry.services.attachment_service import AttachmentService
from event_registry.stores.interfaces import EventStore, UserStore

logger = structlog.get_logger(__name__)

DRAFT_FIELDS = tuple(f.name for f in fields(EventDraft))


def parse_event_id(event_id: str | EventId) -> EventId:
    """Raises InvalidEventIdError for anything that is not a UUID."""
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(str(event_id))
    except ValueError:
        raise InvalidEventIdError() from None


class EventService:
    """Service for the event approval workflow and event listings."""

    def __init__(
        self,
        store: EventStore,
        users: UserStore,
        attachments: AttachmentService,
        public_page_size: int = 9,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._users = users
        self._attachments = attachments
        self._public_page_size = public_page_size
        self._today = today

    def _load(self, event_id: str | EventId) -> Event:
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(parsed))
        return event

    def submit(
        self,
        actor: Identity | None,
        draft: EventDraft,
        target_status: EventStatus,
        files: dict[str, UploadedFile] | None = None,
        event_id: str | EventId | None = None,
    ) -> Event:
        """Save an event as a draft or send it for approval.

        Creates the event when ``event_id`` is None, otherwise updates the
        caller's existing event. Files are checked before anything else and
        uploaded only after validation passes.

        Raises:
            NotAuthenticatedError: If there is no actor.
            PermissionDeniedError: If the actor may not submit or does not own
                the event.
            TransitionError: If the event can no longer be changed by its owner.
            ValidationError: If a file breaks the policy or, for ``pending``,
                a required field or document is missing.
            UploadError: If a file upload fails; nothing is written.
        """
        actor = require_identity(actor)
        if not actor.can_submit:
            raise PermissionDeniedError("Only registrants can submit events")
        files = files or {}

        existing = None
        if event_id is not None:
            existing = self._load(event_id)
            require_owner(actor, existing)
        status = transition(
            existing.status if existing else None, target_status, Actor.OWNER
        )

        self._attachments.check(files)
        draft = draft.normalized()
        content = {name: getattr(draft, name) for name in DRAFT_FIELDS}
        base = existing or Event(user_id=actor.id)
        candidate = replace(base, **content, status=status)
        if status is EventStatus.PENDING:
            validate_for_approval(candidate, frozenset(files))

        urls = self._attachments.upload_all(files)

        if existing is None:
            stored = self._store.insert_event(replace(candidate, **urls))
        else:
            stored = self._store.update_event(
                existing.id, {**content, **urls, "status": status}
            )
            if stored is None:
                raise EventNotFoundError(str(existing.id))
        logger.info(
            "event_submitted",
            event_id=str(stored.id),
            user_id=str(actor.id),
            status=stored.status.value,
            created=existing is None,
            files=sorted(files),
        )
        return stored

    def decide(
        self, actor: Identity | None, event_id: str | EventId, decision: EventStatus
    ) -> Event:
        """Approve or reject a pending event.

        Raises:
            PermissionDeniedError: If the actor is not an administrator.
            ValidationError: If ``decision`` is not approved or rejected.
            TransitionError: If the event is not pending.
            EventNotFoundError: If the event does not exist.
        """
        actor = require_admin(actor)
        if decision not in DECISIONS:
            raise ValidationError("decision", "Decision must be approved or rejected")
        event = self._load(event_id)
        status = transition(event.status, decision, Actor.ADMINISTRATOR)
        updated = self._store.update_event(event.id, {"status": status})
        if updated is None:
            raise EventNotFoundError(str(event.id))
        logger.info(
            "event_decided",
            event_id=str(event.id),
            admin_id=str(actor.id),
            previous=event.status.value,
            status=updated.status.value,
        )
        return updated

    def get_event(
        self, event_id: str | EventId, actor: Identity | None = None
    ) -> Event:
        """Return an event the actor is allowed to see.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is hidden from the actor.
        """
        event = self._load(event_id)
        if not can_view(actor, event):
            raise EventNotFoundError(str(event.id))
        return event

    def get_owned_event(self, actor: Identity | None, event_id: str | EventId) -> Event:
        """Return an event only if ``actor`` owns it."""
        event = self._load(event_id)
        require_owner(actor, event)
        return event

    def list_public(self, today: date | None = None) -> list[Event]:
        """Approved events with a date on or after today, soonest first."""
        return self._store.list_upcoming(today or self._today(), self._public_page_size)

    def list_by_owner(self, user_id: UserId) -> list[Event]:
        """Return all of an owner's events, newest first."""
        return self._store.list_events(user_id=user_id)

    def list_all(self, actor: Identity | None) -> list[Event]:
        require_admin(actor)
        return self._store.list_events()

    def delete_event(self, actor: Identity | None, event_id: str | EventId) -> None:
        """Delete an event together with its schedule.

        Owners may delete their events until approved; administrators any event.
        """
        actor = require_identity(actor)
        event = self._load(event_id)
        if not actor.is_admin:
            require_owner(actor, event)
            if event.status is EventStatus.APPROVED:
                raise PermissionDeniedError(
                    "Approved events cannot be deleted by their owner"
                )
        if not self._store.delete_event(event.id):
            raise EventNotFoundError(str(event.id))
        logger.info("event_deleted", event_id=str(event.id), user_id=str(actor.id))

    def statistics(self, actor: Identity | None) -> Statistics:
        """Recompute the dashboard counters from the stores."""
        require_admin(actor)
        return compute_statistics(self._store.list_events(), self._users.list_users())
