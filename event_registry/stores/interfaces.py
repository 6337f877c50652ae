"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method may raise
RepositoryError (UploadError for the object store) when the backend rejects
the call.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date

from event_registry.domain import (
    Event,
    EventId,
    EventStatus,
    Identity,
    RequestStatus,
    Role,
    ScheduleEntry,
    ScheduleEntryDraft,
    ScheduleEntryId,
    StoredFile,
    UploadedFile,
    UserId,
    UserProfile,
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(
        self, status: EventStatus | None = None, user_id: UserId | None = None
    ) -> list[Event]:
        """Return events matching the filters, ordered by created_at descending."""
        ...

    @abstractmethod
    def list_upcoming(self, today: date, limit: int) -> list[Event]:
        """Return up to ``limit`` approved events with a date on or after ``today``.

        Ordered by the first such date ascending.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_event(self, event: Event) -> Event:
        """Store a new event and return it with its generated id and timestamps."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: dict) -> Event | None:
        """Apply ``changes`` to an event and return it, or None if not found."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event and its schedule entries. Return False if not found."""
        ...


class ScheduleStore(ABC):
    """Interface for schedule entry persistence operations."""

    @abstractmethod
    def list_entries(self, event_id: EventId) -> list[ScheduleEntry]:
        """Return the entries of an event ordered by (data, hora_inicio) ascending."""
        ...

    @abstractmethod
    def get_entry(self, entry_id: ScheduleEntryId) -> ScheduleEntry | None:
        """Return an entry by ID, or None if not found."""
        ...

    @abstractmethod
    def insert_entry(
        self, event_id: EventId, entry: ScheduleEntryDraft
    ) -> ScheduleEntry:
        ...

    @abstractmethod
    def update_entry(
        self, entry_id: ScheduleEntryId, entry: ScheduleEntryDraft
    ) -> ScheduleEntry | None:
        ...

    @abstractmethod
    def delete_entry(self, entry_id: ScheduleEntryId) -> bool:
        ...


class UserStore(ABC):
    """Interface for account profile persistence operations."""

    @abstractmethod
    def list_users(self) -> list[UserProfile]:
        """Return all profiles ordered by created_at descending."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> UserProfile | None:
        ...

    @abstractmethod
    def insert_user(self, profile: UserProfile) -> UserProfile:
        ...

    @abstractmethod
    def update_user(
        self,
        user_id: UserId,
        role: Role | None = None,
        status_pedido: RequestStatus | None = None,
    ) -> UserProfile | None:
        """Change role and/or request status; return None if not found."""
        ...


class ObjectStore(ABC):
    """Interface for the file storage service."""

    @abstractmethod
    def upload(self, key: str, upload: UploadedFile) -> StoredFile:
        """Store the file under ``key`` without overwriting existing objects."""
        ...

    @abstractmethod
    def public_url(self, key: str) -> str:
        ...


class SessionProvider(ABC):
    """Interface for the identity service that authenticates accounts.

    Identities returned here carry the account id, e-mail and display name
    only; role and request status come from the account profile.
    """

    @abstractmethod
    def get_current_identity(self) -> Identity | None:
        ...

    @abstractmethod
    def on_identity_change(
        self, callback: Callable[[Identity | None], None]
    ) -> Callable[[], None]:
        """Register ``callback`` for sign-in and sign-out; return an unsubscribe."""
        ...

    @abstractmethod
    def sign_out(self) -> None:
        ...
