"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ScheduleEntryId:
    """Unique identifier for a ScheduleEntry."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Identifier of an account, as issued by the session provider."""

    value: str

    def __post_init__(self) -> None:
        if not str(self.value).strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value


class EventStatus(Enum):
    """Approval lifecycle stage of an event."""

    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Role(Enum):
    """Permission level of an account."""

    ADMIN = "admin"
    REGISTRANT = "registrant"
    PUBLIC = "public"


class RequestStatus(Enum):
    """Onboarding approval state of an account."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VenueType(Enum):
    PRACA = "praca"
    PARQUE = "parque"
    RUA = "rua"
    GINASIO = "ginasio"
    CENTRO_CULTURAL = "centro_cultural"
    OUTRO = "outro"


MUSIC_MODALITIES: tuple[str, ...] = (
    "Ao vivo",
    "DJ",
    "Som mecânico",
    "Banda",
    "Orquestra",
    "Outro",
)


@dataclass(frozen=True)
class StatusBadge:
    """Display label and visual variant for a status value."""

    label: str
    variant: str


EVENT_STATUS_BADGES: dict[EventStatus, StatusBadge] = {
    EventStatus.DRAFT: StatusBadge(label="Rascunho", variant="secondary"),
    EventStatus.PENDING: StatusBadge(label="Pendente", variant="outline"),
    EventStatus.APPROVED: StatusBadge(label="Aprovado", variant="default"),
    EventStatus.REJECTED: StatusBadge(label="Rejeitado", variant="destructive"),
}

REQUEST_STATUS_BADGES: dict[RequestStatus, StatusBadge] = {
    RequestStatus.PENDING: StatusBadge(label="Pendente", variant="secondary"),
    RequestStatus.APPROVED: StatusBadge(label="Aprovado", variant="default"),
    RequestStatus.REJECTED: StatusBadge(label="Rejeitado", variant="destructive"),
}


def badge_for(status: EventStatus | RequestStatus) -> StatusBadge:
    """Return the shared badge for an event or account request status."""
    if isinstance(status, EventStatus):
        return EVENT_STATUS_BADGES[status]
    return REQUEST_STATUS_BADGES[status]


@dataclass(frozen=True)
class Attendance:
    """Non-negative estimate of the expected audience."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Attendance cannot be negative")
