"""Event approval state machine.

Every status change goes through ``transition``. The table below is the
complete set of legal moves; anything else raises ``TransitionError``.
"""

from enum import Enum

from event_registry.domain.errors import TransitionError
from event_registry.domain.value_objects import EventStatus


class Actor(Enum):
    """Capacity in which an identity acts on an event."""

    OWNER = "owner"
    ADMINISTRATOR = "administrator"


OWNER_WRITABLE = frozenset({EventStatus.DRAFT, EventStatus.PENDING})
DECISIONS = frozenset({EventStatus.APPROVED, EventStatus.REJECTED})

LEGAL_TRANSITIONS: frozenset[tuple[EventStatus | None, EventStatus, Actor]] = frozenset(
    {
        (current, target, Actor.OWNER)
        for current in (None, *OWNER_WRITABLE)
        for target in OWNER_WRITABLE
    }
    | {(EventStatus.PENDING, target, Actor.ADMINISTRATOR) for target in DECISIONS}
)


def transition(
    current: EventStatus | None, target: EventStatus, actor: Actor
) -> EventStatus:
    """Return ``target`` if ``actor`` may move an event there from ``current``.

    ``current`` is None for an event that has not been stored yet.

    Raises:
        TransitionError: If the move is not in the legal transition table.
    """
    if (current, target, actor) not in LEGAL_TRANSITIONS:
        raise TransitionError(current, target)
    return target
