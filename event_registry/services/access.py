"""Role and ownership checks shared by the services."""

from event_registry.domain import Event, EventStatus, Identity
from event_registry.domain.errors import NotAuthenticatedError, PermissionDeniedError


def require_identity(actor: Identity | None) -> Identity:
    if actor is None:
        raise NotAuthenticatedError()
    return actor


def require_admin(actor: Identity | None) -> Identity:
    actor = require_identity(actor)
    if not actor.is_admin:
        raise PermissionDeniedError("Administrator access required")
    return actor


def require_owner(actor: Identity | None, event: Event) -> Identity:
    actor = require_identity(actor)
    if not actor.owns(event):
        raise PermissionDeniedError("Only the event owner can change it")
    return actor


def can_view(actor: Identity | None, event: Event) -> bool:
    """Approved events are public; others only to their owner or an administrator."""
    if event.status is EventStatus.APPROVED:
        return True
    return actor is not None and (actor.is_admin or actor.owns(event))
