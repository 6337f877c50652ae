"""Session context - the single place that knows who is acting.

The context asks the session provider for the authenticated account once,
enriches it with the account profile (role and request status) and hands the
result to every caller. Subscribers are told about every sign-in and
sign-out instead of re-deriving the identity themselves.
"""

from collections.abc import Callable
from dataclasses import replace

import structlog

from event_registry.domain import Identity
from event_registry.services.user_service import UserService
from event_registry.stores.interfaces import SessionProvider

logger = structlog.get_logger(__name__)

Subscriber = Callable[[Identity | None], None]


class SessionContext:
    """Current identity plus change notification, shared by all consumers."""

    def __init__(self, provider: SessionProvider, users: UserService) -> None:
        self._provider = provider
        self._users = users
        self._subscribers: list[Subscriber] = []
        self._identity: Identity | None = None
        self._resolved = False
        self._detach = provider.on_identity_change(self._identity_changed)

    def _enrich(self, identity: Identity | None) -> Identity | None:
        if identity is None:
            return None
        profile = self._users.ensure_profile(identity)
        return replace(
            identity,
            nome=profile.nome,
            role=profile.role,
            status_pedido=profile.status_pedido,
        )

    @property
    def identity(self) -> Identity | None:
        if not self._resolved:
            self._identity = self._enrich(self._provider.get_current_identity())
            self._resolved = True
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback`` with each new identity; return an unsubscribe."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def sign_out(self) -> None:
        self._provider.sign_out()
        if self._identity is not None or not self._resolved:
            # Provider did not report the sign-out itself.
            self._identity_changed(None)

    def close(self) -> None:
        """Stop listening to the provider."""
        self._detach()
        self._subscribers.clear()

    def _identity_changed(self, identity: Identity | None) -> None:
        self._identity = self._enrich(identity)
        self._resolved = True
        logger.info(
            "session_identity_changed",
            user_id=str(self._identity.id) if self._identity else None,
        )
        for callback in list(self._subscribers):
            callback(self._identity)
