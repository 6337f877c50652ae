"""Session provider backed by Django's authentication system."""

from collections.abc import Callable

from django.contrib.auth import logout
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.http import HttpRequest

from event_registry.domain import Identity, UserId
from event_registry.stores.interfaces import SessionProvider


def identity_from_user(user) -> Identity | None:
    """Build a bare identity from a Django user, or None for anonymous users."""
    if user is None or not user.is_authenticated:
        return None
    email = user.email or ""
    nome = user.get_full_name().strip() or email.split("@")[0] or "Usuário"
    return Identity(id=UserId(str(user.pk)), email=email, nome=nome)


class DjangoSessionProvider(SessionProvider):
    """Reads the authenticated account of one request.

    Sign-in and sign-out on the same request are observed through Django's
    ``user_logged_in`` and ``user_logged_out`` signals.
    """

    def __init__(self, request: HttpRequest) -> None:
        self._request = request
        self._callbacks: list[Callable[[Identity | None], None]] = []

    def get_current_identity(self) -> Identity | None:
        return identity_from_user(getattr(self._request, "user", None))

    def on_identity_change(
        self, callback: Callable[[Identity | None], None]
    ) -> Callable[[], None]:
        if not self._callbacks:
            user_logged_in.connect(self._logged_in)
            user_logged_out.connect(self._logged_out)
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)
            if not self._callbacks:
                user_logged_in.disconnect(self._logged_in)
                user_logged_out.disconnect(self._logged_out)

        return unsubscribe

    def sign_out(self) -> None:
        logout(self._request)

    def _notify(self, identity: Identity | None) -> None:
        for callback in list(self._callbacks):
            callback(identity)

    def _logged_in(self, sender, request, user, **kwargs) -> None:
        if request is self._request:
            self._notify(identity_from_user(user))

    def _logged_out(self, sender, request, user, **kwargs) -> None:
        if request is self._request:
            self._notify(None)
