"""Attaches one session context to every request."""

from event_registry.container import user_service
from event_registry.services.session import SessionContext
from event_registry.stores.session_provider import DjangoSessionProvider


class SessionContextMiddleware:
    """Exposes ``request.session_context`` for the lifetime of the request.

    Must come after Django's AuthenticationMiddleware. The identity is resolved
    on first use, after DRF authentication has replaced ``request.user``.
    """

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        context = SessionContext(DjangoSessionProvider(request), user_service())
        request.session_context = context
        try:
            return self.get_response(request)
        finally:
            context.close()
