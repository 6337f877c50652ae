"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from event_registry import container
from event_registry.domain import EventStatus, Identity, RequestStatus, Role
from event_registry.domain.errors import NotAuthenticatedError
from event_registry.domain.statistics import partition_by_status
from event_registry.handlers import cache as cache_keys
from event_registry.handlers.serializers import (
    DecisionSerializer,
    EventInputSerializer,
    EventSerializer,
    IdentitySerializer,
    ScheduleEntryInputSerializer,
    ScheduleEntrySerializer,
    StatisticsSerializer,
    UserProfileSerializer,
    UserUpdateSerializer,
    uploaded_files,
)
from event_registry.services.event_service import parse_event_id
from event_registry.services.schedule_service import group_by_date


def current_identity(request: Request) -> Identity | None:
    return request.session_context.identity


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request: Request) -> Response:
        key = cache_keys.public_list_key()
        data = cache.get(key)
        if data is None:
            events = container.event_service().list_public()
            data = {
                "count": len(events),
                "results": EventSerializer(events, many=True).data,
            }
            cache.set(key, data, cache_keys.timeout())
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = container.event_service().submit(
            current_identity(request),
            serializer.to_draft(),
            serializer.target_status(),
            files=uploaded_files(request.FILES),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class MyEventListView(APIView):
    """Handler for GET /api/events/mine"""

    def get(self, request: Request) -> Response:
        if not request.session_context.is_authenticated:
            raise NotAuthenticatedError()
        identity = current_identity(request)
        events = container.event_service().list_by_owner(identity.id)
        grouped = partition_by_status(events)
        return Response(
            {
                "results": EventSerializer(events, many=True).data,
                "counts": {s.value: len(grouped[s]) for s in EventStatus},
            }
        )


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get(self, request: Request, event_id: str) -> Response:
        key = cache_keys.event_key(parse_event_id(event_id))
        data = cache.get(key)
        if data is None:
            identity = current_identity(request)
            event = container.event_service().get_event(event_id, identity)
            data = EventSerializer(event).data
            if event.status is EventStatus.APPROVED:
                cache.set(key, data, cache_keys.timeout())
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = container.event_service().submit(
            current_identity(request),
            serializer.to_draft(),
            serializer.target_status(),
            files=uploaded_files(request.FILES),
            event_id=event_id,
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        container.event_service().delete_event(current_identity(request), event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventDecisionView(APIView):
    """Handler for POST /api/events/{event_id}/decision"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = DecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = container.event_service().decide(
            current_identity(request), event_id, serializer.to_status()
        )
        return Response(EventSerializer(event).data)


class ScheduleListView(APIView):
    """Handler for GET/POST /api/events/{event_id}/schedule"""

    def get(self, request: Request, event_id: str) -> Response:
        key = cache_keys.schedule_key(parse_event_id(event_id))
        data = cache.get(key)
        if data is None:
            identity = current_identity(request)
            event = container.event_service().get_event(event_id, identity)
            entries = container.schedule_service().list_entries(event.id, identity)
            data = {
                "results": ScheduleEntrySerializer(entries, many=True).data,
                "by_date": {
                    day.isoformat(): ScheduleEntrySerializer(group, many=True).data
                    for day, group in group_by_date(entries).items()
                },
            }
            if event.status is EventStatus.APPROVED:
                cache.set(key, data, cache_keys.timeout())
        return Response(data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = ScheduleEntryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = container.schedule_service().create(
            current_identity(request), event_id, serializer.to_draft()
        )
        return Response(
            ScheduleEntrySerializer(entry).data, status=status.HTTP_201_CREATED
        )


class ScheduleEntryView(APIView):
    """Handler for PUT/DELETE /api/schedule/{entry_id}"""

    def put(self, request: Request, entry_id: str) -> Response:
        serializer = ScheduleEntryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = container.schedule_service().update(
            current_identity(request), entry_id, serializer.to_draft()
        )
        return Response(ScheduleEntrySerializer(entry).data)

    def delete(self, request: Request, entry_id: str) -> Response:
        container.schedule_service().delete(current_identity(request), entry_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminEventListView(APIView):
    """Handler for GET /api/admin/events"""

    def get(self, request: Request) -> Response:
        identity = current_identity(request)
        service = container.event_service()
        events = service.list_all(identity)
        grouped = partition_by_status(events)
        return Response(
            {
                "results": EventSerializer(events, many=True).data,
                "by_status": {
                    s.value: EventSerializer(grouped[s], many=True).data
                    for s in EventStatus
                },
                "statistics": StatisticsSerializer(service.statistics(identity)).data,
            }
        )


class AdminStatisticsView(APIView):
    """Handler for GET /api/admin/statistics"""

    def get(self, request: Request) -> Response:
        stats = container.event_service().statistics(current_identity(request))
        return Response(StatisticsSerializer(stats).data)


class AdminUserListView(APIView):
    """Handler for GET /api/admin/users"""

    def get(self, request: Request) -> Response:
        users = container.user_service().list_users(current_identity(request))
        return Response({"results": UserProfileSerializer(users, many=True).data})


class AdminUserDetailView(APIView):
    """Handler for PATCH /api/admin/users/{user_id}"""

    def patch(self, request: Request, user_id: str) -> Response:
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = current_identity(request)
        service = container.user_service()
        profile = None
        if "role" in serializer.validated_data:
            profile = service.set_role(
                identity, user_id, Role(serializer.validated_data["role"])
            )
        if "status_pedido" in serializer.validated_data:
            profile = service.set_status(
                identity,
                user_id,
                RequestStatus(serializer.validated_data["status_pedido"]),
            )
        return Response(UserProfileSerializer(profile).data)


class MeView(APIView):
    """Handler for GET /api/me"""

    def get(self, request: Request) -> Response:
        if not request.session_context.is_authenticated:
            raise NotAuthenticatedError()
        identity = current_identity(request)
        return Response(IdentitySerializer(identity).data)


class SignOutView(APIView):
    """Handler for POST /api/session/sign-out"""

    def post(self, request: Request) -> Response:
        request.session_context.sign_out()
        return Response(status=status.HTTP_204_NO_CONTENT)
