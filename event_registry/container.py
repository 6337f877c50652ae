"""Builds services wired to the Django stores, using the EVENT_REGISTRY settings."""

from functools import lru_cache

from django.conf import settings
from django.utils import timezone

from event_registry.domain.documents import FilePolicy
from event_registry.services import (
    AttachmentService,
    EventService,
    ScheduleService,
    UserService,
)
from event_registry.stores.django_store import (
    DjangoEventStore,
    DjangoScheduleStore,
    DjangoUserStore,
)
from event_registry.stores.object_store import DjangoObjectStore

DEFAULTS = {
    "PUBLIC_PAGE_SIZE": 9,
    "IMAGE_MAX_BYTES": 5 * 1024 * 1024,
    "DOCUMENT_MAX_BYTES": 10 * 1024 * 1024,
    "STORAGE_PREFIX": "eventos",
    "CACHE_TIMEOUT": 300,
}


def registry_setting(name: str):
    return getattr(settings, "EVENT_REGISTRY", {}).get(name, DEFAULTS[name])


@lru_cache(maxsize=1)
def user_service() -> UserService:
    return UserService(DjangoUserStore())


@lru_cache(maxsize=1)
def attachment_service() -> AttachmentService:
    policy = FilePolicy(
        image_max_bytes=registry_setting("IMAGE_MAX_BYTES"),
        document_max_bytes=registry_setting("DOCUMENT_MAX_BYTES"),
    )
    store = DjangoObjectStore(prefix=registry_setting("STORAGE_PREFIX"))
    return AttachmentService(store, policy)


@lru_cache(maxsize=1)
def event_service() -> EventService:
    return EventService(
        DjangoEventStore(),
        DjangoUserStore(),
        attachment_service(),
        public_page_size=registry_setting("PUBLIC_PAGE_SIZE"),
        today=timezone.localdate,
    )


@lru_cache(maxsize=1)
def schedule_service() -> ScheduleService:
    return ScheduleService(DjangoScheduleStore(), event_service())


def reset() -> None:
    """Forget built services so changed settings take effect."""
    for factory in (user_service, attachment_service, event_service, schedule_service):
        factory.cache_clear()
