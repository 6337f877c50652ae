from django.apps import AppConfig


class EventRegistryConfig(AppConfig):
    """Configuration for the municipal event registry."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "event_registry"
    verbose_name = "Event Registry"

    def ready(self) -> None:
        from event_registry import signals  # noqa: F401
