"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from event_registry.handlers import cache as cache_keys
from event_registry.models import Event, ScheduleEntry


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate the public listing, detail and schedule of a changed event."""
    cache_keys.invalidate_event(instance.pk)


@receiver([post_save, post_delete], sender=ScheduleEntry)
def invalidate_schedule_cache(sender, instance, **kwargs):
    """Invalidate the event's schedule when one of its entries is saved or deleted."""
    cache_keys.invalidate_schedule(instance.evento_id)
