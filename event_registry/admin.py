from django.contrib import admin

from event_registry.models import Event, ScheduleEntry, UserProfile


class ScheduleEntryInline(admin.TabularInline):
    model = ScheduleEntry
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["titulo", "local", "status", "user", "created_at"]
    list_filter = ["status", "tipo_local"]
    search_fields = ["titulo", "local", "promotor_nome"]
    inlines = [ScheduleEntryInline]


@admin.register(ScheduleEntry)
class ScheduleEntryAdmin(admin.ModelAdmin):
    list_display = ["evento", "data", "hora_inicio", "hora_fim", "atividade"]
    list_filter = ["evento"]


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ["nome", "role", "status_pedido", "created_at"]
    list_filter = ["role", "status_pedido"]
