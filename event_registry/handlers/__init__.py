from event_registry.handlers.views import (
    AdminEventListView,
    AdminStatisticsView,
    AdminUserDetailView,
    AdminUserListView,
    EventDecisionView,
    EventDetailView,
    EventListView,
    MeView,
    MyEventListView,
    ScheduleEntryView,
    ScheduleListView,
    SignOutView,
)

__all__ = [
    "AdminEventListView",
    "AdminStatisticsView",
    "AdminUserDetailView",
    "AdminUserListView",
    "EventDecisionView",
    "EventDetailView",
    "EventListView",
    "MeView",
    "MyEventListView",
    "ScheduleEntryView",
    "ScheduleListView",
    "SignOutView",
]
