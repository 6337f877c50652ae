from django.urls import path

from event_registry.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/mine", MyEventListView.as_view(), name="event-mine"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/decision",
        EventDecisionView.as_view(),
        name="event-decision",
    ),
    path(
        "events/<str:event_id>/schedule",
        ScheduleListView.as_view(),
        name="schedule-list",
    ),
    path("schedule/<str:entry_id>", ScheduleEntryView.as_view(), name="schedule-entry"),
    path("admin/events", AdminEventListView.as_view(), name="admin-event-list"),
    path("admin/statistics", AdminStatisticsView.as_view(), name="admin-statistics"),
    path("admin/users", AdminUserListView.as_view(), name="admin-user-list"),
    path(
        "admin/users/<str:user_id>",
        AdminUserDetailView.as_view(),
        name="admin-user-detail",
    ),
    path("me", MeView.as_view(), name="me"),
    path("session/sign-out", SignOutView.as_view(), name="sign-out"),
]
