# activities/urls.py
"""
URL configuration for the activities application.

This module defines routes for browsing activities, for the
enrollment endpoints, and for the administration of activities.
It is mounted under ``/api/``.
"""

from django.urls import path

from .views import (
    ActivityDetailView,
    ActivityListView,
    EnrollmentCreateView,
    EnrollmentWithdrawView,
)
from .views_admin import AdminActivityDetailView, AdminActivityListView, TagListView

# Application namespace for reverse lookups
app_name = "activities"

#: URL patterns for the activities application
urlpatterns = [
    # Parent browsing
    path("activities/", ActivityListView.as_view(), name="list"),
    path("activities/<int:pk>/", ActivityDetailView.as_view(), name="detail"),

    # Enrollments, addressed by the (child, activity) pair
    path("enrollments/", EnrollmentCreateView.as_view(), name="enroll"),
    path(
        "enrollments/<int:child_id>/<int:activity_id>/",
        EnrollmentWithdrawView.as_view(),
        name="withdraw",
    ),

    # Administration
    path("admin/activities/", AdminActivityListView.as_view(), name="admin_list"),
    path("admin/activities/<int:pk>/", AdminActivityDetailView.as_view(), name="admin_detail"),
    path("admin/tags/", TagListView.as_view(), name="admin_tags"),
]
