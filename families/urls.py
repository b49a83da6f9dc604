# families/urls.py
"""
URL configuration for the families application.

This module defines routes for managing children. It is mounted
under ``/api/children/``.
"""

from django.urls import path
from .views import (
    ChildDetailView,
    ChildEnrollmentsView,
    ChildListView,
)

# Application namespace for reverse lookups
app_name = "families"

#: URL patterns for the families application
urlpatterns = [
    # List or create the children of the authenticated parent
    path("", ChildListView.as_view(), name="child_list"),

    # Read or update a child by primary key
    path("<int:pk>/", ChildDetailView.as_view(), name="child_detail"),

    # Enrollments of a child
    path("<int:pk>/enrollments/", ChildEnrollmentsView.as_view(), name="child_enrollments"),
]
