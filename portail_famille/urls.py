# portail_famille/urls.py
"""
Root URL configuration for the Portail Famille project.

This module defines the global URL routes and delegates to the
``urls.py`` module of each application. Every JSON endpoint lives
under ``/api/``.
"""

from django.contrib import admin
from django.urls import path, include

#: Global URL patterns for the project
urlpatterns = [
    # Django admin interface
    path("admin/", admin.site.urls),

    # Authentication, profile and parent administration
    path("api/", include("accounts.urls")),

    # Children of the authenticated parent
    path("api/children/", include("families.urls")),

    # Workers administration
    path("api/admin/workers/", include("workers.urls")),

    # Activities, enrollments and activity administration
    path("api/", include("activities.urls")),

    # Weekly cost report
    path("api/reports/", include("reports.urls")),

    # Action journal (staff only)
    path("monitoring/", include("monitoring.urls")),
]
