# monitoring/urls.py
"""
URL configuration for the monitoring application.

Mounted under ``/monitoring/``.
"""

from django.urls import path
from .views import logs_view

app_name = "monitoring"

urlpatterns = [
    # Action journal, staff members only
    path("logs/", logs_view, name="logs"),
]
