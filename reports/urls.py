# reports/urls.py
"""
URL configuration for the reports application.

Mounted under ``/api/reports/``.
"""

from django.urls import path

from .views import WeeklyCostReportView

app_name = "reports"

urlpatterns = [
    path("costs/", WeeklyCostReportView.as_view(), name="costs"),
]
