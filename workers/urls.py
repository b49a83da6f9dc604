# workers/urls.py
"""
URL configuration for the workers application.

Mounted under ``/api/admin/workers/``.
"""

from django.urls import path

from .views import WorkerDetailView, WorkerListView

app_name = "workers"

urlpatterns = [
    path("", WorkerListView.as_view(), name="list"),
    path("<int:pk>/", WorkerDetailView.as_view(), name="detail"),
]
