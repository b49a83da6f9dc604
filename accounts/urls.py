# accounts/urls.py
"""
URL configuration for the accounts application.

This module defines the authentication endpoints, the profile
endpoint and the administration of parent accounts. It is
mounted under ``/api/``.
"""

from django.urls import path

from .views import ProfileView, csrf_view, login_view, logout_view, signup
from .views_admin import ParentDetailView, ParentListView

app_name = "accounts"

#: URL patterns for the accounts application
urlpatterns = [
    # Session authentication
    path("auth/register/", signup, name="register"),
    path("auth/login/", login_view, name="login"),
    path("auth/logout/", logout_view, name="logout"),
    path("auth/csrf/", csrf_view, name="csrf"),

    # Profile of the authenticated parent
    path("profile/", ProfileView.as_view(), name="profile"),

    # Administration of parent accounts
    path("admin/parents/", ParentListView.as_view(), name="parent_list"),
    path("admin/parents/<int:pk>/", ParentDetailView.as_view(), name="parent_detail"),
]
