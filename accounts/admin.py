# accounts/admin.py
"""
Admin configuration for the accounts application.

This module customizes the Django admin interface for the
:class:`UserProfile` model, enabling list displays, filters,
and search capabilities.
"""

from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """
    Admin configuration for the UserProfile model.

    Attributes
    ----------
    list_display : tuple
        The associated user, the role, and the names.
    list_filter : tuple
        The role.
    search_fields : tuple
        Username, e-mail, and profile names.
    """

    list_display = ("user", "role", "first_name", "last_name", "created_at")
    list_filter = ("role",)
    search_fields = ("user__username", "user__email", "first_name", "last_name")
