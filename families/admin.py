# families/admin.py
"""
Admin configuration for the families application.

This module customizes the Django admin interface for the
Child model, providing list displays, filters, and search
capabilities.
"""

from django.contrib import admin
from .models import Child


@admin.register(Child)
class ChildAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Child model.

    Attributes
    ----------
    list_display : tuple
        Names, parent, birth date, and creation date.
    list_filter : tuple
        The parent user.
    search_fields : tuple
        Child names and parent e-mail.
    readonly_fields : tuple
        The creation date.
    """

    list_display = ("first_name", "last_name", "parent", "birth_date", "created_at")
    list_filter = ("parent",)
    search_fields = ("first_name", "last_name", "parent__email")
    readonly_fields = ("created_at",)
