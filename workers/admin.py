# workers/admin.py
"""
Admin configuration for the workers application.
"""

from django.contrib import admin
from .models import Worker


@admin.register(Worker)
class WorkerAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Worker model.

    Attributes
    ----------
    list_display : tuple
        Names, e-mail, and creation date.
    search_fields : tuple
        Names and e-mail.
    """

    list_display = ("first_name", "last_name", "email", "created_at")
    search_fields = ("first_name", "last_name", "email")
