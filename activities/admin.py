# activities/admin.py
"""
Admin configuration for the activities application.

This module defines Django admin customizations for the
:class:`Facility`, :class:`Activity` and :class:`Enrollment` models.
Tags are edited inline on their activity.
"""

from django.contrib import admin
from .models import Activity, ActivityTag, Enrollment, Facility


class ActivityTagInline(admin.TabularInline):
    """Inline edition of the tags of an activity."""

    model = ActivityTag
    extra = 0


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Activity model.

    Provides list display, filters, and search options for
    Activity records in the Django admin interface.
    """
    # Fields displayed in the admin list view
    list_display = ("name", "cost", "start_datetime", "participant_limit", "worker")
    # Filters available in the right sidebar
    list_filter = ("worker",)
    # Fields available for the admin search bar
    search_fields = ("name", "description")
    inlines = [ActivityTagInline]


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Enrollment model.

    Provides list display, filters, and search options for
    Enrollment records in the Django admin interface.
    """
    # Fields displayed in the admin list view
    list_display = ("child", "activity", "enrolled_at")
    # Filters available in the right sidebar
    list_filter = ("activity",)
    # Fields available for the admin search bar
    search_fields = ("child__first_name", "child__last_name", "activity__name")
