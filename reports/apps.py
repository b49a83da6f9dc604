# reports/apps.py
"""
Application configuration for the reports module.

The reports application builds the weekly cost report of a parent
and renders it as PDF or JSON.
"""

from django.apps import AppConfig


class ReportsConfig(AppConfig):
    """Configuration class for the reports application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "reports"
    verbose_name = "Rapports"
