# families/apps.py
"""
Application configuration for the families module.

The families application stores the children of parent accounts
and resolves which parent owns a child.
"""

from django.apps import AppConfig


class FamiliesConfig(AppConfig):
    """Configuration class for the families application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "families"
    verbose_name = "Familles"
