# workers/apps.py
"""
Application configuration for the workers module.

The workers application stores the staff members leading
activities and exposes their administration endpoints.
"""

from django.apps import AppConfig


class WorkersConfig(AppConfig):
    """
    Configuration class for the workers application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "workers"
    verbose_name = "Animateurs"
