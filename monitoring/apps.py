# monitoring/apps.py
"""
Application configuration for the monitoring module.

The monitoring application keeps the HTML journal of the API
actions and the staff page displaying it.
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    """
    Configuration class for the monitoring application.

    Attributes
    ----------
    name : str
        Full Python path to the monitoring application.
    verbose_name : str
        Label shown in the Django admin.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "monitoring"
    verbose_name = "Supervision"
