# activities/apps.py
"""
Application configuration for the activities module.

The activities application holds the activities, their tags,
the enrollments and the rules deciding who may enroll.
"""

from django.apps import AppConfig


class ActivitiesConfig(AppConfig):
    """
    Configuration class for the activities application.

    Attributes
    ----------
    default_auto_field : str
        Specifies the type of primary key field to use for models
        that do not define one explicitly.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "activities"
    verbose_name = "Activités"
