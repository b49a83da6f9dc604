# accounts/apps.py
"""
Application configuration for the accounts module.

The accounts application owns user profiles (role and names),
the authentication endpoints, and the administration of parent
accounts.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    Configuration class for the accounts application.

    Attributes
    ----------
    default_auto_field : str
        The default type for auto-created primary key fields.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Comptes"

    def ready(self) -> None:
        """Register the profile signals."""
        from . import signals  # noqa: F401
