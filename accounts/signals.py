# accounts/signals.py
"""
Signals for the accounts application.

This module ensures that each user has an associated
UserProfile instance. It defines signals that create a
profile upon user creation and backfill missing profiles
after database migrations.
"""

from django.contrib.auth import get_user_model
from django.db.utils import OperationalError, ProgrammingError
from django.db.models.signals import post_save, post_migrate
from django.dispatch import receiver
from django.apps import apps
from .models import UserProfile

User = get_user_model()


def _default_role(user) -> str:
    """
    Return the role given to a freshly created profile.

    Staff and superusers are administrators, everyone else is a parent.
    """
    if user.is_staff or user.is_superuser:
        return UserProfile.Role.ADMIN
    return UserProfile.Role.PARENT


@receiver(post_save, sender=User)
def create_profile_on_user_create(sender, instance, created, **kwargs):
    """
    Create a UserProfile when a new user is created.

    Parameters
    ----------
    sender : Model
        The model class sending the signal (User).
    instance : User
        The user instance that was created or updated.
    created : bool
        True if a new user instance was created, False otherwise.
    **kwargs : dict
        Additional keyword arguments provided by the signal.

    Notes
    -----
    The user's first and last names seed the profile names.
    Database errors are ignored while the profile table does not
    exist yet (during the initial migration).
    """
    if not created:
        return
    try:
        UserProfile.objects.get_or_create(
            user=instance,
            defaults={
                "role": _default_role(instance),
                "first_name": instance.first_name or None,
                "last_name": instance.last_name or None,
            },
        )
    except (OperationalError, ProgrammingError):
        pass


@receiver(post_migrate)
def backfill_profiles(sender, **kwargs):
    """
    Ensure all existing users have associated UserProfile records.

    Parameters
    ----------
    sender : AppConfig
        The app configuration sending the signal.
    **kwargs : dict
        Additional keyword arguments provided by the signal.
    """
    try:
        if not apps.is_installed("accounts"):
            return

        users = User.objects.all().only("id", "is_staff", "is_superuser")
        existing = set(UserProfile.objects.values_list("user_id", flat=True))
        to_create = [
            UserProfile(user=u, role=_default_role(u))
            for u in users
            if u.id not in existing
        ]

        if to_create:
            UserProfile.objects.bulk_create(to_create, ignore_conflicts=True)
    except (OperationalError, ProgrammingError):
        pass
