# accounts/models.py
"""
Database models for the accounts application.

This module defines the UserProfile model, which extends
the built-in Django user with the role used for access
control (parent or administrator) and the display names.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class UserProfile(models.Model):
    """
    Profile model linked to the Django user.

    Attributes
    ----------
    user : OneToOneField
        A one-to-one relationship with the user model defined
        by ``settings.AUTH_USER_MODEL``. Each user has exactly
        one profile.
    role : CharField
        Either ``parent`` or ``admin``. Parents manage their own
        children and enrollments, administrators manage workers,
        activities, and parent accounts.
    first_name : CharField
        Optional first name displayed in the dashboard.
    last_name : CharField
        Optional last name displayed in the dashboard.
    created_at : DateTimeField
        Creation timestamp of the profile.
    """

    class Role(models.TextChoices):
        """
        Enumeration of account roles.

        PARENT
            Account owning children and enrolling them.
        ADMIN
            Back-office account.
        """

        PARENT = "parent", "Parent"
        ADMIN = "admin", "Administrateur"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    role = models.CharField(
        "Rôle",
        max_length=16,
        choices=Role.choices,
        default=Role.PARENT,
    )
    first_name = models.CharField("Prénom", max_length=100, blank=True, null=True)
    last_name = models.CharField("Nom", max_length=100, blank=True, null=True)
    created_at = models.DateTimeField("Créé le", default=timezone.now)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """
        Return a string representation of the user profile.

        Returns
        -------
        str
            The associated user followed by the role.
        """
        return f"{self.user} ({self.role})"

    @property
    def is_parent(self) -> bool:
        return self.role == self.Role.PARENT

    @property
    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN
