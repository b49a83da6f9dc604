# workers/models.py
"""
Database models for the workers application.

A worker is the staff member leading an activity.
"""

from django.db import models
from django.utils import timezone


class Worker(models.Model):
    """
    Model representing an activity leader.

    Attributes
    ----------
    first_name : CharField
        First name (verbose name: 'Prénom').
    last_name : CharField
        Last name (verbose name: 'Nom').
    email : EmailField
        Contact address, stored in lower case and unique.
    created_at : DateTimeField
        Creation timestamp.
    """

    first_name = models.CharField("Prénom", max_length=100)
    last_name = models.CharField("Nom", max_length=100)
    email = models.EmailField("E-mail", max_length=255, unique=True)
    created_at = models.DateTimeField("Créé le", default=timezone.now)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        """Return the public representation of the worker."""
        return {
            "id": self.pk,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }
