# families/models.py
"""
Database models for the families application.

This module defines the Child model, which represents
a child belonging to a parent user.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Child(models.Model):
    """
    Model representing a child in a family.

    Attributes
    ----------
    parent : ForeignKey
        The user (parent) associated with this child. Set from the
        session on creation and never changed afterwards.
    first_name : CharField
        The child's first name (verbose name: 'Prénom').
    last_name : CharField
        The child's last name (verbose name: 'Nom').
    birth_date : DateField
        The child's date of birth (verbose name: 'Date de naissance').
    description : TextField
        Optional free text (allergies, remarks...).
    created_at : DateTimeField
        Creation timestamp.
    """

    parent = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="children",
    )
    first_name = models.CharField("Prénom", max_length=100)
    last_name = models.CharField("Nom", max_length=100)
    birth_date = models.DateField("Date de naissance")
    description = models.TextField("Description", max_length=1000, blank=True, null=True)
    created_at = models.DateTimeField("Créé le", default=timezone.now)

    class Meta:
        """
        Metadata for the Child model.

        Attributes
        ----------
        ordering : list
            Default ordering by creation date, then id.
        """

        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        """
        Return a string representation of the child.

        Returns
        -------
        str
            Full name of the child (first name + last name).
        """
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        """
        Return the public representation of the child.

        The parent reference is never exposed.
        """
        return {
            "id": self.pk,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "birth_date": self.birth_date.isoformat(),
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }
