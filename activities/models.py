# activities/models.py
"""
Database models for the activities application.

This module defines the Facility, Activity, ActivityTag and
Enrollment models. Activities are the sessions offered to
families, enrollments represent a child's participation in a
specific activity.
"""

from django.db import models
from django.utils import timezone

from families.models import Child
from workers.models import Worker

#: Closed dictionary of tags an activity can carry
TAG_DICTIONARY = (
    "creatif",
    "sport",
    "musique",
    "danse",
    "sciences",
    "langues",
    "plein-air",
    "interieur",
    "individuel",
)


class Facility(models.Model):
    """
    Place where activities happen.

    A deployment has a single facility, identified by
    ``settings.DEFAULT_FACILITY_ID``.
    """

    name = models.CharField("Nom", max_length=200)
    created_at = models.DateTimeField("Créé le", default=timezone.now)

    class Meta:
        verbose_name = "Établissement"

    def __str__(self) -> str:
        return self.name


class Activity(models.Model):
    """
    Model representing an activity.

    Attributes
    ----------
    name : CharField
        The name of the activity (French verbose name: 'Nom').
    description : TextField
        Optional description of the activity.
    cost : DecimalField
        Cost of the activity (French verbose name: 'Tarif (€)').
    participant_limit : PositiveIntegerField
        Maximum number of enrolled children, at least 1.
    start_datetime : DateTimeField
        Start of the session. Enrollment is closed once it is reached.
    worker : ForeignKey
        Leader of the activity. A worker with activities cannot be deleted.
    facility : ForeignKey
        Facility hosting the activity.
    created_at : DateTimeField
        Creation timestamp.
    """

    name = models.CharField("Nom", max_length=200)
    description = models.TextField("Description", max_length=2000, blank=True, null=True)
    cost = models.DecimalField("Tarif (€)", max_digits=8, decimal_places=2, default=0)
    participant_limit = models.PositiveIntegerField("Nombre de places")
    start_datetime = models.DateTimeField("Début")
    worker = models.ForeignKey(
        Worker,
        on_delete=models.PROTECT,
        related_name="activities",
        verbose_name="Animateur",
    )
    facility = models.ForeignKey(
        Facility,
        on_delete=models.PROTECT,
        related_name="activities",
        verbose_name="Établissement",
    )
    created_at = models.DateTimeField("Créé le", default=timezone.now)

    class Meta:
        """
        Metadata options for the Activity model.

        Attributes
        ----------
        ordering : list
            Default ordering of activities by start date.
        """

        ordering = ["start_datetime", "id"]
        verbose_name_plural = "activities"

    def __str__(self) -> str:
        """
        Return a string representation of the activity.

        Returns
        -------
        str
            The activity name.
        """
        return self.name


class ActivityTag(models.Model):
    """
    Tag attached to an activity, taken from :data:`TAG_DICTIONARY`.
    """

    activity = models.ForeignKey(
        Activity,
        on_delete=models.CASCADE,
        related_name="tags",
        verbose_name="Activité",
    )
    tag = models.CharField("Étiquette", max_length=50)

    class Meta:
        unique_together = ("activity", "tag")
        ordering = ["tag"]

    def __str__(self) -> str:
        return self.tag


class Enrollment(models.Model):
    """
    Model representing an enrollment of a child in an activity.

    The pair (child, activity) identifies the enrollment. The
    automatic primary key is internal and never exposed.

    Attributes
    ----------
    child : ForeignKey
        The child enrolled (related to families.Child).
    activity : ForeignKey
        The activity in which the child is enrolled.
    enrolled_at : DateTimeField
        Timestamp set by the server when the enrollment is created.
    """

    child = models.ForeignKey(
        Child,
        on_delete=models.CASCADE,
        related_name="enrollments",
        verbose_name="Enfant",
    )
    activity = models.ForeignKey(
        Activity,
        on_delete=models.CASCADE,
        related_name="enrollments",
        verbose_name="Activité",
    )
    enrolled_at = models.DateTimeField("Inscrit le", default=timezone.now)

    class Meta:
        """
        Metadata options for the Enrollment model.

        Attributes
        ----------
        unique_together : tuple
            Prevents duplicate enrollment of the same child in the same activity.
        ordering : list
            Default ordering of enrollments by enrollment date.
        """

        unique_together = ("child", "activity")
        ordering = ["enrolled_at", "id"]

    def __str__(self) -> str:
        """
        Return a string representation of the enrollment.

        Returns
        -------
        str
            The child and the activity.
        """
        return f"{self.child} -> {self.activity}"
