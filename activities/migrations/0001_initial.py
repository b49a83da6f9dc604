# activities/migrations/0001_initial.py
"""
Initial migration for the activities application.

This migration creates the core models for the activities app:
- Facility: the place hosting activities.
- Activity: represents an offered activity.
- ActivityTag: a tag attached to an activity.
- Enrollment: represents a child's enrollment in an activity.
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """
    Initial migration class for the activities application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration for the app.
    dependencies : list
        The families and workers apps, referenced by foreign keys.
    operations : list
        Creation of the four models with their relationships.
    """

    initial = True

    dependencies = [
        ("families", "0001_initial"),
        ("workers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Facility",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=200, verbose_name="Nom")),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Créé le"),
                ),
            ],
            options={"verbose_name": "Établissement"},
        ),
        migrations.CreateModel(
            name="Activity",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=200, verbose_name="Nom")),
                (
                    "description",
                    models.TextField(
                        blank=True,
                        max_length=2000,
                        null=True,
                        verbose_name="Description",
                    ),
                ),
                (
                    "cost",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=8,
                        verbose_name="Tarif (€)",
                    ),
                ),
                (
                    "participant_limit",
                    models.PositiveIntegerField(verbose_name="Nombre de places"),
                ),
                ("start_datetime", models.DateTimeField(verbose_name="Début")),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Créé le"),
                ),
                (
                    "facility",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="activities",
                        to="activities.facility",
                        verbose_name="Établissement",
                    ),
                ),
                (
                    "worker",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="activities",
                        to="workers.worker",
                        verbose_name="Animateur",
                    ),
                ),
            ],
            options={
                "ordering": ["start_datetime", "id"],
                "verbose_name_plural": "activities",
            },
        ),
        migrations.CreateModel(
            name="ActivityTag",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("tag", models.CharField(max_length=50, verbose_name="Étiquette")),
                (
                    "activity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tags",
                        to="activities.activity",
                        verbose_name="Activité",
                    ),
                ),
            ],
            options={
                "ordering": ["tag"],
                "unique_together": {("activity", "tag")},
            },
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "enrolled_at",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Inscrit le"),
                ),
                (
                    "activity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="activities.activity",
                        verbose_name="Activité",
                    ),
                ),
                (
                    "child",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="families.child",
                        verbose_name="Enfant",
                    ),
                ),
            ],
            options={
                "ordering": ["enrolled_at", "id"],
                "unique_together": {("child", "activity")},
            },
        ),
    ]
