# accounts/migrations/0001_initial.py
"""
Initial migration for the accounts application.

This migration creates the UserProfile model, which extends
the built-in Django user model with the account role and the
display names.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """
    Migration class for initializing the accounts application.

    Attributes
    ----------
    initial : bool
        Indicates that this is the first migration of the app.
    dependencies : list
        Specifies dependencies, including the swappable user model.
    operations : list
        Defines the creation of the UserProfile model with fields
        and relationships.
    """

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
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
                    "role",
                    models.CharField(
                        choices=[("parent", "Parent"), ("admin", "Administrateur")],
                        default="parent",
                        max_length=16,
                        verbose_name="Rôle",
                    ),
                ),
                (
                    "first_name",
                    models.CharField(blank=True, max_length=100, null=True, verbose_name="Prénom"),
                ),
                (
                    "last_name",
                    models.CharField(blank=True, max_length=100, null=True, verbose_name="Nom"),
                ),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="Créé le"),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={"ordering": ["-created_at"]},
        ),
    ]
