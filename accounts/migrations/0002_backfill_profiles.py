# accounts/migrations/0002_backfill_profiles.py
"""
Data migration for the accounts application.

This migration gives every user created before the accounts
application was installed a UserProfile. Staff and superusers
become administrators, the other users parents.
"""

from django.db import migrations


def backfill_profiles(apps, schema_editor):
    """
    Create UserProfile instances for users without one.

    Parameters
    ----------
    apps : django.apps.registry.Apps
        Registry to retrieve historical models during migration.
    schema_editor : BaseDatabaseSchemaEditor
        Schema editor for applying database operations.
    """
    User = apps.get_model("auth", "User")
    UserProfile = apps.get_model("accounts", "UserProfile")
    for u in User.objects.all().only("id", "is_staff", "is_superuser"):
        role = "admin" if (u.is_staff or u.is_superuser) else "parent"
        UserProfile.objects.get_or_create(user_id=u.id, defaults={"role": role})


class Migration(migrations.Migration):

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(backfill_profiles, migrations.RunPython.noop),
    ]
