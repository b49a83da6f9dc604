# activities/management/commands/bootstrap_demo.py
"""
Management command to initialize demo data.

This command creates demo accounts, a child, a worker and a few
upcoming activities so the API can be tried right away. It can be
executed using::

    python manage.py bootstrap_demo

Running it twice does not duplicate anything.
"""

from datetime import date, datetime, time, timedelta, timezone as dt_timezone

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand
from django.utils import timezone

from accounts.models import UserProfile
from activities.models import Activity, ActivityTag
from activities.services_admin import get_default_facility
from families.models import Child
from workers.models import Worker

#: Demo activities: name, cost, places, days from today, hour, tags
DEMO_ACTIVITIES = (
    ("Atelier peinture", 12, 10, 3, 14, ("creatif", "interieur")),
    ("Football", 8, 16, 5, 10, ("sport", "plein-air")),
    ("Éveil musical", 10, 8, 9, 16, ("musique", "interieur")),
    ("Cours d'anglais", 15, 1, 12, 17, ("langues", "individuel")),
)


class Command(BaseCommand):
    """
    Django management command for demo initialization.

    Creates:
    - An administrator account (``admin@example.org`` / ``admin123``).
    - A parent account (``parent@example.org`` / ``parent123``) with a child.
    - The facility of the deployment and one worker.
    - Upcoming activities with tags, relative to the current date.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Create demo accounts, a worker and upcoming activities."

    def handle(self, *args, **options):
        """
        Execute the command.

        Parameters
        ----------
        *args : list
            Additional positional arguments.
        **options : dict
            Command options from the CLI.
        """
        # --- Create administrator account ---
        admin, created = User.objects.get_or_create(
            username="admin@example.org",
            defaults={"email": "admin@example.org", "is_staff": True, "is_superuser": True},
        )
        if created:
            admin.set_password("admin123")
            admin.save()
            self.stdout.write(self.style.SUCCESS("Admin : admin@example.org/admin123"))
        UserProfile.objects.update_or_create(user=admin, defaults={"role": UserProfile.Role.ADMIN})

        # --- Create parent account ---
        parent, created = User.objects.get_or_create(
            username="parent@example.org",
            defaults={"email": "parent@example.org", "first_name": "Alice", "last_name": "Demo"},
        )
        if created:
            parent.set_password("parent123")
            parent.save()
            self.stdout.write(self.style.SUCCESS("Parent : parent@example.org/parent123"))
        UserProfile.objects.update_or_create(
            user=parent,
            defaults={"role": UserProfile.Role.PARENT, "first_name": "Alice", "last_name": "Demo"},
        )

        # --- Create demo child ---
        Child.objects.get_or_create(
            parent=parent,
            first_name="Bob",
            last_name="Demo",
            defaults={"birth_date": date(2016, 6, 1)},
        )

        # --- Facility and worker ---
        facility = get_default_facility()
        worker, _ = Worker.objects.get_or_create(
            email="animateur@example.org",
            defaults={"first_name": "Claire", "last_name": "Martin"},
        )

        # --- Upcoming activities ---
        today = timezone.now().date()
        for name, cost, places, days, hour, tags in DEMO_ACTIVITIES:
            start = datetime.combine(today + timedelta(days=days), time(hour), tzinfo=dt_timezone.utc)
            activity, _ = Activity.objects.update_or_create(
                name=name,
                defaults={
                    "description": f"{name} pour les enfants",
                    "cost": cost,
                    "participant_limit": places,
                    "start_datetime": start,
                    "worker": worker,
                    "facility": facility,
                },
            )
            for tag in tags:
                ActivityTag.objects.get_or_create(activity=activity, tag=tag)

        self.stdout.write(self.style.SUCCESS("Demo data initialized."))
