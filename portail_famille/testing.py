# portail_famille/testing.py
"""
Helpers shared by the test suites of the project applications.
"""

from datetime import date, timedelta
from decimal import Decimal
from itertools import count
import json

from django.contrib.auth.models import User
from django.test import TestCase, override_settings
from django.utils import timezone

_sequence = count(1)


def make_user(email, password="secret-pass", role="parent", **extra):
    """
    Create a user with a profile of the given role.

    The profile is created by the ``post_save`` signal, the role is
    then forced to ``role``.
    """
    user = User.objects.create_user(username=email, email=email, password=password, **extra)
    profile = user.profile
    profile.role = role
    profile.save(update_fields=["role"])
    return user


def make_worker(email="worker@example.org", **extra):
    from workers.models import Worker

    defaults = {"first_name": "Claire", "last_name": "Martin"}
    defaults.update(extra)
    return Worker.objects.create(email=email, **defaults)


def make_child(parent, first_name="Bob", last_name="Demo", **extra):
    from families.models import Child

    extra.setdefault("birth_date", date(2016, 6, 1))
    return Child.objects.create(parent=parent, first_name=first_name, last_name=last_name, **extra)


def make_activity(worker=None, starts_in=timedelta(days=3), tags=(), **extra):
    """
    Create an activity starting ``starts_in`` from now.

    Parameters
    ----------
    worker : Worker, optional
        Leader, a new worker is created when omitted.
    starts_in : timedelta
        Delay between now and the start.
    tags : iterable of str
        Tags to attach.
    """
    from activities.models import Activity, ActivityTag
    from activities.services_admin import get_default_facility

    defaults = {
        "name": "Atelier",
        "cost": Decimal("10.00"),
        "participant_limit": 10,
        "start_datetime": timezone.now() + starts_in,
    }
    defaults.update(extra)
    if worker is None:
        worker = make_worker(email=f"worker{next(_sequence)}@example.org")
    activity = Activity.objects.create(worker=worker, facility=get_default_facility(), **defaults)
    for tag in tags:
        ActivityTag.objects.create(activity=activity, tag=tag)
    return activity


@override_settings(JOURNAL_ENABLED=False)
class ApiTestCase(TestCase):
    """
    Base class of the API tests.

    Provides JSON helpers and asserts on the error body.
    """

    def send(self, method, url, data=None):
        """Send ``data`` as a JSON body with the HTTP ``method``."""
        handler = getattr(self.client, method.lower())
        if data is None:
            return handler(url)
        return handler(url, data=json.dumps(data), content_type="application/json")

    def assertError(self, response, code, status):
        """Assert the response is the JSON error ``code`` with ``status``."""
        self.assertEqual(response.status_code, status, response.content)
        self.assertEqual(response.json()["error"]["code"], code)
