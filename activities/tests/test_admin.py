"""
Tests of the activity administration endpoints.
"""

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone

from activities.models import Activity, ActivityTag, Enrollment, TAG_DICTIONARY
from portail_famille.testing import ApiTestCase, make_activity, make_child, make_user, make_worker


class AdminActivityTests(ApiTestCase):
    def setUp(self):
        """
        Log an administrator in and create a worker.
        """
        make_user("admin@example.org", role="admin")
        self.client.login(username="admin@example.org", password="secret-pass")
        self.worker = make_worker()
        self.list_url = reverse("activities:admin_list")

    def payload(self, **overrides):
        data = {
            "name": "Théâtre",
            "description": "Improvisation",
            "cost": 25.5,
            "participant_limit": 12,
            "start_datetime": (timezone.now() + timedelta(days=7)).isoformat(),
            "worker_id": self.worker.pk,
            "tags": ["creatif", "interieur"],
        }
        data.update(overrides)
        return data

    def detail_url(self, activity):
        return reverse("activities:admin_detail", args=[activity.pk])

    def test_create(self):
        response = self.send("post", self.list_url, self.payload())
        self.assertEqual(response.status_code, 201, response.content)
        body = response.json()
        self.assertEqual(body["name"], "Théâtre")
        self.assertEqual(body["cost"], 25.5)
        self.assertEqual(body["available_spots"], 12)
        self.assertEqual(body["tags"], ["creatif", "interieur"])
        activity = Activity.objects.get(pk=body["id"])
        self.assertEqual(activity.facility_id, 1)

    def test_create_unknown_worker(self):
        response = self.send("post", self.list_url, self.payload(worker_id=9999))
        self.assertError(response, "WORKER_NOT_FOUND", 404)
        self.assertFalse(Activity.objects.exists())

    def test_create_in_the_past(self):
        past = (timezone.now() - timedelta(days=1)).isoformat()
        response = self.send("post", self.list_url, self.payload(start_datetime=past))
        self.assertError(response, "VALIDATION_ERROR", 400)

    def test_create_with_numeric_start(self):
        response = self.send("post", self.list_url, self.payload(start_datetime=1893456000))
        self.assertError(response, "VALIDATION_ERROR", 400)
        self.assertFalse(Activity.objects.exists())

    def test_create_with_unknown_tag(self):
        response = self.send("post", self.list_url, self.payload(tags=["poterie"]))
        self.assertError(response, "VALIDATION_ERROR", 400)

    def test_create_out_of_range(self):
        self.assertError(self.send("post", self.list_url, self.payload(cost=-1)), "VALIDATION_ERROR", 400)
        self.assertError(
            self.send("post", self.list_url, self.payload(participant_limit=0)), "VALIDATION_ERROR", 400
        )

    def test_list_newest_first_with_search(self):
        make_activity(self.worker, name="Judo")
        make_activity(self.worker, name="Danse", description="Danse contemporaine")
        response = self.client.get(self.list_url)
        self.assertEqual([a["name"] for a in response.json()["activities"]], ["Danse", "Judo"])
        response = self.client.get(self.list_url, {"search": "contemp"})
        self.assertEqual([a["name"] for a in response.json()["activities"]], ["Danse"])

    def test_detail(self):
        activity = make_activity(self.worker, name="Judo")
        self.assertEqual(self.client.get(self.detail_url(activity)).json()["name"], "Judo")
        response = self.client.get(reverse("activities:admin_detail", args=[9999]))
        self.assertError(response, "ACTIVITY_NOT_FOUND", 404)

    def test_partial_update_reports_notifications(self):
        activity = make_activity(self.worker, name="Judo", tags=["sport"])
        parent = make_user("parent@example.org")
        Enrollment.objects.create(child=make_child(parent), activity=activity)

        response = self.send("patch", self.detail_url(activity), {"name": "Judo enfants"})
        self.assertEqual(response.status_code, 200, response.content)
        body = response.json()
        self.assertEqual(body["name"], "Judo enfants")
        self.assertEqual(body["tags"], ["sport"])
        self.assertEqual(body["notifications_sent"], 1)

    def test_update_replaces_tags(self):
        activity = make_activity(self.worker, tags=["sport", "plein-air"])
        response = self.send("patch", self.detail_url(activity), {"tags": ["danse"]})
        self.assertEqual(response.json()["tags"], ["danse"])
        response = self.send("patch", self.detail_url(activity), {"tags": []})
        self.assertEqual(response.json()["tags"], [])
        self.assertFalse(ActivityTag.objects.filter(activity=activity).exists())

    def test_update_requires_a_field(self):
        activity = make_activity(self.worker)
        self.assertError(self.send("patch", self.detail_url(activity), {}), "VALIDATION_ERROR", 400)

    def test_update_rejects_null_name(self):
        activity = make_activity(self.worker)
        self.assertError(self.send("patch", self.detail_url(activity), {"name": ""}), "VALIDATION_ERROR", 400)

    def test_update_unknown_worker(self):
        activity = make_activity(self.worker)
        response = self.send("patch", self.detail_url(activity), {"worker_id": 9999})
        self.assertError(response, "WORKER_NOT_FOUND", 404)

    def test_delete_cascades_enrollments(self):
        activity = make_activity(self.worker, tags=["sport"])
        parent = make_user("parent@example.org")
        Enrollment.objects.create(child=make_child(parent), activity=activity)
        Enrollment.objects.create(child=make_child(parent, first_name="Lea"), activity=activity)

        response = self.client.delete(self.detail_url(activity))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"message": "Activity deleted successfully", "notifications_sent": 2}
        )
        self.assertFalse(Enrollment.objects.exists())
        self.assertFalse(ActivityTag.objects.exists())

    def test_delete_unknown(self):
        self.assertError(
            self.client.delete(reverse("activities:admin_detail", args=[9999])), "ACTIVITY_NOT_FOUND", 404
        )

    def test_tags(self):
        response = self.client.get(reverse("activities:admin_tags"))
        self.assertEqual(response.json(), {"tags": list(TAG_DICTIONARY)})

    def test_parent_is_forbidden(self):
        make_user("parent@example.org")
        self.client.login(username="parent@example.org", password="secret-pass")
        self.assertError(self.client.get(self.list_url), "AUTH_UNAUTHORIZED", 403)
