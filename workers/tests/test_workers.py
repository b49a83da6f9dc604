"""
Tests of the worker administration endpoints.
"""

from django.urls import reverse

from portail_famille.testing import ApiTestCase, make_activity, make_user, make_worker
from workers.models import Worker


class WorkerTests(ApiTestCase):
    def setUp(self):
        """
        Log an administrator in.
        """
        make_user("admin@example.org", role="admin")
        self.client.login(username="admin@example.org", password="secret-pass")
        self.list_url = reverse("workers:list")

    def detail_url(self, worker_id):
        return reverse("workers:detail", args=[worker_id])

    def test_create(self):
        response = self.send(
            "post", self.list_url, {"first_name": "Paul", "last_name": "Roux", "email": "Paul@Example.org"}
        )
        self.assertEqual(response.status_code, 201, response.content)
        self.assertEqual(response.json()["email"], "paul@example.org")

    def test_create_duplicate_email(self):
        make_worker(email="paul@example.org")
        response = self.send(
            "post", self.list_url, {"first_name": "Paul", "last_name": "Roux", "email": "paul@example.org"}
        )
        self.assertError(response, "WORKER_EMAIL_CONFLICT", 409)

    def test_create_invalid_email(self):
        response = self.send("post", self.list_url, {"first_name": "Paul", "last_name": "Roux", "email": "paul"})
        self.assertError(response, "VALIDATION_ERROR", 400)

    def test_list_newest_first(self):
        make_worker(email="a@example.org")
        make_worker(email="b@example.org")
        response = self.client.get(self.list_url, {"limit": 1})
        self.assertEqual([w["email"] for w in response.json()["workers"]], ["b@example.org"])
        self.assertEqual(response.json()["pagination"], {"page": 1, "limit": 1, "total": 2})

    def test_get(self):
        worker = make_worker()
        self.assertEqual(self.client.get(self.detail_url(worker.pk)).json()["email"], "worker@example.org")
        self.assertError(self.client.get(self.detail_url(9999)), "WORKER_NOT_FOUND", 404)

    def test_update(self):
        worker = make_worker()
        response = self.send(
            "put", self.detail_url(worker.pk), {"first_name": "Léa", "last_name": "Blanc", "email": "lea@example.org"}
        )
        self.assertEqual(response.status_code, 200, response.content)
        worker.refresh_from_db()
        self.assertEqual(worker.email, "lea@example.org")

    def test_update_to_taken_email(self):
        make_worker(email="taken@example.org")
        worker = make_worker()
        response = self.send(
            "put", self.detail_url(worker.pk), {"first_name": "Léa", "last_name": "Blanc", "email": "taken@example.org"}
        )
        self.assertError(response, "WORKER_EMAIL_CONFLICT", 409)

    def test_delete(self):
        worker = make_worker()
        response = self.client.delete(self.detail_url(worker.pk))
        self.assertEqual(response.json(), {"message": "Worker deleted successfully"})
        self.assertFalse(Worker.objects.exists())

    def test_delete_with_activities(self):
        worker = make_worker()
        make_activity(worker)
        response = self.client.delete(self.detail_url(worker.pk))
        self.assertError(response, "WORKER_HAS_ACTIVITIES", 400)
        self.assertTrue(Worker.objects.filter(pk=worker.pk).exists())

    def test_parent_is_forbidden(self):
        make_user("parent@example.org")
        self.client.login(username="parent@example.org", password="secret-pass")
        self.assertError(self.client.get(self.list_url), "AUTH_UNAUTHORIZED", 403)
