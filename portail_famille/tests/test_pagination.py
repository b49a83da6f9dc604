"""
Tests of the pagination helpers.
"""

from django.test import SimpleTestCase

from portail_famille.errors import ApiError, ErrorCode
from portail_famille.pagination import build_pagination, paginate
from portail_famille.testing import ApiTestCase, make_worker
from workers.models import Worker


class PaginateTests(SimpleTestCase):
    items = list(range(1, 8))

    def test_pages(self):
        self.assertEqual(paginate(self.items, 1, 3), ([1, 2, 3], {"page": 1, "limit": 3, "total": 7}))
        self.assertEqual(paginate(self.items, 3, 3)[0], [7])

    def test_past_the_end_keeps_total(self):
        self.assertEqual(paginate(self.items, 4, 3), ([], {"page": 4, "limit": 3, "total": 7}))

    def test_empty_sequence(self):
        self.assertEqual(paginate([], 1, 20), ([], {"page": 1, "limit": 20, "total": 0}))
        self.assertEqual(paginate([], 2, 20)[0], [])

    def test_page_and_limit_below_one(self):
        for page, limit in ((0, 20), (1, 0)):
            with self.assertRaises(ApiError) as ctx:
                paginate(self.items, page, limit)
            self.assertEqual(ctx.exception.code, ErrorCode.VALIDATION_ERROR)

    def test_negative_total(self):
        with self.assertRaises(ApiError):
            build_pagination(1, 20, -1)


class PaginateQuerySetTests(ApiTestCase):
    def test_queryset(self):
        for i in range(3):
            make_worker(email=f"worker{i}@example.org")
        items, pagination = paginate(Worker.objects.order_by("email"), 2, 2)
        self.assertEqual([w.email for w in items], ["worker2@example.org"])
        self.assertEqual(pagination["total"], 3)
        self.assertEqual(paginate(Worker.objects.all(), 3, 2), ([], {"page": 3, "limit": 2, "total": 3}))
