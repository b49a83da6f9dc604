"""
Tests of the enrollment rules.

The rules are exercised directly on the service functions, with an
explicit reference time where the outcome depends on it.
"""

from datetime import timedelta
from unittest.mock import MagicMock, patch

from django.db import IntegrityError
from django.test import TestCase, override_settings
from django.utils import timezone

from activities.enrollments import (
    WITHDRAWN_MESSAGE,
    create_enrollment,
    list_child_enrollments,
    withdraw_enrollment,
)
from activities.models import Enrollment
from portail_famille.errors import ApiError, ErrorCode
from portail_famille.testing import make_activity, make_child, make_user, make_worker


class EnrollmentTestMixin:
    def setUp(self):
        """
        Prepare a parent with a child, another family and an activity.
        """
        self.parent = make_user("parent@example.org")
        self.child = make_child(self.parent)
        self.other_parent = make_user("other@example.org")
        self.other_child = make_child(self.other_parent, first_name="Eve")
        self.worker = make_worker()
        self.activity = make_activity(self.worker, participant_limit=2, name="Judo")

    def assertApiError(self, code, func, *args, **kwargs):
        with self.assertRaises(ApiError) as ctx:
            func(*args, **kwargs)
        self.assertEqual(ctx.exception.code, code)
        return ctx.exception


class CreateEnrollmentTests(EnrollmentTestMixin, TestCase):
    def test_enrolls_child(self):
        result = create_enrollment(self.parent, self.child.pk, self.activity.pk)
        self.assertEqual(result["child_id"], self.child.pk)
        self.assertEqual(result["activity_id"], self.activity.pk)
        self.assertEqual(result["activity"]["name"], "Judo")
        self.assertEqual(result["child"], {"first_name": "Bob", "last_name": "Demo"})
        self.assertTrue(Enrollment.objects.filter(child=self.child, activity=self.activity).exists())

    def test_unknown_child(self):
        self.assertApiError(ErrorCode.CHILD_NOT_FOUND, create_enrollment, self.parent, 9999, self.activity.pk)

    def test_child_of_another_parent(self):
        err = self.assertApiError(
            ErrorCode.CHILD_NOT_OWNED, create_enrollment, self.parent, self.other_child.pk, self.activity.pk
        )
        self.assertEqual(err.status, 403)

    def test_unknown_activity(self):
        self.assertApiError(ErrorCode.ACTIVITY_NOT_FOUND, create_enrollment, self.parent, self.child.pk, 9999)

    def test_started_activity(self):
        past = make_activity(self.worker, starts_in=timedelta(hours=-1))
        self.assertApiError(ErrorCode.ACTIVITY_STARTED, create_enrollment, self.parent, self.child.pk, past.pk)

    def test_activity_starting_now_counts_as_started(self):
        now = timezone.now()
        activity = make_activity(self.worker, start_datetime=now)
        self.assertApiError(
            ErrorCode.ACTIVITY_STARTED, create_enrollment, self.parent, self.child.pk, activity.pk, now=now
        )

    def test_full_activity(self):
        full = make_activity(self.worker, participant_limit=1)
        Enrollment.objects.create(child=self.other_child, activity=full)
        self.assertApiError(ErrorCode.ACTIVITY_FULL, create_enrollment, self.parent, self.child.pk, full.pk)

    def test_duplicate(self):
        create_enrollment(self.parent, self.child.pk, self.activity.pk)
        self.assertApiError(
            ErrorCode.ENROLLMENT_DUPLICATE, create_enrollment, self.parent, self.child.pk, self.activity.pk
        )
        self.assertEqual(Enrollment.objects.filter(activity=self.activity).count(), 1)

    def test_ownership_checked_before_activity(self):
        self.assertApiError(ErrorCode.CHILD_NOT_OWNED, create_enrollment, self.parent, self.other_child.pk, 9999)

    def test_started_checked_before_full(self):
        past = make_activity(self.worker, starts_in=timedelta(hours=-1), participant_limit=1)
        Enrollment.objects.create(child=self.other_child, activity=past)
        self.assertApiError(ErrorCode.ACTIVITY_STARTED, create_enrollment, self.parent, self.child.pk, past.pk)

    def test_full_checked_before_duplicate(self):
        full = make_activity(self.worker, participant_limit=1)
        Enrollment.objects.create(child=self.child, activity=full)
        self.assertApiError(ErrorCode.ACTIVITY_FULL, create_enrollment, self.parent, self.child.pk, full.pk)

    def test_concurrent_insert_maps_to_duplicate(self):
        with patch.object(Enrollment.objects, "create", side_effect=IntegrityError("unique")):
            self.assertApiError(
                ErrorCode.ENROLLMENT_DUPLICATE, create_enrollment, self.parent, self.child.pk, self.activity.pk
            )

    def test_recount_over_limit_rolls_back(self):
        activity = make_activity(self.worker, participant_limit=1)

        def racing_create(**kwargs):
            # Another family takes the last place at the same time.
            Enrollment(child=self.other_child, activity=activity).save()
            enrollment = Enrollment(**kwargs)
            enrollment.save()
            return enrollment

        with patch.object(Enrollment.objects, "create", side_effect=racing_create):
            self.assertApiError(ErrorCode.ACTIVITY_FULL, create_enrollment, self.parent, self.child.pk, activity.pk)
        self.assertFalse(Enrollment.objects.filter(activity=activity).exists())

    def test_unparsable_start_is_internal_error(self):
        broken = MagicMock(start_datetime="garbage", participant_limit=5)
        with patch("activities.enrollments.Activity.objects") as objects:
            objects.select_for_update.return_value.filter.return_value.first.return_value = broken
            err = self.assertApiError(
                ErrorCode.INTERNAL_ERROR, create_enrollment, self.parent, self.child.pk, self.activity.pk
            )
        self.assertEqual(err.to_dict()["error"]["message"], "An internal error occurred")


class WithdrawEnrollmentTests(EnrollmentTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        Enrollment.objects.create(child=self.child, activity=self.activity)
        self.start = self.activity.start_datetime

    def test_withdraws_with_enough_notice(self):
        result = withdraw_enrollment(
            self.parent, self.child.pk, self.activity.pk, now=self.start - timedelta(hours=24)
        )
        self.assertEqual(result, {"message": WITHDRAWN_MESSAGE})
        self.assertFalse(Enrollment.objects.filter(child=self.child).exists())

    def test_refuses_inside_cutoff(self):
        err = self.assertApiError(
            ErrorCode.WITHDRAWAL_TOO_LATE,
            withdraw_enrollment,
            self.parent,
            self.child.pk,
            self.activity.pk,
            now=self.start - timedelta(hours=23),
        )
        self.assertEqual(err.details, {"remaining_ms": 23 * 3600 * 1000})
        self.assertEqual(err.message, "Cannot withdraw enrollment less than 24h before activity start")
        self.assertTrue(Enrollment.objects.filter(child=self.child).exists())

    @override_settings(WITHDRAWAL_CUTOFF_HOURS=48)
    def test_message_follows_configured_cutoff(self):
        err = self.assertApiError(
            ErrorCode.WITHDRAWAL_TOO_LATE,
            withdraw_enrollment,
            self.parent,
            self.child.pk,
            self.activity.pk,
            now=self.start - timedelta(hours=30),
        )
        self.assertEqual(err.message, "Cannot withdraw enrollment less than 48h before activity start")

    def test_refuses_after_start_with_negative_remaining(self):
        err = self.assertApiError(
            ErrorCode.WITHDRAWAL_TOO_LATE,
            withdraw_enrollment,
            self.parent,
            self.child.pk,
            self.activity.pk,
            now=self.start + timedelta(hours=1),
        )
        self.assertEqual(err.details["remaining_ms"], -3600 * 1000)

    def test_unknown_enrollment(self):
        other = make_activity(self.worker)
        self.assertApiError(
            ErrorCode.ENROLLMENT_NOT_FOUND, withdraw_enrollment, self.parent, self.child.pk, other.pk
        )

    def test_child_of_another_parent(self):
        self.assertApiError(
            ErrorCode.CHILD_NOT_OWNED, withdraw_enrollment, self.other_parent, self.child.pk, self.activity.pk
        )

    def test_unknown_child(self):
        self.assertApiError(ErrorCode.CHILD_NOT_FOUND, withdraw_enrollment, self.parent, 9999, self.activity.pk)


class ListChildEnrollmentsTests(EnrollmentTestMixin, TestCase):
    def test_lists_with_withdrawal_flag(self):
        soon = make_activity(self.worker, starts_in=timedelta(hours=5), name="Piscine")
        Enrollment.objects.create(child=self.child, activity=self.activity)
        Enrollment.objects.create(child=self.child, activity=soon)

        result = list_child_enrollments(self.parent, self.child.pk)
        by_name = {e["activity"]["name"]: e for e in result["enrollments"]}
        self.assertTrue(by_name["Judo"]["can_withdraw"])
        self.assertFalse(by_name["Piscine"]["can_withdraw"])
        self.assertEqual(by_name["Judo"]["activity"]["worker"], {"first_name": "Claire", "last_name": "Martin"})

    def test_empty(self):
        self.assertEqual(list_child_enrollments(self.parent, self.child.pk), {"enrollments": []})

    def test_child_of_another_parent(self):
        self.assertApiError(ErrorCode.CHILD_NOT_OWNED, list_child_enrollments, self.parent, self.other_child.pk)


class EnrollmentScenarioTests(TestCase):
    """
    End-to-end scenarios on one child and one activity of five places.
    """

    def setUp(self):
        self.now = timezone.now()
        self.parent = make_user("p@example.org")
        self.child = make_child(self.parent)
        self.worker = make_worker()

    def activity(self, starts_in):
        return make_activity(self.worker, participant_limit=5, start_datetime=self.now + starts_in)

    def test_enroll_two_hours_before_start(self):
        activity = self.activity(timedelta(hours=2))
        result = create_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual((result["child_id"], result["activity_id"]), (self.child.pk, activity.pk))
        self.assertTrue(result["enrolled_at"])

    def test_enroll_after_start(self):
        activity = self.activity(timedelta(hours=-1))
        with self.assertRaises(ApiError) as ctx:
            create_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual(ctx.exception.code, ErrorCode.ACTIVITY_STARTED)
        self.assertFalse(Enrollment.objects.exists())

    def test_enroll_in_full_activity(self):
        activity = self.activity(timedelta(days=1))
        for i in range(5):
            Enrollment.objects.create(child=make_child(self.parent, first_name=f"C{i}"), activity=activity)
        with self.assertRaises(ApiError) as ctx:
            create_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual(ctx.exception.code, ErrorCode.ACTIVITY_FULL)
        self.assertEqual(Enrollment.objects.filter(activity=activity).count(), 5)

    def test_same_request_twice(self):
        activity = self.activity(timedelta(days=1))
        create_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        with self.assertRaises(ApiError) as ctx:
            create_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual(ctx.exception.code, ErrorCode.ENROLLMENT_DUPLICATE)

    def test_withdraw_23_hours_before_start(self):
        activity = self.activity(timedelta(hours=23))
        Enrollment.objects.create(child=self.child, activity=activity)
        with self.assertRaises(ApiError) as ctx:
            withdraw_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual(ctx.exception.code, ErrorCode.WITHDRAWAL_TOO_LATE)
        self.assertTrue(Enrollment.objects.filter(child=self.child, activity=activity).exists())

    def test_withdraw_25_hours_before_start(self):
        activity = self.activity(timedelta(hours=25))
        Enrollment.objects.create(child=self.child, activity=activity)
        withdraw_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        with self.assertRaises(ApiError) as ctx:
            withdraw_enrollment(self.parent, self.child.pk, activity.pk, now=self.now)
        self.assertEqual(ctx.exception.code, ErrorCode.ENROLLMENT_NOT_FOUND)
