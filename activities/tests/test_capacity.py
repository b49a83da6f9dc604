"""
Unit tests for the capacity and timing helpers.
"""

from datetime import datetime, timedelta, timezone as dt_timezone

from django.test import SimpleTestCase, override_settings

from activities.capacity import (
    available_spots,
    can_withdraw,
    coerce_start,
    is_full,
    time_until_start,
)
from portail_famille.errors import ApiError, ErrorCode

NOW = datetime(2030, 1, 10, 12, 0, tzinfo=dt_timezone.utc)


class AvailableSpotsTests(SimpleTestCase):
    def test_counts_free_places(self):
        self.assertEqual(available_spots(10, 3), 7)
        self.assertFalse(is_full(10, 3))

    def test_never_negative(self):
        self.assertEqual(available_spots(2, 5), 0)
        self.assertTrue(is_full(2, 5))

    def test_full_at_limit(self):
        self.assertTrue(is_full(4, 4))


class CoerceStartTests(SimpleTestCase):
    def test_naive_datetime_is_utc(self):
        start = coerce_start(datetime(2030, 1, 12, 9, 0))
        self.assertEqual(start.utcoffset(), timedelta(0))

    def test_parses_iso_string(self):
        start = coerce_start("2030-01-12T09:00:00+02:00")
        self.assertEqual(start, datetime(2030, 1, 12, 7, 0, tzinfo=dt_timezone.utc))

    def test_unparsable_value_is_internal_error(self):
        for value in ("garbage", "", None, 42):
            with self.subTest(value=value):
                with self.assertRaises(ApiError) as ctx:
                    coerce_start(value)
                self.assertEqual(ctx.exception.code, ErrorCode.INTERNAL_ERROR)
                self.assertEqual(ctx.exception.status, 500)


class WithdrawalWindowTests(SimpleTestCase):
    def test_time_until_start_is_negative_once_started(self):
        self.assertLess(time_until_start(NOW - timedelta(minutes=1), NOW), timedelta(0))

    def test_exactly_cutoff_allows_withdrawal(self):
        self.assertTrue(can_withdraw(NOW + timedelta(hours=24), NOW))

    def test_just_under_cutoff_refuses(self):
        self.assertFalse(can_withdraw(NOW + timedelta(hours=24) - timedelta(seconds=1), NOW))

    @override_settings(WITHDRAWAL_CUTOFF_HOURS=48)
    def test_cutoff_follows_settings(self):
        self.assertFalse(can_withdraw(NOW + timedelta(hours=30), NOW))
        self.assertTrue(can_withdraw(NOW + timedelta(hours=48), NOW))
