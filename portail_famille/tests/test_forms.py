"""
Tests of the shared form fields.
"""

from datetime import date, datetime, timezone

from django import forms
from django.test import SimpleTestCase

from portail_famille.forms import JsonDateField, JsonDateTimeField


class JsonTemporalFieldTests(SimpleTestCase):
    def assertInvalid(self, field, value):
        with self.assertRaises(forms.ValidationError) as ctx:
            field.clean(value)
        self.assertEqual(ctx.exception.code, "invalid")

    def test_date_field_rejects_non_strings(self):
        field = JsonDateField(input_formats=["%Y-%m-%d"])
        for value in (20160101, 2016.5, ["2016-01-01"], {"year": 2016}, True):
            self.assertInvalid(field, value)

    def test_date_field_parses_strings_and_dates(self):
        field = JsonDateField(input_formats=["%Y-%m-%d"])
        self.assertEqual(field.clean("2016-01-01"), date(2016, 1, 1))
        self.assertEqual(field.clean(date(2016, 1, 1)), date(2016, 1, 1))

    def test_datetime_field_rejects_non_strings(self):
        field = JsonDateTimeField()
        for value in (1893456000, ["2030-01-01T10:00:00Z"]):
            self.assertInvalid(field, value)

    def test_datetime_field_parses_iso_strings(self):
        value = JsonDateTimeField().clean("2030-01-01T10:00:00+00:00")
        self.assertEqual(value, datetime(2030, 1, 1, 10, tzinfo=timezone.utc))

    def test_empty_values_are_optional(self):
        field = JsonDateField(required=False)
        self.assertIsNone(field.clean(None))
        self.assertIsNone(field.clean(""))
