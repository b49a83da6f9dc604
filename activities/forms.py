# activities/forms.py
"""
Forms for the activities application.

This module defines the forms validating the query strings of the
activity listings and the JSON bodies of the enrollment and
activity administration endpoints.
"""

import re

from django import forms
from django.utils import timezone

from portail_famille.forms import JsonDateTimeField, PageForm, PartialUpdateMixin

from .models import TAG_DICTIONARY

#: Characters accepted in a tag filter
TAG_PATTERN = re.compile(r"^[A-Za-z0-9\-_/]{1,50}$")


def _dedupe(values):
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class EnrollmentForm(forms.Form):
    """
    Body of the enrollment creation endpoint.

    The parent is never part of the body, it is always the
    authenticated user.

    Attributes
    ----------
    child_id : IntegerField
        Child to enroll, positive integer.
    activity_id : IntegerField
        Target activity, positive integer.
    """

    child_id = forms.IntegerField(min_value=1)
    activity_id = forms.IntegerField(min_value=1)


class ActivityFilterForm(PageForm):
    """
    Query string of the activity listing.

    ``tags`` is a comma separated list combined with AND semantics,
    ``hasAvailableSpots=false`` is the same as no filter.
    """

    startDate = forms.DateField(input_formats=["%Y-%m-%d"], required=False)
    endDate = forms.DateField(input_formats=["%Y-%m-%d"], required=False)
    tags = forms.CharField(required=False)
    hasAvailableSpots = forms.ChoiceField(
        choices=[("true", "true"), ("false", "false")],
        required=False,
    )

    def clean_tags(self):
        raw = self.cleaned_data.get("tags") or ""
        tags = [t.strip() for t in raw.split(",") if t.strip()]
        for tag in tags:
            if not TAG_PATTERN.match(tag):
                raise forms.ValidationError(
                    "Tag contains invalid characters or length > 50", code="invalid_tag"
                )
        return _dedupe(tags)

    def clean_hasAvailableSpots(self):
        return self.cleaned_data.get("hasAvailableSpots") == "true"

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get("startDate"), cleaned.get("endDate")
        if start and end and start > end:
            self.add_error("endDate", forms.ValidationError(
                "startDate must be before or equal to endDate", code="invalid_range"
            ))
        return cleaned


class TagListField(forms.Field):
    """
    JSON array of tags taken from :data:`TAG_DICTIONARY`.

    Values are trimmed and deduplicated, the order is kept.
    """

    default_error_messages = {
        "not_a_list": "Tags must be a list of strings.",
        "unknown_tag": "Unknown tag: %(tag)s",
    }

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise forms.ValidationError(self.error_messages["not_a_list"], code="not_a_list")
        return _dedupe(v.strip() for v in value)

    def validate(self, value):
        super().validate(value)
        for tag in value:
            if tag not in TAG_DICTIONARY:
                raise forms.ValidationError(
                    self.error_messages["unknown_tag"], code="unknown_tag", params={"tag": tag}
                )


def validate_future(value):
    """Reject datetimes that are not strictly in the future."""
    if value <= timezone.now():
        raise forms.ValidationError("start_datetime must be in the future", code="past_datetime")


class AdminActivityForm(forms.Form):
    """
    Body of the activity creation endpoint.

    Attributes
    ----------
    name : CharField
        1 to 200 characters.
    description : CharField
        Up to 2000 characters, empty means no description.
    cost : DecimalField
        Between 0 and 10000.
    participant_limit : IntegerField
        Between 1 and 1000.
    start_datetime : DateTimeField
        ISO 8601 datetime in the future.
    worker_id : IntegerField
        Existing worker.
    tags : TagListField
        Tags from the closed dictionary.
    """

    name = forms.CharField(max_length=200)
    description = forms.CharField(max_length=2000, required=False)
    cost = forms.DecimalField(min_value=0, max_value=10000, max_digits=8, decimal_places=2)
    participant_limit = forms.IntegerField(min_value=1, max_value=1000)
    start_datetime = JsonDateTimeField(validators=[validate_future])
    worker_id = forms.IntegerField(min_value=1)
    tags = TagListField(required=False)

    def clean_description(self):
        return self.cleaned_data.get("description") or None


class AdminActivityUpdateForm(PartialUpdateMixin, AdminActivityForm):
    """Partial update of an activity."""

    non_nullable = ("name", "cost", "participant_limit", "start_datetime", "worker_id")
