# reports/forms.py
"""
Forms for the reports application.
"""

import datetime

from django import forms
from django.utils import timezone


def current_monday(today=None) -> datetime.date:
    """Return the Monday of the current week, in UTC."""
    today = today or timezone.now().astimezone(datetime.timezone.utc).date()
    return today - datetime.timedelta(days=today.weekday())


class WeeklyReportForm(forms.Form):
    """
    Query string of the weekly cost report.

    Attributes
    ----------
    week : DateField
        Monday of the requested week (``YYYY-MM-DD``), defaults to
        the current week.
    format : ChoiceField
        ``pdf`` or ``json``, defaults to ``settings.REPORT_BACKEND``.
    """

    week = forms.DateField(input_formats=["%Y-%m-%d"], required=False)
    format = forms.ChoiceField(choices=[("pdf", "PDF"), ("json", "JSON")], required=False)

    def clean_week(self):
        week = self.cleaned_data.get("week")
        if week is None:
            return current_monday()
        if week.weekday() != 0:
            raise forms.ValidationError("week must be Monday ISO date", code="not_monday")
        return week
