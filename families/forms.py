# families/forms.py
"""
Forms for the families application.

This module defines the forms validating the JSON bodies of the
child creation and update endpoints.
"""

from django import forms
from django.utils import timezone

from portail_famille.forms import JsonDateField, PartialUpdateMixin


def validate_not_in_future(value):
    """Reject birth dates after today."""
    if value > timezone.localdate():
        raise forms.ValidationError("birth_date cannot be in the future", code="future_date")


class ChildForm(forms.Form):
    """
    Form for creating a child.

    Names are trimmed and required, ``birth_date`` uses the
    ``YYYY-MM-DD`` format and cannot be in the future. An empty
    description is stored as null.
    """

    first_name = forms.CharField(label="Prénom", max_length=100)
    last_name = forms.CharField(label="Nom", max_length=100)
    birth_date = JsonDateField(
        label="Date de naissance",
        input_formats=["%Y-%m-%d"],
        validators=[validate_not_in_future],
    )
    description = forms.CharField(label="Description", max_length=1000, required=False)

    def clean_description(self):
        return self.cleaned_data.get("description") or None


class ChildUpdateForm(PartialUpdateMixin, ChildForm):
    """
    Partial update of a child.

    Every field is optional but the names and the birth date cannot
    be sent empty.
    """

    non_nullable = ("first_name", "last_name", "birth_date")
