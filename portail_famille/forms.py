# portail_famille/forms.py
"""
Forms and fields shared by the JSON and query-string endpoints.
"""

from datetime import date

from django import forms

from .pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PageForm(forms.Form):
    """
    ``page`` and ``limit`` query parameters.

    ``page`` defaults to 1, ``limit`` defaults to 20 and is capped
    at 100.
    """

    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, max_value=MAX_PAGE_SIZE, required=False)

    def clean_page(self):
        return self.cleaned_data.get("page") or 1

    def clean_limit(self):
        return self.cleaned_data.get("limit") or DEFAULT_PAGE_SIZE


class JsonTemporalMixin:
    """
    Reject JSON values that are neither strings nor dates.

    JSON bodies can carry numbers, lists or objects where the temporal
    fields of Django only parse strings.
    """

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, (str, date)):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
        return super().to_python(value)


class JsonDateField(JsonTemporalMixin, forms.DateField):
    pass


class JsonDateTimeField(JsonTemporalMixin, forms.DateTimeField):
    pass


class SearchPageForm(PageForm):
    """Paginated listing with an optional free-text ``search``."""

    search = forms.CharField(max_length=100, required=False)


class PartialUpdateMixin:
    """
    Turn a form into a partial update form.

    Only the keys present in the body are validated and applied, and
    at least one of them must be provided. Fields listed in
    ``non_nullable`` cannot be sent empty.
    """

    non_nullable = ()

    def __init__(self, data=None, *args, **kwargs):
        super().__init__(data, *args, **kwargs)
        self.provided = [name for name in self.fields if data is not None and name in data]
        for field in self.fields.values():
            field.required = False

    def clean(self):
        cleaned = super().clean()
        if not self.provided:
            raise forms.ValidationError("At least one field must be provided", code="empty")
        for name in self.provided:
            if name in self.non_nullable and name not in self.errors and cleaned.get(name) in (None, ""):
                self.add_error(name, forms.ValidationError("This field is required.", code="required"))
        return cleaned

    def changes(self) -> dict:
        """Return the cleaned values of the provided fields."""
        return {name: self.cleaned_data.get(name) for name in self.provided}
