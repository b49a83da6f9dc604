# workers/forms.py
"""
Forms for the workers application.
"""

from django import forms


class WorkerForm(forms.Form):
    """
    Body of the worker creation and update endpoints.

    Names are trimmed, the e-mail is trimmed and lower-cased.
    Uniqueness is enforced by the database and reported as
    ``WORKER_EMAIL_CONFLICT``.
    """

    first_name = forms.CharField(label="Prénom", max_length=100)
    last_name = forms.CharField(label="Nom", max_length=100)
    email = forms.EmailField(label="E-mail", max_length=255)

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()
