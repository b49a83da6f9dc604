# accounts/forms.py
"""
Forms for the accounts application.

This module defines the forms validating the JSON bodies of the
registration, login, and profile endpoints.
"""

from django import forms
from django.contrib.auth import get_user_model

User = get_user_model()


class SignUpForm(forms.Form):
    """
    Form for registering a new parent account.

    The e-mail address doubles as the username. It is normalized
    to lower case and must not already be in use.

    Attributes
    ----------
    email : EmailField
        Login e-mail of the new account.
    password : CharField
        Password, at least 8 characters.
    first_name : CharField
        First name of the parent.
    last_name : CharField
        Last name of the parent.
    """

    email = forms.EmailField(label="E-mail", max_length=255)
    password = forms.CharField(label="Mot de passe", min_length=8, max_length=128, strip=False)
    first_name = forms.CharField(label="Prénom", max_length=100)
    last_name = forms.CharField(label="Nom", max_length=100)

    def clean_email(self):
        """
        Normalize the e-mail and reject addresses already registered.

        Returns
        -------
        str
            The lower-cased e-mail address.
        """
        email = self.cleaned_data["email"].strip().lower()
        if User.objects.filter(username__iexact=email).exists():
            raise forms.ValidationError("An account already exists for this e-mail.", code="unique")
        return email


class LoginForm(forms.Form):
    """Credentials sent to the login endpoint."""

    email = forms.EmailField(label="E-mail", max_length=255)
    password = forms.CharField(label="Mot de passe", max_length=128, strip=False)

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()


class ProfileForm(forms.Form):
    """
    Profile update, both names are required.

    Values are trimmed by ``CharField`` so a blank name is rejected.
    """

    first_name = forms.CharField(label="Prénom", min_length=1, max_length=100)
    last_name = forms.CharField(label="Nom", min_length=1, max_length=100)
