# accounts/views.py
"""
Views for the accounts application.

This module defines the authentication endpoints (registration,
login, logout, CSRF cookie) and the profile endpoint of the
authenticated parent. Authentication relies on Django sessions.
"""

from django.contrib.auth import authenticate, login, logout
from django.middleware.csrf import get_token
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from portail_famille.errors import ErrorCode, create_error, from_form_errors
from portail_famille.http import json_response, parse_json_body

from . import services
from .forms import LoginForm, ProfileForm, SignUpForm
from .mixins import ApiView, ParentRequiredMixin


def _session_payload(user) -> dict:
    profile = getattr(user, "profile", None)
    return {
        "id": user.pk,
        "email": user.email,
        "role": profile.role if profile else None,
    }


@require_POST
def signup(request):
    """
    Register a parent account.

    The body carries ``email``, ``password``, ``first_name`` and
    ``last_name``. On success the user is logged in immediately.

    Parameters
    ----------
    request : HttpRequest
        The incoming request object.

    Returns
    -------
    JsonResponse
        ``{id, email, role}`` with status 201.

    Raises
    ------
    ApiError
        ``VALIDATION_ERROR`` on an invalid body or an e-mail
        already in use.
    """
    form = SignUpForm(parse_json_body(request))
    if not form.is_valid():
        raise from_form_errors(form)
    user = services.register_parent(form.cleaned_data)
    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    return json_response(_session_payload(user), status=201)


@require_POST
def login_view(request):
    """
    Open a session from an e-mail and a password.

    Returns
    -------
    JsonResponse
        ``{id, email, role}``.

    Raises
    ------
    ApiError
        ``AUTH_UNAUTHORIZED`` (401) on bad credentials.
    """
    form = LoginForm(parse_json_body(request))
    if not form.is_valid():
        raise from_form_errors(form)
    user = authenticate(
        request,
        username=form.cleaned_data["email"],
        password=form.cleaned_data["password"],
    )
    if user is None:
        raise create_error(ErrorCode.AUTH_UNAUTHORIZED, "Invalid email or password")
    login(request, user)
    return json_response(_session_payload(user))


@require_POST
def logout_view(request):
    """
    Log out the current user.

    Terminates the session. Calling it without a session is harmless.

    Returns
    -------
    JsonResponse
        A confirmation message.
    """
    logout(request)
    return json_response({"message": "Logged out"})


@require_GET
@ensure_csrf_cookie
def csrf_view(request):
    """Set the CSRF cookie and return the token for JSON clients."""
    return json_response({"csrfToken": get_token(request)})


class ProfileView(ParentRequiredMixin, ApiView):
    """
    Profile of the authenticated parent.

    ``GET`` returns it, ``PATCH`` replaces both names.
    """

    def get(self, request):
        return json_response(services.serialize_profile(self.profile))

    def patch(self, request):
        form = ProfileForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        return json_response(services.update_profile(self.profile, form.cleaned_data))
