# accounts/mixins.py
"""
Access-control mixins for the JSON views.

Each API view declares the role it requires by inheriting one of
the mixins below. The caller is resolved from the Django session:
an anonymous caller is rejected with ``401``, an authenticated
caller with the wrong role with ``403``. In both cases the code is
``AUTH_UNAUTHORIZED``.
"""

from django.views import View

from portail_famille.errors import ApiError, ErrorCode, create_error

from .models import UserProfile


def resolve_profile(request, role: str) -> UserProfile:
    """
    Return the profile of the authenticated caller if it has ``role``.

    Parameters
    ----------
    request : HttpRequest
        The current request.
    role : str
        Required role, one of :class:`UserProfile.Role`.

    Returns
    -------
    UserProfile
        The profile of ``request.user``.

    Raises
    ------
    ApiError
        ``AUTH_UNAUTHORIZED`` (401) for anonymous callers,
        ``AUTH_UNAUTHORIZED`` (403) for callers with another role.
    """
    user = request.user
    if not user.is_authenticated:
        raise create_error(ErrorCode.AUTH_UNAUTHORIZED, "Authentication required")
    profile = getattr(user, "profile", None)
    if profile is None or profile.role != role:
        raise create_error(
            ErrorCode.AUTH_UNAUTHORIZED,
            f"Access restricted to the {role} role",
            status=403,
        )
    return profile


class ApiView(View):
    """
    Base class of the JSON views.

    Subclasses set ``required_role``; the resolved profile is stored
    on ``self.profile`` before the handler runs. A ``None`` role means
    the view is public.
    """

    required_role = None

    def dispatch(self, request, *args, **kwargs):
        self.profile = None
        if self.required_role is not None:
            self.profile = resolve_profile(request, self.required_role)
        return super().dispatch(request, *args, **kwargs)

    def http_method_not_allowed(self, request, *args, **kwargs):
        raise ApiError(
            ErrorCode.VALIDATION_ERROR,
            f"Method {request.method} not allowed",
            status=405,
        )


class ParentRequiredMixin:
    """Restrict a view to parent accounts."""

    required_role = UserProfile.Role.PARENT


class AdminRequiredMixin:
    """Restrict a view to administrator accounts."""

    required_role = UserProfile.Role.ADMIN
