# accounts/middleware.py
"""
Middleware rendering API errors as JSON.

Views and services raise :class:`portail_famille.errors.ApiError`
instead of building error responses themselves. This middleware is
the single place where such errors are turned into the JSON error
body and the HTTP status of their code.
"""

import logging

from portail_famille.errors import ApiError, ErrorCode, normalize_unknown_error
from portail_famille.http import error_response

logger = logging.getLogger(__name__)

#: Path prefix of the JSON API
API_PREFIX = "/api/"


class ApiErrorMiddleware:
    """
    Middleware converting exceptions raised by API views into JSON.

    ``ApiError`` instances are rendered with their own code and status.
    Any other exception raised on an ``/api/`` path is logged and
    rendered as a generic ``INTERNAL_ERROR``. Exceptions raised outside
    the API keep Django's default handling.
    """

    def __init__(self, get_response):
        """
        Initialize the middleware.

        Parameters
        ----------
        get_response : callable
            The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        """
        Convert an exception raised by a view into a JSON response.

        Parameters
        ----------
        request : HttpRequest
            The current request.
        exception : Exception
            The exception raised by the view.

        Returns
        -------
        JsonResponse or None
            The error response, or None to let Django handle the
            exception.
        """
        if isinstance(exception, ApiError):
            if exception.code is ErrorCode.INTERNAL_ERROR:
                logger.error("Internal error on %s: %s", request.path, exception.message)
        elif request.path.startswith(API_PREFIX):
            logger.exception("Unexpected error on %s", request.path)
        else:
            return None
        return error_response(normalize_unknown_error(exception))
