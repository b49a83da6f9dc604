# portail_famille/http.py
"""
Transport helpers shared by the JSON views.

This module provides the JSON response helper, request body
parsing and the error response used by every ``views*.py``
module of the project.
"""

from decimal import Decimal
import json
from typing import Any, Dict

from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse

from .errors import ApiError, ErrorCode, create_error


class ApiJSONEncoder(DjangoJSONEncoder):
    """
    JSON encoder rendering decimals as numbers.

    Costs are stored as ``Decimal`` and exposed as plain JSON numbers,
    datetimes keep Django's ISO 8601 rendering.
    """

    def default(self, o):
        if isinstance(o, Decimal):
            return float(o)
        return super().default(o)


def json_response(data: Any, status: int = 200) -> JsonResponse:
    """
    Build a JSON response with the project encoder.

    Parameters
    ----------
    data : Any
        Serializable payload (dicts are the norm).
    status : int
        HTTP status code.

    Returns
    -------
    JsonResponse
        The response with ``application/json`` content type.
    """
    return JsonResponse(data, status=status, encoder=ApiJSONEncoder, safe=False)


def error_response(err: ApiError) -> JsonResponse:
    """Render an :class:`ApiError` as its JSON error body."""
    return json_response(err.to_dict(), status=err.status)


def parse_json_body(request) -> Dict[str, Any]:
    """
    Decode the JSON object sent in the request body.

    Parameters
    ----------
    request : HttpRequest
        The incoming request.

    Returns
    -------
    dict
        The decoded JSON object.

    Raises
    ------
    ApiError
        ``VALIDATION_ERROR`` when the body is missing, malformed,
        or not a JSON object.
    """
    try:
        data = json.loads(request.body or b"")
    except (ValueError, UnicodeDecodeError) as exc:
        raise create_error(ErrorCode.VALIDATION_ERROR, "Invalid or missing JSON body") from exc
    if not isinstance(data, dict):
        raise create_error(ErrorCode.VALIDATION_ERROR, "Invalid or missing JSON body")
    return data
