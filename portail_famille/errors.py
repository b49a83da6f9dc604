# portail_famille/errors.py
"""
Typed errors shared by every application of the project.

Services raise :class:`ApiError` as soon as a business rule or a
data-access call fails. The error carries a stable machine-readable
code which the transport layer (``accounts.middleware``) turns into a
JSON body and an HTTP status.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, Optional
import logging

from django.db import DatabaseError

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """
    Enumeration of the error codes exposed by the API.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_UNAUTHORIZED = "AUTH_UNAUTHORIZED"
    CHILD_NOT_FOUND = "CHILD_NOT_FOUND"
    CHILD_NOT_OWNED = "CHILD_NOT_OWNED"
    ACTIVITY_NOT_FOUND = "ACTIVITY_NOT_FOUND"
    ACTIVITY_STARTED = "ACTIVITY_STARTED"
    ACTIVITY_FULL = "ACTIVITY_FULL"
    ENROLLMENT_DUPLICATE = "ENROLLMENT_DUPLICATE"
    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    WITHDRAWAL_TOO_LATE = "WITHDRAWAL_TOO_LATE"
    WORKER_NOT_FOUND = "WORKER_NOT_FOUND"
    WORKER_EMAIL_CONFLICT = "WORKER_EMAIL_CONFLICT"
    WORKER_HAS_ACTIVITIES = "WORKER_HAS_ACTIVITIES"
    PARENT_NOT_FOUND = "PARENT_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


#: Default HTTP status for each error code
STATUS_MAP: Dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.AUTH_UNAUTHORIZED: 401,
    ErrorCode.CHILD_NOT_FOUND: 404,
    ErrorCode.CHILD_NOT_OWNED: 403,
    ErrorCode.ACTIVITY_NOT_FOUND: 404,
    ErrorCode.ACTIVITY_STARTED: 400,
    ErrorCode.ACTIVITY_FULL: 400,
    ErrorCode.ENROLLMENT_DUPLICATE: 400,
    ErrorCode.ENROLLMENT_NOT_FOUND: 404,
    ErrorCode.WITHDRAWAL_TOO_LATE: 400,
    ErrorCode.WORKER_NOT_FOUND: 404,
    ErrorCode.WORKER_EMAIL_CONFLICT: 409,
    ErrorCode.WORKER_HAS_ACTIVITIES: 400,
    ErrorCode.PARENT_NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}

#: Message returned to callers for internal faults
GENERIC_INTERNAL_MESSAGE = "An internal error occurred"


class ApiError(Exception):
    """
    Error raised by services and views, rendered as a JSON error body.

    Attributes
    ----------
    code : ErrorCode
        Stable machine-readable code.
    message : str
        Human readable message sent to the caller.
    status : int
        HTTP status, defaults to the value in :data:`STATUS_MAP`.
    details : dict, optional
        Extra structured data (validation issues, remaining time...).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.status = status if status is not None else STATUS_MAP[self.code]
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """
        Return the transport representation of the error.

        Internal errors never expose their original message.

        Returns
        -------
        dict
            ``{"error": {"code", "message", "details"?}}``
        """
        message = self.message
        if self.code is ErrorCode.INTERNAL_ERROR:
            message = GENERIC_INTERNAL_MESSAGE
        body: Dict[str, Any] = {"code": self.code.value, "message": message}
        if self.details:
            body["details"] = self.details
        return {"error": body}

    def __repr__(self) -> str:
        return f"ApiError({self.code.value}, {self.message!r}, status={self.status})"


def create_error(
    code: ErrorCode,
    message: str,
    *,
    status: Optional[int] = None,
    details: Optional[Dict[str, Any]] = None,
) -> ApiError:
    """Build an :class:`ApiError` with an optional status override."""
    return ApiError(code, message, status=status, details=details)


def from_form_errors(form, message: str = "Invalid request") -> ApiError:
    """
    Convert the errors of an invalid Django form into a validation error.

    Parameters
    ----------
    form : django.forms.Form
        A bound form whose ``is_valid()`` returned False.
    message : str
        Message of the resulting error.

    Returns
    -------
    ApiError
        A ``VALIDATION_ERROR`` whose details list the field issues.
    """
    issues = []
    for field, errors in form.errors.get_json_data().items():
        for err in errors:
            issues.append(
                {
                    "path": [] if field == "__all__" else [field],
                    "message": err["message"],
                    "code": err.get("code") or "invalid",
                }
            )
    return create_error(ErrorCode.VALIDATION_ERROR, message, details={"issues": issues})


def normalize_unknown_error(exc: BaseException) -> ApiError:
    """
    Return ``exc`` unchanged if it is an :class:`ApiError`, else wrap it.

    Parameters
    ----------
    exc : BaseException
        Any exception caught at a transport boundary.

    Returns
    -------
    ApiError
        The original error or an ``INTERNAL_ERROR`` wrapping it.
    """
    if isinstance(exc, ApiError):
        return exc
    return create_error(ErrorCode.INTERNAL_ERROR, str(exc) or exc.__class__.__name__)


@contextmanager
def data_access(operation: str) -> Iterator[None]:
    """
    Translate database faults raised inside the block into internal errors.

    The raw database message is logged server-side and kept on the
    error object, it is never rendered to the caller.

    Parameters
    ----------
    operation : str
        Short label of the data-access step, used in logs.

    Raises
    ------
    ApiError
        ``INTERNAL_ERROR`` when a :class:`django.db.DatabaseError` occurs.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Data access failed during %s", operation)
        raise create_error(ErrorCode.INTERNAL_ERROR, f"{operation}: {exc}") from exc
