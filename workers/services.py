# workers/services.py
"""
Service functions for the administration of workers.

Every function raises :class:`portail_famille.errors.ApiError`;
database faults become ``INTERNAL_ERROR`` through
:func:`portail_famille.errors.data_access`.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from portail_famille.errors import ErrorCode, create_error, data_access
from portail_famille.pagination import paginate

from .models import Worker

logger = logging.getLogger(__name__)


def _email_conflict():
    return create_error(ErrorCode.WORKER_EMAIL_CONFLICT, "Worker email already exists")


def list_workers(page: int, limit: int) -> dict:
    """
    Return one page of workers, newest first.

    Parameters
    ----------
    page : int
        Page number, starting at 1.
    limit : int
        Page size.

    Returns
    -------
    dict
        ``{"workers": [...], "pagination": {...}}``
    """
    with data_access("list workers"):
        items, pagination = paginate(Worker.objects.all(), page, limit)
    return {"workers": [w.to_dict() for w in items], "pagination": pagination}


def get_worker(worker_id: int) -> Worker:
    """
    Return the worker ``worker_id``.

    Raises
    ------
    ApiError
        ``WORKER_NOT_FOUND`` when it does not exist.
    """
    with data_access("get worker"):
        worker = Worker.objects.filter(pk=worker_id).first()
    if worker is None:
        raise create_error(ErrorCode.WORKER_NOT_FOUND, "Worker not found")
    return worker


def create_worker(data: dict) -> Worker:
    """
    Create a worker from the cleaned data of :class:`workers.forms.WorkerForm`.

    Raises
    ------
    ApiError
        ``WORKER_EMAIL_CONFLICT`` when the e-mail is already used.
    """
    with data_access("create worker"):
        try:
            with transaction.atomic():
                worker = Worker.objects.create(
                    first_name=data["first_name"],
                    last_name=data["last_name"],
                    email=data["email"],
                )
        except IntegrityError as exc:
            raise _email_conflict() from exc
    logger.info("Worker %s created", worker.pk)
    return worker


def update_worker(worker_id: int, data: dict) -> Worker:
    """
    Replace the names and e-mail of a worker.

    Raises
    ------
    ApiError
        ``WORKER_NOT_FOUND`` or ``WORKER_EMAIL_CONFLICT``.
    """
    worker = get_worker(worker_id)
    worker.first_name = data["first_name"]
    worker.last_name = data["last_name"]
    worker.email = data["email"]
    with data_access("update worker"):
        try:
            with transaction.atomic():
                worker.save(update_fields=["first_name", "last_name", "email"])
        except IntegrityError as exc:
            raise _email_conflict() from exc
    return worker


def delete_worker(worker_id: int) -> dict:
    """
    Delete a worker that leads no activity.

    Raises
    ------
    ApiError
        ``WORKER_NOT_FOUND`` when it does not exist,
        ``WORKER_HAS_ACTIVITIES`` while activities reference it.
    """
    worker = get_worker(worker_id)
    has_activities = create_error(
        ErrorCode.WORKER_HAS_ACTIVITIES,
        "Worker is assigned to activities and cannot be deleted",
    )
    with data_access("delete worker"):
        if worker.activities.exists():
            raise has_activities
        try:
            with transaction.atomic():
                worker.delete()
        except ProtectedError as exc:
            raise has_activities from exc
    logger.info("Worker %s deleted", worker_id)
    return {"message": "Worker deleted successfully"}
