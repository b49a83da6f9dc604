# activities/services_admin.py
"""
Administration services for activities and their tags.

Activities are always attached to the facility of the deployment
(``settings.DEFAULT_FACILITY_ID``). Updates and deletions report
``notifications_sent``, the number of enrollments referencing the
activity at that moment. No notification is actually dispatched.
"""

import logging

from django.conf import settings
from django.db import transaction
from django.db.models import Q

from portail_famille.errors import ErrorCode, create_error, data_access
from portail_famille.pagination import paginate
from workers.models import Worker

from .models import TAG_DICTIONARY, Activity, ActivityTag, Enrollment, Facility
from .services import serialize_activity, with_enrollment_count

logger = logging.getLogger(__name__)

#: Model fields an administrator may set
EDITABLE_FIELDS = ("name", "description", "cost", "participant_limit", "start_datetime")


def list_tags() -> dict:
    """Return the closed dictionary of activity tags."""
    return {"tags": list(TAG_DICTIONARY)}


def get_default_facility() -> Facility:
    """
    Return the facility of the deployment, creating it on first use.
    """
    facility, _ = Facility.objects.get_or_create(
        pk=settings.DEFAULT_FACILITY_ID,
        defaults={"name": settings.DEFAULT_FACILITY_NAME},
    )
    return facility


def _get_worker(worker_id: int) -> Worker:
    worker = Worker.objects.filter(pk=worker_id).first()
    if worker is None:
        raise create_error(ErrorCode.WORKER_NOT_FOUND, "Worker not found")
    return worker


def _get_activity(activity_id: int) -> Activity:
    activity = Activity.objects.filter(pk=activity_id).first()
    if activity is None:
        raise create_error(ErrorCode.ACTIVITY_NOT_FOUND, "Activity not found")
    return activity


def _replace_tags(activity: Activity, tags):
    ActivityTag.objects.filter(activity=activity).delete()
    ActivityTag.objects.bulk_create([ActivityTag(activity=activity, tag=t) for t in tags])


def _reload(activity_id: int) -> dict:
    return serialize_activity(with_enrollment_count(Activity.objects.filter(pk=activity_id)).get())


def list_admin_activities(page: int, limit: int, search: str = "") -> dict:
    """
    Return one page of activities, newest first.

    Parameters
    ----------
    page : int
        Page number.
    limit : int
        Page size.
    search : str
        Case-insensitive filter on the name or the description.
    """
    with data_access("list admin activities"):
        queryset = Activity.objects.all()
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(description__icontains=search))
        queryset = with_enrollment_count(queryset).order_by("-created_at", "-id")
        items, pagination = paginate(queryset, page, limit)
    return {"activities": [serialize_activity(a) for a in items], "pagination": pagination}


def get_admin_activity(activity_id: int) -> dict:
    """Return a single activity or raise ``ACTIVITY_NOT_FOUND``."""
    with data_access("get admin activity"):
        _get_activity(activity_id)
        return _reload(activity_id)


def create_activity(data: dict) -> dict:
    """
    Create an activity.

    Parameters
    ----------
    data : dict
        Cleaned data of :class:`activities.forms.AdminActivityForm`.

    Returns
    -------
    dict
        The created activity.

    Raises
    ------
    ApiError
        ``WORKER_NOT_FOUND`` when the worker does not exist.
    """
    with data_access("create activity"):
        with transaction.atomic():
            worker = _get_worker(data["worker_id"])
            activity = Activity.objects.create(
                worker=worker,
                facility=get_default_facility(),
                **{name: data.get(name) for name in EDITABLE_FIELDS},
            )
            _replace_tags(activity, data.get("tags") or [])
        result = _reload(activity.pk)
    logger.info("Activity %s created", activity.pk)
    return result


def update_activity(activity_id: int, changes: dict) -> dict:
    """
    Apply a partial update to an activity.

    ``tags``, when present, replaces the whole tag set (an empty list
    clears it).

    Returns
    -------
    dict
        The updated activity with ``notifications_sent``.

    Raises
    ------
    ApiError
        ``ACTIVITY_NOT_FOUND`` or ``WORKER_NOT_FOUND``.
    """
    with data_access("update activity"):
        with transaction.atomic():
            activity = _get_activity(activity_id)
            if "worker_id" in changes:
                activity.worker = _get_worker(changes["worker_id"])
            for name in EDITABLE_FIELDS:
                if name in changes:
                    setattr(activity, name, changes[name])
            activity.save()
            if "tags" in changes:
                _replace_tags(activity, changes["tags"] or [])
        result = _reload(activity_id)
        result["notifications_sent"] = Enrollment.objects.filter(activity_id=activity_id).count()
    return result


def delete_activity(activity_id: int) -> dict:
    """
    Delete an activity with its enrollments and tags.

    Returns
    -------
    dict
        ``{"message", "notifications_sent"}`` where the count is taken
        before the deletion.
    """
    with data_access("delete activity"):
        with transaction.atomic():
            activity = _get_activity(activity_id)
            notifications_sent = Enrollment.objects.filter(activity=activity).count()
            activity.delete()
    logger.info("Activity %s deleted (%s enrollments)", activity_id, notifications_sent)
    return {"message": "Activity deleted successfully", "notifications_sent": notifications_sent}
