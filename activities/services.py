# activities/services.py
"""
Read services for the activities offered to parents.

Listing applies every filter in the database before paginating,
so ``pagination.total`` counts the filtered activities.
"""

import datetime
from typing import Iterable, Optional

from django.db.models import Count, F, QuerySet

from portail_famille.errors import ErrorCode, create_error, data_access
from portail_famille.pagination import paginate

from .capacity import available_spots
from .models import Activity, ActivityTag


def with_enrollment_count(queryset: QuerySet) -> QuerySet:
    """Annotate activities with ``enrollment_count`` and load workers and tags."""
    return (
        queryset.select_related("worker")
        .prefetch_related("tags")
        .annotate(enrollment_count=Count("enrollments", distinct=True))
    )


def serialize_activity(activity: Activity) -> dict:
    """
    Return the public representation of an activity.

    The activity must come from :func:`with_enrollment_count`.
    """
    worker = activity.worker
    return {
        "id": activity.pk,
        "name": activity.name,
        "description": activity.description,
        "cost": activity.cost,
        "participant_limit": activity.participant_limit,
        "available_spots": available_spots(activity.participant_limit, activity.enrollment_count),
        "start_datetime": activity.start_datetime.isoformat(),
        "created_at": activity.created_at.isoformat(),
        "worker": {
            "id": worker.pk,
            "first_name": worker.first_name,
            "last_name": worker.last_name,
            "email": worker.email,
        },
        "tags": sorted(t.tag for t in activity.tags.all()),
    }


def _day_start(day: datetime.date) -> datetime.datetime:
    return datetime.datetime.combine(day, datetime.time.min, tzinfo=datetime.timezone.utc)


def filter_activities(
    start_date: Optional[datetime.date] = None,
    end_date: Optional[datetime.date] = None,
    tags: Iterable[str] = (),
    has_available_spots: bool = False,
) -> QuerySet:
    """
    Build the filtered activity queryset, ordered by start.

    Parameters
    ----------
    start_date : date, optional
        Keep activities starting on or after this day (UTC).
    end_date : date, optional
        Keep activities starting on or before this day (UTC, inclusive).
    tags : iterable of str
        Keep activities carrying every one of these tags.
    has_available_spots : bool
        Keep only activities with at least one free place.
    """
    queryset = Activity.objects.all()
    if start_date:
        queryset = queryset.filter(start_datetime__gte=_day_start(start_date))
    if end_date:
        queryset = queryset.filter(
            start_datetime__lt=_day_start(end_date + datetime.timedelta(days=1))
        )
    for tag in tags:
        queryset = queryset.filter(
            pk__in=ActivityTag.objects.filter(tag=tag).values("activity_id")
        )
    queryset = with_enrollment_count(queryset)
    if has_available_spots:
        queryset = queryset.filter(enrollment_count__lt=F("participant_limit"))
    return queryset.order_by("start_datetime", "id")


def list_activities(filters: dict) -> dict:
    """
    Return one page of activities matching ``filters``.

    Parameters
    ----------
    filters : dict
        Cleaned data of :class:`activities.forms.ActivityFilterForm`.

    Returns
    -------
    dict
        ``{"activities": [...], "pagination": {page, limit, total}}``
    """
    with data_access("list activities"):
        queryset = filter_activities(
            start_date=filters.get("startDate"),
            end_date=filters.get("endDate"),
            tags=filters.get("tags") or (),
            has_available_spots=filters.get("hasAvailableSpots", False),
        )
        items, pagination = paginate(queryset, filters["page"], filters["limit"])
    return {
        "activities": [serialize_activity(a) for a in items],
        "pagination": pagination,
    }


def get_activity(activity_id: int) -> dict:
    """
    Return a single activity.

    Raises
    ------
    ApiError
        ``ACTIVITY_NOT_FOUND`` when it does not exist.
    """
    with data_access("get activity"):
        activity = with_enrollment_count(Activity.objects.filter(pk=activity_id)).first()
    if activity is None:
        raise create_error(ErrorCode.ACTIVITY_NOT_FOUND, "Activity not found")
    return serialize_activity(activity)
