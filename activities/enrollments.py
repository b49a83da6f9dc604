# activities/enrollments.py
"""
Enrollment rules.

This module holds the rules deciding whether a parent may enroll
a child in an activity or withdraw it. Checks run in a fixed order
and the first failing check decides the error returned:

1. the child exists and belongs to the parent,
2. the activity exists,
3. the activity has not started,
4. a place is left,
5. the child is not already enrolled.

Creation runs inside a transaction holding a row lock on the
activity. The insert is followed by a recount so two concurrent
enrollments can never exceed the participant limit, and the
(child, activity) uniqueness constraint turns a concurrent double
submission into ``ENROLLMENT_DUPLICATE``.
"""

import datetime
import logging
from typing import Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from families.services import get_owned_child
from portail_famille.errors import ErrorCode, create_error, data_access

from .capacity import can_withdraw, coerce_start, time_until_start, withdrawal_cutoff
from .models import Activity, Enrollment

logger = logging.getLogger(__name__)

#: Message returned after a successful withdrawal
WITHDRAWN_MESSAGE = "Child successfully withdrawn from activity"


def create_enrollment(parent, child_id: int, activity_id: int, now: Optional[datetime.datetime] = None) -> dict:
    """
    Enroll a child of ``parent`` in an activity.

    Parameters
    ----------
    parent : User
        The authenticated parent.
    child_id : int
        Child to enroll.
    activity_id : int
        Target activity.
    now : datetime, optional
        Reference time, defaults to ``timezone.now()``.

    Returns
    -------
    dict
        The created enrollment with a summary of the activity and
        of the child, built from the rows already loaded.

    Raises
    ------
    ApiError
        ``CHILD_NOT_FOUND``, ``CHILD_NOT_OWNED``, ``ACTIVITY_NOT_FOUND``,
        ``ACTIVITY_STARTED``, ``ACTIVITY_FULL``, ``ENROLLMENT_DUPLICATE``
        or ``INTERNAL_ERROR``.
    """
    child = get_owned_child(parent, child_id)
    now = now or timezone.now()

    with data_access("create enrollment"):
        with transaction.atomic():
            activity = Activity.objects.select_for_update().filter(pk=activity_id).first()
            if activity is None:
                raise create_error(ErrorCode.ACTIVITY_NOT_FOUND, "Activity not found")

            if coerce_start(activity.start_datetime) <= now:
                raise create_error(ErrorCode.ACTIVITY_STARTED, "Activity already started or past")

            enrolled = Enrollment.objects.filter(activity=activity)
            if enrolled.count() >= activity.participant_limit:
                raise create_error(ErrorCode.ACTIVITY_FULL, "Activity has no available spots")

            duplicate = create_error(
                ErrorCode.ENROLLMENT_DUPLICATE, "Child already enrolled in this activity"
            )
            if enrolled.filter(child=child).exists():
                raise duplicate

            try:
                with transaction.atomic():
                    enrollment = Enrollment.objects.create(child=child, activity=activity, enrolled_at=now)
            except IntegrityError as exc:
                raise duplicate from exc

            # Raising here rolls the insert back.
            if enrolled.count() > activity.participant_limit:
                raise create_error(ErrorCode.ACTIVITY_FULL, "Activity has no available spots")

    logger.info("Child %s enrolled in activity %s", child.pk, activity.pk)
    return {
        "child_id": child.pk,
        "activity_id": activity.pk,
        "enrolled_at": enrollment.enrolled_at.isoformat(),
        "activity": {
            "name": activity.name,
            "start_datetime": activity.start_datetime.isoformat(),
            "cost": activity.cost,
        },
        "child": {
            "first_name": child.first_name,
            "last_name": child.last_name,
        },
    }


def withdraw_enrollment(parent, child_id: int, activity_id: int, now: Optional[datetime.datetime] = None) -> dict:
    """
    Withdraw a child of ``parent`` from an activity.

    The enrollment is removed only while at least
    ``settings.WITHDRAWAL_CUTOFF_HOURS`` hours remain before the start.

    Returns
    -------
    dict
        ``{"message": "Child successfully withdrawn from activity"}``

    Raises
    ------
    ApiError
        ``CHILD_NOT_FOUND``, ``CHILD_NOT_OWNED``, ``ENROLLMENT_NOT_FOUND``,
        ``WITHDRAWAL_TOO_LATE`` (with ``details.remaining_ms``) or
        ``INTERNAL_ERROR``.
    """
    child = get_owned_child(parent, child_id)

    with data_access("withdraw enrollment lookup"):
        enrollment = (
            Enrollment.objects.select_related("activity")
            .filter(child=child, activity_id=activity_id)
            .first()
        )
    if enrollment is None:
        raise create_error(
            ErrorCode.ENROLLMENT_NOT_FOUND, "Enrollment not found for child & activity pair"
        )

    remaining = time_until_start(enrollment.activity.start_datetime, now)
    cutoff = withdrawal_cutoff()
    if remaining < cutoff:
        hours = int(cutoff.total_seconds() // 3600)
        raise create_error(
            ErrorCode.WITHDRAWAL_TOO_LATE,
            f"Cannot withdraw enrollment less than {hours}h before activity start",
            details={"remaining_ms": int(remaining.total_seconds() * 1000)},
        )

    with data_access("withdraw enrollment delete"):
        deleted, _ = Enrollment.objects.filter(pk=enrollment.pk).delete()
    if not deleted:
        raise create_error(
            ErrorCode.INTERNAL_ERROR, "Enrollment deletion failed despite prior existence check"
        )

    logger.info("Child %s withdrawn from activity %s", child.pk, activity_id)
    return {"message": WITHDRAWN_MESSAGE}


def list_child_enrollments(parent, child_id: int, now: Optional[datetime.datetime] = None) -> dict:
    """
    List the enrollments of a child of ``parent``.

    Each item carries ``can_withdraw`` and a summary of the activity
    with the name of its worker.

    Raises
    ------
    ApiError
        ``CHILD_NOT_FOUND``, ``CHILD_NOT_OWNED`` or ``INTERNAL_ERROR``.
    """
    child = get_owned_child(parent, child_id)
    now = now or timezone.now()

    with data_access("list child enrollments"):
        rows = list(
            Enrollment.objects.filter(child=child).select_related("activity", "activity__worker")
        )

    enrollments = []
    for row in rows:
        activity = row.activity
        enrollments.append(
            {
                "child_id": row.child_id,
                "activity_id": row.activity_id,
                "enrolled_at": row.enrolled_at.isoformat(),
                "can_withdraw": can_withdraw(activity.start_datetime, now),
                "activity": {
                    "id": activity.pk,
                    "name": activity.name,
                    "description": activity.description,
                    "cost": activity.cost,
                    "start_datetime": activity.start_datetime.isoformat(),
                    "worker": {
                        "first_name": activity.worker.first_name,
                        "last_name": activity.worker.last_name,
                    },
                },
            }
        )
    return {"enrollments": enrollments}
