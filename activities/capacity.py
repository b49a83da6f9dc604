# activities/capacity.py
"""
Pure helpers deriving capacity and timing facts from an activity.

These functions hold no state and touch no database. The listing
endpoints use them on annotated counts, the enrollment rules use
them on freshly counted rows.
"""

import datetime
from typing import Optional, Union

from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from portail_famille.errors import ErrorCode, create_error


def available_spots(participant_limit: int, enrollment_count: int) -> int:
    """
    Return the number of free places of an activity.

    Parameters
    ----------
    participant_limit : int
        Maximum number of enrolled children.
    enrollment_count : int
        Current number of enrollments.

    Returns
    -------
    int
        ``max(0, participant_limit - enrollment_count)``
    """
    return max(0, participant_limit - enrollment_count)


def is_full(participant_limit: int, enrollment_count: int) -> bool:
    """Return True when no place is left."""
    return available_spots(participant_limit, enrollment_count) == 0


def withdrawal_cutoff() -> datetime.timedelta:
    """Minimum delay between a withdrawal and the activity start."""
    return datetime.timedelta(hours=getattr(settings, "WITHDRAWAL_CUTOFF_HOURS", 24))


def coerce_start(value: Union[datetime.datetime, str, None]) -> datetime.datetime:
    """
    Return the start of an activity as an aware datetime.

    Naive values are read as UTC.

    Raises
    ------
    ApiError
        ``INTERNAL_ERROR`` when the value is missing or cannot be parsed.
    """
    start: Optional[datetime.datetime]
    if isinstance(value, datetime.datetime):
        start = value
    elif isinstance(value, str):
        try:
            start = parse_datetime(value)
        except ValueError:
            start = None
    else:
        start = None
    if start is None:
        raise create_error(ErrorCode.INTERNAL_ERROR, "Invalid activity start datetime format")
    if timezone.is_naive(start):
        start = timezone.make_aware(start, datetime.timezone.utc)
    return start


def time_until_start(start, now: Optional[datetime.datetime] = None) -> datetime.timedelta:
    """Return ``start - now`` (negative once the activity has started)."""
    return coerce_start(start) - (now or timezone.now())


def can_withdraw(start, now: Optional[datetime.datetime] = None) -> bool:
    """
    Return True while an enrollment may still be withdrawn.

    Withdrawal is allowed as long as at least
    ``settings.WITHDRAWAL_CUTOFF_HOURS`` hours remain before the start.
    """
    return time_until_start(start, now) >= withdrawal_cutoff()
