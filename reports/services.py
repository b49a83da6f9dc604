# reports/services.py
"""
Weekly cost report.

The report lists the enrollments of the parent's children whose
activity starts during a given week (Monday 00:00 to Sunday
23:59:59, UTC) and sums their costs.
"""

import datetime
from decimal import Decimal

from activities.models import Enrollment
from portail_famille.errors import data_access

WEEK = datetime.timedelta(days=7)


def week_bounds(week_start: datetime.date):
    """
    Return the UTC datetime range covering a week.

    Parameters
    ----------
    week_start : date
        The Monday of the week.

    Returns
    -------
    tuple
        ``(start, end)`` where ``end`` is exclusive.
    """
    start = datetime.datetime.combine(week_start, datetime.time.min, tzinfo=datetime.timezone.utc)
    return start, start + WEEK


def weekly_cost_report(parent, week_start: datetime.date) -> dict:
    """
    Build the weekly cost report of ``parent``.

    Parameters
    ----------
    parent : User
        The authenticated parent.
    week_start : date
        The Monday of the requested week.

    Returns
    -------
    dict
        ``{rows, total, week_start, week_end}``. Rows are sorted by
        date, time, then child last name.
    """
    start, end = week_bounds(week_start)
    with data_access("weekly cost report"):
        enrollments = list(
            Enrollment.objects.filter(
                child__parent=parent,
                activity__start_datetime__gte=start,
                activity__start_datetime__lt=end,
            ).select_related("child", "activity")
        )

    rows = []
    for enrollment in enrollments:
        starts = enrollment.activity.start_datetime.astimezone(datetime.timezone.utc)
        rows.append(
            {
                "child_first_name": enrollment.child.first_name,
                "child_last_name": enrollment.child.last_name,
                "activity_name": enrollment.activity.name,
                "activity_date": starts.strftime("%Y-%m-%d"),
                "activity_time": starts.strftime("%H:%M"),
                "cost": enrollment.activity.cost,
            }
        )
    rows.sort(key=lambda r: (r["activity_date"], r["activity_time"], r["child_last_name"]))

    return {
        "rows": rows,
        "total": sum((r["cost"] for r in rows), Decimal("0")),
        "week_start": week_start.isoformat(),
        "week_end": (week_start + datetime.timedelta(days=6)).isoformat(),
    }
