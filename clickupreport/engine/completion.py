"""Weekly completion window for clickup-report.

The window is the calendar week containing "now", running from Sunday
00:00 UTC to the following Sunday 00:00 UTC. Both boundary instants are
excluded.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Tuple
from clickupreport.models.task import Task
from clickupreport.engine.due_dates import parse_epoch_millis


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def week_bounds(now: datetime) -> Tuple[datetime, datetime]:
    """Get the (start, end) of the Sunday-based UTC week containing now.

    Args:
        now: Reference instant; naive values are read as UTC

    Returns:
        Tuple of (most recent Sunday 00:00 UTC, start + 7 days)
    """
    now = _as_utc(now)
    # datetime.weekday() has Monday=0; shift so Sunday=0
    days_since_sunday = (now.weekday() + 1) % 7
    start_day = (now - timedelta(days=days_since_sunday)).date()
    week_start = datetime(start_day.year, start_day.month, start_day.day, tzinfo=timezone.utc)
    return week_start, week_start + timedelta(days=7)


def is_completed_this_week(task: Task, now: datetime) -> bool:
    """Check whether a task was closed within the current week.

    Args:
        task: Task to check (normally from the completed bucket)
        now: Reference instant; must be passed explicitly

    Returns:
        False when date_closed is missing or not an epoch-millisecond
        integer; otherwise whether week_start < closed < week_end
    """
    closed = parse_epoch_millis(task.date_closed)
    if closed is None:
        return False
    week_start, week_end = week_bounds(now)
    return week_start < closed < week_end


def count_completed_this_week(tasks: Iterable[Task], now: datetime) -> int:
    return sum(1 for task in tasks if is_completed_this_week(task, now))
