"""
Date and time helpers.
- Timestamps are stored and compared in UTC.
- Calendar arithmetic for request dates (inclusive day counts, shift hours,
  the post-submission edit window) lives here so every rule shares it.
"""
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from app.constants import EDIT_WINDOW_HOURS

UTC = timezone.utc

DateLike = Union[date, str, None]
TimeLike = Union[time, str, None]

TERMINAL_STATUSES = frozenset({"Approved", "Rejected"})


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware). Use for created_at."""
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """If dt is naive, treat as UTC and return timezone-aware UTC. If already aware, convert to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt


def parse_date(value: DateLike) -> Optional[date]:
    """Return a date for a date or ISO ``YYYY-MM-DD`` string; None when empty or unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def parse_time(value: TimeLike) -> Optional[time]:
    """Return a time for a time or ``HH:MM[:SS]`` string; None when empty or unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(str(value).strip())
    except ValueError:
        return None


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Inclusive number of calendar days spanned by two dates.

    Same day counts as 1 and argument order does not matter. Returns 0 when
    either side is missing or unparseable.
    """
    s = parse_date(start)
    e = parse_date(end)
    if s is None or e is None:
        return 0
    return abs((e - s).days) + 1


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def hours_between(time_in: TimeLike, time_out: TimeLike) -> Decimal:
    """
    Hours between two same-day clock times, rounded to 2 decimal places.

    A time_out earlier than time_in is an overnight shift, so 24 hours are
    added. Returns 0 when either side is missing.
    """
    t_in = parse_time(time_in)
    t_out = parse_time(time_out)
    if t_in is None or t_out is None:
        return Decimal("0.00")

    total_minutes = minutes_of_day(t_out) - minutes_of_day(t_in)
    if total_minutes < 0:
        total_minutes += 24 * 60

    return (Decimal(total_minutes) / Decimal(60)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def is_within_edit_window(
    created_at: datetime,
    status: str,
    now: Optional[datetime] = None
) -> bool:
    """
    Whether a submitted record can still be changed by its owner.

    Approved and Rejected records are never editable. Anything else is
    editable for EDIT_WINDOW_HOURS after creation, the boundary included.
    """
    status_value = getattr(status, "value", status)
    if status_value in TERMINAL_STATUSES:
        return False

    current = ensure_utc(now) if now is not None else now_utc()
    elapsed = current - ensure_utc(created_at)
    return elapsed <= timedelta(hours=EDIT_WINDOW_HOURS)
