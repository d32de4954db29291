from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC (MySQL DATETIME columns come back naive)."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def epoch_ms(moment: datetime) -> int:
    return (as_utc(moment) - EPOCH) // _ONE_MS


def utc_day_bounds(moment: Union[datetime, date]) -> Tuple[datetime, datetime]:
    """Return `[start_of_day, start_of_next_day)` of the UTC calendar day."""
    day = as_utc(moment).date() if isinstance(moment, datetime) else moment
    start = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def parse_date_filter(value: Union[str, date, None]) -> Optional[date]:
    """Parse a YYYY-MM-DD (or full ISO datetime) filter value.

    Unparseable values return None so the filter is simply not applied.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value).date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return as_utc(datetime.fromisoformat(text.replace("Z", "+00:00"))).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        return None
