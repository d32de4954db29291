from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.staff_checkin.staff_checkin.common.datetime_utils import (
    epoch_ms,
    parse_date_filter,
    utc_day_bounds,
)


def test_epoch_ms_is_exact():
    moment = datetime(2026, 2, 1, 8, 30, 0, 1000, tzinfo=timezone.utc)
    assert epoch_ms(moment) == 1769934600001
    assert epoch_ms(moment.replace(tzinfo=None)) == 1769934600001


def test_utc_day_bounds_converts_offsets_first():
    moment = datetime(2026, 2, 1, 3, 0, tzinfo=timezone(timedelta(hours=7)))  # 2026-01-31 20:00 UTC
    start, end = utc_day_bounds(moment)

    assert start == datetime(2026, 1, 31, tzinfo=timezone.utc)
    assert end == datetime(2026, 2, 1, tzinfo=timezone.utc)


def test_utc_day_bounds_for_date():
    start, end = utc_day_bounds(date(2026, 12, 31))
    assert (start.date(), end.date()) == (date(2026, 12, 31), date(2027, 1, 1))


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2026-02-01", date(2026, 2, 1)),
        ("2026-02-01T23:30:00+00:00", date(2026, 2, 1)),
        ("2026-02-01T23:30:00-05:00", date(2026, 2, 2)),
        ("", None),
        (None, None),
        ("garbage", None),
    ],
)
def test_parse_date_filter(value, expected):
    assert parse_date_filter(value) == expected
