from datetime import UTC, datetime, timedelta, timezone

import pytest
from dateutil.relativedelta import relativedelta

from pyparkingspots.exceptions import ValidationError
from pyparkingspots.timeago import time_ago, time_ago_since

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=0), "just now"),
        (timedelta(seconds=2), "just now"),
        (timedelta(seconds=3), "3 seconds ago"),
        (timedelta(seconds=59), "59 seconds ago"),
        (timedelta(seconds=90), "1 minute ago"),
        (timedelta(minutes=2), "2 minutes ago"),
        (timedelta(hours=1, minutes=5), "1 hour ago"),
        (timedelta(hours=5), "5 hours ago"),
        (timedelta(hours=25), "1 day ago"),
        (timedelta(days=3), "3 days ago"),
        (timedelta(days=8), "1 week ago"),
        (timedelta(days=15), "2 weeks ago"),
        (relativedelta(months=1), "1 month ago"),
        (relativedelta(months=3), "3 months ago"),
        (relativedelta(months=13), "1 year ago"),
        (relativedelta(years=2, months=6), "2 years ago"),
    ],
)
def test_numeric_dates(delta: timedelta | relativedelta, expected: str) -> None:
    assert time_ago_since(NOW - delta, True, now=NOW) == expected


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=1), "just now"),
        (timedelta(seconds=30), "30 seconds ago"),
        (timedelta(seconds=61), "A minute ago"),
        (timedelta(hours=1, minutes=5), "An hour ago"),
        (timedelta(hours=25), "Yesterday"),
        (timedelta(days=6), "6 days ago"),
        (timedelta(days=7), "Last week"),
        (relativedelta(months=1, days=2), "Last month"),
        (relativedelta(years=1, months=11), "Last year"),
        (relativedelta(years=4), "4 years ago"),
    ],
)
def test_named_dates(delta: timedelta | relativedelta, expected: str) -> None:
    assert time_ago_since(NOW - delta, False, now=NOW) == expected


def test_month_end_uses_calendar_months() -> None:
    value = datetime(2024, 1, 31, 12, 0, tzinfo=UTC)
    now = datetime(2024, 2, 29, 12, 0, tzinfo=UTC)
    assert time_ago_since(value, True, now=now) == "1 month ago"


def test_leap_day_year() -> None:
    value = datetime(2023, 2, 28, 12, 0, tzinfo=UTC)
    now = datetime(2024, 2, 29, 12, 0, tzinfo=UTC)
    assert time_ago_since(value, False, now=now) == "Last year"


def test_future_dates_are_phrased_as_elapsed() -> None:
    assert time_ago_since(NOW + timedelta(minutes=10), True, now=NOW) == "10 minutes ago"


def test_offsets_are_compared_as_instants() -> None:
    value = datetime(2024, 6, 15, 15, 58, tzinfo=timezone(timedelta(hours=2)))
    now = datetime(2024, 6, 15, 14, 0, tzinfo=UTC)
    assert time_ago_since(value, True, now=now) == "2 minutes ago"


def test_time_ago_is_numeric() -> None:
    assert time_ago(NOW - timedelta(days=1), now=NOW) == "1 day ago"


def test_time_ago_defaults_to_wall_clock() -> None:
    assert time_ago(datetime.now(UTC) - timedelta(minutes=5)) == "5 minutes ago"


def test_naive_datetime_rejected() -> None:
    with pytest.raises(ValidationError):
        time_ago_since(datetime(2024, 1, 1), True, now=NOW)
    with pytest.raises(ValidationError):
        time_ago_since(NOW, True, now=datetime(2024, 1, 1))
