"""Relative "time ago" phrases for past instants."""

from __future__ import annotations

from datetime import UTC, datetime

from dateutil.relativedelta import relativedelta

from .exceptions import ValidationError


def _require_aware(value: datetime, label: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"{label} must be a datetime.")
    if value.tzinfo is None:
        raise ValidationError(f"{label} must include timezone information.")
    return value.astimezone(UTC)


def _phrase(count: int, unit: str, single_phrase: str, numeric_dates: bool) -> str | None:
    if count >= 2:
        return f"{count} {unit}s ago"
    if count >= 1:
        return f"1 {unit} ago" if numeric_dates else single_phrase
    return None


def time_ago_since(
    value: datetime,
    numeric_dates: bool,
    *,
    now: datetime | None = None,
) -> str:
    """Describe the time elapsed between ``value`` and now.

    The earlier of the two instants is always the start, so a future ``value``
    is phrased as elapsed time as well. Components are calendar differences
    taken in UTC: years first, then the months left over, then weeks, and so
    on. The largest non-zero component decides the phrase.

    With ``numeric_dates`` a single unit reads "1 week ago"; without it the
    same delta reads "Last week".
    """
    given = _require_aware(value, "value")
    current = _require_aware(now, "now") if now is not None else datetime.now(UTC)
    earliest = min(given, current)
    latest = current if earliest == given else given
    delta = relativedelta(latest, earliest)
    days = delta.days - delta.weeks * 7

    for count, unit, single_phrase in (
        (delta.years, "year", "Last year"),
        (delta.months, "month", "Last month"),
        (delta.weeks, "week", "Last week"),
        (days, "day", "Yesterday"),
        (delta.hours, "hour", "An hour ago"),
        (delta.minutes, "minute", "A minute ago"),
    ):
        phrase = _phrase(count, unit, single_phrase, numeric_dates)
        if phrase is not None:
            return phrase
    if delta.seconds >= 3:
        return f"{delta.seconds} seconds ago"
    return "just now"


def time_ago(value: datetime, *, now: datetime | None = None) -> str:
    return time_ago_since(value, True, now=now)
