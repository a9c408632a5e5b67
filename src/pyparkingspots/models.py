"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from .timeago import time_ago_since
from .util import extract_timestamp


@dataclass(frozen=True, slots=True)
class Level:
    name: str | None = None
    available_count: int | None = None
    total_capacity: int | None = None


@dataclass(frozen=True, slots=True)
class Structure:
    """A parking facility and its levels.

    ``raw_levels`` keeps the levels exactly as received. Its first entry is an
    aggregate row for the whole facility, not a physical level; use ``levels``
    for the physical ones and ``summary_level`` for the aggregate.
    """

    name: str | None = None
    available_count: int | None = None
    total_capacity: int | None = None
    last_updated_raw: str | None = None
    raw_levels: tuple[Level, ...] = ()

    @property
    def levels(self) -> tuple[Level, ...]:
        """Physical levels, i.e. ``raw_levels`` without the aggregate row."""
        return self.raw_levels[1:]

    @property
    def summary_level(self) -> Level | None:
        """The aggregate row dropped from ``levels``, if any."""
        if not self.raw_levels:
            return None
        return self.raw_levels[0]

    @property
    def last_updated_at(self) -> datetime:
        """Instant parsed from ``last_updated_raw``; now when it cannot be parsed."""
        return extract_timestamp(self.last_updated_raw)

    def time_ago(self, numeric_dates: bool = True, *, now: datetime | None = None) -> str:
        return time_ago_since(self.last_updated_at, numeric_dates, now=now)


@dataclass(frozen=True, slots=True)
class Response:
    structures: tuple[Structure, ...] = ()
    captured_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def find_structure(self, name: str) -> Structure | None:
        for structure in self.structures:
            if structure.name == name:
                return structure
        return None
