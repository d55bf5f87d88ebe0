#!/usr/bin/env python3
"""
Ranking record model for the Maple ranking dashboard.
Holds the per-snapshot rows delivered by the ranking feed and the timestamp
helpers every derived view relies on.
"""

import re
from collections import abc
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import pytz

DEFAULT_DISPLAY_TIMEZONE = "Asia/Tokyo"

REQUIRED_FIELDS = ("id", "rank", "name", "world", "level", "job", "timestamp")

FRACTION_PATTERN = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


class RankingDataError(ValueError):
    """Raised when a ranking row violates the record contract."""


class TimestampParseError(RankingDataError):
    """Raised when a record timestamp is not a valid ISO-8601 instant."""

    def __init__(self, timestamp: Any):
        super().__init__(f"Unparseable ranking timestamp: {timestamp!r}")
        self.timestamp = timestamp


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse an ISO-8601 instant into an aware datetime.

    A trailing ``Z`` is read as UTC and a value without an offset is taken
    as UTC as well. Anything unparseable raises TimestampParseError.
    """
    if not isinstance(timestamp, str) or not timestamp:
        raise TimestampParseError(timestamp)
    value = timestamp.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # fromisoformat only takes 3 or 6 fraction digits before 3.11
    value = FRACTION_PATTERN.sub(lambda m: m.group(1) + "." + (m.group(2) + "000000")[:6], value)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise TimestampParseError(timestamp) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def resolve_timezone(tz: Union[str, Any, None] = None):
    """Return a tzinfo for a timezone name (or pass a tzinfo through)."""
    if tz is None:
        tz = DEFAULT_DISPLAY_TIMEZONE
    if isinstance(tz, str):
        try:
            return pytz.timezone(tz)
        except pytz.UnknownTimeZoneError:
            raise RankingDataError(f"Unknown display timezone: {tz}") from None
    return tz


def format_display_date(instant: datetime, tz=None) -> str:
    """Calendar date as the dashboard shows it, e.g. 2025/1/2."""
    local = instant.astimezone(resolve_timezone(tz))
    return f"{local.year}/{local.month}/{local.day}"


def format_month_day(instant: datetime, tz=None) -> str:
    """Chart axis label, e.g. 01/02."""
    local = instant.astimezone(resolve_timezone(tz))
    return local.strftime("%m/%d")


def _as_int(row: Dict[str, Any], field: str) -> int:
    value = row[field]
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise RankingDataError(f"Field '{field}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise RankingDataError(f"Field '{field}' must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class RankingRecord:
    """One character's row in one ranking snapshot."""
    id: Any
    rank: int
    name: str
    world: str
    level: int
    job: str
    timestamp: str

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "RankingRecord":
        missing = [field for field in REQUIRED_FIELDS if field not in row]
        if missing:
            raise RankingDataError(f"Ranking row is missing fields: {', '.join(missing)}")
        # Reject unparseable timestamps at the boundary
        parse_timestamp(row["timestamp"])
        return cls(
            id=row["id"],
            rank=_as_int(row, "rank"),
            name=str(row["name"]),
            world=str(row["world"]),
            level=_as_int(row, "level"),
            job=str(row["job"]),
            timestamp=str(row["timestamp"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class RecordStore(abc.Sequence):
    """
    Immutable, delivery-ordered sequence of ranking records for one source.

    The order is whatever the feed delivered; derived views always re-sort
    by parsed timestamp instead of trusting it.
    """

    def __init__(self, records: Iterable[RankingRecord] = (), source: Optional[str] = None):
        self._records = tuple(records)
        self.source = source

    @classmethod
    def from_rows(cls, rows: Iterable[Dict[str, Any]], source: Optional[str] = None) -> "RecordStore":
        return cls((RankingRecord.from_dict(row) for row in rows), source=source)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return RecordStore(self._records[index], source=self.source)
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RankingRecord]:
        return iter(self._records)

    def __eq__(self, other) -> bool:
        if isinstance(other, RecordStore):
            return self._records == other._records
        return NotImplemented

    def __repr__(self) -> str:
        return f"RecordStore(source={self.source!r}, records={len(self._records)})"

    def to_rows(self) -> List[Dict[str, Any]]:
        return [record.to_dict() for record in self._records]
