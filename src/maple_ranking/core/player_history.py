#!/usr/bin/env python3
"""
Rank and level history for a single character.
Builds the day-by-day series behind the player chart.
"""

from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .records import RankingRecord, parse_timestamp, format_month_day


@dataclass
class TrendPoint:
    """One day of a character's history."""
    date: str
    display_date: str
    rank: int
    level: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SeriesHighlights:
    """Figures listed under the player chart."""
    days: int
    best_rank: int
    latest_rank: int
    best_level: int
    latest_level: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_single_player_series(records: Iterable[RankingRecord], name: str, tz=None) -> List[TrendPoint]:
    """
    Build one TrendPoint per calendar day for ``name``, earliest first.

    Name matching is case-sensitive. When a day holds several snapshots the
    earliest one is kept. The calendar date comes from the timestamp as
    written, the display label from the display timezone.

    Args:
        records: Full record set for the current source
        name: Exact character name
        tz: Display timezone name or tzinfo (defaults to Asia/Tokyo)

    Returns:
        List of TrendPoint in ascending date order (empty for unknown names)
    """
    if not name:
        return []

    matches = [
        (parse_timestamp(record.timestamp), record)
        for record in records
        if record.name == name
    ]
    # Stable sort so same-instant rows keep delivery order
    matches.sort(key=lambda item: item[0])

    by_day: Dict[date, TrendPoint] = {}
    for instant, record in matches:
        day = instant.date()
        if day in by_day:
            continue
        by_day[day] = TrendPoint(
            date=day.isoformat(),
            display_date=format_month_day(instant, tz),
            rank=record.rank,
            level=record.level,
        )

    return list(by_day.values())


def summarize_series(points: List[TrendPoint]) -> Optional[SeriesHighlights]:
    """Best and latest figures of a series, or None when it is empty."""
    if not points:
        return None
    latest = points[-1]
    return SeriesHighlights(
        days=len(points),
        best_rank=min(point.rank for point in points),
        latest_rank=latest.rank,
        best_level=max(point.level for point in points),
        latest_level=latest.level,
    )
