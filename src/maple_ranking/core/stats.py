"""
Summary statistics shown in the dashboard header.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable

from .records import RankingRecord, parse_timestamp, format_display_date


@dataclass
class SummaryStats:
    """Header numbers for one record set."""
    unique_entity_count: int = 0
    earliest_date: str = ""
    latest_date: str = ""
    min_level: int = 0
    max_level: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize(records: Iterable[RankingRecord], tz=None) -> SummaryStats:
    """Count distinct names, find the date range and the level range."""
    records = list(records)
    if not records:
        return SummaryStats()

    names = {record.name for record in records}
    instants = [parse_timestamp(record.timestamp) for record in records]
    levels = [record.level for record in records]

    # True min/max over every record. Taking the tail of a level-sorted view
    # depends on input order and is not what this reports.
    return SummaryStats(
        unique_entity_count=len(names),
        earliest_date=format_display_date(min(instants), tz),
        latest_date=format_display_date(max(instants), tz),
        min_level=min(levels),
        max_level=max(levels),
    )
