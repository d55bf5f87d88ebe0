"""
Head counts by level, job and world for the distribution charts.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .records import RankingRecord

JOB_CHART_LIMIT = 49
WORLD_CHART_LIMIT = 4


@dataclass
class CountBucket:
    label: str
    count: int


def _top(counter: Counter, limit: Optional[int]) -> List[CountBucket]:
    # most_common keeps first-seen order for ties
    return [CountBucket(label=str(label), count=count) for label, count in counter.most_common(limit)]


def level_distribution(records: Iterable[RankingRecord]) -> List[CountBucket]:
    """Characters per level, highest level first."""
    counter = Counter(record.level for record in records)
    return [
        CountBucket(label=f"Lv.{level}", count=counter[level])
        for level in sorted(counter, reverse=True)
    ]


def job_distribution(records: Iterable[RankingRecord], limit: Optional[int] = JOB_CHART_LIMIT) -> List[CountBucket]:
    return _top(Counter(record.job for record in records), limit)


def world_distribution(records: Iterable[RankingRecord], limit: Optional[int] = WORLD_CHART_LIMIT) -> List[CountBucket]:
    return _top(Counter(record.world for record in records), limit)
