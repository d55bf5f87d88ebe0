"""
Shared record builders for the ranking tests.
"""

import sys
from itertools import count
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from maple_ranking.core.records import RankingRecord, RecordStore

_ids = count(1)


def make_record(name, rank, level, timestamp, world="スカニア", job="ヒーロー"):
    return RankingRecord(
        id=next(_ids),
        rank=rank,
        name=name,
        world=world,
        level=level,
        job=job,
        timestamp=timestamp,
    )


def snapshot(timestamp, names, level=250):
    """Records for one snapshot, ranked in the order the names are given."""
    return [make_record(name, rank, level, timestamp) for rank, name in enumerate(names, 1)]


def scenario_records():
    """Two days: A alone on day one, A and B on day two."""
    return RecordStore([
        make_record("A", 1, 200, "2025-01-01T00:00:00Z"),
        make_record("A", 1, 205, "2025-01-02T00:00:00Z"),
        make_record("B", 2, 190, "2025-01-02T00:00:00Z"),
    ])
