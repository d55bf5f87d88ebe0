#!/usr/bin/env python3
"""
Weekly top-N rank trend for the Maple ranking dashboard.

Tracks the characters in the top N of the latest snapshot across the last
K snapshots. The roster is pinned to the latest snapshot so lines do not
appear and vanish from day to day; a character that fell below N is drawn
at N, and one missing from a snapshot is drawn at N with no actual rank.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional

from .records import RankingRecord, parse_timestamp, format_month_day

DEFAULT_WINDOW = 7
DEFAULT_TOP_N = 10

COLORS = [
    "#667eea",
    "#4cd497",
    "#f59e0b",
    "#ef4444",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
    "#84cc16",
    "#f97316",
]


@dataclass
class RankCell:
    clamped_rank: int
    actual_rank: Optional[int]


@dataclass
class DatedRow:
    """One snapshot of the trend chart."""
    date: str
    display_date: str
    ranks: Dict[str, RankCell] = field(default_factory=dict)


@dataclass
class RosterEntry:
    name: str
    color_index: int
    color: str


@dataclass
class TopNTrend:
    rows: List[DatedRow] = field(default_factory=list)
    roster: List[RosterEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_chart_rows(self) -> List[Dict[str, Any]]:
        """Flatten rows to {date, displayDate, name: clamped, name_actual: actual}."""
        chart_rows = []
        for row in self.rows:
            point: Dict[str, Any] = {"date": row.date, "displayDate": row.display_date}
            for name, cell in row.ranks.items():
                point[name] = cell.clamped_rank
                point[f"{name}_actual"] = cell.actual_rank
            chart_rows.append(point)
        return chart_rows


def assign_colors(names: List[str]) -> List[RosterEntry]:
    """Index-to-color table for a fixed roster; colors follow position, not name."""
    return [
        RosterEntry(name=name, color_index=index, color=COLORS[index % len(COLORS)])
        for index, name in enumerate(names)
    ]


def group_by_snapshot(records: Iterable[RankingRecord]) -> Dict[str, Dict[str, RankingRecord]]:
    """timestamp -> {name: record}, first record wins for a repeated name."""
    snapshots: Dict[str, Dict[str, RankingRecord]] = {}
    for record in records:
        snapshot = snapshots.setdefault(record.timestamp, {})
        snapshot.setdefault(record.name, record)
    return snapshots


def build_top_n_trend(records: Iterable[RankingRecord], window: int = DEFAULT_WINDOW,
                      top_n: int = DEFAULT_TOP_N, tz=None) -> TopNTrend:
    """
    Build the rank matrix of the latest top ``top_n`` over the last ``window`` snapshots.

    Args:
        records: Full record set for the current source
        window: Number of most recent distinct snapshots to keep
        top_n: Roster size and the rank every line is clamped to
        tz: Display timezone name or tzinfo for the axis labels

    Returns:
        TopNTrend with one DatedRow per kept snapshot (ascending) and the roster
    """
    if window < 1 or top_n < 1:
        raise ValueError(f"window and top_n must be positive, got window={window}, top_n={top_n}")

    snapshots = group_by_snapshot(records)
    if not snapshots:
        return TopNTrend()

    instants = {timestamp: parse_timestamp(timestamp) for timestamp in snapshots}
    recent = sorted(snapshots, key=instants.__getitem__)[-window:]

    latest = snapshots[recent[-1]]
    leaders = sorted(latest.values(), key=lambda record: record.rank)[:top_n]
    roster = assign_colors([record.name for record in leaders])

    rows = []
    for timestamp in recent:
        snapshot = snapshots[timestamp]
        row = DatedRow(date=timestamp, display_date=format_month_day(instants[timestamp], tz))
        for entry in roster:
            record = snapshot.get(entry.name)
            if record is None:
                row.ranks[entry.name] = RankCell(clamped_rank=top_n, actual_rank=None)
            else:
                row.ranks[entry.name] = RankCell(
                    clamped_rank=min(record.rank, top_n),
                    actual_rank=record.rank,
                )
        rows.append(row)

    return TopNTrend(rows=rows, roster=roster)
