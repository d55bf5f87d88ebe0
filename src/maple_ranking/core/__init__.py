"""Pure transforms over ranking snapshot records."""

from .records import (
    RankingRecord,
    RecordStore,
    RankingDataError,
    TimestampParseError,
    parse_timestamp,
)
from .stats import SummaryStats, summarize
from .name_filter import filter_by_name, recent_window, unique_names, suggest_names
from .player_history import TrendPoint, SeriesHighlights, build_single_player_series, summarize_series
from .top_trend import RankCell, DatedRow, RosterEntry, TopNTrend, build_top_n_trend
from .distribution import CountBucket, level_distribution, job_distribution, world_distribution
