"""
Data processing functions for the Maple ranking dashboard.
Fetches each ranking source and turns it into the view model embedded in
the generated page.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from ..core.records import RankingDataError, RankingRecord
from ..core.stats import summarize
from ..core.name_filter import filter_by_name, recent_window, unique_names
from ..core.player_history import build_single_player_series, summarize_series
from ..core.top_trend import build_top_n_trend
from ..core.distribution import level_distribution, job_distribution, world_distribution
from ..utils.sync_ranking import (
    DEFAULT_CONFIG,
    RankingFetchError,
    available_sources,
    fetch_meta_data,
    fetch_ranking_data,
)


def empty_source_data(source: str, error: Optional[str] = None) -> Dict[str, Any]:
    """View model for a source with nothing to show."""
    return {
        "source": source,
        "has_data": False,
        "error": error,
        "stats": summarize([]).to_dict(),
        "names": [],
        "selected_name": "",
        "recent_window_size": 0,
        "meta": None,
        "records": [],
        "table": [],
        "player_history": {},
        "weekly_trend": {"rows": [], "roster": [], "window": 0, "top_n": 0},
        "distributions": {"level": [], "job": [], "world": []},
    }


def select_table_rows(records: Sequence[RankingRecord], name: str = "",
                      window_size: int = 100) -> List[RankingRecord]:
    """Rows for the ranking table: the recent window, or every row of one character."""
    if name:
        return list(filter_by_name(records, name))
    return list(filter_by_name(recent_window(records, window_size), name))


def build_player_history(records: Sequence[RankingRecord], tz=None) -> Dict[str, Any]:
    """Series and highlights for every character in the record set."""
    by_name: Dict[str, List[RankingRecord]] = {}
    for record in records:
        by_name.setdefault(record.name, []).append(record)

    history = {}
    for name in sorted(by_name):
        points = build_single_player_series(by_name[name], name, tz)
        highlights = summarize_series(points)
        history[name] = {
            "points": [point.to_dict() for point in points],
            "highlights": highlights.to_dict() if highlights else None,
        }
    return history


def build_source_data(records: Sequence[RankingRecord], source: str,
                      config: Optional[Dict[str, Any]] = None,
                      selected_name: str = "") -> Dict[str, Any]:
    """Assemble the dashboard view model for one source's records."""
    config = config or DEFAULT_CONFIG
    if not records:
        return empty_source_data(source)

    tz = config["display_timezone"]
    window = recent_window(records, config["recent_window_size"])
    trend = build_top_n_trend(records, config["trend_window"], config["trend_top_n"], tz)

    return {
        "source": source,
        "has_data": True,
        "error": None,
        "stats": summarize(records, tz).to_dict(),
        "names": unique_names(records),
        "selected_name": selected_name,
        "recent_window_size": config["recent_window_size"],
        "meta": None,
        "records": [record.to_dict() for record in records],
        "table": [record.to_dict() for record in
                  select_table_rows(records, selected_name, config["recent_window_size"])],
        "player_history": build_player_history(records, tz),
        "weekly_trend": {
            "rows": trend.to_chart_rows(),
            "roster": [asdict(entry) for entry in trend.roster],
            "window": config["trend_window"],
            "top_n": config["trend_top_n"],
        },
        "distributions": {
            "level": [asdict(bucket) for bucket in level_distribution(window)],
            "job": [asdict(bucket) for bucket in job_distribution(window)],
            "world": [asdict(bucket) for bucket in world_distribution(window)],
        },
    }


def generate_source_data(source: str, config: Optional[Dict[str, Any]] = None,
                         selected_name: str = "") -> Dict[str, Any]:
    """Fetch one source and build its view model."""
    config = config or DEFAULT_CONFIG
    response = fetch_ranking_data(source, config)
    if not response.success or not response.data:
        return empty_source_data(source)
    data = build_source_data(response.data, source, config, selected_name)
    data["meta"] = fetch_meta_data(source, config)
    return data


def generate_all_dashboard_data(sources: List[str], config: Optional[Dict[str, Any]] = None,
                                selected_name: str = "", max_workers: int = 4) -> Dict[str, Any]:
    """Generate view models for all sources concurrently."""
    config = config or DEFAULT_CONFIG
    print("Generating dashboard data...")

    all_data = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "sources": [item for item in available_sources() if item["value"] in sources],
        "default_source": sources[0] if sources else config["default_source"],
        "data": {},
    }

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(generate_source_data, source, config, selected_name): source
            for source in sources
        }
        for future in as_completed(futures):
            source = futures[future]
            try:
                all_data["data"][source] = future.result()
                print(f"  ✅ Completed {source}")
            except (RankingFetchError, RankingDataError) as e:
                print(f"  ❌ Failed {source}: {e}")
                all_data["data"][source] = empty_source_data(source, str(e))

    print("✅ All dashboard data generation complete")
    return all_data
