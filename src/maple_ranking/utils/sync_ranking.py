#!/usr/bin/env python3
"""
Ranking feed access for the Maple ranking dashboard.
Loads configuration, fetches ranking snapshots from the static JSON endpoint
and prints a quick summary of a source.
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from ..core.records import RecordStore, RankingDataError
from ..core.stats import summarize
from ..core.player_history import build_single_player_series, summarize_series
from ..core.top_trend import build_top_n_trend

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_CONFIG = {
    "api_base_url": "https://r-eco-maple.github.io/ranking",
    "default_source": "ranking",
    "web_ui_output": "web_ui_output",
    "display_timezone": "Asia/Tokyo",
    "recent_window_size": 100,
    "trend_window": 7,
    "trend_top_n": 10,
    "request_timeout": 30,
}

CONFIG_FILE = "ranking_config.json"

# The burning ranking opens at 2025-07-05 00:00 JST
BURNING_START = datetime(2025, 7, 4, 15, 0, tzinfo=timezone.utc)

SOURCES = [
    {"value": "ranking", "label": "総合"},
    {"value": "ranking_burning", "label": "バーニング", "available_from": BURNING_START},
]


class RankingFetchError(Exception):
    """Raised when the ranking feed cannot be fetched or is malformed."""


@dataclass
class ApiResponse:
    success: bool
    data: RecordStore = field(default_factory=RecordStore)


def load_config(config_path: str = CONFIG_FILE) -> Dict[str, Any]:
    """Load configuration from file, falling back to the defaults."""
    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(config_path):
        return config
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config.update(json.load(f))
    except (json.JSONDecodeError, IOError) as e:
        print(f"Error loading config: {e}")
    return config


def save_config(config: Dict[str, Any], config_path: str = CONFIG_FILE) -> Optional[Dict[str, Any]]:
    """Save configuration to file."""
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
        print(f"Configuration saved to {config_path}")
        return config
    except IOError as e:
        print(f"Error saving config: {e}")
        return None


def available_sources(now: Optional[datetime] = None) -> List[Dict[str, str]]:
    """Sources selectable at ``now`` as {value, label} pairs."""
    if now is None:
        now = datetime.now(timezone.utc)
    return [
        {"value": source["value"], "label": source["label"]}
        for source in SOURCES
        if "available_from" not in source or now >= source["available_from"]
    ]


def resolve_source(source: Optional[str], now: Optional[datetime] = None) -> str:
    """Return ``source`` if it is currently available, otherwise the overall ranking."""
    values = [item["value"] for item in available_sources(now)]
    if source in values:
        return source
    if source:
        logger.warning(f"Source '{source}' is not available, using 'ranking'")
    return "ranking"


def fetch_ranking_data(source: str, config: Optional[Dict[str, Any]] = None) -> ApiResponse:
    """Fetch ``<api_base_url>/<source>.json`` and parse it into records."""
    config = config or DEFAULT_CONFIG
    url = f"{config['api_base_url'].rstrip('/')}/{source}.json"
    logger.info(f"Fetching ranking data from {url}")

    try:
        response = requests.get(url, timeout=config.get("request_timeout", 30))
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logger.warning(f"Ranking fetch failed: {e}")
        raise RankingFetchError("Unable to fetch ranking data. Please try again later.") from e
    except ValueError as e:
        raise RankingFetchError(f"Ranking feed returned invalid JSON: {e}") from e

    if not isinstance(payload, dict) or not payload.get("success") or not isinstance(payload.get("data"), list):
        raise RankingFetchError("Invalid data format received")

    try:
        records = RecordStore.from_rows(payload["data"], source=source)
    except RankingDataError as e:
        raise RankingFetchError(f"Invalid ranking row: {e}") from e

    logger.info(f"Fetched {len(records)} records for source '{source}'")
    return ApiResponse(success=True, data=records)


def fetch_meta_data(source: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Fetch the feed's metadata file, or a fallback entry when it is unavailable."""
    config = config or DEFAULT_CONFIG
    meta_file = "meta.json" if source == "ranking" else f"meta-{source}.json"
    url = f"{config['api_base_url'].rstrip('/')}/{meta_file}"

    try:
        response = requests.get(url, timeout=config.get("request_timeout", 30))
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error fetching meta data: {e}")
        return {
            "lastUpdated": datetime.now(timezone.utc).isoformat(),
            "source": "fallback",
            "updateFrequency": "unknown",
        }


def main():
    """Main sync function."""
    parser = argparse.ArgumentParser(description='Fetch a Maple ranking source and print its summary')
    parser.add_argument('--source', help='Ranking source (default from config)')
    parser.add_argument('--config', default=CONFIG_FILE, help='Configuration file')
    parser.add_argument('--name', help='Also show the history of this character')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    config = load_config(args.config)
    source = resolve_source(args.source or config["default_source"])
    tz = config["display_timezone"]

    print("🍁 Maple Ranking Sync")
    print("=" * 40)
    print(f"📍 Source: {source}")
    print(f"🌐 Endpoint: {config['api_base_url']}")
    print()

    try:
        response = fetch_ranking_data(source, config)
    except RankingFetchError as e:
        print(f"❌ {e}")
        return 1

    records = response.data
    if not response.success or not records:
        print("❌ No ranking data available for this source")
        return 1

    stats = summarize(records, tz)
    print(f"👥 Players: {stats.unique_entity_count}")
    print(f"📅 Period: {stats.earliest_date} ~ {stats.latest_date}")
    print(f"📊 Levels: Lv.{stats.min_level} - {stats.max_level}")

    trend = build_top_n_trend(records, config["trend_window"], config["trend_top_n"], tz)
    if trend.rows:
        print(f"\n🏆 Top {len(trend.roster)} as of {trend.rows[-1].display_date}:")
        for entry in trend.roster:
            cell = trend.rows[-1].ranks[entry.name]
            print(f"  {cell.actual_rank}. {entry.name}")

    if args.name:
        highlights = summarize_series(build_single_player_series(records, args.name, tz))
        if highlights is None:
            print(f"\n🔍 No data found for {args.name}")
        else:
            print(f"\n🔍 {args.name}: {highlights.days} days, best rank {highlights.best_rank}, "
                  f"latest rank {highlights.latest_rank}, latest level {highlights.latest_level}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
