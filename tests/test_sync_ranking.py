#!/usr/bin/env python3
"""
Tests for configuration handling and ranking feed access.
"""

import json
import os
import tempfile
import unittest
from datetime import datetime, timezone
from unittest import mock

import requests

from ranking_fixtures import make_record

from maple_ranking.utils import sync_ranking
from maple_ranking.utils.sync_ranking import (
    DEFAULT_CONFIG,
    RankingFetchError,
    available_sources,
    fetch_meta_data,
    fetch_ranking_data,
    load_config,
    resolve_source,
    save_config,
)


def fake_response(payload=None, status_code=200, json_error=None):
    response = mock.Mock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class ConfigTests(unittest.TestCase):
    """ranking_config.json handling."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmpdir.name, "ranking_config.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_missing_file_gives_defaults(self):
        self.assertEqual(load_config(self.config_path), DEFAULT_CONFIG)

    def test_file_overrides_defaults(self):
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump({"trend_top_n": 5, "extra": True}, f)
        config = load_config(self.config_path)
        self.assertEqual(config["trend_top_n"], 5)
        self.assertTrue(config["extra"])
        self.assertEqual(config["trend_window"], DEFAULT_CONFIG["trend_window"])

    def test_broken_file_gives_defaults(self):
        with open(self.config_path, 'w', encoding='utf-8') as f:
            f.write("{not json")
        self.assertEqual(load_config(self.config_path), DEFAULT_CONFIG)

    def test_save_and_reload(self):
        config = dict(DEFAULT_CONFIG, display_timezone="UTC")
        self.assertEqual(save_config(config, self.config_path), config)
        self.assertEqual(load_config(self.config_path)["display_timezone"], "UTC")

    def test_defaults_are_not_mutated(self):
        config = load_config(self.config_path)
        config["trend_top_n"] = 99
        self.assertEqual(DEFAULT_CONFIG["trend_top_n"], 10)


class SourceTests(unittest.TestCase):
    """Burning ranking availability."""

    def test_burning_hidden_before_start(self):
        before = datetime(2025, 7, 4, 14, 59, tzinfo=timezone.utc)
        self.assertEqual([s["value"] for s in available_sources(before)], ["ranking"])
        self.assertEqual(resolve_source("ranking_burning", before), "ranking")

    def test_burning_available_from_jst_midnight(self):
        start = datetime(2025, 7, 4, 15, 0, tzinfo=timezone.utc)
        self.assertEqual([s["value"] for s in available_sources(start)], ["ranking", "ranking_burning"])
        self.assertEqual(resolve_source("ranking_burning", start), "ranking_burning")

    def test_unknown_source_falls_back(self):
        self.assertEqual(resolve_source("weekly"), "ranking")
        self.assertEqual(resolve_source(None), "ranking")


class FetchRankingDataTests(unittest.TestCase):
    """Fetching <base>/<source>.json."""

    def setUp(self):
        self.rows = [
            make_record("A", 1, 280, "2025-01-01T00:00:00Z").to_dict(),
            make_record("B", 2, 279, "2025-01-01T00:00:00Z").to_dict(),
        ]

    @mock.patch.object(sync_ranking.requests, "get")
    def test_success(self, mock_get):
        mock_get.return_value = fake_response({"success": True, "data": self.rows})
        response = fetch_ranking_data("ranking_burning")
        mock_get.assert_called_once_with(
            "https://r-eco-maple.github.io/ranking/ranking_burning.json", timeout=30)
        self.assertTrue(response.success)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(response.data.source, "ranking_burning")
        self.assertEqual(response.data[1].name, "B")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_http_error(self, mock_get):
        mock_get.return_value = fake_response(status_code=404)
        with self.assertRaises(RankingFetchError):
            fetch_ranking_data("ranking")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("offline")
        with self.assertRaises(RankingFetchError):
            fetch_ranking_data("ranking")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = fake_response(json_error=ValueError("bad json"))
        with self.assertRaises(RankingFetchError):
            fetch_ranking_data("ranking")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_invalid_format(self, mock_get):
        for payload in ({"success": False, "data": self.rows}, {"success": True, "data": None}, []):
            mock_get.return_value = fake_response(payload)
            with self.assertRaises(RankingFetchError):
                fetch_ranking_data("ranking")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_malformed_row(self, mock_get):
        del self.rows[0]["rank"]
        mock_get.return_value = fake_response({"success": True, "data": self.rows})
        with self.assertRaises(RankingFetchError):
            fetch_ranking_data("ranking")

    @mock.patch.object(sync_ranking.requests, "get")
    def test_unparseable_timestamp_row(self, mock_get):
        self.rows[1]["timestamp"] = "garbage"
        mock_get.return_value = fake_response({"success": True, "data": self.rows})
        with self.assertRaises(RankingFetchError) as ctx:
            fetch_ranking_data("ranking")
        self.assertIn("garbage", str(ctx.exception))

    @mock.patch.object(sync_ranking.requests, "get")
    def test_empty_data_is_not_an_error(self, mock_get):
        mock_get.return_value = fake_response({"success": True, "data": []})
        response = fetch_ranking_data("ranking")
        self.assertTrue(response.success)
        self.assertEqual(len(response.data), 0)


class FetchMetaDataTests(unittest.TestCase):
    """Metadata file with fallback."""

    @mock.patch.object(sync_ranking.requests, "get")
    def test_meta_file_names(self, mock_get):
        mock_get.return_value = fake_response({"lastUpdated": "2025-01-01T00:00:00Z"})
        fetch_meta_data("ranking")
        fetch_meta_data("ranking_burning")
        urls = [call.args[0] for call in mock_get.call_args_list]
        self.assertEqual(urls, [
            "https://r-eco-maple.github.io/ranking/meta.json",
            "https://r-eco-maple.github.io/ranking/meta-ranking_burning.json",
        ])

    @mock.patch.object(sync_ranking.requests, "get")
    def test_fallback_on_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")
        with self.assertLogs("maple_ranking.utils.sync_ranking", level="ERROR"):
            meta = fetch_meta_data("ranking")
        self.assertEqual(meta["source"], "fallback")
        self.assertEqual(meta["updateFrequency"], "unknown")
        self.assertIn("lastUpdated", meta)


class SyncMainTests(unittest.TestCase):
    """maple-sync command line."""

    def run_main(self, argv):
        with mock.patch("sys.argv", ["maple-sync"] + argv), \
                mock.patch("builtins.print") as mock_print:
            code = sync_ranking.main()
        output = "\n".join(" ".join(str(a) for a in call.args) for call in mock_print.call_args_list)
        return code, output

    @mock.patch.object(sync_ranking, "fetch_ranking_data")
    def test_prints_summary(self, mock_fetch):
        records = sync_ranking.RecordStore([
            make_record("A", 1, 200, "2025-01-01T00:00:00Z"),
            make_record("A", 1, 205, "2025-01-02T00:00:00Z"),
            make_record("B", 2, 190, "2025-01-02T00:00:00Z"),
        ])
        mock_fetch.return_value = sync_ranking.ApiResponse(success=True, data=records)
        code, output = self.run_main(["--config", "missing_config.json", "--name", "A"])
        self.assertEqual(code, 0)
        self.assertIn("Players: 2", output)
        self.assertIn("Lv.190 - 205", output)
        self.assertIn("A: 2 days", output)

    @mock.patch.object(sync_ranking, "fetch_ranking_data")
    def test_fetch_failure_exit_code(self, mock_fetch):
        mock_fetch.side_effect = RankingFetchError("boom")
        code, output = self.run_main(["--config", "missing_config.json"])
        self.assertEqual(code, 1)
        self.assertIn("boom", output)

    @mock.patch.object(sync_ranking, "fetch_ranking_data")
    def test_empty_source(self, mock_fetch):
        mock_fetch.return_value = sync_ranking.ApiResponse(success=True)
        code, output = self.run_main(["--config", "missing_config.json"])
        self.assertEqual(code, 1)
        self.assertIn("No ranking data", output)

    @mock.patch.object(sync_ranking.requests, "get")
    def test_bad_timestamp_exits_with_error(self, mock_get):
        row = make_record("A", 1, 200, "garbage").to_dict()
        mock_get.return_value = fake_response({"success": True, "data": [row]})
        code, output = self.run_main(["--config", "missing_config.json"])
        self.assertEqual(code, 1)
        self.assertIn("garbage", output)


if __name__ == "__main__":
    unittest.main()
