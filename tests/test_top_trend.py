#!/usr/bin/env python3
"""
Tests for the weekly top-N rank trend.
"""

import random
import unittest

from ranking_fixtures import make_record, snapshot

from maple_ranking.core.records import TimestampParseError
from maple_ranking.core.top_trend import COLORS, RankCell, TopNTrend, build_top_n_trend


def day(n):
    return f"2025-01-{n:02d}T00:00:00Z"


class TopNTrendTests(unittest.TestCase):
    """Roster pinning, clamping and gap filling."""

    def test_gap_in_middle_snapshot(self):
        records = (
            snapshot(day(1), ["A", "B"])
            + snapshot(day(2), ["A"])
            + snapshot(day(3), ["A", "B"])
        )
        trend = build_top_n_trend(records, top_n=2)
        self.assertEqual([entry.name for entry in trend.roster], ["A", "B"])
        gap_row = trend.rows[1]
        self.assertEqual(gap_row.ranks["A"], RankCell(clamped_rank=1, actual_rank=1))
        self.assertEqual(gap_row.ranks["B"], RankCell(clamped_rank=2, actual_rank=None))

    def test_ranks_below_boundary_are_clamped(self):
        records = (
            snapshot(day(1), ["A", "X", "Y", "Z", "B"])
            + snapshot(day(2), ["A", "B", "X"])
        )
        trend = build_top_n_trend(records, top_n=2)
        first = trend.rows[0]
        self.assertEqual(first.ranks["B"], RankCell(clamped_rank=2, actual_rank=5))
        self.assertEqual(first.ranks["A"], RankCell(clamped_rank=1, actual_rank=1))
        self.assertNotIn("X", first.ranks)

    def test_roster_pinned_to_latest_snapshot(self):
        records = (
            snapshot(day(1), ["C", "D", "A", "B"])
            + snapshot(day(2), ["B", "A", "C", "D"])
        )
        trend = build_top_n_trend(records, top_n=2)
        self.assertEqual([entry.name for entry in trend.roster], ["B", "A"])
        for row in trend.rows:
            self.assertEqual(list(row.ranks), ["B", "A"])

    def test_keeps_last_window_snapshots_by_instant(self):
        records = []
        for n in range(1, 10):
            records += snapshot(day(n), ["A", "B", "C"])
        random.Random(5).shuffle(records)
        trend = build_top_n_trend(records, window=7, top_n=3)
        self.assertEqual(len(trend.rows), 7)
        self.assertEqual([row.date for row in trend.rows], [day(n) for n in range(3, 10)])
        self.assertEqual(trend.rows[0].display_date, "01/03")

    def test_fewer_snapshots_than_window(self):
        records = snapshot(day(1), ["A"]) + snapshot(day(2), ["A"])
        self.assertEqual(len(build_top_n_trend(records).rows), 2)

    def test_roster_smaller_than_top_n(self):
        trend = build_top_n_trend(snapshot(day(1), ["A", "B", "C"]), top_n=10)
        self.assertEqual(len(trend.roster), 3)
        self.assertEqual(trend.rows[0].ranks["C"], RankCell(3, 3))

    def test_clamped_ranks_in_bounds_and_roster_invariant(self):
        rng = random.Random(7)
        names = [f"P{i}" for i in range(30)]
        records = []
        for n in range(1, 12):
            present = rng.sample(names, rng.randint(5, 30))
            records += snapshot(day(n), present)
        trend = build_top_n_trend(records, window=7, top_n=10)
        roster = [entry.name for entry in trend.roster]
        self.assertLessEqual(len(trend.rows), 7)
        for row in trend.rows:
            self.assertEqual(list(row.ranks), roster)
            for cell in row.ranks.values():
                self.assertTrue(1 <= cell.clamped_rank <= 10)
                if cell.actual_rank is None:
                    self.assertEqual(cell.clamped_rank, 10)
                else:
                    self.assertEqual(cell.clamped_rank, min(cell.actual_rank, 10))

    def test_colors_follow_roster_position(self):
        names = [f"P{i}" for i in range(12)]
        trend = build_top_n_trend(snapshot(day(1), names), top_n=12)
        self.assertEqual([entry.color_index for entry in trend.roster], list(range(12)))
        self.assertEqual(trend.roster[0].color, COLORS[0])
        self.assertEqual(trend.roster[10].color, COLORS[0])
        self.assertEqual(trend.roster[11].color, COLORS[1])

        # Same position, different character, same color
        other = build_top_n_trend(snapshot(day(1), ["Q"] + names[1:]), top_n=12)
        self.assertEqual(other.roster[0].color, trend.roster[0].color)

    def test_empty_input(self):
        self.assertEqual(build_top_n_trend([]), TopNTrend())

    def test_invalid_sizes(self):
        with self.assertRaises(ValueError):
            build_top_n_trend(snapshot(day(1), ["A"]), window=0)
        with self.assertRaises(ValueError):
            build_top_n_trend(snapshot(day(1), ["A"]), top_n=0)

    def test_malformed_timestamp(self):
        records = snapshot(day(1), ["A"]) + [make_record("A", 1, 250, "sometime")]
        with self.assertRaises(TimestampParseError):
            build_top_n_trend(records)

    def test_chart_rows(self):
        records = snapshot(day(1), ["A", "B"]) + snapshot(day(2), ["A"]) + snapshot(day(3), ["A", "B"])
        rows = build_top_n_trend(records, top_n=2).to_chart_rows()
        self.assertEqual(rows[1], {
            "date": day(2),
            "displayDate": "01/02",
            "A": 1,
            "A_actual": 1,
            "B": 2,
            "B_actual": None,
        })


if __name__ == "__main__":
    unittest.main()
